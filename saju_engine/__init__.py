# -*- coding: utf-8 -*-
"""
명리학 사주 계산 엔진 (Four Pillars of Destiny Calculator)
- 절기(태양 황경) 기반 사주 원국 산출
- 십신, 강약, 용신, 합충형파해, 신살, 십이운성
- 대운/세운 계산
"""

from .constants import (
    BRANCHES,
    CHEONGAN,
    JIJANGGAN,
    JIJI,
    STEMS,
    Element,
    PillarPosition,
    Polarity,
    get_branch_element,
    get_branch_polarity,
    get_hidden_stems,
    get_pillar_index,
    get_stem_element,
    get_stem_polarity,
    pillar_from_index,
)
from .date_adapter import DateAdapter
from .errors import (
    ConfigurationError,
    InvalidSymbolError,
    InvariantViolation,
    LunarConversionError,
    SajuError,
    SolarTermBracketError,
)
from .lunar import LunarDate, get_lunar_date, get_solar_date
from .luck import Gender, calculate_major_luck, calculate_yearly_luck, get_year_pillar_for
from .pillars import (
    DEFAULT_TZ_OFFSET_HOURS,
    STANDARD_PRESET,
    TRADITIONAL_PRESET,
    BoundaryPreset,
    DayBoundary,
    FourPillars,
    apply_mean_solar_time,
    effective_day_date,
    get_day_pillar,
    get_four_pillars,
    get_hour_pillar,
    get_month_pillar,
    get_preset,
    get_year_pillar,
)
from .relations import (
    RelationKind,
    TransformStatus,
    analyze_relations,
    find_branch_clash,
    find_branch_six_combination,
    find_stem_combination,
)
from .saju import SajuResult, analyze_saju
from .sinsals import Sinsal, analyze_sinsals
from .solar_terms import JEOLGI, analyze_solar_terms, get_solar_terms_for_year, solar_term_instant
from .strength import StrengthLevel, analyze_strength
from .ten_gods import TenGod, analyze_ten_gods, count_elements, count_ten_gods, get_ten_god
from .twelve_stages import TwelveStage, analyze_twelve_stages
from .yongshen import YongshenMethod, analyze_yongshen, get_element_recommendations

__version__ = '1.0.0'

__all__ = [
    'BRANCHES', 'CHEONGAN', 'JIJANGGAN', 'JIJI', 'STEMS', 'Element', 'PillarPosition', 'Polarity',
    'get_branch_element', 'get_branch_polarity', 'get_hidden_stems', 'get_pillar_index',
    'get_stem_element', 'get_stem_polarity', 'pillar_from_index',
    'DateAdapter',
    'ConfigurationError', 'InvalidSymbolError', 'InvariantViolation', 'LunarConversionError',
    'SajuError', 'SolarTermBracketError',
    'LunarDate', 'get_lunar_date', 'get_solar_date',
    'Gender', 'calculate_major_luck', 'calculate_yearly_luck', 'get_year_pillar_for',
    'DEFAULT_TZ_OFFSET_HOURS', 'STANDARD_PRESET', 'TRADITIONAL_PRESET', 'BoundaryPreset', 'DayBoundary',
    'FourPillars', 'apply_mean_solar_time', 'effective_day_date', 'get_day_pillar', 'get_four_pillars',
    'get_hour_pillar', 'get_month_pillar', 'get_preset', 'get_year_pillar',
    'RelationKind', 'TransformStatus', 'analyze_relations', 'find_branch_clash',
    'find_branch_six_combination', 'find_stem_combination',
    'SajuResult', 'analyze_saju',
    'Sinsal', 'analyze_sinsals',
    'JEOLGI', 'analyze_solar_terms', 'get_solar_terms_for_year', 'solar_term_instant',
    'StrengthLevel', 'analyze_strength',
    'TenGod', 'analyze_ten_gods', 'count_elements', 'count_ten_gods', 'get_ten_god',
    'TwelveStage', 'analyze_twelve_stages',
    'YongshenMethod', 'analyze_yongshen', 'get_element_recommendations',
]
