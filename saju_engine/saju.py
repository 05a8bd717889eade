# -*- coding: utf-8 -*-
"""
사주 종합 분석
- 원국 산출 후 십신, 강약, 용신, 합충, 신살, 십이운성, 절기, 대운/세운을 한 번에 계산
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .constants import ZODIAC_ANIMALS, get_branch_index
from .lunar import get_lunar_date
from .luck import calculate_major_luck, calculate_yearly_luck
from .pillars import STANDARD_PRESET, FourPillars, get_four_pillars
from .relations import RelationsResult, analyze_relations
from .sinsals import SinsalResult, analyze_sinsals
from .solar_terms import SolarTermInfo, analyze_solar_terms
from .strength import StrengthResult, analyze_strength
from .ten_gods import TenGodAnalysis, analyze_ten_gods, count_elements, count_ten_gods
from .twelve_stages import TwelveStagesResult, analyze_twelve_stages
from .yongshen import ElementRecommendations, YongshenResult, analyze_yongshen, get_element_recommendations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SajuResult:
    pillars: FourPillars
    zodiac: str
    ten_gods: TenGodAnalysis
    ten_god_counts: dict
    element_counts: dict
    strength: StrengthResult
    yongshen: YongshenResult
    recommendations: ElementRecommendations
    relations: RelationsResult
    sinsals: SinsalResult
    twelve_stages: TwelveStagesResult
    solar_terms: SolarTermInfo
    major_luck: Optional[Any] = None
    yearly_luck: Optional[tuple] = None

    def to_dict(self, adapter=None):
        return {
            'pillars': self.pillars.to_dict(),
            'zodiac': self.zodiac,
            'ten_gods': self.ten_gods.to_dict(),
            'ten_god_counts': {k.value: v for k, v in self.ten_god_counts.items()},
            'element_counts': {k.value: v for k, v in self.element_counts.items()},
            'strength': self.strength.to_dict(),
            'yongshen': self.yongshen.to_dict(),
            'recommendations': self.recommendations.to_dict(),
            'relations': self.relations.to_dict(),
            'sinsals': self.sinsals.to_dict(),
            'twelve_stages': self.twelve_stages.to_dict(),
            'solar_terms': self.solar_terms.to_dict(adapter),
            'major_luck': self.major_luck.to_dict() if self.major_luck else None,
            'yearly_luck': [y.to_dict() for y in self.yearly_luck] if self.yearly_luck else None,
        }


def analyze_saju(adapter, dt_local, longitude_deg, tz_offset_hours=None, preset=STANDARD_PRESET,
                 gender=None, major_luck_count=8, yearly_luck_range=None, lunar_converter=get_lunar_date):
    """
    사주를 종합 분석합니다.

    Args:
        adapter: 날짜 어댑터
        dt_local: 출생 시각 (출생지 시간대)
        longitude_deg: 출생지 경도
        tz_offset_hours: 표준시 UTC 오프셋 (생략 시 9)
        preset: 경계 설정
        gender: '남'/'여' 또는 Gender. 없으면 대운을 계산하지 않음
        major_luck_count: 대운 개수
        yearly_luck_range: (시작 연도, 끝 연도) 세운 범위
        lunar_converter: 음력 변환 함수

    Returns:
        SajuResult
    """
    four = get_four_pillars(adapter, dt_local, longitude_deg, tz_offset_hours=tz_offset_hours,
                            preset=preset, lunar_converter=lunar_converter)
    y, m, d, h = four.as_tuple()

    ten_gods = analyze_ten_gods(y, m, d, h)
    strength = analyze_strength(y, m, d, h)
    yongshen = analyze_yongshen(y, m, d, h, strength=strength)
    solar_terms = analyze_solar_terms(dt_local, adapter)

    major_luck = None
    if gender is not None:
        major_luck = calculate_major_luck(
            adapter, dt_local, gender, y, m,
            count=major_luck_count,
            next_term_dt=solar_terms.next_jie.local,
            prev_term_dt=solar_terms.prev_jie.local,
        )

    yearly_luck = None
    if yearly_luck_range is not None:
        from_year, to_year = yearly_luck_range
        yearly_luck = calculate_yearly_luck(four.meta.solar_year_used, from_year, to_year)

    logger.debug('saju analysis done for %s (%s %s %s %s)', adapter.to_iso(dt_local), y, m, d, h)

    return SajuResult(
        pillars=four,
        zodiac=ZODIAC_ANIMALS[get_branch_index(y[1])],
        ten_gods=ten_gods,
        ten_god_counts=count_ten_gods(ten_gods),
        element_counts=count_elements(ten_gods),
        strength=strength,
        yongshen=yongshen,
        recommendations=get_element_recommendations(yongshen),
        relations=analyze_relations(y, m, d, h),
        sinsals=analyze_sinsals(y, m, d, h),
        twelve_stages=analyze_twelve_stages(y, m, d, h),
        solar_terms=solar_terms,
        major_luck=major_luck,
        yearly_luck=yearly_luck,
    )
