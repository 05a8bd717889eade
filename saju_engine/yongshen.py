# -*- coding: utf-8 -*-
"""
용신(用神) 선정
- 억부(抑扶): 신강하면 억제, 신약하면 부조
- 종격(從格): 극약하고 한 오행이 지지를 장악하면 그 오행을 따름
- 조후(調候): 계절 한난조습 보정은 참고용으로만 제시
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from .constants import (
    CONTROLLED_BY,
    CONTROLS,
    ELEMENTS,
    GENERATED_BY,
    GENERATES,
    Element,
    get_branch,
    get_stem,
    split_pillar,
)
from .strength import StrengthLevel, analyze_strength

FORMATION_MIN_COUNT = 3


class YongshenMethod(Enum):
    BALANCE = '억부'
    FORMATION = '종격'


class Season(Enum):
    SPRING = 'spring'
    SUMMER = 'summer'
    AUTUMN = 'autumn'
    WINTER = 'winter'

    @property
    def korean(self):
        return {'spring': '봄', 'summer': '여름', 'autumn': '가을', 'winter': '겨울'}[self.value]


SEASON_BY_MONTH_BRANCH = MappingProxyType({
    '寅': Season.SPRING, '卯': Season.SPRING, '辰': Season.SPRING,
    '巳': Season.SUMMER, '午': Season.SUMMER, '未': Season.SUMMER,
    '申': Season.AUTUMN, '酉': Season.AUTUMN, '戌': Season.AUTUMN,
    '亥': Season.WINTER, '子': Season.WINTER, '丑': Season.WINTER,
})

_W, _F, _E, _M, _WA = Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER

# 계절 × 일간 오행 → (1순위, 2순위)
JOHU_YONGSHEN = MappingProxyType({
    Season.SPRING: {_W: (_F, _WA), _F: (_WA, _W), _E: (_F, _W), _M: (_F, _E), _WA: (_F, _M)},
    Season.SUMMER: {_W: (_WA, _M), _F: (_WA, _M), _E: (_WA, _M), _M: (_WA, _E), _WA: (_M, _WA)},
    Season.AUTUMN: {_W: (_WA, _F), _F: (_W, _E), _E: (_F, _WA), _M: (_F, _WA), _WA: (_F, _M)},
    Season.WINTER: {_W: (_F, _E), _F: (_W, _E), _E: (_F, _W), _M: (_F, _E), _WA: (_F, _E)},
})

# 오행별 색상·방위·수
ELEMENT_RECOMMENDATIONS = MappingProxyType({
    Element.WOOD: (('청색', '녹색'), '동', (3, 8)),
    Element.FIRE: (('적색', '자주색'), '남', (2, 7)),
    Element.EARTH: (('황색', '갈색'), '중앙', (5, 10)),
    Element.METAL: (('백색', '금색'), '서', (4, 9)),
    Element.WATER: (('흑색', '남색'), '북', (1, 6)),
})


def get_season(month_branch):
    get_branch(month_branch)
    return SEASON_BY_MONTH_BRANCH[month_branch]


@dataclass(frozen=True)
class BalanceChoice:
    primary: Element
    secondary: Element

    def to_dict(self):
        return {'primary': self.primary.value, 'secondary': self.secondary.value}


@dataclass(frozen=True)
class JohuAdjustment:
    season: Season
    primary: Element
    secondary: Element

    def to_dict(self):
        return {'season': self.season.value, 'primary': self.primary.value, 'secondary': self.secondary.value}


@dataclass(frozen=True)
class ElementRole:
    is_yongshen: bool
    is_kishen: bool

    def to_dict(self):
        return {'is_yongshen': self.is_yongshen, 'is_kishen': self.is_kishen}


@dataclass(frozen=True)
class YongshenResult:
    primary: Element
    secondary: Optional[Element]
    method: YongshenMethod
    reasoning: str
    all_elements: MappingProxyType
    strength_level: StrengthLevel
    alternative_balance: Optional[BalanceChoice] = None
    johu_adjustment: Optional[JohuAdjustment] = None

    def to_dict(self):
        return {
            'primary': self.primary.value,
            'secondary': self.secondary.value if self.secondary else None,
            'method': self.method.value,
            'reasoning': self.reasoning,
            'all_elements': {e.value: role.to_dict() for e, role in self.all_elements.items()},
            'strength_level': self.strength_level.to_dict(),
            'alternative_balance': self.alternative_balance.to_dict() if self.alternative_balance else None,
            'johu_adjustment': self.johu_adjustment.to_dict() if self.johu_adjustment else None,
        }


def balance_yongshen(day_master_element, strength_level):
    """억부용신: 신강이면 관성으로 억제·식상으로 설기, 신약이면 인성·비겁으로 부조"""
    if strength_level.is_strong:
        return BalanceChoice(CONTROLLED_BY[day_master_element], GENERATES[day_master_element])
    return BalanceChoice(GENERATED_BY[day_master_element], day_master_element)


def find_dominant_element(branches, day_master_element):
    """지지 넷 중 3개 이상을 차지한 일간 외 오행 (없으면 None)"""
    counts = {}
    for b in branches:
        element = get_branch(b).element
        counts[element] = counts.get(element, 0) + 1
    for element in ELEMENTS:
        if element is not day_master_element and counts.get(element, 0) >= FORMATION_MIN_COUNT:
            return element
    return None


def _element_roles(primary, secondary, kishen):
    useful = {primary, secondary} - {None}
    return MappingProxyType({
        e: ElementRole(is_yongshen=e in useful, is_kishen=e in kishen and e not in useful)
        for e in ELEMENTS
    })


def analyze_yongshen(year_pillar, month_pillar, day_pillar, hour_pillar, strength=None):
    """용신·희신과 기신 판정. strength를 넘기면 다시 계산하지 않습니다."""
    day_master, _ = split_pillar(day_pillar)
    _, month_branch = split_pillar(month_pillar)
    branches = [split_pillar(p)[1] for p in (year_pillar, month_pillar, day_pillar, hour_pillar)]
    dm_element = get_stem(day_master).element
    season = get_season(month_branch)

    if strength is None:
        strength = analyze_strength(year_pillar, month_pillar, day_pillar, hour_pillar)
    level = strength.level

    balance = balance_yongshen(dm_element, level)

    dominant = None
    if level is StrengthLevel.EXTREMELY_WEAK:
        dominant = find_dominant_element(branches, dm_element)

    if dominant is not None:
        primary, secondary = dominant, GENERATES[dominant]
        method = YongshenMethod.FORMATION
        alternative = balance
        kishen = {CONTROLLED_BY[dominant], GENERATED_BY[dm_element]}
        reasoning = (f'{level.korean} 상태에서 {dominant.korean}({dominant.hanja}) 기운이 지지를 장악하여 '
                     f'종격으로 판단, {dominant.korean}을 따름')
    else:
        primary, secondary = balance.primary, balance.secondary
        method = YongshenMethod.BALANCE
        alternative = None
        if level.is_strong:
            kishen = {dm_element, GENERATED_BY[dm_element]}
            reasoning = f'{level.korean} 상태로 억부용신 적용, 억제와 설기 필요'
        else:
            kishen = {CONTROLS[dm_element], CONTROLLED_BY[dm_element]}
            reasoning = f'{level.korean} 상태로 억부용신 적용, 생조와 부조 필요'

    johu_primary, johu_secondary = JOHU_YONGSHEN[season][dm_element]
    johu = None
    if johu_primary is not balance.primary:
        johu = JohuAdjustment(season, johu_primary, johu_secondary)
        reasoning += f'. {season.korean} 조후로는 {johu_primary.korean}({johu_primary.hanja})도 고려'

    return YongshenResult(
        primary=primary,
        secondary=secondary,
        method=method,
        reasoning=reasoning,
        all_elements=_element_roles(primary, secondary, kishen),
        strength_level=level,
        alternative_balance=alternative,
        johu_adjustment=johu,
    )


@dataclass(frozen=True)
class ElementRecommendations:
    colors: tuple
    directions: tuple
    numbers: tuple

    def to_dict(self):
        return {'colors': list(self.colors), 'directions': list(self.directions), 'numbers': list(self.numbers)}


def get_element_recommendations(yongshen):
    """용신·희신 오행의 색상·방위·수 (중복 제거, 수는 오름차순)"""
    colors, directions, numbers = [], [], []
    for element in (yongshen.primary, yongshen.secondary):
        if element is None:
            continue
        c, d, n = ELEMENT_RECOMMENDATIONS[element]
        colors.extend(x for x in c if x not in colors)
        if d not in directions:
            directions.append(d)
        numbers.extend(x for x in n if x not in numbers)
    return ElementRecommendations(tuple(colors), tuple(directions), tuple(sorted(numbers)))
