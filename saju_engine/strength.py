# -*- coding: utf-8 -*-
"""
일간 강약(身强·身弱) 판단
- 득령(得令): 월지 계절에 따른 일간의 왕쇠
- 통근(通根): 지지 지장간에 일간과 같은/생하는 오행이 있는지
- 투출(透出): 월지 지장간이 천간에 드러났는지
- 득세(得勢): 일간을 돕는 천간의 수
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .constants import Element, get_hidden_stems, get_stem, split_pillar
from .ten_gods import HELPFUL_TEN_GODS, TenGod, get_ten_god

# 식상·재성·관성: 일간의 힘을 빼는 십신
WEAKENING_TEN_GODS = frozenset({
    TenGod.EATING_GOD, TenGod.HURTING_OFFICER,
    TenGod.INDIRECT_WEALTH, TenGod.DIRECT_WEALTH,
    TenGod.SEVEN_KILLINGS, TenGod.DIRECT_OFFICER,
})


class StrengthLevel(Enum):
    EXTREMELY_WEAK = 'extremely_weak'
    VERY_WEAK = 'very_weak'
    WEAK = 'weak'
    NEUTRAL_WEAK = 'neutral_weak'
    NEUTRAL = 'neutral'
    NEUTRAL_STRONG = 'neutral_strong'
    STRONG = 'strong'
    VERY_STRONG = 'very_strong'
    EXTREMELY_STRONG = 'extremely_strong'

    @property
    def rank(self):
        """극약=0 ... 극왕=8"""
        return _LEVEL_ORDER.index(self)

    @property
    def korean(self):
        return _LEVEL_LABELS[self][0]

    @property
    def hanja(self):
        return _LEVEL_LABELS[self][1]

    @property
    def is_strong(self):
        return self in STRONG_LEVELS

    def __lt__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank < other.rank

    def to_dict(self):
        return {'key': self.value, 'korean': self.korean, 'hanja': self.hanja}


_LEVEL_ORDER = tuple(StrengthLevel)

_LEVEL_LABELS = MappingProxyType({
    StrengthLevel.EXTREMELY_WEAK: ('극약', '極弱'),
    StrengthLevel.VERY_WEAK: ('태약', '太弱'),
    StrengthLevel.WEAK: ('신약', '身弱'),
    StrengthLevel.NEUTRAL_WEAK: ('중화신약', '中和身弱'),
    StrengthLevel.NEUTRAL: ('중화', '中和'),
    StrengthLevel.NEUTRAL_STRONG: ('중화신강', '中和身強'),
    StrengthLevel.STRONG: ('신강', '身強'),
    StrengthLevel.VERY_STRONG: ('태강', '太強'),
    StrengthLevel.EXTREMELY_STRONG: ('극왕', '極旺'),
})

STRONG_LEVELS = frozenset({
    StrengthLevel.NEUTRAL_STRONG, StrengthLevel.STRONG,
    StrengthLevel.VERY_STRONG, StrengthLevel.EXTREMELY_STRONG,
})

# (상한 점수, 단계) - 상한 포함
LEVEL_BANDS = (
    (10, StrengthLevel.EXTREMELY_WEAK),
    (20, StrengthLevel.VERY_WEAK),
    (30, StrengthLevel.WEAK),
    (38, StrengthLevel.NEUTRAL_WEAK),
    (45, StrengthLevel.NEUTRAL),
    (55, StrengthLevel.NEUTRAL_STRONG),
    (70, StrengthLevel.STRONG),
    (85, StrengthLevel.VERY_STRONG),
)

# ============================================================
# 득령 - 월지의 계절 기운 (토는 습토/조토로 나눔)
# ============================================================

MONTH_BRANCH_SEASONAL = MappingProxyType({
    '寅': 'wood', '卯': 'wood', '辰': 'wet_earth',
    '巳': 'fire', '午': 'fire', '未': 'dry_earth',
    '申': 'metal', '酉': 'metal', '戌': 'dry_earth',
    '亥': 'water', '子': 'water', '丑': 'wet_earth',
})

SEASONAL_STRENGTH = MappingProxyType({
    Element.WOOD: {'wood': 1.0, 'fire': 0.3, 'wet_earth': 0.5, 'dry_earth': 0.2, 'metal': 0.1, 'water': 0.7},
    Element.FIRE: {'wood': 0.7, 'fire': 1.0, 'wet_earth': 0.3, 'dry_earth': 0.5, 'metal': 0.1, 'water': 0.1},
    Element.EARTH: {'wood': 0.1, 'fire': 0.7, 'wet_earth': 0.8, 'dry_earth': 1.0, 'metal': 0.3, 'water': 0.1},
    Element.METAL: {'wood': 0.1, 'fire': 0.1, 'wet_earth': 0.5, 'dry_earth': 0.7, 'metal': 1.0, 'water': 0.3},
    Element.WATER: {'wood': 0.3, 'fire': 0.1, 'wet_earth': 0.2, 'dry_earth': 0.1, 'metal': 0.7, 'water': 1.0},
})

# 점수 가중치
W_SEASON = 35
W_ROOT = 20
W_TRANSPARENT = 15
W_HELPER_STEM = 8
W_HELP = 5
W_WEAKEN = 6


def _round_half_up(x, digits):
    factor = 10 ** digits
    return math.floor(x * factor + 0.5) / factor


def seasonal_multiplier(day_master_element, month_branch):
    """득령 배수 (0~1)"""
    return SEASONAL_STRENGTH[day_master_element][MONTH_BRANCH_SEASONAL[month_branch]]


def root_strength(day_master, branch):
    """한 지지에서 일간이 얻는 뿌리의 세기"""
    dm = get_stem(day_master)
    strength = 0.0
    for hs in get_hidden_stems(branch):
        hidden = get_stem(hs.stem)
        if hidden.element is dm.element:
            strength += hs.weight * (1.0 if hidden.polarity is dm.polarity else 0.7)
        elif hidden.element.generates is dm.element:
            strength += hs.weight * 0.5
    return strength


def level_from_score(score):
    for upper, level in LEVEL_BANDS:
        if score <= upper:
            return level
    return StrengthLevel.EXTREMELY_STRONG


@dataclass(frozen=True)
class StrengthFactors:
    deukryeong: float
    deukji: float
    deukse: int
    tonggeun: float
    transparency: float
    help_count: int
    weaken_count: int

    @property
    def helper_stem_count(self):
        """득세와 같은 값"""
        return self.deukse

    def to_dict(self):
        return {
            'deukryeong': self.deukryeong,
            'deukji': self.deukji,
            'deukse': self.deukse,
            'tonggeun': self.tonggeun,
            'transparency': self.transparency,
            'help_count': self.help_count,
            'weaken_count': self.weaken_count,
        }


@dataclass(frozen=True)
class StrengthResult:
    level: StrengthLevel
    score: float
    factors: StrengthFactors
    description: str

    def to_dict(self):
        return {
            'level': self.level.to_dict(),
            'score': self.score,
            'factors': self.factors.to_dict(),
            'description': self.description,
        }


def analyze_strength(year_pillar, month_pillar, day_pillar, hour_pillar):
    """일간의 강약 점수와 9단계 판정"""
    pillars = [split_pillar(p) for p in (year_pillar, month_pillar, day_pillar, hour_pillar)]
    stems = [s for s, _ in pillars]
    branches = [b for _, b in pillars]
    day_master = stems[2]
    month_branch = branches[1]
    dm_element = get_stem(day_master).element

    deukryeong = seasonal_multiplier(dm_element, month_branch)
    tonggeun = sum(root_strength(day_master, b) for b in branches)

    # 월지 지장간 중 천간에 투출한 비겁·인성
    transparency = 0.0
    for hs in get_hidden_stems(month_branch):
        if hs.stem in stems and get_ten_god(day_master, hs.stem) in HELPFUL_TEN_GODS:
            transparency += hs.weight * 0.3

    # 득지: 일지·시지의 뿌리 (점수에는 넣지 않음)
    deukji = root_strength(day_master, branches[2]) + root_strength(day_master, branches[3])

    other_stems = (stems[0], stems[1], stems[3])
    deukse = 0
    help_count = 0
    weaken_count = 0
    for stem in other_stems:
        tg = get_ten_god(day_master, stem)
        if tg in HELPFUL_TEN_GODS:
            deukse += 1
            help_count += 1
        elif tg in WEAKENING_TEN_GODS:
            weaken_count += 1

    for branch in branches:
        tg = get_ten_god(day_master, get_hidden_stems(branch)[0].stem)
        if tg in HELPFUL_TEN_GODS:
            help_count += 1
        elif tg in WEAKENING_TEN_GODS:
            weaken_count += 1

    score = (deukryeong * W_SEASON
             + tonggeun * W_ROOT
             + transparency * W_TRANSPARENT
             + deukse * W_HELPER_STEM
             + help_count * W_HELP
             - weaken_count * W_WEAKEN)
    score = _round_half_up(score, 1)

    if deukryeong >= 0.7:
        season_desc = '득령'
    elif deukryeong >= 0.4:
        season_desc = '반득령'
    else:
        season_desc = '실령'

    description = f'일간 {day_master}({dm_element.korean}), {season_desc}({round(deukryeong * 100)}%)'
    if tonggeun > 0:
        description += f', 통근({_round_half_up(tonggeun, 2)})'
    if deukse > 0:
        description += f', 득세({deukse})'

    return StrengthResult(
        level=level_from_score(score),
        score=score,
        factors=StrengthFactors(
            deukryeong=_round_half_up(deukryeong, 2),
            deukji=_round_half_up(deukji, 2),
            deukse=deukse,
            tonggeun=_round_half_up(tonggeun, 2),
            transparency=_round_half_up(transparency, 2),
            help_count=help_count,
            weaken_count=weaken_count,
        ),
        description=description,
    )
