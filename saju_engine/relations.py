# -*- coding: utf-8 -*-
"""
합충형파해(合沖刑破害) 분석
- 천간합, 지지 육합·삼합·방합
- 충(沖), 해(害), 형(刑), 파(破)
- 합의 화(化) 여부: 월령 지원 또는 결과 오행이 원국에 2개 이상
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from .constants import PILLAR_POSITIONS, Element, get_branch, get_stem, split_pillar


class RelationKind(Enum):
    STEM_COMBINATION = '천간합'
    SIX_COMBINATION = '육합'
    TRIPLE_COMBINATION = '삼합'
    DIRECTIONAL_COMBINATION = '방합'
    CLASH = '충'
    HARM = '해'
    PUNISHMENT = '형'
    DESTRUCTION = '파'


class TransformStatus(Enum):
    HALF_COMBINED = 'half_combined'
    TRANSFORMED = 'transformed'
    NOT_TRANSFORMED = 'not_transformed'

    @property
    def korean(self):
        return {
            'half_combined': '반합',
            'transformed': '합화',
            'not_transformed': '불화',
        }[self.value]


# ============================================================
# 1. 관계 표
# ============================================================

STEM_COMBINATIONS = (
    (('甲', '己'), Element.EARTH),
    (('乙', '庚'), Element.METAL),
    (('丙', '辛'), Element.WATER),
    (('丁', '壬'), Element.WOOD),
    (('戊', '癸'), Element.FIRE),
)

BRANCH_SIX_COMBINATIONS = (
    (('子', '丑'), Element.EARTH),
    (('寅', '亥'), Element.WOOD),
    (('卯', '戌'), Element.FIRE),
    (('辰', '酉'), Element.METAL),
    (('巳', '申'), Element.WATER),
    (('午', '未'), Element.EARTH),
)

BRANCH_TRIPLE_COMBINATIONS = (
    (('寅', '午', '戌'), Element.FIRE),
    (('申', '子', '辰'), Element.WATER),
    (('亥', '卯', '未'), Element.WOOD),
    (('巳', '酉', '丑'), Element.METAL),
)

BRANCH_DIRECTIONAL_COMBINATIONS = (
    (('寅', '卯', '辰'), Element.WOOD),
    (('巳', '午', '未'), Element.FIRE),
    (('申', '酉', '戌'), Element.METAL),
    (('亥', '子', '丑'), Element.WATER),
)

BRANCH_CLASHES = (('子', '午'), ('丑', '未'), ('寅', '申'), ('卯', '酉'), ('辰', '戌'), ('巳', '亥'))
BRANCH_HARMS = (('子', '未'), ('丑', '午'), ('寅', '巳'), ('卯', '辰'), ('申', '亥'), ('酉', '戌'))
BRANCH_DESTRUCTIONS = (('子', '酉'), ('丑', '辰'), ('寅', '亥'), ('卯', '午'), ('巳', '申'), ('未', '戌'))

# 삼형·상형
BRANCH_TRIPLE_PUNISHMENTS = (
    (('寅', '巳', '申'), '무은지형'),
    (('丑', '戌', '未'), '무례지형'),
)
BRANCH_PAIR_PUNISHMENTS = (
    (('子', '卯'), '무례지형'),
)
SELF_PUNISHMENT_BRANCHES = ('辰', '午', '酉', '亥')
SELF_PUNISHMENT = '자형'

# 월지가 돕는 오행 (화 성립 조건)
MONTH_SUPPORT = MappingProxyType({
    '寅': frozenset({Element.WOOD, Element.FIRE}),
    '卯': frozenset({Element.WOOD, Element.FIRE}),
    '巳': frozenset({Element.FIRE, Element.EARTH}),
    '午': frozenset({Element.FIRE, Element.EARTH}),
    '申': frozenset({Element.METAL, Element.WATER}),
    '酉': frozenset({Element.METAL, Element.WATER}),
    '亥': frozenset({Element.WATER, Element.WOOD}),
    '子': frozenset({Element.WATER, Element.WOOD}),
    '辰': frozenset({Element.EARTH, Element.METAL}),
    '未': frozenset({Element.EARTH, Element.METAL}),
    '戌': frozenset({Element.EARTH, Element.METAL}),
    '丑': frozenset({Element.EARTH, Element.METAL}),
})

TRANSFORM_MIN_COUNT = 2


def _pair_lookup(table, a, b):
    for pair, element in table:
        if (a, b) == pair or (b, a) == pair:
            return element
    return None


def _pair_in(table, a, b):
    return (a, b) in table or (b, a) in table


def find_stem_combination(stem1, stem2):
    """두 천간이 합하면 결과 오행, 아니면 None"""
    return _pair_lookup(STEM_COMBINATIONS, stem1, stem2)


def find_branch_six_combination(branch1, branch2):
    """두 지지가 육합하면 결과 오행, 아니면 None"""
    return _pair_lookup(BRANCH_SIX_COMBINATIONS, branch1, branch2)


def find_branch_clash(branch1, branch2):
    return _pair_in(BRANCH_CLASHES, branch1, branch2)


# ============================================================
# 2. 결과 타입
# ============================================================


@dataclass(frozen=True)
class Combination:
    kind: RelationKind
    chars: tuple
    positions: tuple
    result_element: Element
    is_complete: bool
    transform_status: TransformStatus
    transform_reason: str

    def to_dict(self):
        return {
            'type': self.kind.value,
            'chars': list(self.chars),
            'positions': [p.value for p in self.positions],
            'result_element': self.result_element.value,
            'is_complete': self.is_complete,
            'transform_status': self.transform_status.value,
            'transform_reason': self.transform_reason,
        }


@dataclass(frozen=True)
class Conflict:
    kind: RelationKind
    chars: tuple
    positions: tuple
    punishment_type: Optional[str] = None

    def to_dict(self):
        result = {
            'type': self.kind.value,
            'chars': list(self.chars),
            'positions': [p.value for p in self.positions],
        }
        if self.punishment_type:
            result['punishment_type'] = self.punishment_type
        return result


@dataclass(frozen=True)
class RelationsResult:
    combinations: tuple
    clashes: tuple
    harms: tuple
    punishments: tuple
    destructions: tuple

    @property
    def all(self):
        return self.combinations + self.clashes + self.harms + self.punishments + self.destructions

    def to_dict(self):
        return {
            'combinations': [r.to_dict() for r in self.combinations],
            'clashes': [r.to_dict() for r in self.clashes],
            'harms': [r.to_dict() for r in self.harms],
            'punishments': [r.to_dict() for r in self.punishments],
            'destructions': [r.to_dict() for r in self.destructions],
        }


# ============================================================
# 3. 분석
# ============================================================


def transform_status(result_element, is_complete, month_branch, element_count):
    """합의 화 여부와 그 이유"""
    if not is_complete:
        return TransformStatus.HALF_COMBINED, '세 글자 중 두 글자만 있어 반합'
    if result_element in MONTH_SUPPORT[month_branch]:
        return TransformStatus.TRANSFORMED, f'월지 {month_branch}가 {result_element.korean} 기운을 도와 합화'
    if element_count >= TRANSFORM_MIN_COUNT:
        return TransformStatus.TRANSFORMED, f'원국에 {result_element.korean} 기운이 {element_count}개 있어 합화'
    return TransformStatus.NOT_TRANSFORMED, f'{result_element.korean} 기운의 지원이 없어 합만 되고 화하지 못함'


def _first_positions(matched, chars):
    """각 글자가 처음 나오는 기둥 위치"""
    return tuple(PILLAR_POSITIONS[chars.index(m)] for m in matched)


def analyze_relations(year_pillar, month_pillar, day_pillar, hour_pillar):
    """원국 네 기둥 사이의 합충형파해"""
    pillars = [split_pillar(p) for p in (year_pillar, month_pillar, day_pillar, hour_pillar)]
    stems = [s for s, _ in pillars]
    branches = [b for _, b in pillars]
    month_branch = branches[1]

    stem_elements = [get_stem(s).element for s in stems]
    branch_elements = [get_branch(b).element for b in branches]

    combinations = []
    clashes = []
    harms = []
    destructions = []
    punishments = []

    def combination(kind, chars, positions, element, is_complete, counted):
        status, reason = transform_status(element, is_complete, month_branch, counted.count(element))
        combinations.append(Combination(kind, tuple(chars), tuple(positions), element, is_complete, status, reason))

    # 천간합
    for i in range(4):
        for j in range(i + 1, 4):
            element = find_stem_combination(stems[i], stems[j])
            if element is not None:
                combination(RelationKind.STEM_COMBINATION, (stems[i], stems[j]),
                            (PILLAR_POSITIONS[i], PILLAR_POSITIONS[j]), element, True, stem_elements)

    # 지지 쌍 관계
    for i in range(4):
        for j in range(i + 1, 4):
            b1, b2 = branches[i], branches[j]
            positions = (PILLAR_POSITIONS[i], PILLAR_POSITIONS[j])

            element = find_branch_six_combination(b1, b2)
            if element is not None:
                combination(RelationKind.SIX_COMBINATION, (b1, b2), positions, element, True, branch_elements)
            if find_branch_clash(b1, b2):
                clashes.append(Conflict(RelationKind.CLASH, (b1, b2), positions))
            if _pair_in(BRANCH_HARMS, b1, b2):
                harms.append(Conflict(RelationKind.HARM, (b1, b2), positions))
            if _pair_in(BRANCH_DESTRUCTIONS, b1, b2):
                destructions.append(Conflict(RelationKind.DESTRUCTION, (b1, b2), positions))

    # 삼합·방합
    for kind, table in ((RelationKind.TRIPLE_COMBINATION, BRANCH_TRIPLE_COMBINATIONS),
                        (RelationKind.DIRECTIONAL_COMBINATION, BRANCH_DIRECTIONAL_COMBINATIONS)):
        for group, element in table:
            matched = [b for b in group if b in branches]
            if len(matched) >= 2:
                combination(kind, matched, _first_positions(matched, branches), element,
                            len(matched) == 3, branch_elements)

    # 형
    for group, name in BRANCH_TRIPLE_PUNISHMENTS:
        matched = [b for b in group if b in branches]
        if len(matched) >= 2:
            punishments.append(Conflict(RelationKind.PUNISHMENT, tuple(matched),
                                        _first_positions(matched, branches), name))
    for group, name in BRANCH_PAIR_PUNISHMENTS:
        matched = [b for b in group if b in branches]
        if len(matched) == 2:
            punishments.append(Conflict(RelationKind.PUNISHMENT, tuple(matched),
                                        _first_positions(matched, branches), name))
    for b in SELF_PUNISHMENT_BRANCHES:
        positions = tuple(PILLAR_POSITIONS[i] for i, ch in enumerate(branches) if ch == b)
        if len(positions) >= 2:
            punishments.append(Conflict(RelationKind.PUNISHMENT, (b,) * len(positions),
                                        positions, SELF_PUNISHMENT))

    return RelationsResult(
        combinations=tuple(combinations),
        clashes=tuple(clashes),
        harms=tuple(harms),
        punishments=tuple(punishments),
        destructions=tuple(destructions),
    )
