# -*- coding: utf-8 -*-
"""
십신(十神) 판단
- 일간(日干)과 다른 천간의 오행 생극 관계 + 음양 동이(同異)로 결정
- 지지는 지장간 본기(本氣)로 판단
"""

from dataclasses import dataclass
from enum import Enum

from .constants import (
    ELEMENTS,
    PILLAR_POSITIONS,
    get_branch_element,
    get_hidden_stems,
    get_stem,
    get_stem_element,
    split_pillar,
)
from .errors import InvariantViolation


class TenGod(Enum):
    COMPANION = 'companion'
    ROB_WEALTH = 'rob_wealth'
    EATING_GOD = 'eating_god'
    HURTING_OFFICER = 'hurting_officer'
    INDIRECT_WEALTH = 'indirect_wealth'
    DIRECT_WEALTH = 'direct_wealth'
    SEVEN_KILLINGS = 'seven_killings'
    DIRECT_OFFICER = 'direct_officer'
    INDIRECT_SEAL = 'indirect_seal'
    DIRECT_SEAL = 'direct_seal'

    @property
    def korean(self):
        return SIPSIN_NAME[_TEN_GOD_ORDER.index(self)]

    @property
    def hanja(self):
        return SIPSIN_HANJA[_TEN_GOD_ORDER.index(self)]

    def to_dict(self):
        return {'key': self.value, 'korean': self.korean, 'hanja': self.hanja}


_TEN_GOD_ORDER = tuple(TenGod)

SIPSIN_NAME = ('비견', '겁재', '식신', '상관', '편재', '정재', '편관', '정관', '편인', '정인')
SIPSIN_HANJA = ('比肩', '劫財', '食神', '傷官', '偏財', '正財', '偏官', '正官', '偏印', '正印')

# 일간 자리 표시
DAY_MASTER_LABEL = {'key': 'day_master', 'korean': '일간', 'hanja': '日干'}

# 비겁·인성: 일간을 돕는 십신
HELPFUL_TEN_GODS = frozenset({
    TenGod.COMPANION, TenGod.ROB_WEALTH, TenGod.INDIRECT_SEAL, TenGod.DIRECT_SEAL,
})


def get_ten_god(day_master, target_stem):
    """일간 기준으로 다른 천간과의 십신 관계를 구합니다."""
    dm = get_stem(day_master)
    target = get_stem(target_stem)
    same_polarity = dm.polarity is target.polarity

    if dm.element is target.element:
        return TenGod.COMPANION if same_polarity else TenGod.ROB_WEALTH

    # 내가 생하는 것 (식상)
    if dm.element.generates is target.element:
        return TenGod.EATING_GOD if same_polarity else TenGod.HURTING_OFFICER

    # 내가 극하는 것 (재성)
    if dm.element.controls is target.element:
        return TenGod.INDIRECT_WEALTH if same_polarity else TenGod.DIRECT_WEALTH

    # 나를 극하는 것 (관성)
    if target.element.controls is dm.element:
        return TenGod.SEVEN_KILLINGS if same_polarity else TenGod.DIRECT_OFFICER

    # 나를 생하는 것 (인성)
    if target.element.generates is dm.element:
        return TenGod.INDIRECT_SEAL if same_polarity else TenGod.DIRECT_SEAL

    raise InvariantViolation(f'Unable to determine ten god relationship: {day_master} -> {target_stem}')


def get_ten_god_for_branch(day_master, branch):
    """지지의 지장간 본기 기준으로 십신을 구합니다."""
    return get_ten_god(day_master, get_hidden_stems(branch)[0].stem)


@dataclass(frozen=True)
class HiddenStemTenGod:
    stem: str
    ten_god: TenGod
    kind: str  # 본기, 중기, 여기
    weight: float

    def to_dict(self):
        return {
            'stem': self.stem,
            'ten_god': self.ten_god.to_dict(),
            'kind': self.kind,
            'weight': self.weight,
        }


def get_ten_gods_for_branch(day_master, branch):
    """지장간 전체의 십신 (본기 먼저)"""
    return tuple(
        HiddenStemTenGod(hs.stem, get_ten_god(day_master, hs.stem), hs.kind, hs.weight)
        for hs in get_hidden_stems(branch)
    )


@dataclass(frozen=True)
class PillarTenGods:
    stem: str
    stem_ten_god: object  # 일주는 None (일간 자리)
    branch: str
    branch_ten_god: TenGod
    hidden_stems: tuple

    def to_dict(self):
        return {
            'stem': {
                'char': self.stem,
                'ten_god': self.stem_ten_god.to_dict() if self.stem_ten_god else dict(DAY_MASTER_LABEL),
            },
            'branch': {
                'char': self.branch,
                'ten_god': self.branch_ten_god.to_dict(),
                'hidden_stems': [hs.to_dict() for hs in self.hidden_stems],
            },
        }


@dataclass(frozen=True)
class TenGodAnalysis:
    year: PillarTenGods
    month: PillarTenGods
    day: PillarTenGods
    hour: PillarTenGods
    day_master: str

    def pillars(self):
        return self.year, self.month, self.day, self.hour

    def to_dict(self):
        result = {pos.value: p.to_dict() for pos, p in zip(PILLAR_POSITIONS, self.pillars())}
        result['day_master'] = self.day_master
        return result


def _analyze_pillar(day_master, pillar, is_day_pillar=False):
    stem, branch = split_pillar(pillar)
    hidden = get_ten_gods_for_branch(day_master, branch)
    return PillarTenGods(
        stem=stem,
        stem_ten_god=None if is_day_pillar else get_ten_god(day_master, stem),
        branch=branch,
        branch_ten_god=hidden[0].ten_god,
        hidden_stems=hidden,
    )


def analyze_ten_gods(year_pillar, month_pillar, day_pillar, hour_pillar):
    """사주 여덟 글자의 십신 배치"""
    day_master, _ = split_pillar(day_pillar)
    return TenGodAnalysis(
        year=_analyze_pillar(day_master, year_pillar),
        month=_analyze_pillar(day_master, month_pillar),
        day=_analyze_pillar(day_master, day_pillar, is_day_pillar=True),
        hour=_analyze_pillar(day_master, hour_pillar),
        day_master=day_master,
    )


def count_ten_gods(analysis):
    """일간을 뺀 천간 3개 + 지지 4개의 십신 개수"""
    counts = {tg: 0 for tg in TenGod}
    for p in (analysis.year, analysis.month, analysis.hour):
        counts[p.stem_ten_god] += 1
    for p in analysis.pillars():
        counts[p.branch_ten_god] += 1
    return counts


def count_elements(analysis):
    """여덟 글자의 오행 개수"""
    counts = {e: 0 for e in ELEMENTS}
    for p in analysis.pillars():
        counts[get_stem_element(p.stem)] += 1
        counts[get_branch_element(p.branch)] += 1
    return counts
