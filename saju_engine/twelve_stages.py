# -*- coding: utf-8 -*-
"""
십이운성(十二運星)
- 양간은 장생지에서 순행, 음간은 역행
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .constants import PILLAR_POSITIONS, get_branch_index, get_stem, is_yang_stem, split_pillar


class TwelveStage(Enum):
    LONG_LIFE = 'long_life'
    BATHING = 'bathing'
    CROWN_BELT = 'crown_belt'
    ESTABLISHMENT = 'establishment'
    IMPERIAL = 'imperial'
    DECLINE = 'decline'
    ILLNESS = 'illness'
    DEATH = 'death'
    TOMB = 'tomb'
    EXTINCTION = 'extinction'
    CONCEPTION = 'conception'
    NURTURING = 'nurturing'

    @property
    def info(self):
        return STAGE_INFO[self]

    def to_dict(self):
        info = STAGE_INFO[self]
        return {
            'key': self.value,
            'korean': info.korean,
            'hanja': info.hanja,
            'meaning': info.meaning,
            'strength': info.strength,
        }


_STAGE_ORDER = tuple(TwelveStage)


@dataclass(frozen=True)
class StageInfo:
    korean: str
    hanja: str
    meaning: str
    strength: str  # strong, neutral, weak


STAGE_INFO = MappingProxyType({
    TwelveStage.LONG_LIFE: StageInfo('장생', '長生', '새로운 시작, 성장의 기운', 'strong'),
    TwelveStage.BATHING: StageInfo('목욕', '沐浴', '불안정, 변화', 'neutral'),
    TwelveStage.CROWN_BELT: StageInfo('관대', '冠帶', '성장, 준비, 학업', 'strong'),
    TwelveStage.ESTABLISHMENT: StageInfo('건록', '建祿', '안정, 직업, 녹봉', 'strong'),
    TwelveStage.IMPERIAL: StageInfo('제왕', '帝旺', '최고 전성기', 'strong'),
    TwelveStage.DECLINE: StageInfo('쇠', '衰', '기운 약화, 후퇴', 'weak'),
    TwelveStage.ILLNESS: StageInfo('병', '病', '곤란, 쇠약', 'weak'),
    TwelveStage.DEATH: StageInfo('사', '死', '끝, 전환점', 'weak'),
    TwelveStage.TOMB: StageInfo('묘', '墓', '저장, 보관', 'neutral'),
    TwelveStage.EXTINCTION: StageInfo('절', '絶', '단절, 새로운 국면', 'weak'),
    TwelveStage.CONCEPTION: StageInfo('태', '胎', '잉태, 구상', 'neutral'),
    TwelveStage.NURTURING: StageInfo('양', '養', '양육, 축적', 'neutral'),
})

# 천간별 장생지
BIRTH_BRANCH = MappingProxyType({
    '甲': '亥', '丙': '寅', '戊': '寅', '庚': '巳', '壬': '申',
    '乙': '午', '丁': '酉', '己': '酉', '辛': '子', '癸': '卯',
})


def get_twelve_stage(stem, branch):
    get_stem(stem)
    birth_idx = get_branch_index(BIRTH_BRANCH[stem])
    target_idx = get_branch_index(branch)
    if is_yang_stem(stem):
        return _STAGE_ORDER[(target_idx - birth_idx) % 12]
    return _STAGE_ORDER[(birth_idx - target_idx) % 12]


@dataclass(frozen=True)
class TwelveStagesResult:
    year: TwelveStage
    month: TwelveStage
    day: TwelveStage
    hour: TwelveStage

    def to_dict(self):
        stages = (self.year, self.month, self.day, self.hour)
        return {pos.value: s.to_dict() for pos, s in zip(PILLAR_POSITIONS, stages)}


def analyze_twelve_stages(year_pillar, month_pillar, day_pillar, hour_pillar):
    """일간 기준 각 지지의 십이운성"""
    day_master, _ = split_pillar(day_pillar)
    branches = [split_pillar(p)[1] for p in (year_pillar, month_pillar, day_pillar, hour_pillar)]
    return TwelveStagesResult(*(get_twelve_stage(day_master, b) for b in branches))
