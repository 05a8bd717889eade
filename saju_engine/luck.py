# -*- coding: utf-8 -*-
"""
대운(大運)·세운(歲運)
- 대운: 양남음녀 순행, 음남양녀 역행. 월주에서 한 갑자씩 이동
- 대운수: 출생~다음(순행) 또는 이전(역행) 절(節)까지 일수 ÷ 3
- 세운: 해당 연도 간지, 나이는 세는나이
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .constants import Polarity, get_pillar_index, get_stem_polarity, pillar_from_index, split_pillar
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000
DEFAULT_DAYS_TO_TERM = 30
DEFAULT_MAJOR_LUCK_COUNT = 8


class Gender(Enum):
    MALE = 'male'
    FEMALE = 'female'

    @property
    def korean(self):
        return '남' if self is Gender.MALE else '여'


_GENDER_ALIASES = {
    'male': Gender.MALE, 'm': Gender.MALE, '남': Gender.MALE, '남자': Gender.MALE,
    'female': Gender.FEMALE, 'f': Gender.FEMALE, '여': Gender.FEMALE, '여자': Gender.FEMALE,
}


def parse_gender(value):
    """'남'/'여', 'male'/'female', 'M'/'F' 를 Gender로"""
    if isinstance(value, Gender):
        return value
    gender = _GENDER_ALIASES.get(str(value).strip().lower())
    if gender is None:
        raise ConfigurationError(f"Unknown gender {value!r}; expected '남'/'여' or 'male'/'female'")
    return gender


@dataclass(frozen=True)
class LuckPillar:
    index: int
    start_age: int
    end_age: int
    pillar: str

    @property
    def stem(self):
        return self.pillar[0]

    @property
    def branch(self):
        return self.pillar[1]

    def to_dict(self):
        return {
            'index': self.index,
            'start_age': self.start_age,
            'end_age': self.end_age,
            'stem': self.stem,
            'branch': self.branch,
            'pillar': self.pillar,
        }


@dataclass(frozen=True)
class MajorLuckResult:
    gender: Gender
    year_stem_polarity: Polarity
    is_forward: bool
    start_age: int
    pillars: tuple

    def current(self, age):
        """해당 나이의 대운 (범위 밖이면 None)"""
        for p in self.pillars:
            if p.start_age <= age <= p.end_age:
                return p
        return None

    def to_dict(self):
        return {
            'gender': self.gender.value,
            'year_stem_polarity': self.year_stem_polarity.value,
            'is_forward': self.is_forward,
            'start_age': self.start_age,
            'pillars': [p.to_dict() for p in self.pillars],
        }


def _round_half_up(x):
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


def calculate_major_luck(adapter, birth_dt, gender, year_pillar, month_pillar,
                         count=DEFAULT_MAJOR_LUCK_COUNT, next_term_dt=None, prev_term_dt=None):
    """
    대운을 계산합니다.

    next_term_dt / prev_term_dt 는 출생 직후·직전 절(節) 시각입니다.
    둘 다 없으면 절기까지 30일로 보고 대운수를 정합니다.
    """
    gender = parse_gender(gender)
    year_stem, _ = split_pillar(year_pillar)
    polarity = get_stem_polarity(year_stem)

    forward = (polarity is Polarity.YANG) == (gender is Gender.MALE)

    days_to_term = DEFAULT_DAYS_TO_TERM
    if next_term_dt is not None and prev_term_dt is not None:
        birth_ms = adapter.to_millis(birth_dt)
        term_ms = adapter.to_millis(next_term_dt if forward else prev_term_dt)
        days_to_term = abs(term_ms - birth_ms) / MS_PER_DAY

    start_age = _round_half_up(days_to_term / 3)

    month_idx = get_pillar_index(month_pillar)
    step = 1 if forward else -1
    pillars = tuple(
        LuckPillar(
            index=i,
            start_age=start_age + (i - 1) * 10,
            end_age=start_age + i * 10 - 1,
            pillar=pillar_from_index(month_idx + step * i),
        )
        for i in range(1, count + 1)
    )

    logger.debug('major luck: %s, start age %d, %s', 'forward' if forward else 'backward',
                 start_age, ' '.join(p.pillar for p in pillars))

    return MajorLuckResult(gender, polarity, forward, start_age, pillars)


def get_year_pillar_for(year):
    """양력 연도의 세운 간지 (1984=甲子)"""
    return pillar_from_index(year - 1984)


@dataclass(frozen=True)
class YearlyLuck:
    year: int
    pillar: str
    age: int

    def to_dict(self):
        return {
            'year': self.year,
            'stem': self.pillar[0],
            'branch': self.pillar[1],
            'pillar': self.pillar,
            'age': self.age,
        }


def calculate_yearly_luck(birth_year, from_year, to_year):
    """from_year ~ to_year(포함) 세운 목록"""
    return tuple(
        YearlyLuck(year, get_year_pillar_for(year), year - birth_year + 1)
        for year in range(from_year, to_year + 1)
    )
