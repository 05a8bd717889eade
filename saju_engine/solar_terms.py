# -*- coding: utf-8 -*-
"""
24절기(節氣) 조회
- 태양 황경 15°마다 하나씩, 소한(285°)을 0번으로 번호를 매김
- 짝수 번호가 절(節): 월의 경계이며 대운 계산에 쓰임
"""

import logging
import math
from dataclasses import dataclass
from typing import Any

from .ephemeris import find_term_utc, sun_apparent_longitude
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class SolarTerm:
    key: str
    korean: str
    hanja: str
    longitude: float
    index: int

    @property
    def is_jie(self):
        return self.index % 2 == 0

    @property
    def approximate_month(self):
        """절기가 드는 양력 달 (소한·대한=1월 ... 대설·동지=12월)"""
        return self.index // 2 + 1

    def to_dict(self):
        return {
            'key': self.key,
            'korean': self.korean,
            'hanja': self.hanja,
            'longitude': self.longitude,
            'index': self.index,
            'is_jie': self.is_jie,
        }


_JEOLGI_DATA = (
    ('minor_cold', '소한', '小寒'),
    ('major_cold', '대한', '大寒'),
    ('spring_begins', '입춘', '立春'),
    ('rain_water', '우수', '雨水'),
    ('awakening_insects', '경칩', '驚蟄'),
    ('vernal_equinox', '춘분', '春分'),
    ('pure_brightness', '청명', '淸明'),
    ('grain_rain', '곡우', '穀雨'),
    ('summer_begins', '입하', '立夏'),
    ('grain_buds', '소만', '小滿'),
    ('grain_in_ear', '망종', '芒種'),
    ('summer_solstice', '하지', '夏至'),
    ('minor_heat', '소서', '小暑'),
    ('major_heat', '대서', '大暑'),
    ('autumn_begins', '입추', '立秋'),
    ('heat_stops', '처서', '處暑'),
    ('white_dew', '백로', '白露'),
    ('autumnal_equinox', '추분', '秋分'),
    ('cold_dew', '한로', '寒露'),
    ('frost_descends', '상강', '霜降'),
    ('winter_begins', '입동', '立冬'),
    ('minor_snow', '소설', '小雪'),
    ('major_snow', '대설', '大雪'),
    ('winter_solstice', '동지', '冬至'),
)

JEOLGI = tuple(
    SolarTerm(key, korean, hanja, float((285 + 15 * i) % 360), i)
    for i, (key, korean, hanja) in enumerate(_JEOLGI_DATA)
)

JEOLGI_BY_NAME = {t.korean: t for t in JEOLGI}


def get_solar_term(name_or_index):
    """절기 이름(한글/키) 또는 번호로 SolarTerm 조회"""
    if isinstance(name_or_index, int):
        return JEOLGI[name_or_index % 24]
    term = JEOLGI_BY_NAME.get(name_or_index)
    if term is None:
        term = next((t for t in JEOLGI if t.key == name_or_index), None)
    if term is None:
        raise ConfigurationError(f'Unknown solar term: {name_or_index!r}')
    return term


def term_index_from_longitude(longitude):
    return int(((longitude - 285 + 360) % 360) // 15)


@dataclass(frozen=True)
class TermDateInfo:
    year: int
    month: int
    day: int
    hour: int
    minute: int

    def to_dict(self):
        return {'year': self.year, 'month': self.month, 'day': self.day,
                'hour': self.hour, 'minute': self.minute}


def _date_info(adapter, dt):
    return TermDateInfo(adapter.get_year(dt), adapter.get_month(dt), adapter.get_day(dt),
                        adapter.get_hour(dt), adapter.get_minute(dt))


def solar_term_instant(adapter, term, year, zone='UTC'):
    """해당 연도의 절기 시각. 그 달 1~28일(UTC) 구간에서 찾습니다."""
    if not isinstance(term, SolarTerm):
        term = get_solar_term(term)
    month = term.approximate_month
    start = adapter.create_utc(year, month, 1, 0, 0, 0)
    end = adapter.create_utc(year, month, 28, 0, 0, 0)
    return adapter.set_zone(find_term_utc(adapter, term.longitude, start, end), zone)


def _latest_before(adapter, term, dt_local, zone):
    """dt_local 이전(같은 시각 포함)에 마지막으로 지난 절기 시각"""
    year = adapter.get_year(dt_local)
    limit = adapter.to_millis(dt_local)
    for y in (year, year - 1):
        t = solar_term_instant(adapter, term, y, zone)
        if adapter.to_millis(t) <= limit:
            return t
    return solar_term_instant(adapter, term, year - 2, zone)


def _earliest_after(adapter, term, dt_local, zone):
    """dt_local 이후 처음 오는 절기 시각"""
    year = adapter.get_year(dt_local)
    limit = adapter.to_millis(dt_local)
    for y in (year, year + 1):
        t = solar_term_instant(adapter, term, y, zone)
        if adapter.to_millis(t) > limit:
            return t
    return solar_term_instant(adapter, term, year + 2, zone)


def _nearest_instant(adapter, term, dt_local, zone):
    """dt_local 에 가장 가까운 해의 절기 시각 (연말·연초는 앞뒤 해로 넘김)"""
    year = adapter.get_year(dt_local)
    gap = term.approximate_month - adapter.get_month(dt_local)
    if gap > 6:
        year -= 1
    elif gap < -6:
        year += 1
    return solar_term_instant(adapter, term, year, zone)


def _current_term_index(adapter, dt_local, zone):
    """황경으로 정한 번호를 실제 절기 시각과 맞춥니다. 교절 직전·직후의 오차를 바로잡습니다."""
    longitude = sun_apparent_longitude(adapter, adapter.to_utc(dt_local))
    idx = term_index_from_longitude(longitude)
    limit = adapter.to_millis(dt_local)
    if adapter.to_millis(_nearest_instant(adapter, JEOLGI[idx], dt_local, zone)) > limit:
        return (idx - 1) % 24
    following = JEOLGI[(idx + 1) % 24]
    if adapter.to_millis(_nearest_instant(adapter, following, dt_local, zone)) <= limit:
        return following.index
    return idx


@dataclass(frozen=True)
class TermOccurrence:
    term: SolarTerm
    local: Any
    date: TermDateInfo
    millis: float

    def to_dict(self, adapter=None):
        result = {'term': self.term.to_dict(), 'date': self.date.to_dict(), 'millis': self.millis}
        if adapter is not None:
            result['iso'] = adapter.to_iso(self.local)
        return result


def _occurrence(adapter, term, local):
    return TermOccurrence(term, local, _date_info(adapter, local), adapter.to_millis(local))


@dataclass(frozen=True)
class SolarTermInfo:
    current: TermOccurrence
    next: TermOccurrence
    prev_jie: TermOccurrence
    next_jie: TermOccurrence
    days_since_current: int
    days_until_next: int

    def to_dict(self, adapter=None):
        return {
            'current': self.current.to_dict(adapter),
            'next': self.next.to_dict(adapter),
            'prev_jie': self.prev_jie.to_dict(adapter),
            'next_jie': self.next_jie.to_dict(adapter),
            'days_since_current': self.days_since_current,
            'days_until_next': self.days_until_next,
        }


def analyze_solar_terms(dt_local, adapter):
    """
    dt_local 기준 현재 절기·다음 절기와 직전·다음 절(節)

    현재 절기는 태양 황경으로 번호를 정하고 실제 절기 시각으로 확인한 뒤, 그 절기가 지난 시각을 찾습니다.
    """
    zone = adapter.get_zone_name(dt_local)
    current_idx = _current_term_index(adapter, dt_local, zone)
    current_term = JEOLGI[current_idx]
    next_term = JEOLGI[(current_idx + 1) % 24]

    prev_jie_term = JEOLGI[current_idx if current_term.is_jie else (current_idx - 1) % 24]
    next_jie_term = JEOLGI[(prev_jie_term.index + 2) % 24]

    current = _occurrence(adapter, current_term, _latest_before(adapter, current_term, dt_local, zone))
    upcoming = _occurrence(adapter, next_term, _earliest_after(adapter, next_term, dt_local, zone))
    prev_jie = _occurrence(adapter, prev_jie_term, _latest_before(adapter, prev_jie_term, dt_local, zone))
    next_jie = _occurrence(adapter, next_jie_term, _earliest_after(adapter, next_jie_term, dt_local, zone))

    dt_millis = adapter.to_millis(dt_local)
    logger.debug('solar terms at %s: %s -> %s', adapter.to_iso(dt_local), current_term.korean, next_term.korean)

    return SolarTermInfo(
        current=current,
        next=upcoming,
        prev_jie=prev_jie,
        next_jie=next_jie,
        days_since_current=math.floor((dt_millis - current.millis) / MS_PER_DAY),
        days_until_next=math.ceil((upcoming.millis - dt_millis) / MS_PER_DAY),
    )


def get_solar_terms_for_year(year, adapter, timezone='UTC'):
    """한 해의 24절기 시각 (소한부터 동지까지)"""
    return tuple(
        _occurrence(adapter, term, solar_term_instant(adapter, term, year, timezone))
        for term in JEOLGI
    )
