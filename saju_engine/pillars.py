# -*- coding: utf-8 -*-
"""
사주 원국(四柱) 산출
- 년주: 입춘(태양 황경 315°) 기준
- 월주: 태양 황경 기준 절월 + 오호둔(五虎遁)
- 일주: 율리우스 일수 기준 60갑자
- 시주: 2시간 단위 시지 + 오서둔(五鼠遁)
"""

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from .constants import CHEONGAN, JIJI, SEXAGENARY_CYCLE, jdn_from_date, pillar_from_index
from .ephemeris import find_term_utc, sun_apparent_longitude
from .errors import ConfigurationError
from .lunar import LunarDate, get_lunar_date

logger = logging.getLogger(__name__)

# 한국 표준시(KST) UTC+9
DEFAULT_TZ_OFFSET_HOURS = 9

LICHUN_DEG = 315.0

# ============================================================
# 1. 경계 설정(preset)
# ============================================================


class DayBoundary(Enum):
    MIDNIGHT = 'midnight'
    ZI23 = 'zi23'  # 23시(자시 시작)에 날짜가 바뀜


@dataclass(frozen=True)
class BoundaryPreset:
    day_boundary: DayBoundary = DayBoundary.MIDNIGHT
    use_mean_solar_time_for_hour: bool = False
    use_mean_solar_time_for_boundary: bool = False

    def to_dict(self):
        return {
            'day_boundary': _boundary(self.day_boundary).value,
            'use_mean_solar_time_for_hour': self.use_mean_solar_time_for_hour,
            'use_mean_solar_time_for_boundary': self.use_mean_solar_time_for_boundary,
        }


# 현대식: 자정 기준, 보정 없음
STANDARD_PRESET = BoundaryPreset()

# 전통식: 자시(23시) 기준, 평균태양시 보정
TRADITIONAL_PRESET = BoundaryPreset(
    day_boundary=DayBoundary.ZI23,
    use_mean_solar_time_for_hour=True,
    use_mean_solar_time_for_boundary=True,
)

PRESETS = {
    'standard': STANDARD_PRESET,
    'traditional': TRADITIONAL_PRESET,
}


def _boundary(value):
    """DayBoundary 또는 그 문자열 값을 받아 DayBoundary로 돌려줍니다."""
    if isinstance(value, DayBoundary):
        return value
    try:
        return DayBoundary(value)
    except ValueError:
        raise ConfigurationError("day_boundary must be 'midnight' or 'zi23'") from None


def get_preset(name):
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset {name!r}; expected one of {', '.join(PRESETS)}"
        ) from None


# ============================================================
# 2. 오호둔(五虎遁)·오서둔(五鼠遁)
# ============================================================

# 년간 → 인월(寅月) 천간: 甲己→丙, 乙庚→戊, 丙辛→庚, 丁壬→壬, 戊癸→甲
FIVE_TIGERS = (2, 4, 6, 8, 0, 2, 4, 6, 8, 0)

# 일간 → 자시(子時) 천간: 甲己→甲, 乙庚→丙, 丙辛→戊, 丁壬→庚, 戊癸→壬
FIVE_RATS = (0, 2, 4, 6, 8, 0, 2, 4, 6, 8)


@dataclass(frozen=True)
class PillarResult:
    """단일 기둥 계산 결과"""
    pillar: str
    idx60: int


@dataclass(frozen=True)
class YearPillarResult(PillarResult):
    solar_year: int


@dataclass(frozen=True)
class MonthPillarResult:
    pillar: str
    sun_longitude_deg: float


@dataclass(frozen=True)
class DayDate:
    year: int
    month: int
    day: int

    def to_dict(self):
        return asdict(self)

    def iso(self):
        return f'{self.year:04d}-{self.month:02d}-{self.day:02d}'


@dataclass(frozen=True)
class HourPillarResult:
    pillar: str
    adjusted_dt: Any
    effective_date: DayDate


# ============================================================
# 3. 기둥별 계산
# ============================================================


def apply_mean_solar_time(adapter, dt_local, longitude_deg, tz_offset_hours=DEFAULT_TZ_OFFSET_HOURS):
    """경도 1°당 4분씩 표준시 자오선과의 차이만큼 평균태양시로 옮깁니다."""
    delta_minutes = 4 * (longitude_deg - 15 * tz_offset_hours)
    return adapter.plus_minutes(dt_local, delta_minutes)


def get_day_pillar(year, month, day):
    """그레고리력 날짜의 일주 (1985-05-15 → 甲寅)"""
    idx60 = (jdn_from_date(year, month, day) - 11) % SEXAGENARY_CYCLE
    return PillarResult(pillar_from_index(idx60), idx60)


def lichun_utc(adapter, year):
    """해당 연도 입춘 시각 (UTC)"""
    start = adapter.create_utc(year, 2, 1, 0, 0, 0)
    end = adapter.create_utc(year, 2, 7, 0, 0, 0)
    return find_term_utc(adapter, LICHUN_DEG, start, end)


def get_year_pillar(adapter, dt_local):
    """입춘 이전 출생은 전년도 간지를 씁니다."""
    year = adapter.get_year(dt_local)
    lichun_local = adapter.set_zone(lichun_utc(adapter, year), adapter.get_zone_name(dt_local))
    solar_year = year if adapter.is_greater_than_or_equal(dt_local, lichun_local) else year - 1

    idx60 = (solar_year - 1984) % SEXAGENARY_CYCLE
    return YearPillarResult(pillar_from_index(idx60), idx60, solar_year)


def month_branch_index(sun_lon):
    """태양 황경 → 월지 순번 (315°=寅)"""
    return (int(((sun_lon + 45) % 360) // 30) + 2) % 12


def get_month_pillar(adapter, dt_local, year_stem_index=None):
    """월지는 태양 황경, 월간은 년간에서 오호둔으로 구합니다."""
    if year_stem_index is None:
        year_stem_index = get_year_pillar(adapter, dt_local).idx60 % 10

    lon = sun_apparent_longitude(adapter, adapter.to_utc(dt_local))
    branch_idx = month_branch_index(lon)

    month_no = (branch_idx - 2) % 12
    stem_idx = (FIVE_TIGERS[year_stem_index] + month_no) % 10
    return MonthPillarResult(CHEONGAN[stem_idx] + JIJI[branch_idx], lon)


def effective_day_date(adapter, dt_local, day_boundary=DayBoundary.MIDNIGHT, longitude_deg=None,
                       tz_offset_hours=DEFAULT_TZ_OFFSET_HOURS, use_mean_solar_time_for_boundary=False):
    """일주를 정할 날짜. 자시 기준이면 23시 이후는 다음 날입니다."""
    boundary = _boundary(day_boundary)

    dt_check = dt_local
    if use_mean_solar_time_for_boundary:
        if longitude_deg is None:
            raise ConfigurationError('longitude_deg required when use_mean_solar_time_for_boundary=True')
        dt_check = apply_mean_solar_time(adapter, dt_local, longitude_deg, tz_offset_hours)

    d = dt_check
    if boundary is DayBoundary.ZI23 and adapter.get_hour(dt_check) >= 23:
        d = adapter.plus_days(dt_check, 1)

    return DayDate(adapter.get_year(d), adapter.get_month(d), adapter.get_day(d))


def hour_branch_index(hour):
    """子時 23~01시, 丑時 01~03시 ... 亥時 21~23시"""
    return ((hour + 1) // 2) % 12


def get_hour_pillar(adapter, dt_local, longitude_deg=None, tz_offset_hours=DEFAULT_TZ_OFFSET_HOURS,
                    use_mean_solar_time_for_hour=False, day_boundary=DayBoundary.MIDNIGHT,
                    use_mean_solar_time_for_boundary=False):
    dt_used = dt_local
    if use_mean_solar_time_for_hour:
        if longitude_deg is None:
            raise ConfigurationError('longitude_deg required when use_mean_solar_time_for_hour=True')
        dt_used = apply_mean_solar_time(adapter, dt_local, longitude_deg, tz_offset_hours)

    eff_date = effective_day_date(
        adapter, dt_local,
        day_boundary=day_boundary,
        longitude_deg=longitude_deg,
        tz_offset_hours=tz_offset_hours,
        use_mean_solar_time_for_boundary=use_mean_solar_time_for_boundary,
    )
    day_stem_idx = get_day_pillar(eff_date.year, eff_date.month, eff_date.day).idx60 % 10

    branch_idx = hour_branch_index(adapter.get_hour(dt_used))
    stem_idx = (FIVE_RATS[day_stem_idx] + branch_idx) % 10
    return HourPillarResult(CHEONGAN[stem_idx] + JIJI[branch_idx], dt_used, eff_date)


# ============================================================
# 4. 사주 원국
# ============================================================


@dataclass(frozen=True)
class FourPillarsMeta:
    solar_year_used: int
    sun_longitude_deg: float
    effective_day_date: DayDate
    adjusted_dt_for_hour: str
    preset: BoundaryPreset

    def to_dict(self):
        return {
            'solar_year_used': self.solar_year_used,
            'sun_longitude_deg': round(self.sun_longitude_deg, 6),
            'effective_day_date': self.effective_day_date.to_dict(),
            'adjusted_dt_for_hour': self.adjusted_dt_for_hour,
            'preset': self.preset.to_dict(),
        }


@dataclass(frozen=True)
class FourPillars:
    year: str
    month: str
    day: str
    hour: str
    lunar: Optional[LunarDate] = None
    meta: Optional[FourPillarsMeta] = field(default=None, compare=False)

    def as_tuple(self):
        return self.year, self.month, self.day, self.hour

    def to_dict(self):
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'hour': self.hour,
            'lunar': self.lunar.to_dict() if self.lunar else None,
            'meta': self.meta.to_dict() if self.meta else None,
        }


def get_four_pillars(adapter, dt_local, longitude_deg, tz_offset_hours=None, preset=STANDARD_PRESET,
                     lunar_converter=get_lunar_date):
    """
    출생 시각과 경도로 사주 원국을 계산합니다.

    Args:
        adapter: 날짜 어댑터
        dt_local: 출생 시각 (출생지 시간대)
        longitude_deg: 출생지 경도 (동경 +)
        tz_offset_hours: 표준시 UTC 오프셋, 생략하면 DEFAULT_TZ_OFFSET_HOURS
        preset: 경계 설정 (STANDARD_PRESET / TRADITIONAL_PRESET)
        lunar_converter: (년, 월, 일) → LunarDate, None이면 음력 생략
    """
    if longitude_deg is None:
        raise ConfigurationError('longitude_deg is required')
    if tz_offset_hours is None:
        tz_offset_hours = DEFAULT_TZ_OFFSET_HOURS

    day_boundary = _boundary(preset.day_boundary)

    year_p = get_year_pillar(adapter, dt_local)
    month_p = get_month_pillar(adapter, dt_local, year_stem_index=year_p.idx60 % 10)

    eff_date = effective_day_date(
        adapter, dt_local,
        day_boundary=day_boundary,
        longitude_deg=longitude_deg,
        tz_offset_hours=tz_offset_hours,
        use_mean_solar_time_for_boundary=preset.use_mean_solar_time_for_boundary,
    )
    day_p = get_day_pillar(eff_date.year, eff_date.month, eff_date.day)

    hour_p = get_hour_pillar(
        adapter, dt_local,
        longitude_deg=longitude_deg,
        tz_offset_hours=tz_offset_hours,
        use_mean_solar_time_for_hour=preset.use_mean_solar_time_for_hour,
        day_boundary=day_boundary,
        use_mean_solar_time_for_boundary=preset.use_mean_solar_time_for_boundary,
    )

    lunar = None
    if lunar_converter is not None:
        lunar = lunar_converter(eff_date.year, eff_date.month, eff_date.day)

    logger.debug('four pillars for %s: %s %s %s %s', adapter.to_iso(dt_local),
                 year_p.pillar, month_p.pillar, day_p.pillar, hour_p.pillar)

    return FourPillars(
        year=year_p.pillar,
        month=month_p.pillar,
        day=day_p.pillar,
        hour=hour_p.pillar,
        lunar=lunar,
        meta=FourPillarsMeta(
            solar_year_used=year_p.solar_year,
            sun_longitude_deg=month_p.sun_longitude_deg,
            effective_day_date=eff_date,
            adjusted_dt_for_hour=adapter.to_iso(hour_p.adjusted_dt),
            preset=preset,
        ),
    )
