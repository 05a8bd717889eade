# -*- coding: utf-8 -*-
"""양력 ↔ 음력 변환 (korean_lunar_calendar)"""

from dataclasses import asdict, dataclass

from korean_lunar_calendar import KoreanLunarCalendar

from .errors import LunarConversionError


@dataclass(frozen=True)
class LunarDate:
    lunar_year: int
    lunar_month: int
    lunar_day: int
    is_leap_month: bool

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SolarDate:
    year: int
    month: int
    day: int

    def to_dict(self):
        return asdict(self)


def get_lunar_date(year, month, day):
    """양력 날짜를 음력으로 변환합니다."""
    calendar = KoreanLunarCalendar()
    if not calendar.setSolarDate(year, month, day):
        raise LunarConversionError(f'Solar date out of supported range: {year}-{month:02d}-{day:02d}')
    return LunarDate(
        lunar_year=calendar.lunarYear,
        lunar_month=calendar.lunarMonth,
        lunar_day=calendar.lunarDay,
        is_leap_month=bool(calendar.isIntercalation),
    )


def get_solar_date(lunar_year, lunar_month, lunar_day, is_leap_month=False):
    """음력 날짜를 양력으로 변환합니다. 윤달이면 is_leap_month=True."""
    calendar = KoreanLunarCalendar()
    if not calendar.setLunarDate(lunar_year, lunar_month, lunar_day, is_leap_month):
        raise LunarConversionError(
            f'Lunar date not convertible: {lunar_year}-{lunar_month:02d}-{lunar_day:02d}'
            f'{" (leap)" if is_leap_month else ""}'
        )
    return SolarDate(calendar.solarYear, calendar.solarMonth, calendar.solarDay)
