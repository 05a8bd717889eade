# -*- coding: utf-8 -*-
"""pytz 기반 날짜 어댑터"""

from datetime import datetime, timedelta

import pytz


def _zone(name):
    if name is None or name.upper() == 'UTC':
        return pytz.utc
    return pytz.timezone(name)


class PytzAdapter:
    """시각 타입: pytz로 localize된 datetime (naive 값은 UTC로 간주)"""

    name = 'pytz'

    def _aware(self, dt):
        if dt.tzinfo is None:
            return pytz.utc.localize(dt)
        return dt

    def get_year(self, dt):
        return dt.year

    def get_month(self, dt):
        return dt.month

    def get_day(self, dt):
        return dt.day

    def get_hour(self, dt):
        return dt.hour

    def get_minute(self, dt):
        return dt.minute

    def get_second(self, dt):
        return dt.second + dt.microsecond / 1_000_000

    def _shift_wall_clock(self, dt, delta):
        dt = self._aware(dt)
        tz = dt.tzinfo
        if tz is pytz.utc or not hasattr(tz, 'localize'):
            return dt + delta
        # 이동 후 시각의 서머타임 여부를 다시 판정
        return tz.localize(dt.replace(tzinfo=None) + delta)

    def plus_days(self, dt, days):
        return self._shift_wall_clock(dt, timedelta(days=days))

    def minus_days(self, dt, days):
        return self._shift_wall_clock(dt, timedelta(days=-days))

    def plus_minutes(self, dt, minutes):
        dt = self._aware(dt)
        moved = dt.astimezone(pytz.utc) + timedelta(minutes=minutes)
        return moved.astimezone(dt.tzinfo)

    def to_utc(self, dt):
        return self._aware(dt).astimezone(pytz.utc)

    def set_zone(self, dt, zone):
        return self._aware(dt).astimezone(_zone(zone))

    def get_zone_name(self, dt):
        dt = self._aware(dt)
        zone = getattr(dt.tzinfo, 'zone', None)
        return zone if zone else dt.tzname()

    def get_utc_offset_hours(self, dt):
        return self._aware(dt).utcoffset().total_seconds() / 3600

    def to_millis(self, dt):
        return self._aware(dt).timestamp() * 1000

    def from_millis(self, millis, zone):
        return datetime.fromtimestamp(millis / 1000, tz=_zone(zone))

    def create_utc(self, year, month, day, hour=0, minute=0, second=0):
        return pytz.utc.localize(datetime(year, month, day, hour, minute, second))

    def create_local(self, year, month, day, hour=0, minute=0, second=0, zone='UTC'):
        """지정 시간대의 벽시계 시각을 만듭니다."""
        return _zone(zone).localize(datetime(year, month, day, hour, minute, second))

    def to_iso(self, dt):
        return self._aware(dt).isoformat()

    def is_greater_than_or_equal(self, a, b):
        return self._aware(a) >= self._aware(b)
