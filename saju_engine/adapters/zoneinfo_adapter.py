# -*- coding: utf-8 -*-
"""표준 라이브러리 datetime + zoneinfo 기반 날짜 어댑터"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo


def _zone(name):
    if name is None or name.upper() == 'UTC':
        return timezone.utc
    return ZoneInfo(name)


class ZoneInfoAdapter:
    """시각 타입: tz-aware datetime (naive 값은 UTC로 간주)"""

    name = 'zoneinfo'

    def _aware(self, dt):
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
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

    def plus_days(self, dt, days):
        # 벽시계 기준 날짜 이동
        return self._aware(dt) + timedelta(days=days)

    def minus_days(self, dt, days):
        return self._aware(dt) - timedelta(days=days)

    def plus_minutes(self, dt, minutes):
        dt = self._aware(dt)
        moved = dt.astimezone(timezone.utc) + timedelta(minutes=minutes)
        return moved.astimezone(dt.tzinfo)

    def to_utc(self, dt):
        return self._aware(dt).astimezone(timezone.utc)

    def set_zone(self, dt, zone):
        return self._aware(dt).astimezone(_zone(zone))

    def get_zone_name(self, dt):
        tz = self._aware(dt).tzinfo
        if tz is timezone.utc:
            return 'UTC'
        key = getattr(tz, 'key', None)
        return key if key else tz.tzname(dt)

    def get_utc_offset_hours(self, dt):
        """그 시각에 적용되는 UTC 오프셋(시간). 서머타임이 반영됩니다."""
        return self._aware(dt).utcoffset().total_seconds() / 3600

    def to_millis(self, dt):
        return self._aware(dt).timestamp() * 1000

    def from_millis(self, millis, zone):
        return datetime.fromtimestamp(millis / 1000, tz=_zone(zone))

    def create_utc(self, year, month, day, hour=0, minute=0, second=0):
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)

    def create_local(self, year, month, day, hour=0, minute=0, second=0, zone='UTC'):
        """지정 시간대의 벽시계 시각을 만듭니다."""
        return datetime(year, month, day, hour, minute, second, tzinfo=_zone(zone))

    def to_iso(self, dt):
        return self._aware(dt).isoformat()

    def is_greater_than_or_equal(self, a, b):
        return self._aware(a) >= self._aware(b)
