# -*- coding: utf-8 -*-
"""
날짜/시간 어댑터 인터페이스
- 엔진은 시각 객체를 직접 다루지 않고 이 인터페이스만 호출함
- 구현은 saju_engine.adapters 에 백엔드별로 분리
"""

from typing import Protocol, TypeVar

T = TypeVar('T')


class DateAdapter(Protocol[T]):
    """엔진이 요구하는 시각 연산 모음. T는 백엔드 고유의 시각 타입입니다."""

    name: str

    # 필드
    def get_year(self, dt: T) -> int: ...
    def get_month(self, dt: T) -> int: ...
    def get_day(self, dt: T) -> int: ...
    def get_hour(self, dt: T) -> int: ...
    def get_minute(self, dt: T) -> int: ...
    def get_second(self, dt: T) -> float: ...

    # 산술
    def plus_days(self, dt: T, days: int) -> T: ...
    def minus_days(self, dt: T, days: int) -> T: ...
    def plus_minutes(self, dt: T, minutes: float) -> T: ...

    # 시간대
    def to_utc(self, dt: T) -> T: ...
    def set_zone(self, dt: T, zone: str) -> T: ...
    def get_zone_name(self, dt: T) -> str: ...
    def get_utc_offset_hours(self, dt: T) -> float: ...

    # 변환
    def to_millis(self, dt: T) -> float: ...
    def from_millis(self, millis: float, zone: str) -> T: ...
    def create_utc(self, year: int, month: int, day: int,
                   hour: int = 0, minute: int = 0, second: int = 0) -> T: ...
    def to_iso(self, dt: T) -> str: ...

    # 비교
    def is_greater_than_or_equal(self, a: T, b: T) -> bool: ...
