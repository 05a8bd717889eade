# -*- coding: utf-8 -*-
"""
태양 황경(黃經) 계산과 절기 시각 탐색
- 저정밀 태양 위치식 (Meeus 계열, 오차 약 0.01°)
- 이분법(bisection)으로 태양이 목표 황경을 지나는 UTC 시각을 찾음
"""

import logging
import math

from .errors import SolarTermBracketError

logger = logging.getLogger(__name__)

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

MAX_BRACKET_EXPANSIONS = 10
MAX_BISECTION_STEPS = 80
CONVERGENCE_DEG = 1e-6


def normalize_degrees(x):
    return x % 360.0


def signed_angle_diff(a, b):
    """a - b 를 (-180, 180] 범위로 (360°→0° 경계 처리)"""
    return ((a - b + 540.0) % 360.0) - 180.0


def julian_day(year, month, day, hour=0, minute=0, second=0.0):
    """그레고리력 날짜·시각의 율리우스일 (소수 포함)"""
    d = day + (hour + (minute + second / 60.0) / 60.0) / 24.0
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + d + b - 1524.5


def sun_longitude_from_jd(jd):
    """율리우스일의 태양 시황경(apparent longitude, 도)"""
    t = (jd - J2000) / DAYS_PER_CENTURY

    l0 = normalize_degrees(280.46646 + 36000.76983 * t + 0.0003032 * t * t)
    m = math.radians(normalize_degrees(357.52911 + 35999.05029 * t - 0.0001537 * t * t))

    # 중심차(中心差)
    c = ((1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
         + (0.019993 - 0.000101 * t) * math.sin(2 * m)
         + 0.000289 * math.sin(3 * m))

    true_long = l0 + c
    omega = 125.04 - 1934.136 * t
    apparent = true_long - 0.00569 - 0.00478 * math.sin(math.radians(omega))
    return normalize_degrees(apparent)


def sun_apparent_longitude(adapter, dt_utc):
    """UTC 시각의 태양 시황경 [0, 360)"""
    jd = julian_day(
        adapter.get_year(dt_utc),
        adapter.get_month(dt_utc),
        adapter.get_day(dt_utc),
        adapter.get_hour(dt_utc),
        adapter.get_minute(dt_utc),
        adapter.get_second(dt_utc),
    )
    return sun_longitude_from_jd(jd)


def find_term_utc(adapter, target_deg, start_utc, end_utc):
    """
    [start_utc, end_utc] 구간에서 태양이 target_deg 를 지나는 UTC 시각을 찾습니다.

    구간 양 끝의 부호가 같으면 하루씩 양쪽으로 넓히며 최대 10번 재시도하고,
    그래도 실패하면 SolarTermBracketError 를 던집니다.
    """
    def f(dt):
        return signed_angle_diff(sun_apparent_longitude(adapter, dt), target_deg)

    a, b = start_utc, end_utc
    fa, fb = f(a), f(b)

    expansions = 0
    while fa * fb > 0 and expansions < MAX_BRACKET_EXPANSIONS:
        a = adapter.minus_days(a, 1)
        b = adapter.plus_days(b, 1)
        fa, fb = f(a), f(b)
        expansions += 1
        logger.debug('widened bracket for %.1f° (attempt %d): %s ~ %s',
                     target_deg, expansions, adapter.to_iso(a), adapter.to_iso(b))

    if fa * fb > 0:
        raise SolarTermBracketError(
            f'Failed to bracket solar term {target_deg}° between '
            f'{adapter.to_iso(start_utc)} and {adapter.to_iso(end_utc)}'
        )

    for _ in range(MAX_BISECTION_STEPS):
        mid = adapter.from_millis((adapter.to_millis(a) + adapter.to_millis(b)) / 2, 'UTC')
        fm = f(mid)
        if abs(fm) < CONVERGENCE_DEG:
            return mid
        if fa * fm <= 0:
            b, fb = mid, fm
        else:
            a, fa = mid, fm

    return adapter.from_millis((adapter.to_millis(a) + adapter.to_millis(b)) / 2, 'UTC')
