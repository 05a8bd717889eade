# -*- coding: utf-8 -*-
import pytest

from saju_engine import SolarTermBracketError
from saju_engine.ephemeris import (
    find_term_utc,
    julian_day,
    normalize_degrees,
    signed_angle_diff,
    sun_apparent_longitude,
    sun_longitude_from_jd,
)


def test_julian_day_j2000():
    assert julian_day(2000, 1, 1, 12) == 2451545.0


def test_julian_day_fraction():
    assert julian_day(2000, 1, 1, 0) == 2451544.5
    assert julian_day(2000, 1, 1, 18) == pytest.approx(2451545.25)


@pytest.mark.parametrize('a, b, expected', [
    (350, 10, -20),
    (10, 350, 20),
    (90, 90, 0),
    (0, 170, -170),
])
def test_signed_angle_diff(a, b, expected):
    assert signed_angle_diff(a, b) == pytest.approx(expected)


def test_normalize_degrees():
    assert normalize_degrees(-15) == 345
    assert normalize_degrees(725) == 5


def test_longitude_in_range():
    for offset in range(0, 3650, 37):
        lon = sun_longitude_from_jd(2451545.0 + offset)
        assert 0 <= lon < 360


def test_march_equinox_2024(adapter):
    # 2024 춘분 03:06 UTC
    lon = sun_apparent_longitude(adapter, adapter.create_utc(2024, 3, 20, 3, 6))
    assert abs(signed_angle_diff(lon, 0)) < 0.05


def test_find_lichun_2024(adapter):
    start = adapter.create_utc(2024, 2, 1)
    end = adapter.create_utc(2024, 2, 7)
    found = find_term_utc(adapter, 315, start, end)

    assert adapter.get_month(found) == 2
    assert adapter.get_day(found) == 4
    assert 7 <= adapter.get_hour(found) <= 9
    assert abs(signed_angle_diff(sun_apparent_longitude(adapter, found), 315)) < 1e-4


def test_find_term_widens_bracket(adapter):
    # 구간 밖(2/4)의 입춘을 하루씩 넓혀 찾음
    start = adapter.create_utc(2024, 2, 5)
    end = adapter.create_utc(2024, 2, 6)
    found = find_term_utc(adapter, 315, start, end)
    assert adapter.get_day(found) == 4


def test_find_term_across_zero_degrees(adapter):
    start = adapter.create_utc(2024, 3, 15)
    end = adapter.create_utc(2024, 3, 25)
    found = find_term_utc(adapter, 0, start, end)
    assert adapter.get_day(found) == 20


def test_find_term_fails_when_unreachable(adapter):
    start = adapter.create_utc(2024, 1, 1)
    end = adapter.create_utc(2024, 1, 3)
    with pytest.raises(SolarTermBracketError, match='Failed to bracket'):
        find_term_utc(adapter, 90, start, end)
