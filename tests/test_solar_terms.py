# -*- coding: utf-8 -*-
import pytest

from saju_engine import JEOLGI, ConfigurationError, analyze_solar_terms, get_solar_terms_for_year, solar_term_instant
from saju_engine.solar_terms import get_solar_term, term_index_from_longitude


def test_term_table():
    assert len(JEOLGI) == 24
    assert JEOLGI[0].korean == '소한' and JEOLGI[0].longitude == 285
    assert JEOLGI[2].korean == '입춘' and JEOLGI[2].longitude == 315
    assert JEOLGI[5].korean == '춘분' and JEOLGI[5].longitude == 0
    assert JEOLGI[23].korean == '동지' and JEOLGI[23].longitude == 270
    assert [t.is_jie for t in JEOLGI[:4]] == [True, False, True, False]


def test_get_solar_term():
    assert get_solar_term('하지').longitude == 90
    assert get_solar_term('summer_solstice').index == 11
    assert get_solar_term(26).korean == '입춘'
    with pytest.raises(ConfigurationError):
        get_solar_term('장마')


@pytest.mark.parametrize('lon, idx', [(285, 0), (299.9, 0), (300, 1), (315, 2), (0, 5), (270, 23), (284.9, 23)])
def test_term_index_from_longitude(lon, idx):
    assert term_index_from_longitude(lon) == idx


def test_lichun_instant(adapter):
    lichun = solar_term_instant(adapter, '입춘', 2024, 'Asia/Seoul')
    assert (adapter.get_month(lichun), adapter.get_day(lichun), adapter.get_hour(lichun)) == (2, 4, 17)


@pytest.mark.parametrize('date, current, upcoming', [
    ((2024, 1, 15), '소한', '대한'),
    ((2024, 2, 3), '대한', '입춘'),
    ((2024, 3, 25), '춘분', '청명'),
    ((2024, 4, 1), '춘분', '청명'),
    ((2024, 6, 25), '하지', '소서'),
])
def test_current_and_next(seoul, adapter, date, current, upcoming):
    info = analyze_solar_terms(seoul(*date), adapter)
    assert info.current.term.korean == current
    assert info.next.term.korean == upcoming
    assert info.current.millis <= adapter.to_millis(seoul(*date)) < info.next.millis
    assert info.days_since_current >= 0
    assert info.days_until_next >= 1


@pytest.mark.parametrize('name, year, before, before_year', [
    ('입춘', 2024, '대한', 2024),
    ('소한', 2025, '동지', 2024),
    ('춘분', 2024, '경칩', 2024),
])
def test_current_term_at_crossing(adapter, name, year, before, before_year):
    crossing = solar_term_instant(adapter, name, year, 'Asia/Seoul')
    just_before = adapter.plus_minutes(crossing, -1 / 60)

    info = analyze_solar_terms(just_before, adapter)
    assert info.current.term.korean == before
    assert info.current.date.year == before_year
    assert info.next.term.korean == name
    assert info.next.millis == adapter.to_millis(crossing)

    info = analyze_solar_terms(crossing, adapter)
    assert info.current.term.korean == name
    assert info.current.date.year == year
    assert info.current.millis == adapter.to_millis(crossing)
    assert info.days_since_current == 0


def test_next_term_in_following_year(seoul, adapter):
    info = analyze_solar_terms(seoul(2024, 12, 25), adapter)
    assert info.current.term.korean == '동지'
    assert info.next.term.korean == '소한'
    assert info.next.date.year == 2025
    assert info.next_jie.term.korean == '소한'
    assert info.prev_jie.term.korean == '대설'


def test_jie_brackets_birth(seoul, adapter):
    dt = seoul(2000, 1, 1, 18)
    info = analyze_solar_terms(dt, adapter)
    assert info.prev_jie.term.korean == '대설'
    assert info.prev_jie.date.year == 1999
    assert info.next_jie.term.korean == '소한'
    assert info.prev_jie.millis <= adapter.to_millis(dt) < info.next_jie.millis


def test_to_dict_with_iso(seoul, adapter):
    data = analyze_solar_terms(seoul(2024, 1, 15), adapter).to_dict(adapter)
    assert data['current']['term']['korean'] == '소한'
    assert data['current']['iso'].endswith('+09:00')
    assert 'iso' not in analyze_solar_terms(seoul(2024, 1, 15), adapter).to_dict()['current']


def test_terms_for_year(adapter):
    terms = get_solar_terms_for_year(2024, adapter, 'Asia/Seoul')
    assert len(terms) == 24
    millis = [t.millis for t in terms]
    assert millis == sorted(millis)

    by_name = {t.term.korean: t for t in terms}
    assert by_name['입춘'].date.month == 2 and 3 <= by_name['입춘'].date.day <= 5
    assert by_name['하지'].date.month == 6 and 20 <= by_name['하지'].date.day <= 22
    assert all(t.date.year == 2024 for t in terms)
