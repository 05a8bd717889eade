# -*- coding: utf-8 -*-
import pytest

from app import app

BIRTH = {'year': 2000, 'month': 1, 'day': 1, 'hour': 18, 'minute': 0, 'longitude': 126.9}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv('SAJU_DATE_BACKEND', raising=False)
    monkeypatch.delenv('SAJU_TIMEZONE', raising=False)
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_health(client):
    res = client.get('/api/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok', 'date_backend': 'zoneinfo', 'timezone': 'Asia/Seoul'}


def test_pillars(client):
    res = client.post('/api/pillars', json=BIRTH)
    assert res.status_code == 200
    data = res.get_json()
    assert (data['year'], data['month'], data['day'], data['hour']) == ('己卯', '丙子', '戊午', '辛酉')
    assert data['lunar']['lunar_day'] == 25


def test_pillars_from_lunar_date(client):
    res = client.post('/api/pillars', json=dict(BIRTH, year=1999, month=11, day=25, is_lunar=True))
    assert res.status_code == 200
    assert res.get_json()['day'] == '戊午'


def test_pillars_with_pytz_backend(client, monkeypatch):
    monkeypatch.setenv('SAJU_DATE_BACKEND', 'pytz')
    res = client.post('/api/pillars', json=BIRTH)
    assert res.get_json()['hour'] == '辛酉'


def test_pillars_outside_korea_use_local_offset(client):
    # 뉴욕 서머타임(UTC-4) 정오, 경도 -74 → 평균태양시 11:04, 午시
    body = {'year': 1985, 'month': 5, 'day': 15, 'hour': 12, 'minute': 0,
            'timezone': 'America/New_York', 'longitude': -74, 'preset': 'traditional'}
    res = client.post('/api/pillars', json=body)
    assert res.status_code == 200
    assert res.get_json()['hour'][1] == '午'


def test_explicit_offset_wins(client):
    body = {'year': 1985, 'month': 5, 'day': 15, 'hour': 12, 'minute': 0,
            'timezone': 'America/New_York', 'longitude': -74, 'preset': 'traditional',
            'tz_offset_hours': 9}
    res = client.post('/api/pillars', json=body)
    assert res.get_json()['hour'][1] == '亥'


def test_saju(client):
    res = client.post('/api/saju', json=dict(BIRTH, gender='남', yearly_from=2024, yearly_to=2026))
    assert res.status_code == 200
    data = res.get_json()
    assert data['pillars']['day'] == '戊午'
    assert data['major_luck']['is_forward'] is False
    assert [y['year'] for y in data['yearly_luck']] == [2024, 2025, 2026]
    assert 'iso' in data['solar_terms']['current']


def test_solar_terms_for_year(client):
    res = client.post('/api/solar-terms', json={'year': 2024})
    assert res.status_code == 200
    data = res.get_json()
    assert data['timezone'] == 'Asia/Seoul'
    assert len(data['terms']) == 24
    assert data['terms'][2]['term']['korean'] == '입춘'


def test_solar_terms_at_instant(client):
    res = client.post('/api/solar-terms', json={'year': 2024, 'month': 1, 'day': 15})
    assert res.status_code == 200
    assert res.get_json()['current']['term']['korean'] == '소한'


def test_missing_field(client):
    res = client.post('/api/pillars', json={'month': 1, 'day': 1})
    assert res.status_code == 400
    assert 'year' in res.get_json()['error']


def test_unknown_preset(client):
    res = client.post('/api/pillars', json=dict(BIRTH, preset='modern'))
    assert res.status_code == 400
    assert 'modern' in res.get_json()['error']


def test_unknown_gender(client):
    res = client.post('/api/saju', json=dict(BIRTH, gender='x'))
    assert res.status_code == 400


def test_unknown_route(client):
    assert client.get('/api/nothing').status_code == 404
