# -*- coding: utf-8 -*-
import json

from saju_engine import TRADITIONAL_PRESET, Element, analyze_saju

SEOUL_LONGITUDE = 126.978


def test_full_analysis(seoul, adapter):
    result = analyze_saju(adapter, seoul(2000, 1, 1, 18), 126.9, gender='남')

    assert result.pillars.as_tuple() == ('己卯', '丙子', '戊午', '辛酉')
    assert result.zodiac == '토끼'
    assert result.ten_gods.day_master == '戊'
    assert sum(result.ten_god_counts.values()) == 7
    assert sum(result.element_counts.values()) == 8
    assert result.element_counts[Element.FIRE] == 2
    assert result.yongshen.strength_level is result.strength.level


def test_major_luck_uses_surrounding_jie(seoul, adapter):
    # 己년 남자는 역행, 직전 절은 1999년 대설
    result = analyze_saju(adapter, seoul(2000, 1, 1, 18), 126.9, gender='남')
    luck = result.major_luck

    assert not luck.is_forward
    assert luck.pillars[0].pillar == '乙亥'
    assert 7 <= luck.start_age <= 9


def test_without_gender_skips_major_luck(seoul, adapter):
    result = analyze_saju(adapter, seoul(2000, 1, 1, 18), SEOUL_LONGITUDE)
    assert result.major_luck is None
    assert result.yearly_luck is None


def test_yearly_luck_counts_from_solar_year(seoul, adapter):
    # 입춘 전 출생이라 1999년생으로 셈
    result = analyze_saju(adapter, seoul(2000, 1, 1, 18), SEOUL_LONGITUDE, yearly_luck_range=(2024, 2025))
    assert [y.age for y in result.yearly_luck] == [26, 27]
    assert result.yearly_luck[0].pillar == '甲辰'


def test_traditional_preset(seoul, adapter):
    result = analyze_saju(adapter, seoul(1985, 5, 15, 23, 50), 126.9, preset=TRADITIONAL_PRESET)
    assert result.pillars.meta.effective_day_date.day == 16


def test_to_dict_is_json_serializable(seoul, adapter):
    result = analyze_saju(adapter, seoul(2000, 1, 1, 18), SEOUL_LONGITUDE, gender='여',
                          yearly_luck_range=(2024, 2024))
    data = result.to_dict(adapter)

    text = json.dumps(data, ensure_ascii=False)
    assert '己卯' in text
    assert set(data) >= {
        'pillars', 'zodiac', 'ten_gods', 'strength', 'yongshen', 'relations',
        'sinsals', 'twelve_stages', 'solar_terms', 'major_luck', 'yearly_luck',
    }
    assert data['major_luck']['is_forward'] is True
    assert data['solar_terms']['prev_jie']['iso'].startswith('1999-12-0')
