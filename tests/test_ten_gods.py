# -*- coding: utf-8 -*-
import pytest

from saju_engine import (
    Element,
    InvalidSymbolError,
    TenGod,
    analyze_ten_gods,
    count_elements,
    count_ten_gods,
    get_ten_god,
)
from saju_engine.ten_gods import get_ten_god_for_branch, get_ten_gods_for_branch


@pytest.mark.parametrize('target, expected', [
    ('甲', TenGod.COMPANION),
    ('乙', TenGod.ROB_WEALTH),
    ('丙', TenGod.EATING_GOD),
    ('丁', TenGod.HURTING_OFFICER),
    ('戊', TenGod.INDIRECT_WEALTH),
    ('己', TenGod.DIRECT_WEALTH),
    ('庚', TenGod.SEVEN_KILLINGS),
    ('辛', TenGod.DIRECT_OFFICER),
    ('壬', TenGod.INDIRECT_SEAL),
    ('癸', TenGod.DIRECT_SEAL),
])
def test_ten_gods_for_jia(target, expected):
    assert get_ten_god('甲', target) is expected


def test_yin_day_master():
    assert get_ten_god('乙', '甲') is TenGod.ROB_WEALTH
    assert get_ten_god('乙', '庚') is TenGod.DIRECT_OFFICER
    assert get_ten_god('癸', '戊') is TenGod.DIRECT_OFFICER


def test_labels():
    assert TenGod.SEVEN_KILLINGS.korean == '편관'
    assert TenGod.DIRECT_SEAL.hanja == '正印'
    assert TenGod.COMPANION.to_dict() == {'key': 'companion', 'korean': '비견', 'hanja': '比肩'}


def test_invalid_stem():
    with pytest.raises(InvalidSymbolError):
        get_ten_god('甲', '子')


def test_branch_uses_main_hidden_stem():
    # 寅의 본기 甲
    assert get_ten_god_for_branch('庚', '寅') is TenGod.INDIRECT_WEALTH
    # 午의 본기 丁
    assert get_ten_god_for_branch('甲', '午') is TenGod.HURTING_OFFICER


def test_hidden_stem_ten_gods():
    hidden = get_ten_gods_for_branch('甲', '寅')
    assert [h.stem for h in hidden] == ['甲', '丙', '戊']
    assert [h.ten_god for h in hidden] == [TenGod.COMPANION, TenGod.EATING_GOD, TenGod.INDIRECT_WEALTH]
    assert hidden[0].weight == 0.6


def test_analyze_ten_gods():
    analysis = analyze_ten_gods('己卯', '丙子', '戊午', '辛酉')

    assert analysis.day_master == '戊'
    assert analysis.day.stem_ten_god is None
    assert analysis.year.stem_ten_god is TenGod.ROB_WEALTH
    assert analysis.month.stem_ten_god is TenGod.INDIRECT_SEAL
    assert analysis.hour.stem_ten_god is TenGod.HURTING_OFFICER
    assert analysis.year.branch_ten_god is TenGod.DIRECT_OFFICER
    assert analysis.month.branch_ten_god is TenGod.DIRECT_WEALTH
    assert analysis.day.branch_ten_god is TenGod.DIRECT_SEAL


def test_ten_gods_to_dict_marks_day_master():
    data = analyze_ten_gods('己卯', '丙子', '戊午', '辛酉').to_dict()
    assert data['day']['stem']['ten_god']['key'] == 'day_master'
    assert data['year']['stem']['ten_god']['korean'] == '겁재'
    assert data['day_master'] == '戊'
    assert len(data['day']['branch']['hidden_stems']) == 2


def test_count_ten_gods_covers_seven_characters():
    counts = count_ten_gods(analyze_ten_gods('己卯', '丙子', '戊午', '辛酉'))
    assert sum(counts.values()) == 7
    assert set(counts) == set(TenGod)
    assert counts[TenGod.DIRECT_OFFICER] == 1


def test_count_elements_covers_eight_characters():
    counts = count_elements(analyze_ten_gods('己卯', '丙子', '戊午', '辛酉'))
    assert sum(counts.values()) == 8
    assert counts == {
        Element.WOOD: 1,
        Element.FIRE: 2,
        Element.EARTH: 2,
        Element.METAL: 2,
        Element.WATER: 1,
    }
