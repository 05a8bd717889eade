# -*- coding: utf-8 -*-
import pytest

from saju_engine import TwelveStage, analyze_twelve_stages
from saju_engine.twelve_stages import get_twelve_stage


@pytest.mark.parametrize('stem, branch, stage', [
    ('甲', '亥', TwelveStage.LONG_LIFE),
    ('甲', '子', TwelveStage.BATHING),
    ('甲', '寅', TwelveStage.ESTABLISHMENT),
    ('甲', '卯', TwelveStage.IMPERIAL),
    ('甲', '未', TwelveStage.TOMB),
    ('乙', '午', TwelveStage.LONG_LIFE),
    ('乙', '巳', TwelveStage.BATHING),
    ('乙', '卯', TwelveStage.ESTABLISHMENT),
    ('乙', '寅', TwelveStage.IMPERIAL),
    ('庚', '申', TwelveStage.ESTABLISHMENT),
])
def test_stage(stem, branch, stage):
    assert get_twelve_stage(stem, branch) is stage


def test_analyze_uses_day_master():
    result = analyze_twelve_stages('庚午', '丙寅', '甲子', '丁卯')
    assert result.year is TwelveStage.DEATH
    assert result.month is TwelveStage.ESTABLISHMENT
    assert result.day is TwelveStage.BATHING
    assert result.hour is TwelveStage.IMPERIAL


def test_to_dict():
    data = analyze_twelve_stages('庚午', '丙寅', '甲子', '丁卯').to_dict()
    assert data['month'] == {
        'key': 'establishment', 'korean': '건록', 'hanja': '建祿',
        'meaning': '안정, 직업, 녹봉', 'strength': 'strong',
    }
