# -*- coding: utf-8 -*-
from saju_engine import PillarPosition, Sinsal, analyze_sinsals


def test_peach_blossom_counted_once_per_position():
    # 년지 子·일지 辰 모두 申子辰 → 酉
    result = analyze_sinsals('甲子', '癸酉', '丙辰', '戊戌')
    peach = [m for m in result.matches if m.sinsal is Sinsal.PEACH_BLOSSOM]
    assert len(peach) == 1
    assert result.summary[Sinsal.PEACH_BLOSSOM] == (PillarPosition.MONTH,)


def test_nobles_from_day_and_year_stems():
    result = analyze_sinsals('乙丑', '丙戌', '甲子', '辛未')
    assert result.summary[Sinsal.SKY_NOBLE] == (PillarPosition.YEAR, PillarPosition.HOUR)
    assert result.summary[Sinsal.MOON_NOBLE] == (PillarPosition.DAY,)


def test_heavenly_virtue_on_stem():
    result = analyze_sinsals('丁卯', '壬寅', '甲子', '甲子')
    assert result.summary[Sinsal.HEAVENLY_VIRTUE] == (PillarPosition.YEAR,)


def test_heavenly_virtue_ignores_branches():
    # 卯월 천덕은 申: 지지의 申은 세지 않고 천간만 봄
    result = analyze_sinsals('甲申', '丁卯', '甲子', '甲子')
    assert Sinsal.HEAVENLY_VIRTUE not in result.summary
    assert result.summary[Sinsal.MONTHLY_VIRTUE] == (PillarPosition.YEAR, PillarPosition.DAY, PillarPosition.HOUR)


def test_monthly_virtue_on_stems_only():
    # 寅월 월덕은 丙: 시간의 丙만 해당
    result = analyze_sinsals('甲子', '甲寅', '甲午', '丙寅')
    assert result.summary[Sinsal.MONTHLY_VIRTUE] == (PillarPosition.HOUR,)


def test_white_tiger():
    result = analyze_sinsals('甲辰', '丙寅', '甲子', '甲子')
    assert result.summary[Sinsal.WHITE_TIGER] == (PillarPosition.YEAR,)


def test_white_tiger_absent_for_geng():
    result = analyze_sinsals('甲辰', '丙寅', '庚辰', '丙子')
    assert Sinsal.WHITE_TIGER not in result.summary


def test_info_and_to_dict():
    assert Sinsal.SKY_NOBLE.info.korean == '천을귀인'
    assert Sinsal.GHOST_GATE.info.kind == 'inauspicious'
    data = analyze_sinsals('甲辰', '丙寅', '甲子', '甲子').to_dict()
    assert {'sinsal', 'position'} == set(data['matches'][0])
    assert data['summary']['white_tiger'] == ['year']
