# -*- coding: utf-8 -*-
from collections import Counter
from itertools import permutations

import pytest

from saju_engine import (
    Element,
    PillarPosition,
    RelationKind,
    TransformStatus,
    analyze_relations,
    find_branch_clash,
    find_branch_six_combination,
    find_stem_combination,
)
from saju_engine.relations import BRANCH_DESTRUCTIONS, BRANCH_HARMS


def test_pair_lookups_are_symmetric():
    assert find_stem_combination('甲', '己') is Element.EARTH
    assert find_stem_combination('己', '甲') is Element.EARTH
    assert find_stem_combination('甲', '庚') is None
    assert find_branch_six_combination('亥', '寅') is Element.WOOD
    assert find_branch_clash('午', '子')
    assert not find_branch_clash('子', '丑')


def test_two_clashes():
    result = analyze_relations('甲子', '庚午', '丙寅', '壬申')
    assert len(result.clashes) == 2
    assert {c.chars for c in result.clashes} == {('子', '午'), ('寅', '申')}
    assert result.clashes[0].positions == (PillarPosition.YEAR, PillarPosition.MONTH)


def test_complete_triple_combination_transforms_with_month_support():
    result = analyze_relations('甲寅', '庚午', '丙戌', '壬子')
    triples = [c for c in result.combinations if c.kind is RelationKind.TRIPLE_COMBINATION]

    fire = [c for c in triples if c.result_element is Element.FIRE][0]
    assert fire.is_complete
    assert fire.chars == ('寅', '午', '戌')
    assert fire.positions == (PillarPosition.YEAR, PillarPosition.MONTH, PillarPosition.DAY)
    assert fire.transform_status is TransformStatus.TRANSFORMED


def test_partial_triple_is_half_combined():
    result = analyze_relations('甲寅', '庚午', '丙子', '壬子')
    fire = [c for c in result.combinations
            if c.kind is RelationKind.TRIPLE_COMBINATION and c.result_element is Element.FIRE][0]
    assert not fire.is_complete
    assert fire.chars == ('寅', '午')
    assert fire.transform_status is TransformStatus.HALF_COMBINED


def test_stem_combination_transforms_in_supporting_month():
    result = analyze_relations('甲子', '己巳', '丙寅', '壬辰')
    stem = [c for c in result.combinations if c.kind is RelationKind.STEM_COMBINATION]
    assert len(stem) == 1
    assert stem[0].chars == ('甲', '己')
    assert stem[0].result_element is Element.EARTH
    assert stem[0].transform_status is TransformStatus.TRANSFORMED


def test_stem_combination_without_support_does_not_transform():
    result = analyze_relations('丁卯', '戊申', '壬午', '庚戌')
    stem = [c for c in result.combinations if c.kind is RelationKind.STEM_COMBINATION][0]
    assert stem.chars == ('丁', '壬')
    assert stem.positions == (PillarPosition.YEAR, PillarPosition.DAY)
    assert stem.transform_status is TransformStatus.NOT_TRANSFORMED


def test_triple_punishment():
    result = analyze_relations('甲寅', '己巳', '壬申', '庚午')
    punishment = [p for p in result.punishments if p.punishment_type == '무은지형'][0]
    assert punishment.chars == ('寅', '巳', '申')
    assert punishment.positions == (PillarPosition.YEAR, PillarPosition.MONTH, PillarPosition.DAY)
    assert any(h.chars == ('寅', '巳') for h in result.harms)
    assert any(d.chars == ('巳', '申') for d in result.destructions)


def test_self_punishment():
    result = analyze_relations('甲辰', '丙辰', '戊午', '庚申')
    selfs = [p for p in result.punishments if p.punishment_type == '자형']
    assert len(selfs) == 1
    assert selfs[0].chars == ('辰', '辰')
    assert selfs[0].positions == (PillarPosition.YEAR, PillarPosition.MONTH)


def test_zi_mao_punishment():
    result = analyze_relations('甲子', '丁卯', '丙寅', '壬辰')
    assert [p.punishment_type for p in result.punishments] == ['무례지형']


def test_to_dict_and_all():
    result = analyze_relations('甲子', '庚午', '丙寅', '壬申')
    data = result.to_dict()
    assert data['clashes'][0]['type'] == '충'
    assert data['clashes'][0]['positions'] == ['year', 'month']
    assert 'punishment_type' not in data['clashes'][0]
    assert len(result.all) == sum(len(v) for v in data.values())


def _relation_multiset(result):
    # 화 여부는 월지에 따라 달라지므로 종류와 글자만 비교
    return Counter((r.kind, tuple(sorted(r.chars))) for r in result.all)


@pytest.mark.parametrize('chart', [
    ('甲子', '庚午', '丙寅', '壬申'),
    ('甲寅', '己巳', '壬申', '庚午'),
    ('甲辰', '丙辰', '戊午', '庚申'),
    ('丁卯', '戊申', '壬午', '庚戌'),
    ('甲子', '己未', '丙寅', '癸酉'),
])
def test_relations_do_not_depend_on_pillar_order(chart):
    expected = _relation_multiset(analyze_relations(*chart))
    assert expected
    for order in permutations(chart):
        assert _relation_multiset(analyze_relations(*order)) == expected


@pytest.mark.parametrize('kind, pair', (
    [(RelationKind.HARM, p) for p in BRANCH_HARMS]
    + [(RelationKind.DESTRUCTION, p) for p in BRANCH_DESTRUCTIONS]
))
def test_harm_and_destruction_pairs_work_both_ways(kind, pair):
    a, b = pair
    for first, second in ((a, b), (b, a)):
        result = analyze_relations(f'甲{first}', f'甲{second}', f'甲{first}', f'甲{first}')
        found = [r for r in result.all if r.kind is kind and sorted(r.chars) == sorted(pair)]
        # 연-월, 월-일, 월-시 세 쌍
        assert len(found) == 3


def test_transform_statuses():
    assert {s.korean for s in TransformStatus} == {'반합', '합화', '불화'}
