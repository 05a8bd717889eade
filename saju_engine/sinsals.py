# -*- coding: utf-8 -*-
"""
신살(神煞) 판단
- 지지 기준: 년지/일지/월지에서 목표 지지를 찾아 원국 지지와 대조
- 천간 기준: 일간/년간에서 목표 지지(하나 이상)를 찾아 대조
- 같은 신살이 같은 자리에 두 번 잡히면 한 번만 기록
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .constants import PILLAR_POSITIONS, split_pillar


class Sinsal(Enum):
    PEACH_BLOSSOM = 'peach_blossom'
    SKY_HORSE = 'sky_horse'
    FLOWERY_CANOPY = 'flowery_canopy'
    GHOST_GATE = 'ghost_gate'
    SOLITARY_STAR = 'solitary_star'
    WIDOW_STAR = 'widow_star'
    HEAVENLY_VIRTUE = 'heavenly_virtue'
    MONTHLY_VIRTUE = 'monthly_virtue'
    SKY_NOBLE = 'sky_noble'
    MOON_NOBLE = 'moon_noble'
    LITERARY_NOBLE = 'literary_noble'
    ACADEMIC_HALL = 'academic_hall'
    BLOOD_KNIFE = 'blood_knife'
    SIX_HARMS = 'six_harms'
    WHITE_TIGER = 'white_tiger'
    HEAVENLY_DOCTOR = 'heavenly_doctor'

    @property
    def info(self):
        return SINSAL_INFO[self]

    def to_dict(self):
        info = SINSAL_INFO[self]
        return {
            'key': self.value,
            'korean': info.korean,
            'hanja': info.hanja,
            'meaning': info.meaning,
            'type': info.kind,
        }


@dataclass(frozen=True)
class SinsalInfo:
    korean: str
    hanja: str
    meaning: str
    kind: str  # auspicious, inauspicious, neutral


SINSAL_INFO = MappingProxyType({
    Sinsal.PEACH_BLOSSOM: SinsalInfo('도화살', '桃花煞', '이성 인연, 매력, 색정', 'neutral'),
    Sinsal.SKY_HORSE: SinsalInfo('역마살', '驛馬煞', '이동, 변화, 해외', 'neutral'),
    Sinsal.FLOWERY_CANOPY: SinsalInfo('화개살', '華蓋煞', '예술, 종교, 고독', 'neutral'),
    Sinsal.GHOST_GATE: SinsalInfo('귀문관살', '鬼門關煞', '영적 감각, 예민함, 불안', 'inauspicious'),
    Sinsal.SOLITARY_STAR: SinsalInfo('고진살', '孤辰煞', '고독, 독립', 'inauspicious'),
    Sinsal.WIDOW_STAR: SinsalInfo('과숙살', '寡宿煞', '외로움, 배우자 인연 약함', 'inauspicious'),
    Sinsal.HEAVENLY_VIRTUE: SinsalInfo('천덕귀인', '天德貴人', '하늘의 덕, 재난 해소', 'auspicious'),
    Sinsal.MONTHLY_VIRTUE: SinsalInfo('월덕귀인', '月德貴人', '달의 덕, 흉화 해소', 'auspicious'),
    Sinsal.SKY_NOBLE: SinsalInfo('천을귀인', '天乙貴人', '귀인의 도움, 위기 극복', 'auspicious'),
    Sinsal.MOON_NOBLE: SinsalInfo('월을귀인', '月乙貴人', '귀인의 도움', 'auspicious'),
    Sinsal.LITERARY_NOBLE: SinsalInfo('문창귀인', '文昌貴人', '학업, 시험, 문서', 'auspicious'),
    Sinsal.ACADEMIC_HALL: SinsalInfo('학당귀인', '學堂貴人', '학문, 교육, 지식', 'auspicious'),
    Sinsal.BLOOD_KNIFE: SinsalInfo('혈인살', '血刃煞', '수술, 출혈, 부상', 'inauspicious'),
    Sinsal.SIX_HARMS: SinsalInfo('육해살', '六害煞', '인간관계의 손상', 'inauspicious'),
    Sinsal.WHITE_TIGER: SinsalInfo('백호살', '白虎煞', '상해, 사고, 흉사', 'inauspicious'),
    Sinsal.HEAVENLY_DOCTOR: SinsalInfo('천의성', '天醫星', '치료, 의료, 건강 회복', 'auspicious'),
})


def _by_group(groups):
    """{'寅午戌': '卯', ...} → 글자별 12칸 표"""
    table = {}
    for chars, target in groups.items():
        for ch in chars:
            table[ch] = target
    return MappingProxyType(table)


# ============================================================
# 1. 지지 기준 표
# ============================================================

PEACH_BLOSSOM_MAP = _by_group({'寅午戌': '卯', '申子辰': '酉', '巳酉丑': '午', '亥卯未': '子'})
SKY_HORSE_MAP = _by_group({'寅午戌': '申', '申子辰': '寅', '巳酉丑': '亥', '亥卯未': '巳'})
FLOWERY_CANOPY_MAP = _by_group({'寅午戌': '戌', '申子辰': '辰', '巳酉丑': '丑', '亥卯未': '未'})
SIX_HARMS_MAP = _by_group({'寅午戌': '酉', '申子辰': '卯', '巳酉丑': '子', '亥卯未': '午'})

GHOST_GATE_MAP = MappingProxyType(dict(zip('子丑寅卯辰巳午未申酉戌亥', '卯寅丑子亥戌酉申未午巳辰')))

SOLITARY_STAR_MAP = _by_group({'子丑': '寅', '寅卯辰': '巳', '巳午未': '申', '申酉戌': '亥', '亥': '寅'})
WIDOW_STAR_MAP = _by_group({'子丑': '戌', '寅卯辰': '丑', '巳午未': '辰', '申酉戌': '未', '亥': '戌'})

# 월지 → 천간 또는 지지
HEAVENLY_VIRTUE_MAP = MappingProxyType(dict(zip('寅卯辰巳午未申酉戌亥子丑', '丁申壬辛亥甲癸寅丙乙巳庚')))
MONTHLY_VIRTUE_MAP = MappingProxyType(dict(zip('寅卯辰巳午未申酉戌亥子丑', '丙甲壬庚丙甲壬庚丙甲壬庚')))

BLOOD_KNIFE_MAP = MappingProxyType(dict(zip('子丑寅卯辰巳午未申酉戌亥', '酉戌亥子丑寅卯辰巳午未申')))
HEAVENLY_DOCTOR_MAP = MappingProxyType(dict(zip('子丑寅卯辰巳午未申酉戌亥', '亥子丑寅卯辰巳午未申酉戌')))

# ============================================================
# 2. 천간 기준 표
# ============================================================

SKY_NOBLE_MAP = MappingProxyType({
    '甲': ('丑', '未'), '戊': ('丑', '未'), '庚': ('丑', '未'),
    '乙': ('子', '申'), '己': ('子', '申'),
    '丙': ('亥', '酉'), '丁': ('亥', '酉'),
    '壬': ('卯', '巳'), '癸': ('卯', '巳'),
    '辛': ('午', '寅'),
})

LITERARY_NOBLE_MAP = MappingProxyType(dict(zip('甲乙丙丁戊己庚辛壬癸', '巳午申酉申酉亥子寅卯')))
ACADEMIC_HALL_MAP = MappingProxyType(dict(zip('甲乙丙丁戊己庚辛壬癸', '亥子寅卯寅卯巳午申酉')))

# 己庚辛은 해당 없음
WHITE_TIGER_MAP = MappingProxyType({
    '甲': '辰', '乙': '未', '丙': '戌', '丁': '丑', '戊': '辰', '壬': '戌', '癸': '丑',
})


@dataclass(frozen=True)
class SinsalMatch:
    sinsal: Sinsal
    position: object  # PillarPosition

    def to_dict(self):
        return {'sinsal': self.sinsal.to_dict(), 'position': self.position.value}


@dataclass(frozen=True)
class SinsalResult:
    matches: tuple
    summary: MappingProxyType  # Sinsal → (PillarPosition, ...)

    def to_dict(self):
        return {
            'matches': [m.to_dict() for m in self.matches],
            'summary': {k.value: [p.value for p in v] for k, v in self.summary.items()},
        }


def _branch_based(base, targets, table, sinsal):
    target = table.get(base)
    if target is None:
        return []
    return [SinsalMatch(sinsal, PILLAR_POSITIONS[i]) for i, ch in enumerate(targets) if ch == target]


def _stem_based(base, branches, table, sinsal):
    target = table.get(base)
    if target is None:
        return []
    wanted = target if isinstance(target, tuple) else (target,)
    return [SinsalMatch(sinsal, PILLAR_POSITIONS[i]) for i, ch in enumerate(branches) if ch in wanted]


def _virtue_based(month_branch, stems, table, sinsal):
    """덕귀인: 월지에서 찾은 글자가 기둥의 천간과 같으면 해당"""
    target = table.get(month_branch)
    return [SinsalMatch(sinsal, PILLAR_POSITIONS[i]) for i, stem in enumerate(stems) if stem == target]


def analyze_sinsals(year_pillar, month_pillar, day_pillar, hour_pillar):
    """원국의 신살 목록과 신살별 위치 요약"""
    pillars = [split_pillar(p) for p in (year_pillar, month_pillar, day_pillar, hour_pillar)]
    stems = [s for s, _ in pillars]
    branches = [b for _, b in pillars]
    year_stem, day_stem = pillars[0][0], pillars[2][0]
    year_branch, month_branch, day_branch = branches[0], branches[1], branches[2]

    found = []
    for base in (year_branch, day_branch):
        found += _branch_based(base, branches, PEACH_BLOSSOM_MAP, Sinsal.PEACH_BLOSSOM)
        found += _branch_based(base, branches, SKY_HORSE_MAP, Sinsal.SKY_HORSE)
        found += _branch_based(base, branches, FLOWERY_CANOPY_MAP, Sinsal.FLOWERY_CANOPY)
    found += _branch_based(day_branch, branches, GHOST_GATE_MAP, Sinsal.GHOST_GATE)
    found += _branch_based(year_branch, branches, SOLITARY_STAR_MAP, Sinsal.SOLITARY_STAR)
    found += _branch_based(year_branch, branches, WIDOW_STAR_MAP, Sinsal.WIDOW_STAR)
    found += _virtue_based(month_branch, stems, HEAVENLY_VIRTUE_MAP, Sinsal.HEAVENLY_VIRTUE)
    found += _virtue_based(month_branch, stems, MONTHLY_VIRTUE_MAP, Sinsal.MONTHLY_VIRTUE)
    found += _stem_based(day_stem, branches, SKY_NOBLE_MAP, Sinsal.SKY_NOBLE)
    found += _stem_based(year_stem, branches, SKY_NOBLE_MAP, Sinsal.MOON_NOBLE)
    found += _stem_based(day_stem, branches, LITERARY_NOBLE_MAP, Sinsal.LITERARY_NOBLE)
    found += _stem_based(day_stem, branches, ACADEMIC_HALL_MAP, Sinsal.ACADEMIC_HALL)
    found += _branch_based(day_branch, branches, BLOOD_KNIFE_MAP, Sinsal.BLOOD_KNIFE)
    for base in (year_branch, day_branch):
        found += _branch_based(base, branches, SIX_HARMS_MAP, Sinsal.SIX_HARMS)
    found += _stem_based(day_stem, branches, WHITE_TIGER_MAP, Sinsal.WHITE_TIGER)
    found += _branch_based(month_branch, branches, HEAVENLY_DOCTOR_MAP, Sinsal.HEAVENLY_DOCTOR)

    # 처음 나온 순서를 지키며 중복 제거
    matches = tuple(dict.fromkeys(found))

    summary = {}
    for m in matches:
        summary.setdefault(m.sinsal, []).append(m.position)

    return SinsalResult(
        matches=matches,
        summary=MappingProxyType({k: tuple(v) for k, v in summary.items()}),
    )
