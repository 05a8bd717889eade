# -*- coding: utf-8 -*-
"""
천간(天干)·지지(地支)·오행(五行) 기본 데이터와 60갑자 계산
- 모든 표는 import 시점에 한 번 만들어지고 변경되지 않음
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import InvalidSymbolError

# ============================================================
# 1. 오행(五行)·음양(陰陽)
# ============================================================


class Element(Enum):
    WOOD = 'wood'
    FIRE = 'fire'
    EARTH = 'earth'
    METAL = 'metal'
    WATER = 'water'

    @property
    def korean(self):
        return _ELEMENT_LABELS[self][0]

    @property
    def hanja(self):
        return _ELEMENT_LABELS[self][1]

    @property
    def generates(self):
        """내가 생하는 오행 (목→화→토→금→수→목)"""
        return GENERATES[self]

    @property
    def controls(self):
        """내가 극하는 오행 (목→토→수→화→금→목)"""
        return CONTROLS[self]

    @property
    def generated_by(self):
        return GENERATED_BY[self]

    @property
    def controlled_by(self):
        return CONTROLLED_BY[self]


class Polarity(Enum):
    YANG = 'yang'
    YIN = 'yin'


class PillarPosition(Enum):
    YEAR = 'year'
    MONTH = 'month'
    DAY = 'day'
    HOUR = 'hour'


PILLAR_POSITIONS = tuple(PillarPosition)

ELEMENTS = tuple(Element)

_ELEMENT_LABELS = MappingProxyType({
    Element.WOOD: ('목', '木'),
    Element.FIRE: ('화', '火'),
    Element.EARTH: ('토', '土'),
    Element.METAL: ('금', '金'),
    Element.WATER: ('수', '水'),
})

GENERATES = MappingProxyType({
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
})

CONTROLS = MappingProxyType({
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
})

GENERATED_BY = MappingProxyType({v: k for k, v in GENERATES.items()})
CONTROLLED_BY = MappingProxyType({v: k for k, v in CONTROLS.items()})

# ============================================================
# 2. 천간·지지
# ============================================================

CHEONGAN = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')
CHEONGAN_KR = ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계')

JIJI = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')
JIJI_KR = ('자', '축', '인', '묘', '진', '사', '오', '미', '신', '유', '술', '해')

# 띠 이름
ZODIAC_ANIMALS = ('쥐', '소', '호랑이', '토끼', '용', '뱀', '말', '양', '원숭이', '닭', '개', '돼지')

# 甲乙=목, 丙丁=화, 戊己=토, 庚辛=금, 壬癸=수
CHEONGAN_OHAENG = (
    Element.WOOD, Element.WOOD, Element.FIRE, Element.FIRE, Element.EARTH,
    Element.EARTH, Element.METAL, Element.METAL, Element.WATER, Element.WATER,
)

# 子=수, 丑=토, 寅=목 ...
JIJI_OHAENG = (
    Element.WATER, Element.EARTH, Element.WOOD, Element.WOOD, Element.EARTH, Element.FIRE,
    Element.FIRE, Element.EARTH, Element.METAL, Element.METAL, Element.EARTH, Element.WATER,
)


def _polarity(idx):
    return Polarity.YANG if idx % 2 == 0 else Polarity.YIN


# ============================================================
# 3. 지장간(地藏干) - 본기/중기/여기 순서, 비중 합계 1.0
# ============================================================


@dataclass(frozen=True)
class HiddenStem:
    stem: str
    weight: float
    kind: str  # 본기, 중기, 여기


def _hidden(*pairs):
    kinds = ('본기', '중기', '여기')
    return tuple(HiddenStem(stem, weight, kinds[i]) for i, (stem, weight) in enumerate(pairs))


JIJANGGAN = MappingProxyType({
    '子': _hidden(('癸', 1.0)),
    '丑': _hidden(('己', 0.6), ('癸', 0.25), ('辛', 0.15)),
    '寅': _hidden(('甲', 0.6), ('丙', 0.25), ('戊', 0.15)),
    '卯': _hidden(('乙', 1.0)),
    '辰': _hidden(('戊', 0.6), ('乙', 0.25), ('癸', 0.15)),
    '巳': _hidden(('丙', 0.6), ('庚', 0.25), ('戊', 0.15)),
    '午': _hidden(('丁', 0.7), ('己', 0.3)),
    '未': _hidden(('己', 0.6), ('丁', 0.25), ('乙', 0.15)),
    '申': _hidden(('庚', 0.6), ('壬', 0.25), ('戊', 0.15)),
    '酉': _hidden(('辛', 1.0)),
    '戌': _hidden(('戊', 0.6), ('辛', 0.25), ('丁', 0.15)),
    '亥': _hidden(('壬', 0.7), ('甲', 0.3)),
})


@dataclass(frozen=True)
class Stem:
    char: str
    index: int
    element: Element
    polarity: Polarity

    @property
    def korean(self):
        return CHEONGAN_KR[self.index]


@dataclass(frozen=True)
class Branch:
    char: str
    index: int
    element: Element
    polarity: Polarity
    hidden_stems: tuple

    @property
    def korean(self):
        return JIJI_KR[self.index]

    @property
    def primary_stem(self):
        """본기(本氣)"""
        return self.hidden_stems[0].stem


STEMS = MappingProxyType({
    ch: Stem(ch, i, CHEONGAN_OHAENG[i], _polarity(i)) for i, ch in enumerate(CHEONGAN)
})

BRANCHES = MappingProxyType({
    ch: Branch(ch, i, JIJI_OHAENG[i], _polarity(i), JIJANGGAN[ch]) for i, ch in enumerate(JIJI)
})

# ============================================================
# 4. 조회 함수
# ============================================================


def get_stem(char):
    try:
        return STEMS[char]
    except KeyError:
        raise InvalidSymbolError(f'Invalid stem: {char!r}') from None


def get_branch(char):
    try:
        return BRANCHES[char]
    except KeyError:
        raise InvalidSymbolError(f'Invalid branch: {char!r}') from None


def get_stem_index(char):
    return get_stem(char).index


def get_branch_index(char):
    return get_branch(char).index


def get_stem_element(char):
    return get_stem(char).element


def get_stem_polarity(char):
    return get_stem(char).polarity


def get_branch_element(char):
    return get_branch(char).element


def get_branch_polarity(char):
    return get_branch(char).polarity


def get_hidden_stems(char):
    """지지의 지장간 목록 (본기 먼저)"""
    return get_branch(char).hidden_stems


def is_yang_stem(char):
    return get_stem_polarity(char) is Polarity.YANG


def split_pillar(pillar):
    """'甲子' 형태의 간지 문자열을 (천간, 지지)로 나눕니다."""
    if not isinstance(pillar, str) or len(pillar) != 2:
        raise InvalidSymbolError(f'Invalid pillar: {pillar!r}')
    stem, branch = pillar[0], pillar[1]
    get_stem(stem)
    get_branch(branch)
    return stem, branch


# ============================================================
# 5. 60갑자·율리우스일
# ============================================================

SEXAGENARY_CYCLE = 60


def pillar_from_index(idx60):
    """60갑자 순번(0=甲子)을 간지 문자열로 바꿉니다."""
    n = idx60 % SEXAGENARY_CYCLE
    return CHEONGAN[n % 10] + JIJI[n % 12]


def get_pillar_index(pillar):
    """간지 문자열의 60갑자 순번. 음양이 맞지 않는 조합은 오류입니다."""
    stem, branch = split_pillar(pillar)
    stem_idx = STEMS[stem].index
    branch_idx = BRANCHES[branch].index
    if stem_idx % 2 != branch_idx % 2:
        raise InvalidSymbolError(f'Not a sexagenary pair: {pillar!r}')
    # 6·s - 5·b ≡ s (mod 10), ≡ b (mod 12)
    return (6 * stem_idx - 5 * branch_idx) % SEXAGENARY_CYCLE


def jdn_from_date(year, month, day):
    """그레고리력 날짜의 율리우스 일수(JDN, 정수)"""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
