# -*- coding: utf-8 -*-
"""사주 엔진 예외 정의"""


class SajuError(Exception):
    """사주 엔진에서 발생하는 모든 오류의 기반 클래스"""


class InvalidSymbolError(SajuError, ValueError):
    """천간/지지/간지 문자가 정의된 범위를 벗어난 경우"""


class ConfigurationError(SajuError, ValueError):
    """경도 누락, 알 수 없는 경계 설정 등 호출 설정 오류"""


class SolarTermBracketError(SajuError, RuntimeError):
    """절기 교차 시각을 포함하는 구간을 찾지 못한 경우"""


class InvariantViolation(SajuError):
    """오행 순환상 존재할 수 없는 관계가 나온 경우"""


class LunarConversionError(SajuError, ValueError):
    """음력 변환 라이브러리가 날짜를 거부한 경우"""
