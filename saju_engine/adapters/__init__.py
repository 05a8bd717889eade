# -*- coding: utf-8 -*-
"""
날짜 어댑터 구현 모음
- zoneinfo: 표준 라이브러리 datetime + zoneinfo
- pytz: pytz 시간대 데이터베이스
백엔드 라이브러리는 처음 요청될 때 import 됩니다.
"""

import importlib

from ..errors import ConfigurationError

_BACKENDS = {
    'zoneinfo': ('.zoneinfo_adapter', 'ZoneInfoAdapter'),
    'pytz': ('.pytz_adapter', 'PytzAdapter'),
}

AVAILABLE_BACKENDS = tuple(_BACKENDS)


def get_adapter(name='zoneinfo'):
    """이름으로 날짜 어댑터를 생성합니다. 어댑터는 상태가 없어 공유해도 됩니다."""
    try:
        module_name, class_name = _BACKENDS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown date backend {name!r}; expected one of {', '.join(AVAILABLE_BACKENDS)}"
        ) from None
    module = importlib.import_module(module_name, __name__)
    return getattr(module, class_name)()


__all__ = ['AVAILABLE_BACKENDS', 'get_adapter']
