# -*- coding: utf-8 -*-
import pytest

from saju_engine.adapters import AVAILABLE_BACKENDS, get_adapter

SEOUL = 'Asia/Seoul'
SEOUL_LONGITUDE = 126.978


@pytest.fixture(params=AVAILABLE_BACKENDS)
def adapter(request):
    """두 날짜 백엔드 모두에서 같은 결과가 나와야 함"""
    return get_adapter(request.param)


@pytest.fixture
def seoul(adapter):
    """서울 벽시계 시각을 만드는 함수"""
    def make(year, month, day, hour=0, minute=0, second=0):
        return adapter.create_local(year, month, day, hour, minute, second, zone=SEOUL)
    return make
