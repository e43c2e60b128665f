"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 어댑터/캐시 주입

금지:
- 실제 프로바이더 API 호출
- 실제 Redis 연결
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dealscope.schemas import ProviderSource  # noqa: E402
from tests.fixtures.fakes import FakeAdapter, FakeTier, make_results  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def amazon_adapter() -> FakeAdapter:
    return FakeAdapter(ProviderSource.AMAZON, make_results(ProviderSource.AMAZON, 3), has_more=True)


@pytest.fixture
def bestbuy_adapter() -> FakeAdapter:
    return FakeAdapter(ProviderSource.BESTBUY, make_results(ProviderSource.BESTBUY, 2), has_more=False)


@pytest.fixture
def shared_tier() -> FakeTier:
    return FakeTier()
