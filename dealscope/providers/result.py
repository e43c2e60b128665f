"""Provider Outcome Standard Format

프로바이더 한 번 호출(한 페이지)의 결과 형식을 정의합니다.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from dealscope.schemas.search_schema import UnifiedResult


@dataclass(frozen=True)
class ProviderOutcome:
    """프로바이더 조회 결과

    Attributes:
        results: 통합 결과 (프로바이더 원래 순서 유지)
        has_more: 현재 페이지 이후에 결과가 더 있다고 프로바이더가 판단했는지 여부
    """

    results: Tuple[UnifiedResult, ...] = ()
    has_more: bool = False

    @classmethod
    def empty(cls) -> "ProviderOutcome":
        """실패/미설정 시 사용하는 빈 결과"""
        return _EMPTY_OUTCOME

    @classmethod
    def of(cls, results: Iterable[UnifiedResult], has_more: bool) -> "ProviderOutcome":
        return cls(results=tuple(results), has_more=bool(has_more))


_EMPTY_OUTCOME = ProviderOutcome()
