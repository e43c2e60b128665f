"""Result Merger - 프로바이더 결과 병합

- 호출 순서대로 이어 붙이고, 프로바이더 간 중복 제거는 하지 않습니다
  (리테일러마다 다른 리스팅은 다른 결과).
- 이어 붙인 뒤 앞에서부터 max_results개로 자릅니다.
- has_more는 하나라도 True면 True (잘려 나간 프로바이더 포함, 낙관적).
"""

from typing import Sequence

from dealscope.providers.result import ProviderOutcome

from .result import SearchPayload

DEFAULT_MAX_RESULTS = 30


def merge_outcomes(outcomes: Sequence[ProviderOutcome], max_results: int = DEFAULT_MAX_RESULTS) -> SearchPayload:
    """프로바이더 결과 병합

    Args:
        outcomes: 호출 순서대로 정렬된 프로바이더 결과
        max_results: 결과 상한

    Returns:
        SearchPayload: 병합 결과
    """
    if max_results <= 0:
        raise ValueError(f"max_results must be positive: {max_results}")

    merged = [result for outcome in outcomes for result in outcome.results]
    has_more = any(outcome.has_more for outcome in outcomes)
    return SearchPayload(results=merged[:max_results], has_more=has_more)
