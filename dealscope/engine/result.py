"""Search Result - Standardized Result Format

오케스트레이터가 반환하는 병합 결과와 출처(provenance) 정보를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dealscope.schemas.search_schema import CachedSearchPayload, SearchResponse, UnifiedResult


class CacheLayer(str, Enum):
    """결과를 만들어 낸 단계"""

    L1 = "L1"  # 프로세스 로컬 캐시
    L2 = "L2"  # Redis 공유 캐시
    LIVE = "LIVE"  # 프로바이더 실시간 조회


@dataclass
class SearchPayload:
    """병합된 결과 ({results, hasMore})"""

    results: List[UnifiedResult] = field(default_factory=list)
    has_more: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.results

    def to_cache_dict(self) -> Dict[str, Any]:
        """캐시 저장용 JSON 호환 dict"""
        return CachedSearchPayload(results=self.results, has_more=self.has_more).model_dump(
            mode="json", by_alias=True
        )

    @classmethod
    def from_cache_dict(cls, data: Dict[str, Any]) -> "SearchPayload":
        """캐시 dict에서 복원

        Raises:
            pydantic.ValidationError: 형식이 맞지 않는 경우
        """
        cached = CachedSearchPayload.model_validate(data)
        return cls(results=list(cached.results), has_more=cached.has_more)


@dataclass
class SearchResult:
    """검색 결과 표준 포맷

    Attributes:
        payload: 병합된 결과
        cache_layer: L1 | L2 | LIVE
        query: 검색어
        elapsed_ms: 소요 시간 (밀리초)
    """

    payload: SearchPayload
    cache_layer: CacheLayer
    query: Optional[str] = None
    elapsed_ms: Optional[float] = None

    @property
    def cached(self) -> bool:
        return self.cache_layer != CacheLayer.LIVE

    def to_response(self) -> SearchResponse:
        return SearchResponse(
            results=self.payload.results,
            has_more=self.payload.has_more,
            cached=self.cached,
            cache_layer=self.cache_layer.value,
        )
