"""Pydantic 스키마 정의 (통합 검색 결과 / API 응답)"""
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer


ALL_PROVIDERS = "all"


class ProviderSource(str, Enum):
    """연동된 리테일러 태그 (닫힌 집합)"""

    AMAZON = "amazon"
    BESTBUY = "bestbuy"


class UnifiedResult(BaseModel):
    """프로바이더에 무관한 단일 검색 결과

    rating/reviews는 값이 없으면 JSON에서 키 자체를 생략합니다.
    price/thumbnail은 값이 없으면 null로 직렬화됩니다.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    source: ProviderSource = Field(..., description="결과 출처 리테일러")
    title: str = Field(..., min_length=1, description="표시용 상품명")
    price: Optional[str] = Field(None, description="통화 기호가 붙은 표시 가격 (예: $19.99)")
    link: str = Field(..., min_length=1, description="상품 페이지 URL")
    thumbnail: Optional[str] = Field(None, description="이미지 URL")
    rating: Optional[Union[int, float]] = Field(None, description="평균 평점 (보통 0~5, 원본 숫자 그대로)")
    reviews: Optional[int] = Field(None, ge=0, description="리뷰 수")

    @model_serializer(mode="wrap")
    def _drop_absent_metrics(self, handler) -> dict[str, Any]:
        data = handler(self)
        for key in ("rating", "reviews"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


class CachedSearchPayload(BaseModel):
    """캐시에 저장되는 병합 결과 ({results, hasMore})"""

    model_config = ConfigDict(populate_by_name=True)

    results: List[UnifiedResult] = Field(default_factory=list)
    has_more: bool = Field(False, alias="hasMore")


class SearchResponse(BaseModel):
    """검색 응답"""

    model_config = ConfigDict(populate_by_name=True)

    results: List[UnifiedResult] = Field(default_factory=list, description="통합 결과 (최대 30개)")
    has_more: bool = Field(..., alias="hasMore", description="다음 페이지 존재 가능성 (참고용)")
    cached: bool = Field(..., description="캐시에서 반환되었는지 여부")
    cache_layer: str = Field(..., alias="cacheLayer", description="L1 | L2 | LIVE")


class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str


class ProviderStatus(BaseModel):
    """프로바이더 설정 상태"""
    source: ProviderSource
    configured: bool


class ProvidersResponse(BaseModel):
    """프로바이더 목록 응답"""
    providers: List[ProviderStatus]
    default: Optional[str] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    providers: dict[str, bool]
    shared_cache: bool
