"""스키마 패키지 - export only."""

from .search_schema import (
    ALL_PROVIDERS,
    CachedSearchPayload,
    ErrorResponse,
    HealthResponse,
    ProviderSource,
    ProviderStatus,
    ProvidersResponse,
    SearchResponse,
    UnifiedResult,
)

__all__ = [
    "ALL_PROVIDERS",
    "CachedSearchPayload",
    "ErrorResponse",
    "HealthResponse",
    "ProviderSource",
    "ProviderStatus",
    "ProvidersResponse",
    "SearchResponse",
    "UnifiedResult",
]
