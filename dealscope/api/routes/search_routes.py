"""Search Routes - SearchOrchestrator로 위임하는 HTTP Translator

HTTP Layer는 요청 파라미터를 Engine Layer에 넘기고, 결과/예외를
JSON 응답과 상태 코드로 변환하는 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dealscope.core.config import settings
from dealscope.core.exceptions import (
    InvalidQueryException,
    MergeException,
    ProviderConfigurationException,
)
from dealscope.core.logging import logger
from dealscope.engine import SearchOrchestrator, TimeoutGuard
from dealscope.providers import ProviderRegistry, SharedHttpClient, get_shared_http_client
from dealscope.schemas.search_schema import (
    ErrorResponse,
    ProviderStatus,
    ProvidersResponse,
    SearchResponse,
)
from dealscope.services import LocalCacheService, SharedCacheService

router = APIRouter(prefix="/api", tags=["search"])

# 싱글톤 서비스
_local_cache: Optional[LocalCacheService] = None
_shared_cache: Optional[SharedCacheService] = None
_registry: Optional[ProviderRegistry] = None
_orchestrator: Optional[SearchOrchestrator] = None


def get_http_client() -> SharedHttpClient:
    return get_shared_http_client()


def get_local_cache() -> LocalCacheService:
    """L1 캐시 싱글톤 (프로세스 단위)"""
    global _local_cache
    if _local_cache is None:
        _local_cache = LocalCacheService()
    return _local_cache


def get_shared_cache() -> SharedCacheService:
    """L2 캐시 싱글톤"""
    global _shared_cache
    if _shared_cache is None:
        _shared_cache = SharedCacheService()
    return _shared_cache


def get_provider_registry(
    http_client: SharedHttpClient = Depends(get_http_client),
) -> ProviderRegistry:
    """ProviderRegistry 싱글톤"""
    global _registry
    if _registry is None:
        _registry = ProviderRegistry.from_settings(settings, http_client=http_client)
    return _registry


def get_orchestrator(
    registry: ProviderRegistry = Depends(get_provider_registry),
    local_cache: LocalCacheService = Depends(get_local_cache),
    shared_cache: SharedCacheService = Depends(get_shared_cache),
) -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤

    Engine Layer의 진입점을 제공합니다.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SearchOrchestrator(
            registry=registry,
            local_cache=local_cache,
            shared_cache=shared_cache,
            timeout_guard=TimeoutGuard(settings.provider_timeout_ms),
            local_ttl_s=settings.local_cache_ttl_s,
            shared_ttl_s=settings.shared_cache_ttl_s,
            max_results=settings.max_results,
            key_namespace=settings.cache_key_namespace,
        )
    return _orchestrator


async def shutdown_services() -> None:
    """앱 종료 시 외부 연결 정리"""
    if _shared_cache is not None:
        await _shared_cache.close()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    q: Optional[str] = None,
    page: Optional[str] = None,
    provider: Optional[str] = None,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """통합 검색 API

    Flow:
        1. 입력 검증 (검색어/프로바이더 설정)
        2. Engine에 위임 (L1 → L2 → Live)
        3. 결과를 {results, hasMore, cached, cacheLayer}로 변환
    """
    try:
        result = await orchestrator.search(q, page=page, provider=provider)
    except InvalidQueryException:
        logger.info("[API] Rejected: missing search term")
        return _error(400, "Missing search term")
    except ProviderConfigurationException as e:
        logger.error(f"[API] {e}")
        return _error(500, e.message)
    except MergeException as e:
        logger.error(f"[API] Search failed: {e}")
        return _error(500, "Search failed")
    except Exception as e:
        logger.error(f"[API] Search failed: {type(e).__name__}: {e}", exc_info=True)
        return _error(500, "Search failed")

    return JSONResponse(content=result.to_response().model_dump(mode="json", by_alias=True))


@router.get("/providers", response_model=ProvidersResponse)
async def list_providers(registry: ProviderRegistry = Depends(get_provider_registry)):
    """프로바이더 목록 API (UI의 프로바이더 필터용)"""
    return ProvidersResponse(
        providers=[
            ProviderStatus(source=adapter.source, configured=adapter.is_configured)
            for adapter in registry.adapters
        ],
        default=registry.default_scope(),
    )
