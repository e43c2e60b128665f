"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from dealscope import __version__
from dealscope.api.routes.search_routes import get_provider_registry, get_shared_cache
from dealscope.core.logging import logger
from dealscope.providers import ProviderRegistry
from dealscope.schemas.search_schema import HealthResponse
from dealscope.services import SharedCacheService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    shared_cache: SharedCacheService = Depends(get_shared_cache),
    registry: ProviderRegistry = Depends(get_provider_registry),
):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - Redis(L2) 연결 상태
    - 프로바이더 자격 증명 설정 여부
    """
    redis_ok = False
    try:
        redis_ok = await shared_cache.health_check()
    except Exception as e:
        logger.error(f"Unexpected cache error: {e}")
        redis_ok = False

    providers = registry.status()
    providers_ok = any(providers.values())

    status = "ok" if redis_ok and providers_ok else ("degraded" if redis_ok or providers_ok else "error")

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        providers=providers,
        shared_cache=redis_ok,
    )
