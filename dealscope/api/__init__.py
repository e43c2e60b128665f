"""API 엔드포인트 패키지 - export only."""

from .routes import (
    get_local_cache,
    get_orchestrator,
    get_provider_registry,
    get_shared_cache,
    health_router,
    search_router,
    shutdown_services,
)

__all__ = [
    "health_router",
    "search_router",
    "get_local_cache",
    "get_orchestrator",
    "get_provider_registry",
    "get_shared_cache",
    "shutdown_services",
]
