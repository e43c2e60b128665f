"""API routes package."""

from .health_routes import router as health_router
from .search_routes import (
    get_local_cache,
    get_orchestrator,
    get_provider_registry,
    get_shared_cache,
    router as search_router,
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
