"""Services implementation package."""

from .local_cache_service import LocalCacheService
from .shared_cache_service import SharedCacheService

__all__ = ["LocalCacheService", "SharedCacheService"]
