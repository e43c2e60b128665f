"""캐시 서비스 - export only."""

from .cache_tier import CacheTier
from .impl import LocalCacheService, SharedCacheService

__all__ = ["CacheTier", "LocalCacheService", "SharedCacheService"]
