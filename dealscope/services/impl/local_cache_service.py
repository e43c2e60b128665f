"""프로세스 로컬 캐시 (L1)

- 쓰기 시점부터 TTL을 계산해 만료 시각을 저장합니다.
- 만료된 엔트리는 다음 접근 시 제거합니다 (백그라운드 스윕 없음).
- 동시 요청 간 잠금 없이 공유되며, 같은 키에 대한 쓰기는 마지막 쓰기가 남습니다.
"""
import time
from typing import Any, Callable, Dict, Optional, Tuple

from dealscope.core.logging import logger


class LocalCacheService:
    """인메모리 TTL 캐시"""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            clock: 현재 시각(초)을 반환하는 함수 (테스트 주입용, 기본 time.monotonic)
        """
        self._clock = clock or time.monotonic
        self._store: Dict[str, Tuple[float, Dict[str, Any]]] = {}

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._store.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if expires_at <= self._clock():
            # lazy eviction
            self._store.pop(key, None)
            logger.debug(f"[L1] expired: {key}")
            return None
        return value

    async def put(self, key: str, value: Dict[str, Any], ttl_seconds: int) -> None:
        self._store[key] = (self._clock() + ttl_seconds, value)
