"""Redis 캐시 서비스 (L2) - 캐싱 로직만 담당

인스턴스 간 공유되고 재시작 후에도 남는 계층입니다. 만료는 Redis SETEX에 맡깁니다.
모든 실패는 CacheException으로 변환되며, 호출부(오케스트레이터)가 로그를 남기고
미스로 취급합니다.
"""
import json
from typing import Any, Dict, Optional

from pydantic import ValidationError
from redis.asyncio import Redis

from dealscope.core.config import settings
from dealscope.core.exceptions import (
    CacheConnectionException,
    CacheSerializationException,
)
from dealscope.core.logging import logger
from dealscope.schemas.search_schema import CachedSearchPayload


class SharedCacheService:
    """Redis 캐시 관리 서비스"""

    def __init__(self, redis_url: Optional[str] = None, socket_timeout_s: Optional[float] = None):
        """
        Args:
            redis_url: Redis URL (없으면 settings.redis_url)
            socket_timeout_s: 연결/소켓 타임아웃 (초)

        연결은 첫 사용 시점에 만듭니다. URL이 비어 있어도 앱 기동은 막지 않습니다.
        """
        self.redis_url = settings.redis_url if redis_url is None else redis_url
        self.socket_timeout_s = socket_timeout_s or settings.redis_socket_timeout_s
        self._client: Optional[Redis] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.redis_url)

    def _get_client(self) -> Redis:
        if self._client is not None:
            return self._client
        if not self.is_configured:
            raise CacheConnectionException("redis_url is not configured")
        try:
            self._client = Redis.from_url(
                self.redis_url,
                decode_responses=True,
                socket_connect_timeout=self.socket_timeout_s,
                socket_timeout=self.socket_timeout_s,
            )
        except Exception as e:
            raise CacheConnectionException(f"invalid redis_url: {type(e).__name__}") from e
        return self._client

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """
        캐시된 병합 결과 조회

        Returns:
            {"results": [...], "hasMore": bool} 또는 None

        Raises:
            CacheConnectionException: Redis 미설정/연결 실패
            CacheSerializationException: 저장된 값이 손상됨
        """
        client = self._get_client()
        try:
            cached_data = await client.get(key)
        except Exception as e:
            raise CacheConnectionException(
                f"read failed: {type(e).__name__}: {e}",
                details={"key": key},
            ) from e

        if not cached_data:
            logger.debug(f"[L2] miss: {key}")
            return None

        try:
            payload = CachedSearchPayload.model_validate(json.loads(cached_data))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            raise CacheSerializationException("deserialize", str(e), details={"key": key}) from e

        logger.debug(f"[L2] hit: {key}")
        return payload.model_dump(mode="json", by_alias=True)

    async def put(self, key: str, value: Dict[str, Any], ttl_seconds: int) -> None:
        """
        병합 결과 저장 (SETEX)

        Raises:
            CacheConnectionException: Redis 미설정/연결 실패
            CacheSerializationException: 직렬화 실패
        """
        client = self._get_client()
        try:
            cached_value = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CacheSerializationException("serialize", str(e), details={"key": key}) from e

        try:
            await client.setex(key, ttl_seconds, cached_value)
        except Exception as e:
            raise CacheConnectionException(
                f"write failed: {type(e).__name__}: {e}",
                details={"key": key},
            ) from e
        logger.debug(f"[L2] set: {key}, TTL: {ttl_seconds}s")

    async def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            client = self._get_client()
            return bool(await client.ping())
        except Exception:
            return False

    async def close(self) -> None:
        if self._client is None:
            return
        try:
            await self._client.aclose()
        except Exception as e:
            logger.debug(f"[L2] close failed: {type(e).__name__}: {e}")
        self._client = None
