"""Search Orchestrator - Main Engine Entry Point

Coordinates the aggregation pipeline for one request:
1. Validate input
2. L1 (process-local) lookup
3. L2 (Redis) lookup, backfilling L1 on hit
4. Live fan-out to providers, each under its own Timeout Guard
5. Merge
6. Cache population (L1 always, L2 only for non-empty results)
"""

import asyncio
from time import perf_counter
from typing import Any, Optional

from dealscope.core.config import settings
from dealscope.core.exceptions import CacheException, MergeException, TimeoutException
from dealscope.core.logging import logger, sanitize_for_log
from dealscope.providers.base import ProviderAdapter
from dealscope.providers.registry import ProviderRegistry
from dealscope.providers.result import ProviderOutcome
from dealscope.services.cache_tier import CacheTier
from dealscope.utils.cache_keys import generate_cache_key, generate_shared_cache_key

from .merger import merge_outcomes
from .request import SearchRequest
from .result import CacheLayer, SearchPayload, SearchResult
from .timeout_guard import TimeoutGuard


class SearchOrchestrator:
    """검색 집계 오케스트레이터

    L1 → L2 → Live 순서로 진행하며 첫 성공 지점에서 종료합니다.
    프로바이더/캐시 단계의 실패는 모두 흡수하고, 입력 검증 실패와
    병합 단계의 내부 오류만 호출자에게 예외로 전달합니다.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        local_cache: CacheTier,
        shared_cache: CacheTier,
        timeout_guard: Optional[TimeoutGuard] = None,
        *,
        local_ttl_s: Optional[int] = None,
        shared_ttl_s: Optional[int] = None,
        max_results: Optional[int] = None,
        key_namespace: Optional[str] = None,
    ):
        """
        Args:
            registry: 프로바이더 레지스트리 (호출 순서 = 병합 순서)
            local_cache: L1 캐시 (get/put)
            shared_cache: L2 캐시 (get/put)
            timeout_guard: 프로바이더별 데드라인 (기본 settings.provider_timeout_ms)
        """
        if registry is None:
            raise ValueError("registry must not be None")
        if local_cache is None:
            raise ValueError("local_cache must not be None")
        if shared_cache is None:
            raise ValueError("shared_cache must not be None")

        self.registry = registry
        self.local_cache = local_cache
        self.shared_cache = shared_cache
        self.timeout_guard = timeout_guard or TimeoutGuard()
        self.local_ttl_s = local_ttl_s or settings.local_cache_ttl_s
        self.shared_ttl_s = shared_ttl_s or settings.shared_cache_ttl_s
        self.max_results = max_results or settings.max_results
        self.key_namespace = key_namespace or settings.cache_key_namespace

    async def search(self, q: Optional[str], page: Any = None, provider: Optional[str] = None) -> SearchResult:
        """통합 검색 실행

        Args:
            q: 검색어
            page: 페이지 번호 (문자열 허용, 잘못된 값은 1)
            provider: 프로바이더 태그 또는 "all" (없으면 첫 번째 설정된 프로바이더, 알 수 없는 태그는 빈 결과)

        Returns:
            SearchResult: 병합 결과와 출처

        Raises:
            InvalidQueryException: 검색어 누락
            ProviderConfigurationException: 설정된 프로바이더 없음
            MergeException: 병합 중 내부 오류
        """
        started = perf_counter()
        request = SearchRequest.parse(q, page, provider, self.registry)

        local_key = generate_cache_key(request.query, request.page, request.provider_scope)
        shared_key = generate_shared_cache_key(
            self.key_namespace, request.query, request.page, request.provider_scope
        )
        logger.info(
            f"[ORCH] Search started: query='{sanitize_for_log(request.query)}', "
            f"page={request.page}, scope={request.provider_scope}"
        )

        # 1. L1
        cached = await self.local_cache.get(local_key)
        if cached is not None:
            logger.info(f"[ORCH] L1 hit: {local_key}")
            return self._result(SearchPayload.from_cache_dict(cached), CacheLayer.L1, request, started)

        # 2. L2
        payload = await self._try_shared_cache(shared_key)
        if payload is not None:
            await self.local_cache.put(local_key, payload.to_cache_dict(), self.local_ttl_s)
            logger.info(f"[ORCH] L2 hit: {shared_key}")
            return self._result(payload, CacheLayer.L2, request, started)

        # 3. Live
        adapters = self.registry.resolve(request.provider_scope)
        outcomes = await asyncio.gather(
            *(self._fetch_guarded(adapter, request) for adapter in adapters)
        )

        try:
            payload = merge_outcomes(outcomes, max_results=self.max_results)
        except Exception as e:
            logger.error(f"[ORCH] Combined providers exception: {type(e).__name__}: {e}", exc_info=True)
            raise MergeException(str(e)) from e

        await self._populate(local_key, shared_key, payload)

        result = self._result(payload, CacheLayer.LIVE, request, started)
        logger.info(
            f"[ORCH] Live fetch completed: providers={len(adapters)}, "
            f"results={len(payload.results)}, has_more={payload.has_more}, elapsed={result.elapsed_ms:.0f}ms"
        )
        return result

    async def _try_shared_cache(self, key: str) -> Optional[SearchPayload]:
        """L2 조회 (실패는 미스로 취급)"""
        try:
            cached = await self.shared_cache.get(key)
            if cached is None:
                return None
            return SearchPayload.from_cache_dict(cached)
        except CacheException as e:
            logger.error(f"[L2] read error: {e}")
            return None
        except Exception as e:
            logger.error(f"[L2] read error: {type(e).__name__}: {e}")
            return None

    async def _fetch_guarded(self, adapter: ProviderAdapter, request: SearchRequest) -> ProviderOutcome:
        """프로바이더 1개 호출 (타임아웃/예외는 빈 결과로 대체)"""
        tag = adapter.source.value
        try:
            return await self.timeout_guard.run(
                adapter.fetch(request.query, request.page),
                name=tag,
            )
        except TimeoutException as e:
            logger.warning(f"[ORCH] {tag} timed out after {e.timeout_ms}ms")
        except Exception as e:
            logger.error(f"[ORCH] {tag} failed: {type(e).__name__}: {e}")
        return ProviderOutcome.empty()

    async def _populate(self, local_key: str, shared_key: str, payload: SearchPayload) -> None:
        """캐시 저장

        - L1: 빈 결과 포함 항상 저장 (빈 검색어로 프로바이더를 반복 호출하지 않도록)
        - L2: 빈 결과는 저장하지 않음 (일시 장애로 인한 빈 응답이 오래 남지 않도록)
        """
        try:
            cache_value = payload.to_cache_dict()
        except Exception as e:
            logger.error(f"[ORCH] Failed to serialize payload for cache: {type(e).__name__}: {e}")
            return

        await self.local_cache.put(local_key, cache_value, self.local_ttl_s)

        if payload.is_empty:
            logger.debug(f"[L2] skip empty payload: {shared_key}")
            return

        try:
            await self.shared_cache.put(shared_key, cache_value, self.shared_ttl_s)
        except CacheException as e:
            logger.error(f"[L2] write error: {e}")
        except Exception as e:
            logger.error(f"[L2] write error: {type(e).__name__}: {e}")

    @staticmethod
    def _result(
        payload: SearchPayload, layer: CacheLayer, request: SearchRequest, started: float
    ) -> SearchResult:
        return SearchResult(
            payload=payload,
            cache_layer=layer,
            query=request.query,
            elapsed_ms=(perf_counter() - started) * 1000,
        )
