"""Provider Registry - 순서가 고정된 어댑터 집합

등록 순서가 곧 호출 순서이자 병합 순서입니다 (amazon → bestbuy).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from dealscope.core.config import Settings
from dealscope.core.logging import logger
from dealscope.schemas.search_schema import ALL_PROVIDERS

from .amazon import AmazonAdapter
from .base import ProviderAdapter
from .bestbuy import BestBuyAdapter
from .http_client import SharedHttpClient


class ProviderRegistry:
    """프로바이더 어댑터 레지스트리"""

    def __init__(self, adapters: Sequence[ProviderAdapter]):
        if not adapters:
            raise ValueError("adapters must not be empty")

        self._adapters: Dict[str, ProviderAdapter] = {}
        for adapter in adapters:
            tag = adapter.source.value
            if tag in self._adapters:
                raise ValueError(f"Duplicate provider adapter: {tag}")
            self._adapters[tag] = adapter

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: Optional[SharedHttpClient] = None
    ) -> "ProviderRegistry":
        """설정값으로 기본 어댑터 구성"""
        return cls(
            [
                AmazonAdapter(
                    settings.rainforest_api_key,
                    http_client=http_client,
                    request_timeout_s=settings.provider_request_timeout_s,
                    base_url=settings.rainforest_base_url,
                    amazon_domain=settings.amazon_domain,
                ),
                BestBuyAdapter(
                    settings.bestbuy_api_key,
                    http_client=http_client,
                    request_timeout_s=settings.provider_request_timeout_s,
                    base_url=settings.bestbuy_base_url,
                    page_size=settings.bestbuy_page_size,
                ),
            ]
        )

    @property
    def adapters(self) -> List[ProviderAdapter]:
        return list(self._adapters.values())

    def get(self, tag: str) -> Optional[ProviderAdapter]:
        return self._adapters.get(tag)

    def configured(self) -> List[ProviderAdapter]:
        """자격 증명이 있는 어댑터 (등록 순서)"""
        return [a for a in self._adapters.values() if a.is_configured]

    def has_any_configured(self) -> bool:
        return any(a.is_configured for a in self._adapters.values())

    def default_scope(self) -> Optional[str]:
        """기본 스코프: 첫 번째로 설정된 프로바이더 태그"""
        configured = self.configured()
        if not configured:
            return None
        return configured[0].source.value

    def normalize_scope(self, provider: Optional[str]) -> Optional[str]:
        """요청 파라미터를 스코프 태그로 정규화

        알 수 없는 태그도 그대로 유지합니다 (resolve에서 빈 목록).
        """
        value = (provider or "").strip().lower()
        if not value:
            return self.default_scope()
        return value

    def resolve(self, scope: str) -> List[ProviderAdapter]:
        """스코프에 해당하는 어댑터 목록

        - "all": 설정된 어댑터 전체 (등록 순서)
        - 단일 태그: 해당 어댑터 (미설정이어도 포함, fetch가 즉시 빈 결과 반환)
        - 알 수 없는 태그: 빈 목록 (호출 없음, 병합 결과는 빈 페이로드)
        """
        if scope == ALL_PROVIDERS:
            return self.configured()
        adapter = self._adapters.get(scope)
        if adapter is None:
            logger.warning(f"[REGISTRY] unknown provider scope: {scope}")
            return []
        return [adapter]

    def status(self) -> Dict[str, bool]:
        return {tag: adapter.is_configured for tag, adapter in self._adapters.items()}