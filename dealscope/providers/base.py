"""Provider Adapter Base - 리테일러 검색 API 공통 경계

모든 어댑터는 fetch()에서 예외를 밖으로 내보내지 않습니다.
자격 증명 누락, 전송 실패, 비정상 상태, JSON 디코딩 실패, 예상 밖 구조는
전부 로그를 남기고 ProviderOutcome.empty()로 변환됩니다.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union

from dealscope.core.config import settings
from dealscope.core.exceptions import ProviderHttpException, ProviderParseException
from dealscope.core.logging import logger, mask_url
from dealscope.schemas.search_schema import ProviderSource, UnifiedResult

from .http_client import SharedHttpClient, get_shared_http_client
from .result import ProviderOutcome


class ProviderAdapter(ABC):
    """리테일러 검색 어댑터

    하위 클래스는 build_request()와 parse()만 구현합니다.

    구현 예시:
        class AmazonAdapter(ProviderAdapter):
            source = ProviderSource.AMAZON

            def build_request(self, query, page):
                return url, params

            def parse(self, data, page):
                return ProviderOutcome.of(results, has_more)
    """

    source: ProviderSource
    log_tag: str = "PROVIDER"

    def __init__(
        self,
        api_key: Optional[str],
        http_client: Optional[SharedHttpClient] = None,
        request_timeout_s: Optional[float] = None,
    ):
        self.api_key = (api_key or "").strip()
        self.http_client = http_client or get_shared_http_client()
        self.request_timeout_s = request_timeout_s or settings.provider_request_timeout_s

    @property
    def is_configured(self) -> bool:
        """자격 증명이 설정되어 있는지 여부"""
        return bool(self.api_key)

    async def fetch(self, query: str, page: int) -> ProviderOutcome:
        """검색 실행 (예외를 던지지 않음)

        Args:
            query: 검색어
            page: 페이지 번호 (1부터)

        Returns:
            ProviderOutcome: 성공 시 결과, 실패 시 빈 결과
        """
        if not self.is_configured:
            logger.debug(f"[{self.log_tag}] API key not set, skipping")
            return ProviderOutcome.empty()

        try:
            url, params = self.build_request(query, page)
            data = await self._get_json(url, params)
            outcome = self.parse(data, page)
            logger.info(
                f"[{self.log_tag}] OK: page={page}, results={len(outcome.results)}, has_more={outcome.has_more}"
            )
            return outcome
        except ProviderHttpException as e:
            logger.error(f"[{self.log_tag}] error status: {e.status_code}")
            return ProviderOutcome.empty()
        except ProviderParseException as e:
            logger.error(f"[{self.log_tag}] {e.message}")
            return ProviderOutcome.empty()
        except Exception as e:
            logger.error(f"[{self.log_tag}] exception: {type(e).__name__}: {mask_url(str(e))}")
            return ProviderOutcome.empty()

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        res = await self.http_client.get_text(url, params=params, timeout_s=self.request_timeout_s)
        if res is None:
            raise ProviderHttpException(self.source.value, None, "transport failure")

        status, body = res
        if not 200 <= status < 300:
            raise ProviderHttpException(self.source.value, status)

        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            raise ProviderParseException(self.source.value, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise ProviderParseException(self.source.value, f"expected object, got {type(data).__name__}")
        return data

    def make_result(
        self,
        *,
        title: Any,
        link: Any,
        price: Optional[str],
        thumbnail: Any,
        rating: Optional[Union[int, float]],
        reviews: Optional[int],
    ) -> Optional[UnifiedResult]:
        """필수 필드(title/link)가 없으면 None"""
        title_str = title.strip() if isinstance(title, str) else ""
        link_str = link.strip() if isinstance(link, str) else ""
        if not title_str or not link_str:
            logger.debug(f"[{self.log_tag}] skipping item without title/link")
            return None

        return UnifiedResult(
            source=self.source,
            title=title_str,
            price=price,
            link=link_str,
            thumbnail=thumbnail if isinstance(thumbnail, str) and thumbnail else None,
            rating=rating,
            reviews=reviews,
        )

    @staticmethod
    def fallback_has_more(results: List[UnifiedResult]) -> bool:
        """페이지네이션 메타데이터가 없을 때의 추정 (참고용, 정확하지 않음)"""
        return len(results) > 0

    @abstractmethod
    def build_request(self, query: str, page: int) -> Tuple[str, Optional[Dict[str, Any]]]:
        """(url, params) 반환"""

    @abstractmethod
    def parse(self, data: Dict[str, Any], page: int) -> ProviderOutcome:
        """프로바이더 응답을 ProviderOutcome으로 변환"""
