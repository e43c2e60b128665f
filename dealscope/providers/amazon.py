"""Amazon 검색 어댑터 (Rainforest API)

- 가격은 Rainforest가 이미 포맷해 준 price.raw 문자열을 그대로 사용합니다.
- hasMore는 pagination.current_page < pagination.total_pages,
  메타데이터가 없으면 결과 유무로 추정합니다.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from dealscope.core.config import settings
from dealscope.core.exceptions import ProviderParseException
from dealscope.schemas.search_schema import ProviderSource, UnifiedResult
from dealscope.utils.edge_cases import EdgeCaseHandler

from .base import ProviderAdapter
from .http_client import SharedHttpClient
from .result import ProviderOutcome


class AmazonAdapter(ProviderAdapter):
    """Rainforest API 기반 Amazon 검색"""

    source = ProviderSource.AMAZON
    log_tag = "AMAZON"

    def __init__(
        self,
        api_key: Optional[str],
        http_client: Optional[SharedHttpClient] = None,
        request_timeout_s: Optional[float] = None,
        base_url: Optional[str] = None,
        amazon_domain: Optional[str] = None,
    ):
        super().__init__(api_key, http_client, request_timeout_s)
        self.base_url = base_url or settings.rainforest_base_url
        self.amazon_domain = amazon_domain or settings.amazon_domain

    def build_request(self, query: str, page: int) -> Tuple[str, Optional[Dict[str, Any]]]:
        params = {
            "api_key": self.api_key,
            "type": "search",
            "amazon_domain": self.amazon_domain,
            "search_term": query,
            "page": page,
        }
        return self.base_url, params

    def parse(self, data: Dict[str, Any], page: int) -> ProviderOutcome:
        items = data.get("search_results")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise ProviderParseException(self.source.value, "search_results is not a list")

        results: List[UnifiedResult] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            price_obj = EdgeCaseHandler.safe_get(item, "price", expected_type=dict)
            result = self.make_result(
                title=item.get("title"),
                link=item.get("link"),
                price=EdgeCaseHandler.safe_str(EdgeCaseHandler.safe_get(price_obj, "raw")),
                thumbnail=item.get("image"),
                rating=EdgeCaseHandler.as_number(item.get("rating")),
                reviews=EdgeCaseHandler.as_count(item.get("reviews")),
            )
            if result is not None:
                results.append(result)

        pagination = EdgeCaseHandler.safe_get(data, "pagination", expected_type=dict)
        current_page = EdgeCaseHandler.safe_get(pagination, "current_page")
        total_pages = EdgeCaseHandler.safe_get(pagination, "total_pages")
        if EdgeCaseHandler.is_number(current_page) and EdgeCaseHandler.is_number(total_pages):
            has_more = current_page < total_pages
        else:
            has_more = self.fallback_has_more(results)

        return ProviderOutcome.of(results, has_more)
