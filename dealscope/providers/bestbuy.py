"""Best Buy 검색 어댑터 (Products API)

검색어는 URL 경로의 products((search=...)) 안에 들어가므로 직접 인코딩합니다.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from dealscope.core.config import settings
from dealscope.core.exceptions import ProviderParseException
from dealscope.schemas.search_schema import ProviderSource, UnifiedResult
from dealscope.utils.edge_cases import EdgeCaseHandler
from dealscope.utils.prices import first_formatted_price

from .base import ProviderAdapter
from .http_client import SharedHttpClient
from .result import ProviderOutcome


class BestBuyAdapter(ProviderAdapter):
    """Best Buy Products API 검색"""

    source = ProviderSource.BESTBUY
    log_tag = "BESTBUY"

    def __init__(
        self,
        api_key: Optional[str],
        http_client: Optional[SharedHttpClient] = None,
        request_timeout_s: Optional[float] = None,
        base_url: Optional[str] = None,
        page_size: Optional[int] = None,
    ):
        super().__init__(api_key, http_client, request_timeout_s)
        self.base_url = (base_url or settings.bestbuy_base_url).rstrip("/")
        self.page_size = page_size or settings.bestbuy_page_size

    def build_request(self, query: str, page: int) -> Tuple[str, Optional[Dict[str, Any]]]:
        url = f"{self.base_url}((search={quote(query, safe='')}))"
        params = {
            "apiKey": self.api_key,
            "format": "json",
            "pageSize": self.page_size,
            "page": page,
        }
        return url, params

    def parse(self, data: Dict[str, Any], page: int) -> ProviderOutcome:
        products = data.get("products")
        if products is None:
            products = []
        if not isinstance(products, list):
            raise ProviderParseException(self.source.value, "products is not a list")

        results: List[UnifiedResult] = []
        for product in products:
            if not isinstance(product, dict):
                continue
            # salePrice 우선, 없으면 regularPrice
            price = first_formatted_price(product.get("salePrice"), product.get("regularPrice"))
            result = self.make_result(
                title=product.get("name"),
                link=product.get("url"),
                price=price,
                thumbnail=product.get("image"),
                rating=EdgeCaseHandler.as_number(product.get("customerReviewAverage")),
                reviews=EdgeCaseHandler.as_count(product.get("customerReviewCount")),
            )
            if result is not None:
                results.append(result)

        total_pages = data.get("totalPages")
        current_page = data.get("currentPage")
        if not EdgeCaseHandler.is_number(current_page):
            current_page = page

        if EdgeCaseHandler.is_number(total_pages):
            has_more = current_page < total_pages
        else:
            has_more = self.fallback_has_more(results)

        return ProviderOutcome.of(results, has_more)
