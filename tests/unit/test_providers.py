"""프로바이더 어댑터 단위 테스트 (HTTP 클라이언트 Mock)"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from dealscope.providers import AmazonAdapter, BestBuyAdapter, ProviderOutcome
from dealscope.schemas import ProviderSource
from tests.fixtures import BESTBUY_PAYLOADS, RAINFOREST_PAYLOADS


def mock_http_client(status: int = 200, body=None, raw: str | None = None) -> MagicMock:
    client = MagicMock()
    text = raw if raw is not None else json.dumps(body if body is not None else {})
    client.get_text = AsyncMock(return_value=(status, text))
    return client


def amazon(client: MagicMock, api_key: str = "rf-key") -> AmazonAdapter:
    return AmazonAdapter(
        api_key,
        http_client=client,
        request_timeout_s=1.0,
        base_url="https://rainforest.test/request",
        amazon_domain="amazon.com",
    )


def bestbuy(client: MagicMock, api_key: str = "bb-key") -> BestBuyAdapter:
    return BestBuyAdapter(
        api_key,
        http_client=client,
        request_timeout_s=1.0,
        base_url="https://bestbuy.test/v1/products",
        page_size=10,
    )


class TestAmazonAdapter:
    """Rainforest 기반 Amazon 어댑터"""

    @pytest.mark.asyncio
    async def test_missing_key_skips_network(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["two_items_with_pagination"])
        adapter = amazon(client, api_key="")

        outcome = await adapter.fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()
        assert adapter.is_configured is False
        client.get_text.assert_not_called()

    @pytest.mark.asyncio
    async def test_request_parameters(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["empty"])
        adapter = amazon(client)

        await adapter.fetch("AirPods Pro", 3)

        args, kwargs = client.get_text.call_args
        assert args[0] == "https://rainforest.test/request"
        assert kwargs["params"] == {
            "api_key": "rf-key",
            "type": "search",
            "amazon_domain": "amazon.com",
            "search_term": "AirPods Pro",
            "page": 3,
        }
        assert kwargs["timeout_s"] == 1.0

    @pytest.mark.asyncio
    async def test_maps_items_and_pagination(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["two_items_with_pagination"])

        outcome = await amazon(client).fetch("airpods", 1)

        assert outcome.has_more is True
        assert len(outcome.results) == 2

        first, second = outcome.results
        assert first.source == ProviderSource.AMAZON
        assert first.title == "Apple AirPods Pro (2nd Generation)"
        assert first.price == "$189.99"
        assert first.link == "https://www.amazon.com/dp/B0BDHWDR12"
        assert first.thumbnail == "https://m.media-amazon.com/images/I/airpods.jpg"
        assert first.rating == 4.7
        assert first.reviews == 81234

        # 문자열 평점/리뷰는 변환하지 않고 버림
        assert second.price is None
        assert second.thumbnail is None
        assert second.rating is None
        assert second.reviews is None

    @pytest.mark.asyncio
    async def test_integer_rating_passed_through(self):
        """정수 평점 4는 4로 유지 (4.0으로 바꾸지 않음)"""
        body = {"search_results": [{"title": "Echo Dot", "link": "https://www.amazon.com/dp/ECHO", "rating": 4}]}
        client = mock_http_client(body=body)

        outcome = await amazon(client).fetch("echo", 1)

        data = outcome.results[0].model_dump(mode="json")
        assert data["rating"] == 4
        assert type(data["rating"]) is int

    @pytest.mark.asyncio
    async def test_last_page_has_no_more(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["last_page"])

        outcome = await amazon(client).fetch("airpods", 7)

        assert len(outcome.results) == 1
        assert outcome.has_more is False

    @pytest.mark.asyncio
    async def test_has_more_falls_back_to_result_presence(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["no_pagination"])
        outcome = await amazon(client).fetch("airpods", 1)
        assert outcome.has_more is True

        client = mock_http_client(body=RAINFOREST_PAYLOADS["empty"])
        outcome = await amazon(client).fetch("xyzzynonexistentproduct123", 1)
        assert outcome.results == ()
        assert outcome.has_more is False

    @pytest.mark.asyncio
    async def test_skips_items_without_title_or_link(self):
        client = mock_http_client(body=RAINFOREST_PAYLOADS["missing_required_fields"])

        outcome = await amazon(client).fetch("airpods", 1)

        assert [r.title for r in outcome.results] == ["Valid"]
        # 음수 리뷰 수와 bool 평점은 숫자로 인정하지 않음
        assert outcome.results[0].reviews is None
        assert outcome.results[0].rating is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    async def test_non_success_status_yields_empty(self, status):
        client = mock_http_client(status=status, body=RAINFOREST_PAYLOADS["two_items_with_pagination"])

        outcome = await amazon(client).fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()

    @pytest.mark.asyncio
    async def test_invalid_json_yields_empty(self):
        client = mock_http_client(raw="<html>rate limited</html>")

        outcome = await amazon(client).fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()

    @pytest.mark.asyncio
    async def test_unexpected_shape_yields_empty(self):
        client = mock_http_client(body={"search_results": {"title": "not a list"}})
        assert await amazon(client).fetch("airpods", 1) == ProviderOutcome.empty()

        client = mock_http_client(raw="[1, 2, 3]")
        assert await amazon(client).fetch("airpods", 1) == ProviderOutcome.empty()

    @pytest.mark.asyncio
    async def test_transport_failure_yields_empty(self):
        client = MagicMock()
        client.get_text = AsyncMock(return_value=None)

        outcome = await amazon(client).fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()

    @pytest.mark.asyncio
    async def test_client_exception_does_not_escape(self):
        client = MagicMock()
        client.get_text = AsyncMock(side_effect=RuntimeError("boom api_key=secret"))

        outcome = await amazon(client).fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()


class TestBestBuyAdapter:
    """Best Buy Products API 어댑터"""

    @pytest.mark.asyncio
    async def test_missing_key_skips_network(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["sale_and_regular"])
        adapter = bestbuy(client, api_key="  ")

        outcome = await adapter.fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()
        client.get_text.assert_not_called()

    @pytest.mark.asyncio
    async def test_query_is_encoded_in_path(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["empty"])

        await bestbuy(client).fetch("AirPods Pro & case/2", 2)

        args, kwargs = client.get_text.call_args
        assert args[0] == "https://bestbuy.test/v1/products((search=AirPods%20Pro%20%26%20case%2F2))"
        assert kwargs["params"] == {
            "apiKey": "bb-key",
            "format": "json",
            "pageSize": 10,
            "page": 2,
        }

    @pytest.mark.asyncio
    async def test_price_prefers_sale_over_regular(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["sale_and_regular"])

        outcome = await bestbuy(client).fetch("airpods", 1)

        assert outcome.has_more is True
        prices = [r.price for r in outcome.results]
        assert prices == ["$189.00", "$7.50", None]

        first = outcome.results[0]
        assert first.source == ProviderSource.BESTBUY
        assert first.title == "Apple - AirPods Pro 2"
        assert first.link == "https://www.bestbuy.com/site/airpods-pro/6447382.p"
        assert first.rating == 4.8
        assert first.reviews == 15012

        second = outcome.results[1]
        assert second.rating is None
        assert second.reviews is None

    @pytest.mark.asyncio
    async def test_last_page_has_no_more(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["last_page"])

        outcome = await bestbuy(client).fetch("airpods", 3)

        assert outcome.has_more is False
        assert outcome.results[0].price == "$1.00"

    @pytest.mark.asyncio
    async def test_requested_page_used_when_current_page_missing(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["total_pages_without_current"])

        assert (await bestbuy(client).fetch("airpods", 1)).has_more is True
        assert (await bestbuy(client).fetch("airpods", 2)).has_more is False

    @pytest.mark.asyncio
    async def test_has_more_falls_back_to_result_presence(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["no_pagination"])

        outcome = await bestbuy(client).fetch("airpods", 1)

        assert outcome.has_more is True
        assert outcome.results[0].price is None

    @pytest.mark.asyncio
    async def test_empty_result_page(self):
        client = mock_http_client(body=BESTBUY_PAYLOADS["empty"])

        outcome = await bestbuy(client).fetch("xyzzynonexistentproduct123", 1)

        assert outcome.results == ()
        assert outcome.has_more is False

    @pytest.mark.asyncio
    async def test_service_unavailable_yields_empty(self):
        client = mock_http_client(status=503, raw="Service Unavailable")

        outcome = await bestbuy(client).fetch("airpods", 1)

        assert outcome == ProviderOutcome.empty()
