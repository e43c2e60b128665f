"""유틸리티 유닛 테스트 (가격 포맷/엣지 케이스/캐시 키/로그 마스킹)"""
import logging
import math

import pytest

from dealscope.core.logging import ApiKeyMaskingFilter, mask_url, resolve_log_level, sanitize_for_log, setup_logging
from dealscope.utils import (
    EdgeCaseHandler,
    first_formatted_price,
    format_price,
    generate_cache_key,
    generate_shared_cache_key,
)


class TestFormatPrice:
    """가격 표시 문자열"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (19.99, "$19.99"),
            (189, "$189.00"),
            (7.5, "$7.50"),
            (0, "$0.00"),
            (1234.567, "$1234.57"),
        ],
    )
    def test_numbers(self, value, expected):
        assert format_price(value) == expected

    @pytest.mark.parametrize("value", [None, "19.99", "N/A", True, -1, math.nan, math.inf])
    def test_invalid(self, value):
        assert format_price(value) is None

    def test_first_valid_candidate(self):
        assert first_formatted_price(None, 249.0) == "$249.00"
        assert first_formatted_price(189.0, 249.0) == "$189.00"
        assert first_formatted_price("N/A", None) is None
        assert first_formatted_price() is None


class TestEdgeCaseHandler:
    """Null-safety 헬퍼"""

    def test_safe_get(self):
        assert EdgeCaseHandler.safe_get({"a": 1}, "a") == 1
        assert EdgeCaseHandler.safe_get({"a": 1}, "b", default=0) == 0
        assert EdgeCaseHandler.safe_get(None, "a") is None
        assert EdgeCaseHandler.safe_get(["a"], "a") is None
        assert EdgeCaseHandler.safe_get({"a": "x"}, "a", expected_type=dict) is None

    @pytest.mark.parametrize(
        "value, expected",
        [(4.5, 4.5), (4, 4.0), ("4.5", None), (True, None), (None, None), (math.nan, None)],
    )
    def test_as_number(self, value, expected):
        assert EdgeCaseHandler.as_number(value) == expected

    def test_as_number_keeps_int(self):
        """정수 평점은 float로 바꾸지 않음"""
        assert type(EdgeCaseHandler.as_number(4)) is int
        assert type(EdgeCaseHandler.as_number(4.5)) is float

    @pytest.mark.parametrize(
        "value, expected",
        [(12, 12), (12.0, 12), (0, 0), (12.5, None), (-3, None), ("12", None), (False, None)],
    )
    def test_as_count(self, value, expected):
        assert EdgeCaseHandler.as_count(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [("  $19.99 ", "$19.99"), ("", None), ("   ", None), (19.99, None), (None, None)],
    )
    def test_safe_str(self, value, expected):
        assert EdgeCaseHandler.safe_str(value) == expected


class TestCacheKeys:
    """캐시 키 형식"""

    def test_local_key_is_case_insensitive(self):
        assert generate_cache_key("AirPods Pro", 1, "amazon") == "airpods pro::1::amazon"
        assert generate_cache_key("AIRPODS PRO", 1, "amazon") == generate_cache_key("airpods pro", 1, "amazon")

    def test_keys_differ_by_page_and_scope(self):
        keys = {
            generate_cache_key("tv", 1, "amazon"),
            generate_cache_key("tv", 2, "amazon"),
            generate_cache_key("tv", 1, "all"),
        }
        assert len(keys) == 3

    def test_shared_key_namespaced(self):
        assert generate_shared_cache_key("dealscope:search:v1", "TV", 3, "all") == "dealscope:search:v1:tv::3::all"


class TestLogMasking:
    """로그에 API 키 노출 방지"""

    def test_mask_url(self):
        url = "https://api.rainforestapi.com/request?api_key=SECRET123&type=search"
        assert mask_url(url) == "https://api.rainforestapi.com/request?api_key=***&type=search"

    def test_mask_camel_case_key(self):
        url = "https://api.bestbuy.com/v1/products((search=tv))?apiKey=abc&format=json"
        assert "abc" not in mask_url(url)

    def test_sanitize_for_log(self):
        assert sanitize_for_log("") == "[empty]"
        assert sanitize_for_log("x" * 150).endswith("...")
        assert sanitize_for_log("my password is 1234") == "***"

    def test_filter_masks_formatted_record(self):
        """포맷 인자로 들어온 키도 핸들러 단계에서 마스킹"""
        record = logging.LogRecord(
            "dealscope", logging.WARNING, __file__, 1,
            "GET %s failed", ("https://api.bestbuy.com/v1/products?apiKey=SECRET&page=1",), None,
        )

        assert ApiKeyMaskingFilter().filter(record) is True
        assert record.getMessage() == "GET https://api.bestbuy.com/v1/products?apiKey=***&page=1 failed"

    def test_filter_leaves_plain_record(self):
        record = logging.LogRecord("dealscope", logging.INFO, __file__, 1, "page=%d", (2,), None)

        ApiKeyMaskingFilter().filter(record)

        assert record.args == (2,)
        assert record.getMessage() == "page=2"

    @pytest.mark.parametrize(
        "level, expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("verbose", logging.INFO)],
    )
    def test_resolve_log_level(self, level, expected):
        assert resolve_log_level(level) == expected

    def test_setup_logging_single_handler(self):
        first = setup_logging("dealscope.test_setup", "INFO")
        second = setup_logging("dealscope.test_setup", "WARNING")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.WARNING
        assert any(isinstance(f, ApiKeyMaskingFilter) for f in second.handlers[0].filters)
