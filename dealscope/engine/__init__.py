"""Engine Layer - Aggregation Orchestration

This module provides the core engine layer for the aggregator:
- SearchOrchestrator: Main entry point for search execution
- SearchRequest: Validated request (query/page/provider scope)
- TimeoutGuard: Per-provider deadline
- merge_outcomes: Provider result merging (cap 30, optimistic hasMore)
- SearchResult/SearchPayload/CacheLayer: Standardized result format
"""

from .merger import DEFAULT_MAX_RESULTS, merge_outcomes
from .orchestrator import SearchOrchestrator
from .request import SearchRequest, parse_page
from .result import CacheLayer, SearchPayload, SearchResult
from .timeout_guard import TimeoutGuard

__all__ = [
    "SearchOrchestrator",
    "SearchRequest",
    "parse_page",
    "TimeoutGuard",
    "merge_outcomes",
    "DEFAULT_MAX_RESULTS",
    "SearchResult",
    "SearchPayload",
    "CacheLayer",
]
