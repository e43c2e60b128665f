"""Retail search provider adapters.

공개 API는 이 파일에서만 export합니다.
"""

from .amazon import AmazonAdapter
from .base import ProviderAdapter
from .bestbuy import BestBuyAdapter
from .http_client import SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .registry import ProviderRegistry
from .result import ProviderOutcome

__all__ = [
    "AmazonAdapter",
    "BestBuyAdapter",
    "ProviderAdapter",
    "ProviderOutcome",
    "ProviderRegistry",
    "SharedHttpClient",
    "get_shared_http_client",
    "shutdown_shared_http_client",
]
