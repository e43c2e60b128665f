"""유틸리티 패키지"""

from .cache_keys import generate_cache_key, generate_shared_cache_key
from .edge_cases import EdgeCaseHandler
from .prices import first_formatted_price, format_price

__all__ = [
    "EdgeCaseHandler",
    "first_formatted_price",
    "format_price",
    "generate_cache_key",
    "generate_shared_cache_key",
]
