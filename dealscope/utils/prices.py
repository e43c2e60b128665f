"""Price formatting helpers."""

from __future__ import annotations

from typing import Any, Optional

from .edge_cases import EdgeCaseHandler


def format_price(value: Any, currency_symbol: str = "$") -> Optional[str]:
    """숫자 가격을 소수 둘째 자리 표시 문자열로 변환.

    숫자가 아니거나 음수면 None (잘못된 가격 문자열을 만들지 않음).
    """
    amount = EdgeCaseHandler.as_number(value)
    if amount is None or amount < 0:
        return None
    return f"{currency_symbol}{amount:.2f}"


def first_formatted_price(*candidates: Any, currency_symbol: str = "$") -> Optional[str]:
    """후보 중 처음으로 유효한 가격을 포맷 (예: salePrice → regularPrice 순)."""
    for candidate in candidates:
        formatted = format_price(candidate, currency_symbol=currency_symbol)
        if formatted is not None:
            return formatted
    return None
