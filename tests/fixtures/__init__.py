"""테스트 자산 레이어

- provider_payloads: 프로바이더 원본 응답 샘플 (단순 dict)
- fakes: 오케스트레이터/API 테스트용 대역 객체
"""

from .provider_payloads import BESTBUY_PAYLOADS, RAINFOREST_PAYLOADS

__all__ = [
    "BESTBUY_PAYLOADS",
    "RAINFOREST_PAYLOADS",
]
