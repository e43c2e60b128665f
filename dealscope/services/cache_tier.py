"""Cache Tier Protocol - L1/L2 공통 인터페이스"""

from typing import Any, Dict, Optional, Protocol


class CacheTier(Protocol):
    """캐시 계층 프로토콜

    계층별 쓰기 정책(L1은 빈 결과도 저장, L2는 빈 결과 저장 안 함)은
    오케스트레이터 호출부에서 명시적으로 결정합니다.
    """

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """캐시 조회 (없거나 만료되면 None)"""
        ...

    async def put(self, key: str, value: Dict[str, Any], ttl_seconds: int) -> None:
        """캐시 저장 (기존 엔트리는 통째로 교체)"""
        ...
