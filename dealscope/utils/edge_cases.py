"""엣지 케이스 처리 유틸리티

프로바이더 JSON은 필드 누락/타입 불일치가 흔하므로, 값을 강제 변환하지 않고
타입이 맞을 때만 통과시킵니다.
"""
import math
from typing import Any, Dict, Optional, Type, TypeVar, Union

from dealscope.core.logging import logger

T = TypeVar('T')


class EdgeCaseHandler:
    """엣지 케이스 처리 및 Null-safety 보장"""

    @staticmethod
    def safe_get(obj: Any, key: str,
                 default: Optional[T] = None,
                 expected_type: Optional[Type] = None) -> Optional[T]:
        """딕셔너리 안전 접근

        Args:
            obj: 딕셔너리 (dict가 아니면 default 반환)
            key: 키
            default: 기본값
            expected_type: 예상 타입 (불일치 시 default 반환)

        Returns:
            값 또는 기본값
        """
        if obj is None:
            return default

        if not isinstance(obj, dict):
            logger.debug(f"Expected dict but got {type(obj).__name__}")
            return default

        value: Any = obj.get(key, default)

        if value is not None and expected_type is not None:
            if not isinstance(value, expected_type):
                logger.debug(
                    f"Type mismatch for key '{key}': "
                    f"expected {expected_type.__name__} but got {type(value).__name__}"
                )
                return default

        return value  # type: ignore[no-any-return]

    @staticmethod
    def is_number(value: Any) -> bool:
        """JSON 숫자 여부 (bool, NaN, inf 제외)"""
        if isinstance(value, bool):
            return False
        if not isinstance(value, (int, float)):
            return False
        return math.isfinite(value)

    @staticmethod
    def as_number(value: Any) -> Optional[Union[int, float]]:
        """숫자면 그대로(int/float 유지), 아니면 None (문자열 "4.5" 등은 변환하지 않음)"""
        if not EdgeCaseHandler.is_number(value):
            return None
        return value

    @staticmethod
    def as_count(value: Any) -> Optional[int]:
        """음이 아닌 정수 값이면 int, 아니면 None

        12.0 처럼 정수값을 가진 float는 허용합니다.
        """
        if not EdgeCaseHandler.is_number(value):
            return None
        if isinstance(value, float) and not value.is_integer():
            return None
        count = int(value)
        if count < 0:
            return None
        return count

    @staticmethod
    def safe_str(value: Any) -> Optional[str]:
        """공백이 아닌 문자열이면 strip 결과, 아니면 None"""
        if not isinstance(value, str):
            return None
        stripped = value.strip()
        return stripped or None
