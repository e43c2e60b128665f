"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class DealScopeException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외 (HTTP 400)
class ValidationException(DealScopeException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어 (비어 있거나 공백뿐)"""
    def __init__(self, reason: str = "Missing search term", details: Optional[dict[str, Any]] = None):
        super().__init__("q", reason, details)


# 설정 관련 예외 (HTTP 500, 운영자 조치 필요)
class ConfigurationException(DealScopeException):
    """설정 오류"""
    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CONFIG_ERROR", details)


class ProviderConfigurationException(ConfigurationException):
    """프로바이더 API 키가 하나도 설정되지 않음"""
    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "Server is not configured with any provider API keys",
            "NO_PROVIDER_CONFIGURED",
            details,
        )


# 프로바이더 관련 예외 (항상 어댑터/오케스트레이터 경계에서 흡수)
class ProviderException(DealScopeException):
    """프로바이더 호출 예외의 기본 클래스"""
    def __init__(self, source: str, message: str, error_code: str = "PROVIDER_ERROR", details: Optional[dict[str, Any]] = None):
        self.source = source
        super().__init__(message, error_code or "PROVIDER_ERROR", details or {"source": source})


class ProviderHttpException(ProviderException):
    """비정상 HTTP 상태 또는 전송 실패"""
    def __init__(self, source: str, status_code: Optional[int] = None, reason: str = "", details: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        message = f"{source} request failed (status={status_code}) {reason}".strip()
        super().__init__(source, message, "PROVIDER_HTTP_ERROR",
                        details or {"source": source, "status_code": status_code})


class ProviderParseException(ProviderException):
    """응답 JSON 디코딩/구조 오류"""
    def __init__(self, source: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse {source} response: {reason}"
        super().__init__(source, message, "PROVIDER_PARSE_ERROR",
                        details or {"source": source, "reason": reason})


class TimeoutException(DealScopeException):
    """타임아웃 예외 (Timeout Guard)"""
    def __init__(self, operation: str, timeout_ms: int, details: Optional[dict[str, Any]] = None):
        self.operation = operation
        self.timeout_ms = timeout_ms
        message = f"Operation '{operation}' timed out after {timeout_ms}ms"
        super().__init__(message, "TIMEOUT",
                        details or {"operation": operation, "timeout_ms": timeout_ms})


# 캐시 관련 예외 (항상 흡수, 다음 단계로 진행)
class CacheException(DealScopeException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결 실패 (미설정 포함)"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to connect to cache: {reason}"
        super().__init__(message, "CACHE_CONNECTION_ERROR", details or {"reason": reason})


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


# 병합 단계 예외 (팬아웃 이후 유일하게 500으로 노출)
class MergeException(DealScopeException):
    """결과 병합 중 예기치 못한 내부 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(f"Failed to merge provider results: {reason}", "MERGE_ERROR",
                        details or {"reason": reason})
