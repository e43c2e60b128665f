"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 프로바이더 자격 증명 (비어 있으면 해당 프로바이더는 비활성)
    rainforest_api_key: str = ""
    bestbuy_api_key: str = ""

    # 프로바이더 엔드포인트
    rainforest_base_url: str = "https://api.rainforestapi.com/request"
    amazon_domain: str = "amazon.com"
    bestbuy_base_url: str = "https://api.bestbuy.com/v1/products"
    bestbuy_page_size: int = 10

    # Redis (L2). 비어 있으면 L2 조회/저장은 실패로 기록되고 라이브 조회로 넘어갑니다.
    redis_url: str = ""
    redis_socket_timeout_s: float = 2.0

    # 캐시 TTL
    # - L1: 프로세스 로컬, 짧게
    # - L2: Redis, 인스턴스 간 공유
    local_cache_ttl_s: int = 60
    shared_cache_ttl_s: int = 600
    cache_key_namespace: str = "dealscope:search:v1"

    # 프로바이더 호출 예산
    # - provider_timeout_ms: 프로바이더별 Timeout Guard 데드라인
    # - provider_request_timeout_s: HTTP 단일 요청 타임아웃 (가드에 걸린 뒤에도
    #   백그라운드에서 계속되는 요청의 상한)
    provider_timeout_ms: int = 4000
    provider_request_timeout_s: float = 10.0

    # 병합 결과 상한
    max_results: int = 30

    # HTTP 클라이언트
    http_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    http_max_clients: int = 20

    # API
    api_title: str = "DealScope Search Aggregator"
    api_version: str = "1.0.0"
    api_description: str = "여러 리테일 검색 API를 하나의 결과 목록으로 합쳐 반환합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("local_cache_ttl_s", "shared_cache_ttl_s")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache ttl must be positive")
        return v

    @field_validator("provider_timeout_ms")
    @classmethod
    def validate_provider_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("provider_timeout_ms must be positive")
        return v

    @field_validator("provider_request_timeout_s", "redis_socket_timeout_s")
    @classmethod
    def validate_socket_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("bestbuy_page_size", "max_results", "http_max_clients")
    @classmethod
    def validate_positive_sizes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("sizes must be positive")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
