"""캐시 키 유틸리티"""


def generate_cache_key(query: str, page: int, provider_scope: str) -> str:
    """
    L1(프로세스 로컬) 캐시 키 생성

    Args:
        query: 검색어 (대소문자 무시)
        page: 페이지 번호
        provider_scope: 프로바이더 태그 또는 "all"

    Returns:
        "{query}::{page}::{scope}" 형식 키
    """
    return f"{query.lower()}::{page}::{provider_scope}"


def generate_shared_cache_key(namespace: str, query: str, page: int, provider_scope: str) -> str:
    """
    L2(Redis) 캐시 키 생성

    네임스페이스에 버전(v1 등)을 포함시켜 페이로드 형식이 바뀌어도
    이전 엔트리와 충돌하지 않도록 합니다.
    """
    return f"{namespace}:{generate_cache_key(query, page, provider_scope)}"
