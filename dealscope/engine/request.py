"""Search Request - 호출자 입력에서 파생된 검색 요청"""

from dataclasses import dataclass
from typing import Any, Optional

from dealscope.core.exceptions import InvalidQueryException, ProviderConfigurationException
from dealscope.providers.registry import ProviderRegistry

DEFAULT_PAGE = 1


def parse_page(value: Any) -> int:
    """페이지 번호 파싱

    양의 정수로 해석되지 않으면(없음/숫자 아님/0 이하) 1을 반환합니다.
    """
    if value is None:
        return DEFAULT_PAGE
    if isinstance(value, bool):
        return DEFAULT_PAGE
    if isinstance(value, int):
        page = value
    else:
        try:
            page = int(str(value).strip(), 10)
        except ValueError:
            return DEFAULT_PAGE
    return page if page >= 1 else DEFAULT_PAGE


@dataclass(frozen=True)
class SearchRequest:
    """검색 요청

    Attributes:
        query: 검색어 (앞뒤 공백 제거, 비어 있지 않음)
        page: 페이지 번호 (1 이상)
        provider_scope: 프로바이더 태그 또는 "all"
    """

    query: str
    page: int
    provider_scope: str

    @classmethod
    def parse(
        cls,
        q: Optional[str],
        page: Any,
        provider: Optional[str],
        registry: ProviderRegistry,
    ) -> "SearchRequest":
        """요청 파라미터 검증 및 정규화

        검증 순서: 검색어 → 프로바이더 설정 여부 → 페이지/스코프

        Raises:
            InvalidQueryException: 검색어가 비었거나 공백뿐
            ProviderConfigurationException: 설정된 프로바이더가 하나도 없음
        """
        query = q.strip() if isinstance(q, str) else ""
        if not query:
            raise InvalidQueryException()

        if not registry.has_any_configured():
            raise ProviderConfigurationException()

        scope = registry.normalize_scope(provider)
        return cls(query=query, page=parse_page(page), provider_scope=scope)
