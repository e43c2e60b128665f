"""로깅 설정 (Security Enhanced)

프로바이더 API 키가 쿼리스트링으로 전달되므로, 핸들러 단계에서
모든 레코드의 api_key/apiKey 값을 한 번 더 마스킹합니다.
"""
import logging
import os
import re
import sys
from typing import Optional

from dealscope.core.config import settings


# Production 환경에서는 DEBUG 로그 비활성화
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

# 쿼리스트링에 실리는 프로바이더 키 (Rainforest: api_key, Best Buy: apiKey)
_SECRET_PARAM_RE = re.compile(r"((?:api_key|apiKey|apikey)=)[^&\s]+")

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def mask_url(url: str) -> str:
    """URL 쿼리스트링의 API 키 값을 마스킹

    Args:
        url: 요청 URL

    Returns:
        api_key/apiKey 값이 ***로 치환된 URL
    """
    if not url:
        return ""
    return _SECRET_PARAM_RE.sub(r"\1***", url)


class ApiKeyMaskingFilter(logging.Filter):
    """레코드 메시지의 API 키 마스킹 (호출부에서 mask_url을 빠뜨린 경우 대비)"""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_url(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def resolve_log_level(level: Optional[str] = None) -> int:
    """설정 문자열을 logging 레벨로 변환

    - 알 수 없는 값은 INFO
    - Production에서는 DEBUG를 INFO로 올림
    """
    name = (level or settings.log_level).upper()
    if IS_PRODUCTION and name == "DEBUG":
        name = "INFO"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(name: str = "dealscope", level: Optional[str] = None) -> logging.Logger:
    """로거 초기화 및 설정

    여러 번 호출해도 핸들러는 하나만 붙습니다.
    """
    logger = logging.getLogger(name)
    log_level = resolve_log_level(level)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(
            fmt=_PRODUCTION_FORMAT if IS_PRODUCTION else _DEVELOPMENT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console_handler.addFilter(ApiKeyMaskingFilter())
    logger.addHandler(console_handler)
    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """민감 정보 제거 후 로깅용 문자열 반환

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        제거된 문자열
    """
    if not value:
        return "[empty]"

    result = mask_url(value)

    patterns_to_mask = [
        ('password', '***'),
        ('token', '***'),
        ('secret', '***'),
    ]
    for pattern, mask in patterns_to_mask:
        if pattern in result.lower():
            result = mask
            break

    # 길이 초과 시 절단
    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
