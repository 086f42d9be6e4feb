"""로깅 설정

모든 모듈은 `search_scraper` 로거 하나를 공유하고, 메시지 앞에 [Playwright], [Pipeline]
같은 태그를 붙여 단계를 구분합니다.
"""
import logging
import os
import re
import sys
from typing import Optional

from search_scraper.core.config import settings


IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

LOGGER_NAME = "search_scraper"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

# 드라이버/이벤트 루프 내부 로그는 경고 이상만
_NOISY_LOGGERS = ("asyncio", "playwright")

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]+")


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.log_level or "INFO").upper()
    if IS_PRODUCTION and name == "DEBUG":
        name = "INFO"
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """로거 초기화 (여러 번 호출해도 핸들러는 하나)"""
    log_level = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PRODUCTION_FORMAT if IS_PRODUCTION else _DEVELOPMENT_FORMAT,
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


logger = setup_logging()


def sanitize_for_log(value: Optional[str], max_length: int = 100) -> str:
    """검색어 같은 사용자 입력을 한 줄로 정리

    제어 문자(개행 포함)는 공백 하나로 바꾸고 max_length 에서 자릅니다.

    Examples:
        >>> sanitize_for_log("climate\\nchange")
        'climate change'
        >>> sanitize_for_log("")
        '[empty]'
    """
    if not value:
        return "[empty]"

    result = _CONTROL_CHARS.sub(" ", value)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
