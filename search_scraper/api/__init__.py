"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, search_router, tool_router
from .dependencies import get_browser_session, get_result_store, get_search_service, get_snapshot_service

__all__ = [
    "health_router",
    "search_router",
    "tool_router",
    "get_browser_session",
    "get_result_store",
    "get_search_service",
    "get_snapshot_service",
]
