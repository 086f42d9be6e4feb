"""API routes package."""

from .health_routes import router as health_router
from .search_routes import router as search_router
from .tool_routes import router as tool_router

__all__ = ["health_router", "search_router", "tool_router"]
