"""헬스 체크 엔드포인트"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from search_scraper import __version__
from search_scraper.api.dependencies import get_browser_session
from search_scraper.core.config import settings
from search_scraper.crawlers.playwright import BrowserSession
from search_scraper.crawlers.profiles import available_engines
from search_scraper.schemas.search_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(session: BrowserSession = Depends(get_browser_session)):
    """
    헬스 체크 엔드포인트

    브라우저는 첫 검색 때 실행되므로 idle 도 정상입니다.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        browser="running" if session.is_running else "idle",
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "engines": available_engines(),
        "docs": "/docs",
    }
