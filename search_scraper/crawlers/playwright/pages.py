"""Playwright page 설정/보조 함수.

Page 생성 후 기본 타임아웃, 라우팅(리소스 차단), 헤더 설정을 한 곳에서 합니다.
"""

from __future__ import annotations

from playwright.async_api import Page, Request, Route

from search_scraper.core.config import settings


BLOCKED_RESOURCE_TYPES = frozenset({"image", "media", "font"})


async def _route_handler(route: Route, request: Request) -> None:
    try:
        if request.resource_type in BLOCKED_RESOURCE_TYPES:
            await route.abort()
            return
        await route.continue_()
    except Exception:
        # 페이지가 이미 닫혔거나 요청이 취소된 경우
        return


async def configure_page(page: Page) -> Page:
    page.set_default_timeout(settings.browser_timeout_ms)

    if settings.crawler_block_resources:
        try:
            await page.route("**/*", _route_handler)
        except Exception:
            pass

    await page.set_extra_http_headers(
        {
            "User-Agent": settings.crawler_user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
    )

    return page
