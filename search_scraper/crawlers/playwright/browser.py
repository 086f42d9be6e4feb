"""Playwright 공용 브라우저/페이지 관리.

프로세스당 브라우저 하나, 페이지 하나를 lazy하게 띄워 재사용합니다.
재시도는 여기서 하지 않고 호출 측(RetryPolicy)에 맡깁니다.
"""

from __future__ import annotations

import asyncio
import platform
from typing import Any, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from search_scraper.core.config import settings
from search_scraper.core.logging import logger
from search_scraper.core.exceptions import BrowserException, NavigationException

from .pages import configure_page


def build_launch_args() -> list[str]:
    args: list[str] = [
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--disable-background-networking",
        "--disable-background-timer-throttling",
        "--disable-renderer-backgrounding",
        "--disable-default-apps",
        "--disable-extensions",
        "--no-first-run",
        "--no-default-browser-check",
    ]

    if platform.system().lower() == "linux":
        args.extend(["--no-sandbox", "--disable-setuid-sandbox"])

    deduped: list[str] = []
    seen: set[str] = set()
    for a in args:
        if a not in seen:
            seen.add(a)
            deduped.append(a)
    return deduped


class BrowserSession:
    """브라우저 하나 + 페이지 하나를 소유하는 세션

    Usage:
        session = BrowserSession()
        page = await session.ensure()
        await session.navigate(page, "https://example.com")
        rows = await session.evaluate(page, script, descriptor)
        await session.close()
    """

    def __init__(self, headless: Optional[bool] = None) -> None:
        self.headless = settings.browser_headless if headless is None else headless
        self._lock = asyncio.Lock()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    @property
    def is_running(self) -> bool:
        try:
            return self._browser is not None and self._browser.is_connected()
        except Exception:
            return False

    async def ensure(self) -> Page:
        """준비된 페이지 반환 (최초 호출 시 브라우저 실행)"""
        async with self._lock:
            if self.is_running and self._page is not None and not self._page.is_closed():
                return self._page

            if not self.is_running:
                await self._teardown()
                await self._launch()

            assert self._browser is not None
            try:
                page = await self._browser.new_page()
            except PlaywrightError as e:
                logger.error(f"[Playwright] Failed to open page: {type(e).__name__}: {e}")
                raise BrowserException(f"[Playwright] Failed to open page: {e}") from e

            try:
                self._page = await configure_page(page)
            except Exception as e:
                logger.error(f"[Playwright] Failed to configure page: {type(e).__name__}: {e}")
                try:
                    await page.close()
                except Exception:
                    pass
                raise BrowserException(f"[Playwright] Failed to configure page: {e}") from e
            return self._page

    async def _launch(self) -> None:
        logger.info(f"[Playwright] Launching browser (headless={self.headless})...")
        pw: Optional[Playwright] = None
        try:
            pw = await async_playwright().start()
            browser = await pw.chromium.launch(
                headless=self.headless,
                args=build_launch_args(),
            )
        except Exception as e:
            logger.error(f"[Playwright] Failed to launch browser: {type(e).__name__}: {e}")
            if pw is not None:
                try:
                    await pw.stop()
                except Exception:
                    pass
            raise BrowserException(f"[Playwright] Browser launch failed: {e}") from e

        self._playwright = pw
        self._browser = browser
        logger.info("[Playwright] Browser launched successfully (shared)")

    async def navigate(self, page: Page, url: str) -> None:
        """DOM 파싱 완료(domcontentloaded)까지 대기

        Raises:
            NavigationException: 네트워크 오류, 타임아웃 등
        """
        try:
            await page.goto(url, wait_until="domcontentloaded", timeout=settings.browser_timeout_ms)
        except PlaywrightError as e:
            logger.error(f"[Playwright] Navigation to {url} failed: {type(e).__name__}: {e}")
            raise NavigationException(url, str(e) or type(e).__name__) from e

    async def evaluate(self, page: Page, script: str, arg: Any = None) -> Any:
        """문서 컨텍스트에서 스크립트 실행"""
        return await page.evaluate(script, arg)

    async def content(self, page: Page) -> str:
        """렌더링된 DOM 직렬화"""
        return await page.content()

    async def close(self) -> None:
        """브라우저 종료 (실행 중이 아니면 no-op)"""
        async with self._lock:
            if self._browser is None and self._playwright is None:
                return
            logger.info("[Playwright] Closing browser...")
            await self._teardown()

    async def _teardown(self) -> None:
        if self._page is not None:
            try:
                await self._page.close()
            except Exception:
                pass
            self._page = None
        if self._browser is not None:
            try:
                await self._browser.close()
            except Exception:
                pass
            self._browser = None
        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception:
                pass
            self._playwright = None
