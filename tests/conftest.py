"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 브라우저 세션/페이지 주입

금지:
- 실제 브라우저 실행 (integration 의 opt-in 테스트 제외)
- 외부 네트워크 호출
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from search_scraper.core.exceptions import NavigationException  # noqa: E402
from search_scraper.engine import ResultStore, RetryPolicy, SearchPipeline  # noqa: E402
from search_scraper.services import SearchService, SnapshotService  # noqa: E402
from tests.fixtures import pages  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


class FakePage:
    """Playwright Page 대역 (url 만 사용)"""

    def __init__(self, url: str = "https://example.test/") -> None:
        self.url = url


class FakeSession:
    """BrowserSession 대역

    - navigate: 처음 nav_failures 번은 NavigationException
    - evaluate: rows 반환 (Exception 이면 raise)
    - content: html 반환
    """

    def __init__(
        self,
        rows: Any = None,
        html: str = "",
        nav_failures: int = 0,
        page_url: str = "https://example.test/",
        nav_delay: float = 0.0,
    ) -> None:
        self.page = FakePage(page_url)
        self.rows = [] if rows is None else rows
        self.html = html
        self.nav_failures = nav_failures
        self.nav_delay = nav_delay
        self.ensure_calls = 0
        self.navigated: list[str] = []
        self.descriptors: list[Any] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def ensure(self) -> FakePage:
        self.ensure_calls += 1
        return self.page

    async def navigate(self, page: FakePage, url: str) -> None:
        self.navigated.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.nav_delay:
                await asyncio.sleep(self.nav_delay)
            if self.nav_failures > 0:
                self.nav_failures -= 1
                raise NavigationException(url, "net::ERR_CONNECTION_RESET")
        finally:
            self.in_flight -= 1

    async def evaluate(self, page: FakePage, script: str, arg: Any = None) -> Any:
        self.descriptors.append(arg)
        if isinstance(self.rows, Exception):
            raise self.rows
        return self.rows

    async def content(self, page: FakePage) -> str:
        return self.html


NO_WAIT = RetryPolicy(max_attempts=3, delay_s=0)


def _make_pipeline(
    session: FakeSession,
    store: Optional[ResultStore] = None,
    retry_policy: Optional[RetryPolicy] = None,
    extraction_mode: str = "dom",
) -> SearchPipeline:
    return SearchPipeline(
        session=session,
        store=store if store is not None else ResultStore(),
        retry_policy=retry_policy or NO_WAIT,
        extraction_mode=extraction_mode,
    )


def _make_service(session: FakeSession, store: Optional[ResultStore] = None) -> SearchService:
    store = store if store is not None else ResultStore()
    return SearchService(pipeline=_make_pipeline(session, store), store=store)


@pytest.fixture
def fake_session():
    """FakeSession 클래스 (인자를 바꿔 생성)"""
    return FakeSession


@pytest.fixture
def make_pipeline():
    """SearchPipeline 팩토리 (재시도 대기 없음)"""
    return _make_pipeline


@pytest.fixture
def make_service():
    """SearchService 팩토리"""
    return _make_service


@pytest.fixture
def html_pages():
    """검색 결과 페이지 HTML 픽스처 모듈"""
    return pages


@pytest.fixture
def store() -> ResultStore:
    return ResultStore()


@pytest.fixture
def two_google_rows() -> list[dict[str, str]]:
    return [
        {
            "title": "Climate change - Wikipedia",
            "url": "https://en.wikipedia.org/wiki/Climate_change",
            "snippet": "Climate change is the long-term shift in temperatures.",
        },
        {
            "title": "What Is Climate Change? | United Nations",
            "url": "https://www.un.org/en/climatechange/what-is-climate-change",
            "snippet": "Climate change refers to long-term shifts.",
        },
    ]


@pytest.fixture
def snapshot_service(tmp_path: Path) -> SnapshotService:
    return SnapshotService(tmp_path / "search_results.json")
