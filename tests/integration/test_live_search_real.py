"""실제 검색 엔진 대상 통합 테스트

주의: 네트워크/브라우저 자원이 필요합니다. 환경 변수 LIVE_CRAWL=1 일 때만 실행됩니다.
엔진 마크업은 수시로 바뀌므로 결과 개수보다 레코드 형태를 검증합니다.
"""
import os

import pytest
import pytest_asyncio

from search_scraper.crawlers.playwright import BrowserSession
from search_scraper.engine import ResultStore, SearchPipeline
from search_scraper.services import SearchService

pytestmark = [
    pytest.mark.asyncio,
    pytest.mark.skipif(os.getenv("LIVE_CRAWL") != "1", reason="LIVE_CRAWL=1 일 때만 실행"),
]


@pytest_asyncio.fixture
async def service():
    session = BrowserSession(headless=True)
    store = ResultStore()
    yield SearchService(pipeline=SearchPipeline(session=session, store=store), store=store)
    await session.close()


@pytest.mark.parametrize("engine", ["google", "duckduckgo", "youtube"])
async def test_web_and_video_search(service, engine):
    snapshot = await service.search("climate change", engine)

    for record in snapshot.results:
        assert record.source_type == engine
        assert record.url == "" or record.url.startswith("http")


async def test_pubmed_search(service):
    snapshot = await service.search("statins cardiovascular", "pubmed")

    for record in snapshot.results:
        assert record.authors is not None
        assert record.journal is not None
        assert record.url == "" or record.url.startswith("https://pubmed.ncbi.nlm.nih.gov/")


async def test_shared_page_across_searches(service):
    """두 검색이 같은 브라우저 페이지를 재사용"""
    await service.search("python", "duckduckgo")
    page = await service.pipeline.session.ensure()
    await service.search("rust", "duckduckgo")

    assert await service.pipeline.session.ensure() is page
