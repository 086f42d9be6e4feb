"""FastAPI 의존성 - 프로세스 단위 싱글톤

브라우저 세션과 결과 store 는 한 번 만들어 모든 요청에 주입합니다.
"""

from typing import Optional

from search_scraper.core.logging import logger
from search_scraper.crawlers.playwright import BrowserSession
from search_scraper.engine import ResultStore, SearchPipeline
from search_scraper.services import SearchService, SnapshotService

_browser_session: Optional[BrowserSession] = None
_result_store: Optional[ResultStore] = None
_search_service: Optional[SearchService] = None
_snapshot_service: Optional[SnapshotService] = None


def get_browser_session() -> BrowserSession:
    """BrowserSession 싱글톤 (브라우저는 첫 검색 때 실행)"""
    global _browser_session
    if _browser_session is None:
        _browser_session = BrowserSession()
    return _browser_session


def get_result_store() -> ResultStore:
    """ResultStore 싱글톤"""
    global _result_store
    if _result_store is None:
        _result_store = ResultStore()
    return _result_store


def get_search_service() -> SearchService:
    """SearchService 싱글톤"""
    global _search_service
    if _search_service is None:
        store = get_result_store()
        pipeline = SearchPipeline(session=get_browser_session(), store=store)
        _search_service = SearchService(pipeline=pipeline, store=store)
    return _search_service


def get_snapshot_service() -> SnapshotService:
    """SnapshotService 싱글톤"""
    global _snapshot_service
    if _snapshot_service is None:
        _snapshot_service = SnapshotService()
    return _snapshot_service


async def shutdown_browser_session() -> None:
    """앱 종료 시 브라우저 정리"""
    if _browser_session is None:
        return
    try:
        await _browser_session.close()
    except Exception as e:
        logger.error(f"[Playwright] Failed to close browser: {type(e).__name__}: {e}")
