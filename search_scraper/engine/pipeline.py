"""Search Pipeline - (engine, query) → ResultRecord 목록

1. 프로필 조회
2. 공유 페이지 확보
3. 검색 URL 생성
4. 네비게이션 (RetryPolicy)
5. 추출 (페이지 컨텍스트 JS 또는 직렬화된 DOM 파싱)
6. ResultRecord 변환 + ResultStore 추가

파이프라인 자체는 상태가 없습니다. 같은 검색을 두 번 실행하면 독립된 두 배치가
호출 순서대로 store에 쌓입니다.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from search_scraper.core.config import settings
from search_scraper.core.exceptions import ExtractionException
from search_scraper.core.logging import logger, sanitize_for_log
from search_scraper.crawlers.parsing import parse_results_html
from search_scraper.crawlers.playwright.extract import EXTRACT_RESULTS_SCRIPT
from search_scraper.crawlers.profiles import ExtractionProfile, get_profile
from search_scraper.schemas.search_schema import ResultRecord

from .retry import RetryPolicy
from .store import ResultStore


class SearchPipeline:
    """BrowserSession + ExtractionProfile + RetryPolicy 조합

    검증은 gateway 책임입니다. 빈 검색어도 그대로 네비게이션합니다.
    """

    def __init__(
        self,
        session,
        store: ResultStore,
        retry_policy: Optional[RetryPolicy] = None,
        profiles: Optional[Mapping[str, ExtractionProfile]] = None,
        extraction_mode: Optional[str] = None,
    ):
        """
        Args:
            session: BrowserSession (ensure/navigate/evaluate/content 구현)
            store: 결과를 쌓을 ResultStore
            retry_policy: 네비게이션 재시도 정책 (기본값: settings)
            profiles: 엔진 → 프로필 (기본값: 내장 4종)
            extraction_mode: "dom" | "html" (기본값: settings)
        """
        if session is None:
            raise ValueError("session must not be None")
        if store is None:
            raise ValueError("store must not be None")

        self.session = session
        self.store = store
        self.retry_policy = retry_policy or RetryPolicy.from_settings()
        self.profiles = profiles
        self.extraction_mode = extraction_mode or settings.extraction_mode
        if self.extraction_mode not in ("dom", "html"):
            raise ValueError(f"Unsupported extraction_mode: {self.extraction_mode}")

    async def run(self, engine: str, query: str) -> list[ResultRecord]:
        """검색 실행

        Returns:
            이번 호출에서 만든 레코드 (store 전체 아님)

        Raises:
            UnknownEngineException: 등록되지 않은 엔진 (재시도 없음)
            NavigationException: 재시도 후에도 페이지 로드 실패
            ExtractionException: 추출 스크립트 오류 또는 잘못된 형태
        """
        profile = get_profile(engine, self.profiles)
        page = await self.session.ensure()

        url = profile.build_url(query)
        logger.info(f"[Pipeline] {profile.engine}: query='{sanitize_for_log(query)}'")

        await self.retry_policy.run(
            lambda: self.session.navigate(page, url),
            description=f"navigate {profile.engine}",
        )

        rows = await self._extract(page, profile)

        records: list[ResultRecord] = []
        for row in rows:
            record = ResultRecord.from_row(
                profile.engine,
                row,
                extra_fields=profile.extra_fields,
                captured_at=datetime.now(timezone.utc),
            )
            self.store.append(record)
            records.append(record)

        logger.info(f"[Pipeline] {profile.engine}: {len(records)} result(s)")
        return records

    async def _extract(self, page, profile: ExtractionProfile) -> list[dict[str, Any]]:
        try:
            if self.extraction_mode == "html":
                html = await self.session.content(page)
                rows = parse_results_html(html, profile, base_url=getattr(page, "url", "") or "")
            else:
                rows = await self.session.evaluate(page, EXTRACT_RESULTS_SCRIPT, profile.to_descriptor())
        except ExtractionException:
            raise
        except Exception as e:
            logger.error(f"[Pipeline] {profile.engine} extraction failed: {type(e).__name__}: {e}")
            raise ExtractionException(profile.engine, str(e) or type(e).__name__) from e

        if rows is None:
            return []
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            raise ExtractionException(profile.engine, f"malformed rows: {type(rows).__name__}")
        return rows
