"""검색 게이트웨이 서비스 - HTTP 라우트와 도구 호출이 공유하는 로직

공유 페이지가 하나뿐이므로 모든 검색은 lock 으로 직렬화합니다.
동시에 들어온 요청은 같은 페이지에서 경쟁하지 않고 순서대로 대기합니다.
"""

import asyncio
import json
from typing import Mapping, Optional

from pydantic import ValidationError

from search_scraper.core.exceptions import ScraperException, UnknownToolException
from search_scraper.core.logging import logger, sanitize_for_log
from search_scraper.crawlers.profiles import PROFILES, ExtractionProfile, get_profile
from search_scraper.engine import ResultStore, SearchPipeline
from search_scraper.schemas.search_schema import (
    ResultRecord,
    SearchSnapshot,
    SearchToolArguments,
    ToolCallRequest,
    ToolDefinition,
    ToolResult,
)


TOOL_PREFIX = "search_"

_TOOL_DESCRIPTIONS = {
    "google": "Search Google and return the organic web results (title, url, snippet).",
    "duckduckgo": "Search DuckDuckGo and return the web results (title, url, snippet).",
    "youtube": "Search YouTube and return matching videos (title, url, description).",
    "pubmed": (
        "Search PubMed for randomized controlled trials, meta-analyses and reviews "
        "(title, url, authors, journal, citation)."
    ),
}


def tool_name_for(engine: str) -> str:
    return f"{TOOL_PREFIX}{engine}"


def _error_message(error: Exception) -> str:
    if isinstance(error, ScraperException):
        return error.message
    return str(error) or type(error).__name__


class SearchService:
    """검색 요청 처리 (reset → pipeline → snapshot)"""

    def __init__(
        self,
        pipeline: SearchPipeline,
        store: ResultStore,
        profiles: Optional[Mapping[str, ExtractionProfile]] = None,
    ):
        self.pipeline = pipeline
        self.store = store
        self.profiles = profiles if profiles is not None else PROFILES
        self._lock = asyncio.Lock()

    async def search(self, query: str, engine: str) -> SearchSnapshot:
        """HTTP 검색: store 초기화 후 실행하고 스냅샷 반환

        Raises:
            UnknownEngineException: 등록되지 않은 엔진
            ScraperException: 네비게이션/추출 실패
        """
        async with self._lock:
            self.store.reset()
            await self.pipeline.run(engine, query)
            return self.store.snapshot(query, engine)

    async def run_batch(self, engine: str, query: str) -> list[ResultRecord]:
        """도구 호출 한 번: store 초기화 후 이번 배치만 반환"""
        async with self._lock:
            self.store.reset()
            return await self.pipeline.run(engine, query)

    def resolve_tool(self, name: str) -> ExtractionProfile:
        """도구 이름 → 프로필

        Raises:
            UnknownToolException: search_<engine> 형식이 아니거나 엔진 미등록
        """
        if not name or not name.startswith(TOOL_PREFIX):
            raise UnknownToolException(name)
        engine = name[len(TOOL_PREFIX):]
        if engine not in self.profiles:
            raise UnknownToolException(name)
        return get_profile(engine, self.profiles)

    async def call_tool(self, request: ToolCallRequest) -> ToolResult:
        """도구 호출 처리 - 예외를 던지지 않고 isError 결과로 변환"""
        try:
            profile = self.resolve_tool(request.name)
        except UnknownToolException as e:
            logger.warning(f"[Tool] {e}")
            return ToolResult.text(e.message, is_error=True)

        try:
            arguments = SearchToolArguments.model_validate(request.arguments)
        except ValidationError as e:
            logger.warning(f"[Tool] Invalid arguments for {request.name}: {e.error_count()} error(s)")
            return ToolResult.text(
                f"Invalid arguments for {request.name}: 'query' must be a string",
                is_error=True,
            )

        logger.info(f"[Tool] {request.name}: query='{sanitize_for_log(arguments.query)}'")
        try:
            records = await self.run_batch(profile.engine, arguments.query)
        except Exception as e:
            logger.error(f"[Tool] {request.name} failed: {type(e).__name__}: {e}")
            return ToolResult.text(
                f"Failed to perform {profile.display_name} search: {_error_message(e)}",
                is_error=True,
            )

        text = json.dumps([r.to_payload() for r in records], indent=2, ensure_ascii=False)
        return ToolResult.text(text)

    def list_tools(self) -> list[ToolDefinition]:
        return [
            ToolDefinition(
                name=tool_name_for(engine),
                description=_TOOL_DESCRIPTIONS.get(engine, f"Search {profile.display_name}."),
                input_schema={
                    "type": "object",
                    "properties": {
                        "query": {"type": "string", "description": "Search query"},
                    },
                    "required": ["query"],
                },
            )
            for engine, profile in self.profiles.items()
        ]
