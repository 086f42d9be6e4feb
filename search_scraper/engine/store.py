"""Result Store - 프로세스 단위 검색 결과 로그"""

from __future__ import annotations

import uuid

from search_scraper.schemas.search_schema import ResultRecord, SearchSnapshot


class ResultStore:
    """마지막 reset 이후 추가된 ResultRecord 목록

    - HTTP 검색 요청 시작 시 reset
    - 파이프라인만 append
    - snapshot 은 읽기 전용 (비우지 않음)
    """

    def __init__(self) -> None:
        self._records: list[ResultRecord] = []

    def reset(self) -> None:
        self._records.clear()

    def append(self, record: ResultRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> tuple[ResultRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self, query: str, engine: str) -> SearchSnapshot:
        """현재 전체 목록 + 새 UUID + (query, engine)"""
        return SearchSnapshot(
            id=str(uuid.uuid4()),
            query=query,
            engine=engine,
            results=list(self._records),
        )
