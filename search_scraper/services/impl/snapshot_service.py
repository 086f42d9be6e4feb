"""스냅샷 저장 서비스 - 마지막 검색 결과를 JSON 파일로 덮어쓰기"""
from pathlib import Path
from typing import Optional, Union

from search_scraper.core.config import settings
from search_scraper.core.exceptions import PersistenceException
from search_scraper.core.logging import logger
from search_scraper.schemas.search_schema import SearchSnapshot


class SnapshotService:
    """스냅샷 파일 관리 서비스

    파일은 매번 통째로 덮어씁니다 (append 아님).
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path if path is not None else settings.snapshot_path)

    def save(self, snapshot: SearchSnapshot) -> Path:
        """
        스냅샷 저장

        Args:
            snapshot: 저장할 스냅샷

        Returns:
            저장한 파일 경로

        Raises:
            PersistenceException: 직렬화 또는 파일 쓰기 실패
        """
        try:
            data = snapshot.model_dump_json(indent=2, by_alias=True, exclude_none=True)
        except ValueError as e:
            raise PersistenceException(str(self.path), f"serialization failed: {e}") from e

        try:
            self.path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise PersistenceException(str(self.path), str(e)) from e

        logger.info(f"[Snapshot] Search results written to {self.path}")
        return self.path

    def save_quietly(self, snapshot: SearchSnapshot) -> bool:
        """save() 의 best-effort 버전 (백그라운드 작업용)

        Returns:
            성공 여부. 실패는 로그만 남깁니다.
        """
        try:
            self.save(snapshot)
            return True
        except PersistenceException as e:
            logger.error(f"[Snapshot] {e}")
            return False
