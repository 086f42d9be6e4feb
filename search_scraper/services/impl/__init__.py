"""Service implementations."""

from .search_service import SearchService
from .snapshot_service import SnapshotService

__all__ = ["SearchService", "SnapshotService"]
