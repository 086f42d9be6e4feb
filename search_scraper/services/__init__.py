"""Services package - export only."""

from .impl import SearchService, SnapshotService

__all__ = ["SearchService", "SnapshotService"]
