"""SnapshotService 단위 테스트."""

from __future__ import annotations

import json
import logging

import pytest

from search_scraper.core.exceptions import PersistenceException
from search_scraper.engine.store import ResultStore
from search_scraper.schemas.search_schema import ResultRecord
from search_scraper.services.impl.snapshot_service import SnapshotService


@pytest.fixture
def snapshot():
    store = ResultStore()
    store.append(ResultRecord.from_row("pubmed", {"title": "t"}, extra_fields=("authors", "journal")))
    return store.snapshot("statins", "pubmed")


def test_save_writes_pretty_json(snapshot_service, snapshot):
    path = snapshot_service.save(snapshot)

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)
    assert text.startswith("{\n  ")
    assert data["id"] == snapshot.id
    assert data["results"][0]["sourceType"] == "pubmed"
    assert data["results"][0]["authors"] == ""


def test_save_overwrites_previous_content(snapshot_service, snapshot):
    snapshot_service.path.write_text("x" * 10000, encoding="utf-8")

    snapshot_service.save(snapshot)

    assert json.loads(snapshot_service.path.read_text(encoding="utf-8"))["query"] == "statins"


def test_save_failure_raises_persistence_exception(tmp_path, snapshot):
    service = SnapshotService(tmp_path / "missing" / "dir" / "out.json")

    with pytest.raises(PersistenceException) as exc_info:
        service.save(snapshot)

    assert exc_info.value.error_code == "PERSISTENCE_ERROR"


def test_save_quietly_logs_instead_of_raising(tmp_path, snapshot, caplog):
    service = SnapshotService(tmp_path / "missing" / "out.json")

    with caplog.at_level(logging.ERROR, logger="search_scraper"):
        assert service.save_quietly(snapshot) is False

    assert any("[Snapshot]" in r.getMessage() for r in caplog.records)


def test_default_path_from_settings():
    assert SnapshotService().path.name == "search_results.json"
