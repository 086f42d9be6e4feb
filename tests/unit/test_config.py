"""Settings 검증 테스트."""

import pytest
from pydantic import ValidationError

from search_scraper.core.config import Settings


def test_defaults():
    s = Settings(_env_file=None)

    assert s.browser_headless is True
    assert s.retry_max_attempts == 3
    assert s.retry_delay_ms == 1000
    assert s.extraction_mode == "dom"
    assert s.api_port == 3000


def test_extraction_mode_normalized():
    assert Settings(_env_file=None, extraction_mode=" HTML ").extraction_mode == "html"


@pytest.mark.parametrize(
    "overrides",
    [
        {"extraction_mode": "xpath"},
        {"retry_max_attempts": 0},
        {"retry_delay_ms": -1},
        {"browser_timeout_ms": -5},
        {"snapshot_path": "  "},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_env_override(monkeypatch):
    monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "5")

    assert Settings(_env_file=None).retry_max_attempts == 5
