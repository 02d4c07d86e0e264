"""Shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from hackathon_scoring.core.config import DATABASE_ENV_VAR, ScoringConfig
from hackathon_scoring.services.storage import ScoringStore


@pytest.fixture
def config(monkeypatch):
    """Config pointing at a throwaway SQLite file."""
    monkeypatch.delenv(DATABASE_ENV_VAR, raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        yield ScoringConfig(
            database_path=str(Path(tmpdir) / "scoring.db"),
            output_dir=str(Path(tmpdir) / "reports"),
        )


@pytest.fixture
async def store(config):
    """Initialized store seeded with default criteria and settings."""
    scoring_store = ScoringStore(config)
    await scoring_store.init()
    yield scoring_store
    scoring_store.close_sync()
