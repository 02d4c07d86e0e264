"""Unified scoring storage layer on SQLModel/SQLite."""

from __future__ import annotations

import gc
from typing import Any

import structlog
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from hackathon_scoring.core.config import ScoringConfig
from hackathon_scoring.leaderboard import compute_leaderboard
from hackathon_scoring.models import (
    AppSettings,
    Criterion,
    Evaluation,
    Judge,
    LeaderboardEntry,
    Participant,
)

from .criterion_repository import CriterionRepository
from .evaluation_repository import EvaluationRepository
from .import_repository import ImportRepository
from .judge_repository import JudgeRepository
from .participant_repository import ParticipantRepository
from .settings_repository import SettingsRepository
from .snapshot import DataSnapshot

logger = structlog.get_logger()


class ScoringStore:
    """Persistence layer for participants, judges, criteria, evaluations and settings.

    Also acts as a LeaderboardSource: every read returns a fresh snapshot of
    the current rows, and get_leaderboard() recomputes from those snapshots.
    """

    def __init__(self, config: ScoringConfig) -> None:
        """Initialize scoring store.

        Args:
            config: Scoring configuration (database path, seed criteria, settings).
        """
        self.config = config
        self._db_path = config.get_database_path()
        self._engine = None
        self._init_db()

        self.participants = ParticipantRepository(self._engine)
        self.judges = JudgeRepository(self._engine)
        self.criteria = CriterionRepository(self._engine)
        self.evaluations = EvaluationRepository(self._engine)
        self.settings = SettingsRepository(self._engine)
        self._importer = ImportRepository(self._engine)

    def _init_db(self) -> None:
        """Create the SQLite engine and tables."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._engine = create_engine(
            f"sqlite:///{self._db_path}",
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
        )
        SQLModel.metadata.create_all(self._engine)

    async def init(self) -> None:
        """Seed default criteria and settings into an empty database."""
        added = await self.criteria.seed(
            Criterion(name=c.name, description=c.description, weight=c.weight)
            for c in self.config.criteria
        )
        await self.settings.ensure(AppSettings(**self.config.settings.model_dump()))
        logger.info("store_init", path=str(self._db_path), criteria_added=added)

    # ==================== LeaderboardSource ====================

    async def list_participants(self) -> list[Participant]:
        return await self.participants.list_all()

    async def list_evaluations(self) -> list[Evaluation]:
        return await self.evaluations.list_all()

    async def list_criteria(self) -> list[Criterion]:
        return await self.criteria.list_all()

    async def list_judges(self) -> list[Judge]:
        return await self.judges.list_all()

    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        """Compute the leaderboard from the rows currently stored."""
        participants = await self.list_participants()
        evaluations = await self.list_evaluations()
        criteria = await self.list_criteria()
        judges = await self.list_judges()
        return compute_leaderboard(participants, evaluations, criteria, judges)

    # ==================== Backup & reset ====================

    async def export_all_data(self) -> dict[str, Any]:
        """Dump participants, evaluations, criteria and settings."""
        participants = await self.list_participants()
        evaluations = await self.list_evaluations()
        criteria = await self.list_criteria()
        judges = await self.list_judges()
        settings = await self.settings.get()
        return {
            "participants": [p.model_dump() for p in participants],
            "evaluations": [e.model_dump() for e in evaluations],
            "criteria": [c.model_dump() for c in criteria],
            "judges": [j.model_dump() for j in judges],
            "settings": settings.model_dump(),
        }

    async def reset_all_data(self) -> None:
        """Remove participants and evaluations. Judges, criteria and settings stay."""
        evaluations = await self.evaluations.delete_all()
        participants = await self.participants.delete_all()
        logger.warning("data_reset", participants=participants, evaluations=evaluations)

    async def load_snapshot(self, snapshot: DataSnapshot) -> None:
        """Import a snapshot in one transaction.

        Raises:
            SnapshotError: If the snapshot clashes with stored rows. Nothing is
                imported in that case.
        """
        await self._importer.load(snapshot)
        logger.info(
            "snapshot_loaded",
            participants=len(snapshot.participants),
            evaluations=len(snapshot.evaluations),
            judges=len(snapshot.judges),
        )

    # ==================== Lifecycle ====================

    async def close(self) -> None:
        """Dispose of the database engine."""
        if self._engine:
            self._engine.dispose()

    def close_sync(self) -> None:
        """Synchronously dispose of the database engine."""
        if self._engine:
            self._engine.dispose()
            self._engine = None

        gc.collect()
