"""Database persistence for criteria and their weights."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from sqlmodel import Session, col, select

from hackathon_scoring.models import Criterion

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine


class CriterionRepository(AsyncRepository):
    """Persist and query criteria. Criteria are reweighted, never deleted."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def list_all(self) -> list[Criterion]:
        def _list(session: Session) -> list[Criterion]:
            return list(session.exec(select(Criterion).order_by(col(Criterion.id))).all())

        return await self._run_session(_list)

    async def seed(self, criteria: Iterable[Criterion]) -> int:
        """Insert criteria whose names are not stored yet.

        Returns:
            Number of criteria inserted.
        """
        pending = list(criteria)

        def _seed(session: Session) -> int:
            existing = set(session.exec(select(Criterion.name)).all())
            added = 0
            for criterion in pending:
                if criterion.name in existing:
                    continue
                session.add(criterion)
                existing.add(criterion.name)
                added += 1
            session.commit()
            return added

        return await self._run_session(_seed)

    async def update_weights(self, weights: Mapping[int, float]) -> list[Criterion]:
        """Set weights by criterion id. Unknown ids are skipped.

        Returns:
            All criteria after the update.
        """

        def _update(session: Session) -> list[Criterion]:
            for criterion_id, weight in weights.items():
                criterion = session.get(Criterion, criterion_id)
                if criterion is None:
                    continue
                criterion.weight = weight
                session.add(criterion)
            session.commit()
            return list(session.exec(select(Criterion).order_by(col(Criterion.id))).all())

        return await self._run_session(_update)
