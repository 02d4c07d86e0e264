"""All-or-nothing import of data snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from hackathon_scoring.core.errors import SnapshotError
from hackathon_scoring.models import Criterion, Evaluation, Judge, Participant

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine

    from .snapshot import DataSnapshot


class ImportRepository(AsyncRepository):
    """Write a whole snapshot in a single transaction."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def load(self, snapshot: DataSnapshot) -> None:
        """Insert judges, participants and evaluations and upsert criteria by name.

        Judge and participant ids are kept; evaluations get fresh ids. Nothing
        is written unless every record goes in.

        Raises:
            SnapshotError: If a record clashes with stored data (an id or code
                already taken, or a second evaluation for the same pair).
        """

        def _load(session: Session) -> None:
            for judge in snapshot.judges:
                session.add(Judge.model_validate(judge.model_dump()))
            for participant in snapshot.participants:
                session.add(Participant.model_validate(participant.model_dump()))
            session.flush()

            for criterion in snapshot.criteria:
                stored = session.exec(
                    select(Criterion).where(Criterion.name == criterion.name)
                ).first()
                if stored is None:
                    stored = Criterion(name=criterion.name, description=criterion.description)
                elif criterion.description:
                    stored.description = criterion.description
                stored.weight = criterion.weight
                session.add(stored)

            for evaluation in snapshot.evaluations:
                session.add(Evaluation.model_validate(evaluation.model_dump(exclude={"id"})))
            session.flush()

        def _conflict(error: IntegrityError) -> SnapshotError:
            return SnapshotError(snapshot.source, f"conflicts with stored data ({error.orig})")

        await self._run_atomic(_load, _conflict)
