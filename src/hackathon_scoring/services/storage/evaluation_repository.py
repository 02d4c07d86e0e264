"""Database persistence for evaluations."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlmodel import Session, col, select

from hackathon_scoring.models import Evaluation

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine


class EvaluationRepository(AsyncRepository):
    """Persist and query evaluations. One row per (participant, judge) pair."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def get_for_pair(self, participant_id: int, judge_id: int) -> Evaluation | None:
        def _get(session: Session) -> Evaluation | None:
            statement = select(Evaluation).where(
                Evaluation.participant_id == participant_id,
                Evaluation.judge_id == judge_id,
            )
            return session.exec(statement).first()

        return await self._run_session(_get)

    async def create(self, evaluation: Evaluation) -> Evaluation:
        def _create(session: Session) -> Evaluation:
            session.add(evaluation)
            session.commit()
            session.refresh(evaluation)
            return evaluation

        return await self._run_session(_create)

    async def update(self, evaluation_id: int, changes: dict[str, Any]) -> Evaluation | None:
        """Apply field changes in place and bump updated_at.

        Returns:
            The updated evaluation, or None if it doesn't exist.
        """

        def _update(session: Session) -> Evaluation | None:
            existing = session.get(Evaluation, evaluation_id)
            if existing is None:
                return None
            for key, value in changes.items():
                setattr(existing, key, value)
            existing.updated_at = datetime.now(UTC)
            session.add(existing)
            session.commit()
            session.refresh(existing)
            return existing

        return await self._run_session(_update)

    async def list_by_participant(self, participant_id: int) -> list[Evaluation]:
        def _list(session: Session) -> list[Evaluation]:
            statement = (
                select(Evaluation)
                .where(Evaluation.participant_id == participant_id)
                .order_by(col(Evaluation.id))
            )
            return list(session.exec(statement).all())

        return await self._run_session(_list)

    async def list_by_judge(self, judge_id: int) -> list[Evaluation]:
        def _list(session: Session) -> list[Evaluation]:
            statement = (
                select(Evaluation)
                .where(Evaluation.judge_id == judge_id)
                .order_by(col(Evaluation.id))
            )
            return list(session.exec(statement).all())

        return await self._run_session(_list)

    async def list_all(self) -> list[Evaluation]:
        def _list(session: Session) -> list[Evaluation]:
            return list(session.exec(select(Evaluation).order_by(col(Evaluation.id))).all())

        return await self._run_session(_list)

    async def delete_all(self) -> int:
        def _delete_all(session: Session) -> int:
            evaluations = session.exec(select(Evaluation)).all()
            for evaluation in evaluations:
                session.delete(evaluation)
            session.commit()
            return len(evaluations)

        return await self._run_session(_delete_all)
