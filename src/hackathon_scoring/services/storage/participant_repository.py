"""Database persistence for participants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlmodel import Session, col, select

from hackathon_scoring.models import Evaluation, Participant

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = structlog.get_logger()


class ParticipantRepository(AsyncRepository):
    """Persist and query participants."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def create(self, participant: Participant) -> Participant:
        def _create(session: Session) -> Participant:
            session.add(participant)
            session.commit()
            session.refresh(participant)
            return participant

        return await self._run_session(_create)

    async def get(self, participant_id: int) -> Participant | None:
        def _get(session: Session) -> Participant | None:
            return session.get(Participant, participant_id)

        return await self._run_session(_get)

    async def get_by_code(self, participant_code: str) -> Participant | None:
        def _get(session: Session) -> Participant | None:
            statement = select(Participant).where(Participant.participant_code == participant_code)
            return session.exec(statement).first()

        return await self._run_session(_get)

    async def list_all(self) -> list[Participant]:
        """Get all participants ordered by id."""

        def _list(session: Session) -> list[Participant]:
            statement = select(Participant).order_by(col(Participant.id))
            return list(session.exec(statement).all())

        return await self._run_session(_list)

    async def delete(self, participant_id: int) -> bool:
        """Delete a participant together with its evaluations.

        Returns:
            True if the participant existed.
        """

        def _delete(session: Session) -> bool:
            participant = session.get(Participant, participant_id)
            if participant is None:
                return False
            statement = select(Evaluation).where(Evaluation.participant_id == participant_id)
            for evaluation in session.exec(statement).all():
                session.delete(evaluation)
            session.delete(participant)
            session.commit()
            return True

        deleted = await self._run_session(_delete)
        if deleted:
            logger.info("participant_deleted", participant_id=participant_id)
        return deleted

    async def delete_all(self) -> int:
        def _delete_all(session: Session) -> int:
            participants = session.exec(select(Participant)).all()
            for participant in participants:
                session.delete(participant)
            session.commit()
            return len(participants)

        return await self._run_session(_delete_all)
