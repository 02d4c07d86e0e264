"""Database persistence for judges."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlmodel import Session, col, select

from hackathon_scoring.models import Evaluation, Judge

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine


class JudgeRepository(AsyncRepository):
    """Persist and query judges."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def create(self, judge: Judge) -> Judge:
        def _create(session: Session) -> Judge:
            session.add(judge)
            session.commit()
            session.refresh(judge)
            return judge

        return await self._run_session(_create)

    async def get(self, judge_id: int) -> Judge | None:
        def _get(session: Session) -> Judge | None:
            return session.get(Judge, judge_id)

        return await self._run_session(_get)

    async def get_by_username(self, username: str) -> Judge | None:
        def _get(session: Session) -> Judge | None:
            return session.exec(select(Judge).where(Judge.username == username)).first()

        return await self._run_session(_get)

    async def list_all(self) -> list[Judge]:
        def _list(session: Session) -> list[Judge]:
            return list(session.exec(select(Judge).order_by(col(Judge.id))).all())

        return await self._run_session(_list)

    async def delete(self, judge_id: int) -> bool:
        """Delete a judge and every evaluation they submitted."""

        def _delete(session: Session) -> bool:
            judge = session.get(Judge, judge_id)
            if judge is None:
                return False
            statement = select(Evaluation).where(Evaluation.judge_id == judge_id)
            for evaluation in session.exec(statement).all():
                session.delete(evaluation)
            session.delete(judge)
            session.commit()
            return True

        return await self._run_session(_delete)
