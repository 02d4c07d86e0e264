"""Async wrappers around sync SQLModel sessions."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

if TYPE_CHECKING:
    from sqlalchemy import Engine

T = TypeVar("T")


class AsyncRepository:
    """Base for repositories whose queries run on a worker thread."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    async def _run_session(self, fn: Callable[[Session], T]) -> T:
        """Run fn in its own Session off the event loop.

        fn is responsible for committing whatever it writes.
        """

        def _run() -> T:
            with Session(self._engine) as session:
                return fn(session)

        return await asyncio.to_thread(_run)

    async def _run_atomic(
        self,
        fn: Callable[[Session], T],
        on_conflict: Callable[[IntegrityError], Exception],
    ) -> T:
        """Run fn as one unit of work and commit once at the end.

        fn must not commit. Any failure rolls back every write fn made; a
        constraint violation is re-raised as on_conflict(error).
        """

        def _run() -> T:
            with Session(self._engine) as session:
                try:
                    result = fn(session)
                    session.commit()
                except IntegrityError as e:
                    session.rollback()
                    raise on_conflict(e) from e
                except Exception:
                    session.rollback()
                    raise
                return result

        return await asyncio.to_thread(_run)
