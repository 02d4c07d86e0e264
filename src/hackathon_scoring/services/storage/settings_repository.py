"""Database persistence for the single settings row."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlmodel import Session, select

from hackathon_scoring.models import AppSettings

from .repository import AsyncRepository

if TYPE_CHECKING:
    from sqlalchemy import Engine


class SettingsRepository(AsyncRepository):
    """Read and update application settings."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)

    async def ensure(self, defaults: AppSettings) -> AppSettings:
        """Insert the settings row if none exists yet."""

        def _ensure(session: Session) -> AppSettings:
            existing = session.exec(select(AppSettings)).first()
            if existing is not None:
                return existing
            session.add(defaults)
            session.commit()
            session.refresh(defaults)
            return defaults

        return await self._run_session(_ensure)

    async def get(self) -> AppSettings:
        def _get(session: Session) -> AppSettings:
            return session.exec(select(AppSettings)).first() or AppSettings()

        return await self._run_session(_get)

    async def update(self, changes: dict[str, Any]) -> AppSettings:
        def _update(session: Session) -> AppSettings:
            settings = session.exec(select(AppSettings)).first() or AppSettings()
            for key, value in changes.items():
                setattr(settings, key, value)
            session.add(settings)
            session.commit()
            session.refresh(settings)
            return settings

        return await self._run_session(_update)
