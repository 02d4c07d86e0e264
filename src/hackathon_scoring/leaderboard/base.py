"""Read-only data contract the leaderboard engine needs from storage."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hackathon_scoring.models import Criterion, Evaluation, Judge, Participant


@runtime_checkable
class LeaderboardSource(Protocol):
    """Protocol for anything that can supply a leaderboard snapshot.

    Implementations return plain collections; the engine never writes back.
    """

    async def list_participants(self) -> Sequence[Participant]:
        """Get all participants."""
        ...

    async def list_evaluations(self) -> Sequence[Evaluation]:
        """Get every evaluation across all judges and participants."""
        ...

    async def list_criteria(self) -> Sequence[Criterion]:
        """Get criteria with their current weights."""
        ...

    async def list_judges(self) -> Sequence[Judge]:
        """Get judges, used only to attribute comments by name."""
        ...
