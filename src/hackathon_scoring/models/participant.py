from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class Participant(SQLModel, table=True):
    """A competing team or individual and the project they submitted."""

    id: int | None = Field(default=None, primary_key=True)
    participant_code: str = Field(index=True, unique=True)  # e.g. "ARDC-001"
    name: str
    project: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
