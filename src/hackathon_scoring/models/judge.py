from sqlmodel import Field, SQLModel


class Judge(SQLModel, table=True):
    """A judge who submits evaluations."""

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    name: str
