from sqlmodel import Field, SQLModel


class Criterion(SQLModel, table=True):
    """A named scoring dimension with a percentage weight."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    description: str = ""
    weight: float = 20.0
