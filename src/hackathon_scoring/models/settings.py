from sqlmodel import Field, SQLModel


class AppSettings(SQLModel, table=True):
    """Administrator-controlled switches for the judging workflow."""

    __tablename__ = "settings"

    id: int | None = Field(default=None, primary_key=True)
    allow_edit_evaluations: bool = True
    show_scores_to_participants: bool = False
    require_comments: bool = True
    auto_logout: bool = False
