"""Configuration schemas and loading for Hackathon Scoring."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

DATABASE_ENV_VAR = "HACKATHON_SCORING_DB"


class CriterionConfig(BaseModel):
    """A scoring dimension and its percentage weight."""

    name: str
    description: str = ""
    weight: float = Field(default=20.0, ge=0.0, le=100.0)

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Criterion name cannot be empty")
        return v.strip()


DEFAULT_CRITERIA: tuple[CriterionConfig, ...] = (
    CriterionConfig(
        name="Project Design",
        description="Evaluate the overall design quality, aesthetics, and structure of the project",
        weight=25.0,
    ),
    CriterionConfig(
        name="Functionality",
        description="Rate how well the project works and fulfills its intended purpose",
        weight=30.0,
    ),
    CriterionConfig(
        name="Presentation",
        description="Evaluate the quality of the project presentation and documentation",
        weight=15.0,
    ),
    CriterionConfig(
        name="Web Design",
        description="Rate the quality of any web interfaces or web components of the project",
        weight=15.0,
    ),
    CriterionConfig(
        name="Impact",
        description=(
            "Evaluate the potential social, environmental, or economic impact of the project"
        ),
        weight=15.0,
    ),
)


class SettingsConfig(BaseModel):
    """Initial application settings, editable later by an administrator."""

    allow_edit_evaluations: bool = True
    show_scores_to_participants: bool = False
    require_comments: bool = True
    auto_logout: bool = False


class ScoringConfig(BaseModel):
    """Complete scoring configuration.

    Attributes:
        event_name: Display name of the competition.
        database_path: SQLite file backing the store.
        output_dir: Directory for leaderboard reports and exports.
        criteria: Criteria seeded into an empty database.
        settings: Settings seeded into an empty database.
        weight_tolerance: Allowed drift from 100 when weights are updated.
        min_score: Lowest accepted criterion score.
        max_score: Highest accepted criterion score.
        leaderboard_refresh_seconds: Polling interval for the live leaderboard.
    """

    event_name: str = "Hackathon"
    database_path: str = "./scoring.db"
    output_dir: str = "./reports"
    criteria: list[CriterionConfig] = Field(
        default_factory=lambda: [c.model_copy() for c in DEFAULT_CRITERIA], min_length=1
    )
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    weight_tolerance: float = Field(default=0.01, ge=0.0)
    min_score: float = 1.0
    max_score: float = 100.0
    leaderboard_refresh_seconds: float = Field(default=5.0, gt=0.0)

    @field_validator("criteria")
    @classmethod
    def validate_unique_names(cls, v: list[CriterionConfig]) -> list[CriterionConfig]:
        """Ensure criterion names are unique."""
        seen: set[str] = set()
        for criterion in v:
            if criterion.name in seen:
                msg = f"Duplicate criterion name: {criterion.name}"
                raise ValueError(msg)
            seen.add(criterion.name)
        return v

    @model_validator(mode="after")
    def validate_score_range(self) -> ScoringConfig:
        if self.min_score >= self.max_score:
            msg = "min_score must be lower than max_score"
            raise ValueError(msg)
        return self

    @property
    def total_weight(self) -> float:
        return sum(c.weight for c in self.criteria)

    def get_database_path(self) -> Path:
        """Get database file path from environment or config."""
        return Path(os.environ.get(DATABASE_ENV_VAR) or self.database_path)

    def get_database_url(self) -> str:
        return f"sqlite:///{self.get_database_path()}"


def load_config(path: str | Path) -> ScoringConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated ScoringConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f) or {}

    return ScoringConfig.model_validate(data)
