"""Core configuration and errors for Hackathon Scoring."""

from hackathon_scoring.core.config import (
    DEFAULT_CRITERIA,
    CriterionConfig,
    ScoringConfig,
    SettingsConfig,
    load_config,
)
from hackathon_scoring.core.errors import (
    ConfigurationError,
    DuplicateError,
    EditNotAllowedError,
    MissingCommentsError,
    NotFoundError,
    ScoreRangeError,
    ScoringError,
    SnapshotError,
    UnknownCriterionError,
    WeightSumError,
)

__all__ = [
    "DEFAULT_CRITERIA",
    "CriterionConfig",
    "ScoringConfig",
    "SettingsConfig",
    "load_config",
    "ConfigurationError",
    "DuplicateError",
    "EditNotAllowedError",
    "MissingCommentsError",
    "NotFoundError",
    "ScoreRangeError",
    "ScoringError",
    "SnapshotError",
    "UnknownCriterionError",
    "WeightSumError",
]
