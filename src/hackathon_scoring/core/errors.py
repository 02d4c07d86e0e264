"""Custom exceptions for configuration and scoring errors."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class SnapshotError(ConfigurationError):
    """Error when a data snapshot file cannot be used."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Invalid snapshot {path}: {reason}",
            "Check the participants/evaluations/criteria sections of the file.",
        )


class ScoringError(Exception):
    """Base exception for rejected write operations (evaluations, weights, settings)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ScoringError):
    """Error when a referenced record does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class DuplicateError(ScoringError):
    """Error when a unique identifier is already taken."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} already exists: {key}")


class WeightSumError(ScoringError):
    """Error when criteria weights do not add up to 100%."""

    def __init__(self, total: float) -> None:
        self.total = total
        super().__init__(f"Criteria weights must sum to 100% (got {total:g})")


class UnknownCriterionError(ScoringError):
    """Error when a weight update names a criterion that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown criterion: {name}")


class ScoreRangeError(ScoringError):
    """Error when a criterion score falls outside the allowed scale."""

    def __init__(self, field: str, value: float, low: float, high: float) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Score for '{field}' must be between {low:g} and {high:g} (got {value:g})"
        )


class EditNotAllowedError(ScoringError):
    """Error when a judge resubmits an evaluation while editing is disabled."""

    def __init__(self) -> None:
        super().__init__("Editing evaluations is not allowed")


class MissingCommentsError(ScoringError):
    """Error when comments are required but the evaluation has none."""

    def __init__(self) -> None:
        super().__init__("Comments are required for every evaluation")
