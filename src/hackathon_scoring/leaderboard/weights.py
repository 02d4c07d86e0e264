"""Criterion weight resolution with hardcoded fallbacks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hackathon_scoring.models import Criterion

# Evaluation field -> criterion display name, in scoring order.
CRITERION_NAMES: dict[str, str] = {
    "project_design": "Project Design",
    "functionality": "Functionality",
    "presentation": "Presentation",
    "web_design": "Web Design",
    "impact": "Impact",
}

CRITERION_FIELDS: tuple[str, ...] = tuple(CRITERION_NAMES)

DEFAULT_WEIGHTS: dict[str, float] = {
    "project_design": 25.0,
    "functionality": 30.0,
    "presentation": 15.0,
    "web_design": 15.0,
    "impact": 15.0,
}


def resolve_weights(criteria: Iterable[Criterion]) -> dict[str, float]:
    """Map each scoring field to its weight.

    Criteria are matched by name; the first criterion with a given name wins.
    A field whose criterion is absent uses its default weight. Weights are
    returned as-is and are not renormalized when they don't sum to 100.

    Args:
        criteria: Criteria with name and weight.

    Returns:
        Dict of field name -> percentage weight.
    """
    by_name: dict[str, float] = {}
    for criterion in criteria:
        by_name.setdefault(criterion.name, float(criterion.weight))

    return {
        field: by_name.get(name, DEFAULT_WEIGHTS[field])
        for field, name in CRITERION_NAMES.items()
    }
