"""Decimal rounding shared by averages and totals."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_score(value: float, places: int = 1) -> float:
    """Round half away from zero to a fixed number of decimal places.

    Goes through the shortest decimal repr of the float, so 0.25 rounds to 0.3
    rather than following binary artefacts of the float value.

    Args:
        value: Score to round.
        places: Decimal places to keep.

    Returns:
        Rounded score.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
