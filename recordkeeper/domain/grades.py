"""Score-to-letter grade bands."""

from __future__ import annotations

from typing import Tuple

# Inclusive (low, high, letter) bands, checked in order.
GRADE_BANDS: Tuple[Tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    """Return the letter grade for `score`; anything outside every band is an F."""
    for low, high, letter in GRADE_BANDS:
        if low <= score <= high:
            return letter
    return FAILING_GRADE


__all__ = ["GRADE_BANDS", "FAILING_GRADE", "grade_for"]
