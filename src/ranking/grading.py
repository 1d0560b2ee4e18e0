"""Letter grade derivation from a numeric mark."""

from __future__ import annotations

from typing import Any

from config import settings

__all__ = ["calculate_grade"]


def calculate_grade(mark: Any) -> str:
    """Map a mark onto the school's letter grades.

    Absent or non-numeric marks are graded as 0.
    """
    try:
        value = float(mark) if mark is not None else 0.0
    except (TypeError, ValueError):
        value = 0.0
    for lower, grade in settings.GRADE_THRESHOLDS:
        if value >= lower:
            return grade
    return settings.FAIL_GRADE
