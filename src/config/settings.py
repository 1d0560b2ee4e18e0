"""Global configuration and constants for report ranking and marking."""

from __future__ import annotations

import os
from typing import Final

# (lower bound inclusive, grade) ordered from highest to lowest
GRADE_THRESHOLDS: Final = (
    (90, "A+"),
    (85, "A"),
    (80, "A-"),
    (75, "B+"),
    (70, "B"),
    (65, "B-"),
    (60, "C+"),
    (55, "C"),
    (50, "C-"),
)
FAIL_GRADE: Final = "F"

DEFAULT_SORT_FIELD: Final = "mark"
MARK_MIN: Final = 0
MARK_MAX: Final = 100

LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_env_level = os.environ.get("REPORT_CORE_LOG_LEVEL", "WARNING").upper()
LOG_LEVEL: Final = _env_level if _env_level in LOG_LEVELS else "WARNING"
