"""Domain models for class mark sheets."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(slots=True)
class StudentMark:
    index: int
    mark: Optional[float] = None  # None until the mark is entered
    name: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MarkValidation:
    valid: bool
    mark: Optional[float] = None
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class MarkStatistics:
    total_students: int
    entered_marks: int
    pending_marks: int
    average: float
    highest: float
    lowest: float
    completion_percentage: float

    @classmethod
    def empty(cls, total_students: int) -> "MarkStatistics":
        return cls(
            total_students=total_students,
            entered_marks=0,
            pending_marks=total_students,
            average=0,
            highest=0,
            lowest=0,
            completion_percentage=0,
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
