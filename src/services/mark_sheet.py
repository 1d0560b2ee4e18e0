"""Mark sheet for one test of one subject in one class.

Entries are accumulated in a ``LinkedList`` in the order they are recorded
and converted to plain rows for ranking and summaries.

Rules:
 - A mark must parse as a number in the inclusive range 0..100.
 - ``None`` records a student whose mark has not been entered yet.
 - Recording the same student index twice updates the existing entry.
 - Only marks greater than 0 count as entered in ``statistics``.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from config import settings
from domain.errors import InvalidMarkError
from domain.models import MarkStatistics, MarkValidation, StudentMark
from ranking import SortingStats, get_sorting_stats, sort_students_with_grades
from structures import LinkedList

__all__ = ["validate_mark", "MarkSheet"]

_log = logging.getLogger(__name__)


def validate_mark(value: Any) -> MarkValidation:
    try:
        mark = float(value)
    except (TypeError, ValueError):
        return MarkValidation(False, error="Mark must be a valid number")
    if math.isnan(mark):
        return MarkValidation(False, error="Mark must be a valid number")
    if mark < settings.MARK_MIN or mark > settings.MARK_MAX:
        return MarkValidation(
            False, error=f"Mark must be between {settings.MARK_MIN} and {settings.MARK_MAX}"
        )
    return MarkValidation(True, mark=mark)


class MarkSheet:
    def __init__(
        self,
        class_name: str,
        subject: str,
        test_number: int,
        student_count: Optional[int] = None,
    ) -> None:
        self.class_name = class_name
        self.subject = subject
        self.test_number = test_number
        self.student_count = student_count
        self._entries: LinkedList[StudentMark] = LinkedList()

    def __len__(self) -> int:
        return len(self._entries)

    def _find(self, index: int) -> Tuple[int, Optional[StudentMark]]:
        for position, entry in enumerate(self._entries):
            if entry.index == index:
                return position, entry
        return -1, None

    def record(self, index: int, mark: Any, name: Optional[str] = None) -> StudentMark:
        """Record (or update) the mark of student ``index``.

        Raises InvalidMarkError when ``mark`` is given but fails validation.
        """
        value: Optional[float] = None
        if mark is not None:
            result = validate_mark(mark)
            if not result.valid:
                _log.warning(
                    "rejected mark %r for student %s (%s, %s test %s): %s",
                    mark,
                    index,
                    self.class_name,
                    self.subject,
                    self.test_number,
                    result.error,
                )
                raise InvalidMarkError(
                    f"Student {index}: {result.error}",
                    index=index,
                    mark=mark,
                    context={
                        "class_name": self.class_name,
                        "subject": self.subject,
                        "test_number": self.test_number,
                    },
                )
            value = result.mark
        _, entry = self._find(index)
        if entry is not None:
            entry.mark = value
            if name is not None:
                entry.name = name
            return entry
        entry = StudentMark(index=index, mark=value, name=name)
        self._entries.add(entry)
        return entry

    def withdraw(self, index: int) -> bool:
        position, _ = self._find(index)
        return self._entries.remove_at(position)

    def rows(self) -> List[Dict[str, Any]]:
        return [entry.as_dict() for entry in self._entries.to_array()]

    def ranked(
        self, ascending: bool = False, with_stats: bool = False
    ) -> List[Dict[str, Any]] | Tuple[List[Dict[str, Any]], SortingStats]:
        """Graded rows ordered by mark (highest first by default).

        With ``with_stats`` a ``(rows, SortingStats)`` pair is returned; the
        statistics compare the entry-order rows against the ranked rows.
        """
        rows = self.rows()
        ranked = sort_students_with_grades(rows, ascending=ascending)
        if not with_stats:
            return ranked
        keys = [row["index"] for row in rows]
        ranked_keys = [row["index"] for row in ranked]
        return ranked, get_sorting_stats(keys, ranked_keys)

    def statistics(self) -> MarkStatistics:
        total = self.student_count if self.student_count is not None else len(self._entries)
        marks = [e.mark for e in self._entries if e.mark is not None and e.mark > 0]
        if not marks:
            return MarkStatistics.empty(total)
        average = sum(marks) / len(marks)
        completion = (len(marks) / total) * 100 if total else 0
        return MarkStatistics(
            total_students=total,
            entered_marks=len(marks),
            pending_marks=total - len(marks),
            average=round(average, 2),
            highest=max(marks),
            lowest=min(marks),
            completion_percentage=round(completion, 2),
        )
