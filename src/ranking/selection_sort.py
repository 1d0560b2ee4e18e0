"""Selection sort over numbers and records (student marks, table rows).

Every entry point copies its input and returns a new list; the input is never
mutated. One boundary pass per position picks the extreme (minimum for
ascending, maximum for descending) element of the unsorted suffix and swaps
it into place.

Absent field values are never treated as the extreme element while a present
value remains, so they collect at the end in both directions. Selection sort
is not stable; equal keys keep no guaranteed relative order.

API:
 - sort_numeric_array(values, ascending=True)
 - sort_table_data(rows, sort_by, ascending=True)
 - sort_students_by_marks(students, sort_by="mark", ascending=True)
 - sort_students_with_grades(students, ascending=True, score_field="mark")
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from config import settings

from .compare import compare, get_value, is_absent
from .grading import calculate_grade

__all__ = [
    "sort_numeric_array",
    "sort_table_data",
    "sort_students_by_marks",
    "sort_students_with_grades",
    "swap",
]

T = TypeVar("T")

_log = logging.getLogger(__name__)


def swap(items: List[Any], i: int, j: int) -> None:
    """Swap two positions in place; invalid or equal indices are ignored."""
    if i != j and 0 <= i < len(items) and 0 <= j < len(items):
        items[i], items[j] = items[j], items[i]


def _more_extreme(candidate: Any, best: Any, ascending: bool) -> bool:
    if is_absent(candidate):
        return False
    if is_absent(best):
        return True
    result = compare(candidate, best)
    return result < 0 if ascending else result > 0


def _selection_sort(
    items: Optional[Iterable[T]], key: Callable[[T], Any], ascending: bool
) -> List[T]:
    result = list(items) if items is not None else []
    n = len(result)
    if n <= 1:
        return result
    swaps = 0
    for i in range(n - 1):
        extreme = i
        extreme_value = key(result[i])
        for j in range(i + 1, n):
            value = key(result[j])
            if _more_extreme(value, extreme_value, ascending):
                extreme, extreme_value = j, value
        if extreme != i:
            swap(result, i, extreme)
            swaps += 1
    _log.debug("selection sort n=%d ascending=%s swaps=%d", n, ascending, swaps)
    return result


def sort_numeric_array(values: Optional[Iterable[float]], ascending: bool = True) -> List[float]:
    return _selection_sort(values, lambda v: v, ascending)


def sort_table_data(rows: Optional[Iterable[T]], sort_by: str, ascending: bool = True) -> List[T]:
    """Sort records by a (possibly dotted) field path."""
    return _selection_sort(rows, lambda row: get_value(row, sort_by), ascending)


def sort_students_by_marks(
    students: Optional[Iterable[T]],
    sort_by: str = settings.DEFAULT_SORT_FIELD,
    ascending: bool = True,
) -> List[T]:
    return sort_table_data(students, sort_by, ascending)


def _as_dict(record: Any) -> Dict[str, Any]:
    if isinstance(record, Mapping):
        return dict(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    # scalars and None carry no fields, like spreading a primitive
    return dict(vars(record)) if hasattr(record, "__dict__") else {}


def sort_students_with_grades(
    students: Optional[Iterable[Any]],
    ascending: bool = True,
    score_field: str = settings.DEFAULT_SORT_FIELD,
) -> List[Dict[str, Any]]:
    """Attach ``grade`` and ``originalIndex`` to copies of ``students`` and sort by score.

    The grade is derived from the score, with an absent score graded as 0.
    ``originalIndex`` is the record's ``index`` or, when that is falsy, any
    ``originalIndex`` it already carries. The sort itself uses the raw score,
    so records with no score still end up last.
    """
    graded: List[Dict[str, Any]] = []
    for student in students or []:
        row = _as_dict(student)
        row["grade"] = calculate_grade(get_value(row, score_field) or 0)
        row["originalIndex"] = row.get("index") or row.get("originalIndex")
        graded.append(row)
    return sort_table_data(graded, score_field, ascending)
