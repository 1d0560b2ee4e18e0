"""Selection sort based ranking of student records.

Public API:
 - compare / get_value / is_absent: field lookup and ordering rule
 - sort_numeric_array, sort_table_data, sort_students_by_marks,
   sort_students_with_grades: selection sort entry points
 - calculate_grade: letter grade for a mark
 - get_sorting_stats / count_swaps: statistics reported with a sort
"""

from .compare import compare, get_value, is_absent  # noqa: F401
from .grading import calculate_grade  # noqa: F401
from .selection_sort import (  # noqa: F401
    sort_numeric_array,
    sort_students_by_marks,
    sort_students_with_grades,
    sort_table_data,
    swap,
)
from .stats import SortingStats, count_swaps, get_sorting_stats  # noqa: F401

__all__ = [
    "compare",
    "get_value",
    "is_absent",
    "calculate_grade",
    "sort_numeric_array",
    "sort_table_data",
    "sort_students_by_marks",
    "sort_students_with_grades",
    "swap",
    "SortingStats",
    "count_swaps",
    "get_sorting_stats",
]
