"""Sorting statistics reported alongside a selection sort result.

The comparison count is exact: selection sort always performs n(n-1)/2
comparisons. The swap count is an approximation rebuilt after the fact by
replaying the original towards the sorted order (first mismatch, locate the
wanted element further ahead, swap, count once). It is not the number of
swaps the sort performed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from utils.equality import strict_equals

__all__ = ["SortingStats", "get_sorting_stats", "count_swaps"]

ALGORITHM = "Selection Sort"
SPACE_COMPLEXITY = "O(1)"

_MISSING = object()


@dataclass(frozen=True)
class SortingStats:
    array_size: int
    comparisons: int
    swaps: int
    time_complexity: str
    space_complexity: str = SPACE_COMPLEXITY
    algorithm: str = ALGORITHM

    def as_dict(self) -> Dict[str, Any]:
        return {
            "arraySize": self.array_size,
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "timeComplexity": self.time_complexity,
            "spaceComplexity": self.space_complexity,
            "algorithm": self.algorithm,
        }


def count_swaps(original: Sequence[Any], sorted_items: Sequence[Any]) -> int:
    swaps = 0
    temp = list(original)
    for i in range(len(temp) - 1):
        wanted = sorted_items[i] if i < len(sorted_items) else _MISSING
        if strict_equals(temp[i], wanted):
            continue
        for j in range(i + 1, len(temp)):
            if strict_equals(temp[j], wanted):
                temp[i], temp[j] = temp[j], temp[i]
                swaps += 1
                break
    return swaps


def get_sorting_stats(original: Sequence[Any], sorted_items: Sequence[Any]) -> SortingStats:
    n = len(original)
    return SortingStats(
        array_size=n,
        comparisons=n * (n - 1) // 2,
        swaps=count_swaps(original, sorted_items),
        time_complexity=f"O(n²) where n = {n}",
    )
