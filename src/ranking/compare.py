"""Field lookup and the type-aware comparison used by the selection sort.

Absent values (``None``, missing keys/attributes, NaN) compare equal to each
other and greater than anything present. Numbers compare numerically, strings
compare naturally ("Test 2" < "Test 10") ignoring case and accents at the
primary level, with spaces and punctuation before digits and digits before
letters. Mixed types fall back to comparing their string forms.
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Mapping, Sequence
from typing import Any, Tuple

__all__ = ["get_value", "is_absent", "compare", "natural_key"]

_DIGITS = re.compile(r"(\d+)")


def get_value(obj: Any, path: str | None) -> Any:
    """Resolve a dotted ``path`` (e.g. ``student.mark``) inside ``obj``.

    Mappings are indexed by key, sequences by integer segment and anything
    else by attribute. A missing segment yields ``None``.
    """
    if obj is None or not path:
        return None
    value = obj
    for segment in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        elif isinstance(value, Sequence) and not isinstance(value, str):
            if not segment.isdigit() or int(segment) >= len(value):
                return None
            value = value[int(segment)]
        else:
            value = getattr(value, segment, None)
    return value


def is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _char_class(ch: str) -> int:
    # whitespace and punctuation (0) sort before digit runs (1), letters last (2)
    return 2 if ch.isalpha() else 0


def natural_key(text: str, *, fold: bool = True) -> Tuple[Tuple[int, int, str], ...]:
    """Collation key: one entry per character, one per digit run.

    Digit runs compare by numeric value, so "01" and "1" tie. With ``fold``
    the key ignores case and accents; without it, lower case sorts first.
    """
    parts = []
    for i, chunk in enumerate(_DIGITS.split(text)):
        if not chunk:
            continue
        if i % 2:
            parts.append((1, int(chunk), ""))
            continue
        for ch in _fold(chunk) if fold else chunk.swapcase():
            parts.append((_char_class(ch), 0, ch))
    return tuple(parts)


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_strings(a: str, b: str) -> int:
    primary = _sign(natural_key(a), natural_key(b))
    if primary:
        return primary
    # case and accents only break ties, like a collator's tertiary level
    return _sign(natural_key(a, fold=False), natural_key(b, fold=False))


def compare(a: Any, b: Any) -> int:
    """Return a negative, zero or positive int ordering ``a`` against ``b``."""
    if is_absent(a):
        return 0 if is_absent(b) else 1
    if is_absent(b):
        return -1
    if _is_number(a) and _is_number(b):
        return _sign(a, b)
    if isinstance(a, str) and isinstance(b, str):
        return _compare_strings(a, b)
    return _compare_strings(str(a), str(b))
