"""Strict equality shared by the linked list and the swap counter."""

from __future__ import annotations

from typing import Any

_PRIMITIVES = (str, int, float, bytes)


def strict_equals(a: Any, b: Any) -> bool:
    """Value equality for primitives, identity for everything else.

    ``True`` never equals ``1`` and ``"1"`` never equals ``1``.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, _PRIMITIVES) and isinstance(b, _PRIMITIVES):
        if isinstance(a, (int, float)) and isinstance(b, (int, float)):
            return a == b
        return type(a) is type(b) and a == b
    return False


__all__ = ["strict_equals"]
