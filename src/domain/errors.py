"""Errors raised while building or reading class mark sheets."""

from __future__ import annotations
from typing import Any

_SHEET_KEYS = ("class_name", "subject", "test_number")


class ReportError(Exception):
    """Base class for report input issues.

    ``context`` names the mark sheet the problem belongs to (``class_name``,
    ``subject``, ``test_number``) plus any record level details.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    @property
    def sheet(self) -> str | None:
        """Human readable sheet label, e.g. ``Grade 10A / Mathematics / test 1``."""
        parts = [self.context.get(k) for k in _SHEET_KEYS]
        if all(p is None for p in parts):
            return None
        class_name, subject, test_number = parts
        label = " / ".join(str(p) for p in (class_name, subject) if p is not None)
        if test_number is not None:
            label = f"{label} / test {test_number}" if label else f"test {test_number}"
        return label


class InvalidMarkError(ReportError):
    """Raised when a mark is not a number or lies outside the allowed range."""

    def __init__(
        self, message: str, *, index: int, mark: Any, context: dict[str, Any] | None = None
    ):
        super().__init__(message, context={**(context or {}), "index": index, "mark": mark})
        self.index = index
        self.mark = mark
