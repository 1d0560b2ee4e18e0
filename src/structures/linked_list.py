"""Singly linked list used to accumulate records one at a time.

Callers build up a class's student entries incrementally and convert the
list to a plain Python list (``to_array``) before sorting or display.

Notes:
 - Append walks from head; no tail pointer is kept.
 - Index based operations never raise. Out-of-range ``get`` returns the
   sentinel and out-of-range ``remove_at`` returns ``False``.
 - Payload matching uses strict equality: value equality for primitives,
   identity for everything else.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar

from utils.equality import strict_equals

__all__ = ["Node", "LinkedList"]

T = TypeVar("T")

_log = logging.getLogger(__name__)


class Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[Node[T]] = None

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Node({self.data!r})"


class LinkedList(Generic[T]):
    """Insertion ordered singly linked list with a maintained size."""

    def __init__(self) -> None:
        self.head: Optional[Node[T]] = None
        self.size = 0

    # Mutation ---------------------------------------------------------
    def add(self, data: T) -> bool:
        node = Node(data)
        if self.head is None:
            self.head = node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = node
        self.size += 1
        return True

    def remove(self, data: T) -> bool:
        """Remove the first node holding ``data``. Returns True on removal."""
        if self.head is None:
            return False
        if strict_equals(self.head.data, data):
            self.head = self.head.next
            self.size -= 1
            return True
        current = self.head
        while current.next is not None and not strict_equals(current.next.data, data):
            current = current.next
        if current.next is not None:
            current.next = current.next.next
            self.size -= 1
            return True
        return False

    def remove_at(self, index: int) -> bool:
        if index < 0 or index >= self.size:
            return False
        assert self.head is not None
        if index == 0:
            self.head = self.head.next
            self.size -= 1
            return True
        current = self.head
        for _ in range(index - 1):
            current = current.next  # type: ignore[assignment]
        current.next = current.next.next  # type: ignore[union-attr]
        self.size -= 1
        return True

    def clear(self) -> None:
        self.head = None
        self.size = 0

    # Query ------------------------------------------------------------
    def get(self, index: int, default: Any = None) -> Any:
        if index < 0 or index >= self.size:
            return default
        current = self.head
        for _ in range(index):
            current = current.next  # type: ignore[union-attr]
        return current.data  # type: ignore[union-attr]

    def contains(self, data: T) -> bool:
        return any(strict_equals(item, data) for item in self)

    def get_size(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self.size == 0

    def to_array(self) -> List[T]:
        return list(self)

    def display(self) -> str:
        if self.head is None:
            text = "List is empty"
        else:
            text = " -> ".join(str(item) for item in self)
        _log.debug("linked list: %s", text)
        return text

    # Protocols --------------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self.size

    def __contains__(self, data: object) -> bool:
        return self.contains(data)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.display()
