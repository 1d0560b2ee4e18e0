"""In-memory containers used to accumulate report records."""

from .linked_list import LinkedList, Node  # noqa: F401

__all__ = ["LinkedList", "Node"]
