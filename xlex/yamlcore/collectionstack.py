"""A stack of the kinds of collection being read."""

from __future__ import annotations

from enum import Enum, auto


class CollectionType(Enum):
    """Kinds of collection a document can nest."""

    NO_COLLECTION = auto()
    BLOCK_MAP = auto()
    BLOCK_SEQ = auto()
    FLOW_MAP = auto()
    FLOW_SEQ = auto()
    COMPACT_MAP = auto()


class CollectionStack:
    """Tracks which collection is currently open."""

    def __init__(self):
        self._stack: list[CollectionType] = []

    def __len__(self):
        return len(self._stack)

    def current_type(self):
        """Return the innermost open collection, or NO_COLLECTION."""
        return self._stack[-1] if self._stack else CollectionType.NO_COLLECTION

    def push(self, kind):
        """Open a collection of the given kind."""
        self._stack.append(kind)

    def pop(self, kind):
        """Close the innermost collection, which must be of the given kind."""
        if not self._stack:
            raise IndexError("no collection is open")
        if kind != self.current_type():
            raise ValueError(
                f"closing {kind.name} but {self.current_type().name} is open"
            )
        self._stack.pop()