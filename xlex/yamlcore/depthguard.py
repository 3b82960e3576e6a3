"""Protection against runaway recursion while parsing."""

from __future__ import annotations

from contextlib import contextmanager


class DeepRecursion(Exception):
    """Raised when nesting reaches the allowed maximum depth."""

    def __init__(self, depth, mark, message):
        super().__init__(message)
        self.depth = depth
        self.mark = mark
        self.message = message


class DepthGuard:
    """A nesting counter that refuses to go past a maximum depth."""

    def __init__(self, max_depth=2000):
        self.max_depth = max_depth
        self._depth = 0

    def current_depth(self):
        """Return how deeply nested the guarded code currently is."""
        return self._depth

    @contextmanager
    def guard(self, mark=None, message=""):
        """Enter one level of nesting for the duration of the block."""
        self._depth += 1
        if self.max_depth <= self._depth:
            depth = self._depth
            self._depth -= 1
            raise DeepRecursion(depth, mark, message)
        try:
            yield self._depth
        finally:
            self._depth -= 1