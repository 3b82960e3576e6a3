"""Binary data that either borrows an outside buffer or owns its bytes."""

from __future__ import annotations


class Binary:
    """Bytes held by reference until they are swapped into owned storage."""

    __hash__ = None

    def __init__(self, data=None):
        self._owned = bytearray()
        self._borrowed = None if data is None else memoryview(data)

    def owned(self):
        """Tell whether the bytes belong to this object."""
        return self._borrowed is None

    def __len__(self):
        return len(self._owned) if self.owned() else len(self._borrowed)

    def data(self):
        """Return a copy of the current bytes."""
        return bytes(self._owned) if self.owned() else self._borrowed.tobytes()

    def swap(self, other):
        """Exchange contents with a bytearray, which then gets a copy of ours."""
        incoming = bytes(other)
        other[:] = self.data()
        self._owned = bytearray(incoming)
        self._borrowed = None

    def __eq__(self, other):
        if not isinstance(other, Binary):
            return NotImplemented
        return self.data() == other.data()

    def __repr__(self):
        return f"Binary({self.data()!r})"