"""Cursor views over a stream or a string of characters."""

from __future__ import annotations

from .stream import Stream


class StreamCharSource:
    """A read-only cursor into the look-ahead of a stream."""

    def __init__(self, stream: Stream, offset=0):
        self.stream = stream
        self.offset = offset

    def __bool__(self):
        return self.stream.read_ahead_to(self.offset)

    def __getitem__(self, index):
        return self.stream.char_at(self.offset + index)

    def __add__(self, count):
        offset = self.offset + count
        return StreamCharSource(self.stream, offset if offset >= 0 else 0)


class StringCharSource:
    """A cursor into a string."""

    def __init__(self, text, offset=0):
        self.text = text
        self.offset = offset

    def __bool__(self):
        return self.offset < len(self.text)

    def __getitem__(self, index):
        position = self.offset + index
        if position < 0:
            raise IndexError("index before the start of the text")
        return self.text[position]

    def __add__(self, count):
        offset = self.offset + count
        return StringCharSource(self.text, offset if offset >= 0 else 0)

    def advance(self, count=1):
        """Move this cursor forward by ``count`` characters."""
        self.offset += count
        return self

    def __iadd__(self, count):
        return self.advance(count)