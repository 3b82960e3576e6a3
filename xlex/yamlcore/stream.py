"""A character stream that detects its encoding and tracks its position."""

from __future__ import annotations

import dataclasses
import struct
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum, auto

EOF = "\x04"
REPLACEMENT_CHARACTER = "\ufffd"
_MAX_CODEPOINT = 0x10FFFF


@dataclass
class Mark:
    """A position in the input: character offset, line and column."""

    pos: int = 0
    line: int = 0
    column: int = 0


class CharacterSet(Enum):
    """Encodings the stream can read."""

    UTF8 = auto()
    UTF16LE = auto()
    UTF16BE = auto()
    UTF32LE = auto()
    UTF32BE = auto()


class _Intro(IntEnum):
    START = 0
    UTFBE_B1 = auto()
    UTF32BE_B2 = auto()
    UTF32BE_BOM3 = auto()
    UTF32BE = auto()
    UTF16BE = auto()
    UTF16BE_BOM1 = auto()
    UTFLE_BOM1 = auto()
    UTF16LE_BOM2 = auto()
    UTF32LE_BOM3 = auto()
    UTF16LE = auto()
    UTF32LE = auto()
    UTF8_IMP = auto()
    UTF16LE_IMP = auto()
    UTF32LE_IMP3 = auto()
    UTF8_BOM1 = auto()
    UTF8_BOM2 = auto()
    UTF8 = auto()
    ERROR = auto()


_FINAL = frozenset(
    {_Intro.UTF32BE, _Intro.UTF16BE, _Intro.UTF16LE, _Intro.UTF32LE, _Intro.UTF8, _Intro.ERROR}
)

_S = _Intro
# Columns: 0x00, 0xBB, 0xBF, 0xEF, 0xFE, 0xFF, other byte, end of input.
_TRANSITIONS = {
    _S.START: (_S.UTFBE_B1, _S.UTF8, _S.UTF8, _S.UTF8_BOM1, _S.UTF16BE_BOM1,
               _S.UTFLE_BOM1, _S.UTF8_IMP, _S.UTF8),
    _S.UTFBE_B1: (_S.UTF32BE_B2, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8,
                  _S.UTF16BE, _S.UTF8),
    _S.UTF32BE_B2: (_S.UTF32BE, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF32BE_BOM3, _S.UTF8,
                    _S.UTF8, _S.UTF8),
    _S.UTF32BE_BOM3: (_S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF32BE,
                      _S.UTF8, _S.UTF8),
    _S.UTF16BE_BOM1: (_S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF16BE,
                      _S.UTF8, _S.UTF8),
    _S.UTFLE_BOM1: (_S.UTF8, _S.UTF8, _S.UTF8, _S.UTF8, _S.UTF16LE_BOM2, _S.UTF8,
                    _S.UTF8, _S.UTF8),
    _S.UTF16LE_BOM2: (_S.UTF32LE_BOM3,) + (_S.UTF16LE,) * 7,
    _S.UTF32LE_BOM3: (_S.UTF32LE,) + (_S.UTF16LE,) * 7,
    _S.UTF8_IMP: (_S.UTF16LE_IMP,) + (_S.UTF8,) * 7,
    _S.UTF16LE_IMP: (_S.UTF32LE_IMP3,) + (_S.UTF16LE,) * 7,
    _S.UTF32LE_IMP3: (_S.UTF32LE,) + (_S.UTF16LE,) * 7,
    _S.UTF8_BOM1: (_S.UTF8, _S.UTF8_BOM2) + (_S.UTF8,) * 6,
    _S.UTF8_BOM2: (_S.UTF8,) * 8,
}

_UNGETS = {
    _S.START: (0, 1, 1, 0, 0, 0, 0, 1),
    _S.UTFBE_B1: (0, 2, 2, 2, 2, 2, 2, 2),
    _S.UTF32BE_B2: (3, 3, 3, 3, 0, 3, 3, 3),
    _S.UTF32BE_BOM3: (4, 4, 4, 4, 4, 0, 4, 4),
    _S.UTF16BE_BOM1: (2, 2, 2, 2, 2, 0, 2, 2),
    _S.UTFLE_BOM1: (2, 2, 2, 2, 0, 2, 2, 2),
    _S.UTF16LE_BOM2: (0, 1, 1, 1, 1, 1, 1, 1),
    _S.UTF32LE_BOM3: (0, 2, 2, 2, 2, 2, 2, 2),
    _S.UTF8_IMP: (0, 2, 2, 2, 2, 2, 2, 2),
    _S.UTF16LE_IMP: (0, 3, 3, 3, 3, 3, 3, 3),
    _S.UTF32LE_IMP3: (4, 4, 4, 4, 4, 4, 4, 4),
    _S.UTF8_BOM1: (2, 0, 2, 2, 2, 2, 2, 2),
    _S.UTF8_BOM2: (3, 3, 0, 3, 3, 3, 3, 3),
}

_SPECIAL_BYTES = {0x00: 0, 0xBB: 1, 0xBF: 2, 0xEF: 3, 0xFE: 4, 0xFF: 5}

_RESULT = {
    _S.UTF8: CharacterSet.UTF8,
    _S.UTF16LE: CharacterSet.UTF16LE,
    _S.UTF16BE: CharacterSet.UTF16BE,
    _S.UTF32LE: CharacterSet.UTF32LE,
    _S.UTF32BE: CharacterSet.UTF32BE,
}


def _char_type(byte):
    if byte is None:
        return 7
    if byte in _SPECIAL_BYTES:
        return _SPECIAL_BYTES[byte]
    return 6 if 0 < byte < 0xFF else 7


def detect_charset(data):
    """Guess the encoding of ``data`` from its first bytes.

    Returns the character set and the number of leading bytes (the byte
    order mark, if any) to skip.
    """
    data = bytes(data)
    pos = 0
    intro = []
    state = _Intro.START
    while state not in _FINAL:
        byte = data[pos] if pos < len(data) else None
        if byte is not None:
            pos += 1
        intro.append(byte)
        kind = _char_type(byte)
        ungets = _UNGETS[state][kind]
        state = _TRANSITIONS[state][kind]
        for _ in range(ungets):
            if intro.pop() is not None:
                pos -= 1
    return _RESULT.get(state, CharacterSet.UTF8), pos


def _char(codepoint):
    if codepoint == ord(EOF) or codepoint > _MAX_CODEPOINT:
        return REPLACEMENT_CHARACTER
    return chr(codepoint)


def _is_high(unit):
    return 0xD800 <= unit < 0xDC00


def _is_low(unit):
    return 0xDC00 <= unit < 0xE000


def _units(data, fmt):
    size = struct.calcsize(fmt)
    usable = len(data) - len(data) % size
    return (value for (value,) in struct.iter_unpack(fmt, data[:usable]))


def _decode_utf16(data, big_endian):
    units = _units(data, ">H" if big_endian else "<H")
    for unit in units:
        if _is_low(unit):
            yield REPLACEMENT_CHARACTER
            continue
        while _is_high(unit):
            low = next(units, None)
            if low is None:
                yield REPLACEMENT_CHARACTER
                return
            if _is_low(low):
                unit = 0x10000 + (((unit & 0x3FF) << 10) | (low & 0x3FF))
            else:
                yield REPLACEMENT_CHARACTER
                unit = low
        yield _char(unit)


def _decode_utf32(data, big_endian):
    for unit in _units(data, ">I" if big_endian else "<I"):
        yield _char(unit)


def _decode(data, charset):
    if charset is CharacterSet.UTF16LE:
        return _decode_utf16(data, big_endian=False)
    if charset is CharacterSet.UTF16BE:
        return _decode_utf16(data, big_endian=True)
    if charset is CharacterSet.UTF32LE:
        return _decode_utf32(data, big_endian=False)
    if charset is CharacterSet.UTF32BE:
        return _decode_utf32(data, big_endian=True)
    return iter(data.decode("utf-8", errors="replace"))


def _read_bytes(source):
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    content = source.read()
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


class Stream:
    """Characters read from bytes or a file, with a look-ahead queue."""

    EOF = EOF

    def __init__(self, source):
        data = _read_bytes(source)
        self.charset, skip = detect_charset(data)
        self._chars = _decode(data[skip:], self.charset)
        self._exhausted = False
        self._readahead: deque[str] = deque()
        self._mark = Mark()
        self.read_ahead_to(0)

    def __bool__(self):
        return not self._exhausted or (
            bool(self._readahead) and self._readahead[0] != EOF
        )

    @property
    def mark(self):
        """A copy of the current position."""
        return dataclasses.replace(self._mark)

    @property
    def pos(self):
        return self._mark.pos

    @property
    def line(self):
        return self._mark.line

    @property
    def column(self):
        return self._mark.column

    def reset_column(self):
        """Set the column back to zero."""
        self._mark.column = 0

    def peek(self):
        """Return the next character without consuming it, or EOF."""
        return self._readahead[0] if self._readahead else EOF

    def get(self, n=None):
        """Consume one character, or a string of ``n`` characters."""
        if n is not None:
            return "".join(self._get_one() for _ in range(max(n, 0)))
        return self._get_one()

    def eat(self, n=1):
        """Consume ``n`` characters."""
        for _ in range(n):
            self._get_one()

    def char_at(self, index):
        """Return an already read-ahead character."""
        if index < 0:
            raise IndexError("negative look-ahead index")
        return self._readahead[index]

    def read_ahead_to(self, index):
        """Make sure the character at ``index`` is queued; tell whether it is."""
        if len(self._readahead) > index:
            return True
        while not self._exhausted and len(self._readahead) <= index:
            try:
                self._readahead.append(next(self._chars))
            except StopIteration:
                self._exhausted = True
        if self._exhausted:
            self._readahead.append(EOF)
        return len(self._readahead) > index

    def _get_one(self):
        char = self.peek()
        self._advance()
        self._mark.column += 1
        if char == "\n":
            self._mark.column = 0
            self._mark.line += 1
        return char

    def _advance(self):
        if self._readahead:
            self._readahead.popleft()
            self._mark.pos += 1
        self.read_ahead_to(0)