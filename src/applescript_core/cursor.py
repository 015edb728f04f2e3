"""Cursor: the text being decoded and the current offset into it."""

from __future__ import annotations


class Cursor:
    """Read position over one immutable input string.

    A cursor belongs to a single decode call and is advanced only by the
    parsing routines in :mod:`applescript_core.reader`.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, len={len(self.text)})"

    def peek(self, k: int = 0) -> str:
        """Character at ``pos + k``, or ``""`` past the end."""
        j = self.pos + k
        return self.text[j] if 0 <= j < len(self.text) else ""

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self, n: int = 1) -> None:
        self.pos += n

    def remaining(self) -> str:
        return self.text[self.pos:]
