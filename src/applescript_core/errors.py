"""Decode errors."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    UNTERMINATED_COLLECTION = auto()
    UNTERMINATED_STRING = auto()
    UNEXPECTED_END = auto()
    MALFORMED_DATA = auto()
    INVALID_KEY = auto()
    INVALID_ESCAPE = auto()
    TRAILING_DATA = auto()


class AppleScriptParseError(ValueError):
    """Raised when AppleScript output cannot be decoded.

    ``position`` is the offset (in the normalised input) at which the
    enclosing construct began.
    """

    def __init__(self, kind: ErrorKind, position: int, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.position = position

    def __repr__(self) -> str:
        return f"AppleScriptParseError({self.kind.name}, {self.position}, {str(self)!r})"
