"""Conversion of decoded Values into plain Python objects."""

from __future__ import annotations

from typing import Any

from .reader import read
from .values import (
    Value,
    VAlias,
    VBool,
    VData,
    VDate,
    VList,
    VNumber,
    VRecord,
    VText,
    _Empty,
)


class TaggedBytes(bytes):
    """``bytes`` from a ``«data»`` value, with its four-character type tag."""

    type_tag: str

    def __new__(cls, data: bytes, type_tag: str) -> "TaggedBytes":
        obj = super().__new__(cls, data)
        obj.type_tag = type_tag
        return obj

    def __repr__(self) -> str:
        return f"TaggedBytes({bytes(self)!r}, type_tag={self.type_tag!r})"


def to_python(value: Value) -> Any:
    """Convert a Value tree to lists, dicts and scalars.

    - VList → list, VRecord → dict (source order kept)
    - VText / VAlias → str
    - VNumber → float, VBool → bool
    - VDate → datetime, or None if the date text was not understood
    - VData → TaggedBytes
    - Empty → None
    """
    if isinstance(value, _Empty):
        return None
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VRecord):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, (VText, VNumber, VBool)):
        return value.value
    if isinstance(value, VAlias):
        return value.path
    if isinstance(value, VDate):
        return value.moment
    if isinstance(value, VData):
        return TaggedBytes(value.data, value.type_tag)
    raise TypeError(f"not a decoded value: {value!r}")


def parse_applescript(
    text: str, *, strict: bool = False, missing_value: bool = True
) -> Any:
    """Decode ``osascript -ss`` output straight to Python objects.

    Returns None for empty output. See :func:`applescript_core.reader.read`
    for the keyword arguments.
    """
    return to_python(read(text, strict=strict, missing_value=missing_value))
