"""AppleScript Core — decoder for ``osascript -ss`` output."""

from .reader import read
from .native import TaggedBytes, parse_applescript, to_python
from .display import format_inline, format_value
from .values import (
    Empty,
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
from .errors import AppleScriptParseError, ErrorKind

__all__ = [
    "read",
    "parse_applescript",
    "to_python",
    "TaggedBytes",
    "format_inline",
    "format_value",
    "Empty",
    "Value",
    "VAlias",
    "VBool",
    "VData",
    "VDate",
    "VList",
    "VNumber",
    "VRecord",
    "VText",
    "AppleScriptParseError",
    "ErrorKind",
]
