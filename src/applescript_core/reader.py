"""Reader layer: decodes ``osascript -ss`` output text into Values.

The format carries no type tags. Each value's type is inferred from the
characters at the cursor, and composite parsers re-enter
:func:`parse_value` for their children. There is no backtracking.
"""

from __future__ import annotations

import binascii
import json
import logging
import re

from dateutil import parser as dateparser

from .cursor import Cursor
from .errors import AppleScriptParseError, ErrorKind
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
)

LOG = logging.getLogger(__name__)

_DIGITS = "0123456789"
_END_OF_TOKEN_RE = re.compile(r"[,\n}]")
_RECORD_HEAD_RE = re.compile(r"[A-Za-z0-9]+:")
_KEY_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_ALIAS_PREFIX = "alias \""
_DATE_PREFIX = "date \""
_DATA_PREFIX = "«data"
_MISSING_VALUE = "missing value"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def read(text: str, *, strict: bool = False, missing_value: bool = True) -> Value:
    """Decode AppleScript output *text* into a Value.

    Newlines are folded into spaces and the text is trimmed before parsing;
    an empty result gives ``Empty``.

    - ``strict``: raise ``TRAILING_DATA`` if anything follows the first value.
    - ``missing_value``: read the ``missing value`` literal as ``Empty``
      instead of as text.
    """
    text = text.replace("\n", " ").strip()
    if not text:
        return Empty

    cur = Cursor(text)
    value = parse_value(cur, missing_value=missing_value)

    if strict and not cur.at_end():
        raise AppleScriptParseError(
            ErrorKind.TRAILING_DATA,
            cur.pos,
            f"Unexpected trailing data at position {cur.pos}: {cur.remaining()[:20]!r}",
        )
    return value


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

def parse_value(cur: Cursor, *, missing_value: bool = True) -> Value:
    """Parse the value starting at the cursor, choosing a parser by its first characters."""
    ch = cur.peek()

    if ch == "{":
        return parse_collection(cur, missing_value=missing_value)
    if ch == '"':
        return VText(parse_string(cur))
    if cur.startswith(_ALIAS_PREFIX):
        return parse_alias(cur)
    if cur.startswith(_DATE_PREFIX):
        return parse_date(cur)
    if cur.startswith(_DATA_PREFIX):
        return parse_data(cur)
    if ch and (ch == "-" or ch in _DIGITS):
        return parse_number(cur)
    return parse_unknown(cur, missing_value=missing_value)


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

def is_record_ahead(cur: Cursor) -> bool:
    """True if the ``{`` at the cursor opens a record rather than a list.

    Looks for ``key:`` right after the brace. The cursor is not moved.
    """
    return _RECORD_HEAD_RE.match(cur.text, cur.pos + 1) is not None


def parse_collection(cur: Cursor, *, missing_value: bool = True) -> VList | VRecord:
    if is_record_ahead(cur):
        LOG.debug("collection at %d read as record", cur.pos)
        return parse_record(cur, missing_value=missing_value)
    LOG.debug("collection at %d read as list", cur.pos)
    return parse_list(cur, missing_value=missing_value)


def parse_list(cur: Cursor, *, missing_value: bool = True) -> VList:
    start = cur.pos
    items: list[Value] = []
    cur.advance()  # {

    while cur.peek() != "}":
        if cur.at_end():
            raise _unterminated_collection(start)
        items.append(parse_value(cur, missing_value=missing_value))
        if cur.peek() == ",":
            cur.advance(2)  # ", "

    cur.advance()  # }
    return VList(items)


def parse_record(cur: Cursor, *, missing_value: bool = True) -> VRecord:
    start = cur.pos
    entries: dict[str, Value] = {}
    cur.advance()  # {

    while cur.peek() != "}":
        if cur.at_end():
            raise _unterminated_collection(start)
        key = parse_key(cur)
        cur.advance()  # :
        # Later duplicates overwrite earlier ones
        entries[key] = parse_value(cur, missing_value=missing_value)
        if cur.peek() == ",":
            cur.advance(2)  # ", "

    cur.advance()  # }
    return VRecord(entries)


def parse_key(cur: Cursor) -> str:
    """Read a bare record key; the cursor is left on the ``:`` after it."""
    m = _KEY_RE.match(cur.text, cur.pos)
    if m is None or cur.peek(m.end() - cur.pos) != ":":
        raise AppleScriptParseError(
            ErrorKind.INVALID_KEY,
            cur.pos,
            f"Expected a record key followed by `:` at position {cur.pos}.",
        )
    cur.pos = m.end()
    return m.group()


def _unterminated_collection(start: int) -> AppleScriptParseError:
    return AppleScriptParseError(
        ErrorKind.UNTERMINATED_COLLECTION,
        start,
        f"Ending `}}` character of list/record at position {start} was never found.",
    )


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def parse_string(cur: Cursor) -> str:
    """Parse a ``"``-delimited string and return it unescaped.

    A backslash protects the character after it, so ``\\"`` does not end
    the string. The escapes themselves are resolved afterwards by reading
    the body as a JSON string literal.
    """
    start = cur.pos
    text = cur.text
    i = start + 1

    while True:
        if i >= len(text):
            raise AppleScriptParseError(
                ErrorKind.UNTERMINATED_STRING,
                start,
                f'Ending character `"` of string at position {start} was never found.',
            )
        ch = text[i]
        if ch == '"':
            break
        i += 2 if ch == "\\" else 1

    body = text[start + 1:i]
    cur.pos = i + 1

    try:
        return json.loads(f'"{body}"', strict=False)
    except json.JSONDecodeError as exc:
        raise AppleScriptParseError(
            ErrorKind.INVALID_ESCAPE,
            start,
            f"Invalid escape sequence in string at position {start}: {exc.msg}",
        ) from exc


# ---------------------------------------------------------------------------
# Keyword-prefixed values
# ---------------------------------------------------------------------------

def parse_alias(cur: Cursor) -> VAlias:
    """``alias "Macintosh HD:Users:joe:"`` -> ``/Volumes/Macintosh HD/Users/joe/``"""
    cur.advance(len(_ALIAS_PREFIX) - 1)
    return VAlias("/Volumes/" + parse_string(cur).replace(":", "/"))


def parse_date(cur: Cursor) -> VDate:
    """``date "Monday, 1 January 2024 at 09:30:00"`` -> VDate.

    Text that dateutil cannot make sense of gives a VDate without a moment.
    """
    cur.advance(len(_DATE_PREFIX) - 1)
    text = parse_string(cur)
    try:
        moment = dateparser.parse(text.replace(" at", ",", 1))
    except (ValueError, OverflowError) as exc:
        LOG.debug("unparseable date %r: %s", text, exc)
        return VDate(text)
    return VDate(text, moment)


def parse_data(cur: Cursor) -> VData:
    """``«data PNGf89504E47»`` -> VData("PNGf", b"\\x89PNG")"""
    start = cur.pos
    body = read_token(cur)[len(_DATA_PREFIX) + 1:-1]
    type_tag, digits = body[:4], body[4:]

    if len(type_tag) < 4 or len(digits) % 2:
        raise _malformed_data(start, "truncated payload")
    try:
        data = binascii.unhexlify(digits)
    except binascii.Error as exc:
        raise _malformed_data(start, str(exc)) from exc
    return VData(type_tag, data)


def _malformed_data(start: int, detail: str) -> AppleScriptParseError:
    return AppleScriptParseError(
        ErrorKind.MALFORMED_DATA,
        start,
        f"Malformed «data» value at position {start}: {detail}.",
    )


# ---------------------------------------------------------------------------
# Numbers and raw tokens
# ---------------------------------------------------------------------------

def parse_number(cur: Cursor) -> VNumber:
    """Plain decimal numerals only; anything else (``1_000``, ``-inf``, ...) is NaN."""
    token = read_token(cur).strip()
    if not _NUMBER_RE.fullmatch(token):
        return VNumber(float("nan"))
    return VNumber(float(token))


def parse_unknown(
    cur: Cursor, *, boolean: bool = True, missing_value: bool = True
) -> Value:
    """Fallback for anything without a recognisable prefix.

    With ``boolean`` set, ``true``/``false`` become VBool and
    ``missing value`` becomes Empty (if ``missing_value``). Everything else
    (object specifiers, constants, ...) is kept as raw text.
    """
    token = read_token(cur)

    if boolean:
        if token == "true":
            return VBool(True)
        if token == "false":
            return VBool(False)
        if missing_value and token == _MISSING_VALUE:
            return Empty
    return VText(token)


def read_token(cur: Cursor) -> str:
    """Read everything up to the next ``,``, newline or ``}``.

    Quotes and braces inside the token are not tracked, so a literal comma
    ends the token early. End of input also ends a token, as long as at
    least one character was read. The cursor is left on the terminator.
    """
    start = cur.pos
    m = _END_OF_TOKEN_RE.search(cur.text, start)
    end = m.start() if m else len(cur.text)

    if m is None and end == start:
        raise AppleScriptParseError(
            ErrorKind.UNEXPECTED_END,
            start,
            "Expected more characters, but reached end of input when parsing "
            f"the input starting from position {start}.",
        )

    cur.pos = end
    return cur.text[start:end]
