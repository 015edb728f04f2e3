"""Human-readable rendering of decoded Values (logs, debugging, doctests)."""

from __future__ import annotations

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


def format_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, (VNumber, VBool)):
        return str(value)
    if isinstance(value, VDate):
        return f'date "{value}"' if value.valid else f'date "{value.text}" (invalid)'
    if isinstance(value, VAlias):
        return f'alias "{value.path}"'
    if isinstance(value, VData):
        return f"«data {value.type_tag} {len(value.data)} bytes»"
    if isinstance(value, VList):
        return "[" + ", ".join(format_inline(v) for v in value.items) + "]"
    if isinstance(value, VRecord):
        return "{" + ", ".join(
            f"{k}: {format_inline(v)}" for k, v in value.entries.items()
        ) + "}"
    if isinstance(value, _Empty):
        return "Empty"
    return repr(value)


def format_value(value: Value) -> str:
    """Pretty-print a value, one list item or record entry per line."""
    if isinstance(value, VRecord):
        if not value.entries:
            return "VRecord {}"
        width = max(len(k) for k in value.entries)
        lines = ["VRecord {"]
        for k, v in value.entries.items():
            lines.append(f"  {k:<{width}}: {format_inline(v)}")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, VList):
        lines = ["VList ["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"  {i}: {format_inline(v)}")
        lines.append("]")
        return "\n".join(lines)

    return format_inline(value)
