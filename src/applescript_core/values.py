"""Value types for decoded AppleScript output."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if v != v or v in (float("inf"), float("-inf")):
            return str(v)
        if v == int(v):
            return str(int(v))
        return str(v)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VDate:
    text: str  # date text as printed by AppleScript
    moment: datetime | None = None  # None when the text could not be parsed

    @property
    def valid(self) -> bool:
        return self.moment is not None

    def __str__(self) -> str:
        if self.moment is None:
            return self.text
        return self.moment.isoformat()


@dataclass
class VAlias:
    path: str  # POSIX-like, rooted at /Volumes/

    def __str__(self) -> str:
        return self.path


@dataclass
class VData:
    type_tag: str
    data: bytes

    def __str__(self) -> str:
        return f"«data {self.type_tag}{self.data.hex().upper()}»"


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VRecord:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


class _Empty:
    """Singleton for no value: empty output, or ``missing value`` when read as absent."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Empty"


Empty = _Empty()

Value = Union[VText, VNumber, VBool, VDate, VAlias, VData, VList, VRecord, _Empty]
