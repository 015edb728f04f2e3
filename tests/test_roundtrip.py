"""Round trip: JSON-like values printed the way ``osascript -ss`` does, then decoded.

AppleScript cannot tell ``{}`` lists from ``{}`` records and has no null,
so those are left out of the generated values. Numbers are kept to 14
significant digits and ``-0.0`` is excluded for the same reason.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from applescript_core import parse_applescript


def encode(value) -> str:
    """Print *value* as ``osascript -ss`` would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    if isinstance(value, list):
        return "{" + ", ".join(encode(v) for v in value) + "}"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{k}:{encode(v)}" for k, v in value.items()) + "}"
    raise TypeError(value)


_numbers = st.one_of(
    st.integers(min_value=-(10**14) + 1, max_value=10**14 - 1),
    st.integers(min_value=-(10**11), max_value=10**11).map(lambda n: n / 1000),
    st.sampled_from([1e20, -2.5e-7, 1.5e300]),
)
_strings = st.text(st.characters(exclude_characters="\n"))
_keys = st.from_regex(r"[A-Za-z]+", fullmatch=True)

_json_values = st.recursive(
    st.booleans() | _numbers | _strings,
    lambda children: (
        st.lists(children, min_size=1, max_size=5)
        | st.dictionaries(_keys, children, min_size=1, max_size=5)
    ),
    max_leaves=20,
)


@given(_json_values)
def test_roundtrip(value):
    assert parse_applescript(encode(value)) == value


@given(st.lists(_strings, min_size=1))
def test_roundtrip_string_lists_keep_order(values):
    assert parse_applescript(encode(values)) == values


def test_encode_sample():
    assert encode({"A": [1, "x\"y"], "B": False}) == '{A:{1, "x\\"y"}, B:false}'
