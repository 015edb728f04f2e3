"""Tests for applescript_core.cursor."""

from applescript_core.cursor import Cursor


class TestCursor:
    def test_peek(self):
        cur = Cursor("abc")
        assert cur.peek() == "a"
        assert cur.peek(2) == "c"

    def test_peek_past_end(self):
        cur = Cursor("abc", pos=3)
        assert cur.peek() == ""
        assert cur.at_end()

    def test_startswith_at_position(self):
        cur = Cursor("{alias", pos=1)
        assert cur.startswith("alias")
        assert not cur.startswith("{")

    def test_advance_and_remaining(self):
        cur = Cursor("1, 2")
        cur.advance()
        assert cur.peek() == ","
        cur.advance(2)
        assert cur.remaining() == "2"
        assert not cur.at_end()

    def test_repr(self):
        assert repr(Cursor("abc", pos=1)) == "Cursor(pos=1, len=3)"
