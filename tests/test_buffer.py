"""Tests for OutputBuffer."""

from minimal import OutputBuffer


class TestOutputBuffer:
    def test_starts_empty(self):
        buf = OutputBuffer()
        assert buf.getvalue() == ""
        assert not buf
        assert len(buf) == 0

    def test_initial_content(self):
        assert OutputBuffer("seed").getvalue() == "seed"

    def test_append_preserves_order(self):
        buf = OutputBuffer()
        buf.append("foo").append("bar").append("baz")
        assert buf.getvalue() == "foobarbaz"
        assert len(buf) == 9

    def test_append_empty_is_noop(self):
        buf = OutputBuffer()
        buf.append("")
        assert not buf

    def test_replace_clears(self):
        buf = OutputBuffer("old")
        buf.replace()
        assert buf.getvalue() == ""
        assert not buf

    def test_replace_with_text(self):
        buf = OutputBuffer("old")
        buf.replace("new")
        assert str(buf) == "new"

    def test_read_is_repeatable(self):
        buf = OutputBuffer()
        buf.append("a").append("b")
        assert buf.getvalue() == "ab"
        buf.append("c")
        assert buf.getvalue() == "abc"
        assert buf.getvalue() == "abc"

    def test_repr(self):
        assert repr(OutputBuffer("x")) == "OutputBuffer('x')"
