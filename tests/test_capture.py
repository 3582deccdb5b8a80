"""Tests for capture scopes.

Key behaviors:
1. Writes inside a scope are captured, the work's return value discarded
2. With no writes, the work's return value (as text) is the result
3. The replaced buffer is restored on success and on failure
4. Scopes nest LIFO
"""

from __future__ import annotations

import logging

import pytest

from minimal import CaptureScopeError, OutputBuffer, capture, capture_scope, to_text


class TestCapture:
    """capture(view, work) return rule."""

    def test_capturing_a_block(self, view):
        def work():
            view.concat("foo")
            view.concat("bar")
            return "baz"

        assert capture(view, work) == "foobar"

    def test_return_value_used_when_nothing_written(self, view):
        assert capture(view, lambda: "baz") == "baz"

    def test_return_value_coerced_to_text(self, view):
        assert capture(view, lambda: 42) == "42"
        assert capture(view, lambda: None) == ""

    def test_writes_do_not_leak_into_outer_buffer(self, view):
        view.output_buffer.append("before")
        capture(view, lambda: view.concat("inside"))
        assert view.output_buffer.getvalue() == "before"

    def test_original_buffer_object_restored(self, view):
        original = view.output_buffer
        capture(view, lambda: view.concat("x"))
        assert view.output_buffer is original

    def test_restores_buffer_on_error(self, view):
        original = view.output_buffer
        original.append("kept")

        def failing():
            view.concat("lost")
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            capture(view, failing)
        assert view.output_buffer is original
        assert original.getvalue() == "kept"

    def test_capturing_a_helper_with_a_block(self, view):
        def block():
            view.concat("foo")
            view.concat("bar")
            return "baz"

        result = view.content_tag("div", block=lambda: view.with_output_buffer(block))
        assert result == "<div>foobar</div>"


class TestNesting:
    """Scopes nest strictly, last opened first closed."""

    def test_lifo_restoration(self, view):
        inner_results: list[str] = []

        def outer():
            view.concat("x")
            inner_results.append(capture(view, lambda: view.concat("y")))
            view.concat("z")

        assert capture(view, outer) == "xz"
        assert inner_results == ["y"]
        assert view.output_buffer.getvalue() == ""

    def test_inner_failure_restores_outer_scope(self, view):
        def outer():
            view.concat("a")
            with pytest.raises(KeyError):
                capture(view, lambda: {}["missing"])
            view.concat("b")

        assert capture(view, outer) == "ab"

    def test_scope_records_both_buffers(self, view):
        original = view.output_buffer
        with capture_scope(view) as outer:
            assert outer.replaced is original
            assert view.output_buffer is outer.installed
            with capture_scope(view) as inner:
                assert inner.replaced is outer.installed
                view.concat("deep")
            assert view.output_buffer is outer.installed
            assert inner.captured == "deep"
        assert view.output_buffer is original


class TestScopeImbalance:
    def test_foreign_buffer_raises_on_normal_exit(self, view):
        original = view.output_buffer
        with pytest.raises(CaptureScopeError) as exc_info:
            with capture_scope(view):
                view.output_buffer = OutputBuffer()
        assert view.output_buffer is original
        assert exc_info.value.code.value == "M-CAP-001"

    def test_foreign_buffer_logged_when_unwinding(self, view, caplog):
        original = view.output_buffer
        with caplog.at_level(logging.WARNING, logger="minimal.capture"):
            with pytest.raises(RuntimeError):
                with capture_scope(view):
                    view.output_buffer = OutputBuffer()
                    raise RuntimeError("first")
        assert view.output_buffer is original
        assert "foreign buffer" in caplog.text


class TestToText:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, ""), ("s", "s"), (1, "1"), (1.5, "1.5"), (OutputBuffer("b"), "b")],
    )
    def test_coercion(self, value, expected):
        assert to_text(value) == expected
