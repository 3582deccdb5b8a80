"""Pytest configuration and fixtures for minimal tests."""

import pytest

from minimal import Template, View


@pytest.fixture
def view():
    """A reference view with an empty active buffer."""
    return View()


@pytest.fixture
def template(view):
    """A template facade bound to ``view`` with no local assigns."""
    return Template(view)


def assert_html_equal(actual: str, expected: str) -> None:
    """Assert rendered markup equals expected, ignoring newlines.

    Args:
        actual: The rendered output.
        expected: The expected markup.
    """
    actual_normalized = actual.replace("\n", "")
    assert actual_normalized == expected, (
        f"Rendered output mismatch:\n"
        f"  Actual: {actual_normalized!r}\n"
        f"  Expected: {expected!r}"
    )
