"""Shared pytest configuration for minimal examples.

Each example directory holds an ``app.py`` that defines template classes
and renders them once at import time into ``output``.

Fixtures:
    example_app: the sibling ``app.py`` executed in a fresh namespace
    example_view: a new `View` carrying the example's ``HELPERS`` and
        ``ASSIGNS``, for rendering the example's templates again in
        isolation from the module-level view
"""

from __future__ import annotations

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest

from minimal import View


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the app.py next to the requesting test and expose its globals."""
    app_path = Path(request.path).parent / "app.py"
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")
    return SimpleNamespace(**namespace)


@pytest.fixture
def example_view(example_app: SimpleNamespace) -> View:
    """A fresh view configured the way the example configures its own."""
    return View(
        getattr(example_app, "ASSIGNS", None),
        helpers=getattr(example_app, "HELPERS", None),
    )
