from __future__ import annotations

import pytest

from minimal import Template, View


@pytest.fixture
def view() -> View:
    return View({"title": "Benchmark"})


@pytest.fixture
def template(view: View) -> Template:
    return Template(view, {"items": list(range(50))})
