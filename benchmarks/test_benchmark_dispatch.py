"""Dispatch and capture micro-benchmarks.

Measures the per-call cost of the delegation layer:
- "capture": an empty and a written capture scope
- "dispatch": a returning helper, a buffering helper, a variable lookup
- "render": a small table rendered through tag shortcuts

Run with: pytest benchmarks/test_benchmark_dispatch.py --benchmark-only
"""

from __future__ import annotations

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

from minimal import Template, View, capture, dispatch


class Rows(Template):
    def content(self) -> None:
        self.table(block=self.rows)

    def rows(self) -> None:
        for item in self.items:
            self.tr(block=lambda item=item: self.td(item))


@pytest.mark.benchmark(group="capture")
def test_capture_empty(benchmark: BenchmarkFixture, view: View) -> None:
    benchmark(capture, view, lambda: None)


@pytest.mark.benchmark(group="capture")
def test_capture_written(benchmark: BenchmarkFixture, view: View) -> None:
    benchmark(capture, view, lambda: view.concat("x"))


@pytest.mark.benchmark(group="dispatch")
def test_dispatch_returning(benchmark: BenchmarkFixture, template: Template) -> None:
    benchmark(dispatch, template, "format_number", (1234,))


@pytest.mark.benchmark(group="dispatch")
def test_dispatch_buffering(benchmark: BenchmarkFixture, template: Template) -> None:
    benchmark(dispatch, template, "wrap_tag", ("div",))


@pytest.mark.benchmark(group="dispatch")
def test_dispatch_variable(benchmark: BenchmarkFixture, template: Template) -> None:
    benchmark(dispatch, template, "title")


@pytest.mark.benchmark(group="render")
def test_render_table(benchmark: BenchmarkFixture, view: View) -> None:
    result = benchmark(view.render, Rows, items=list(range(20)))
    assert result.startswith("<table><tr><td>0</td></tr>")
