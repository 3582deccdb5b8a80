"""Tests for the hello example."""


class TestHelloApp:
    """Verify the hello example renders correctly."""

    def test_output(self, example_app) -> None:
        assert example_app.output == "<h1>Greetings</h1><p>Hello, World!</p>"

    def test_renders_again_on_a_fresh_view(self, example_app, example_view) -> None:
        html = example_view.render(example_app.Hello, name="Views")
        assert html == "<h1>Greetings</h1><p>Hello, Views!</p>"
        assert example_view.output_buffer.getvalue() == ""
