"""Hello World -- the simplest minimal example.

A template class writes through tag shortcuts; the greeting comes from a
local assign and the heading from a view instance variable.

Run:
    python app.py
"""

from minimal import Template, View


class Hello(Template):
    def content(self):
        self.h1(self.heading)
        self.p(f"Hello, {self.name}!")


ASSIGNS = {"heading": "Greetings"}

view = View(ASSIGNS)

output = view.render(Hello, name="World")


def main() -> None:
    print(output)
    print()

    for name in ["Minimal", "Views", "Python"]:
        print(view.render(Hello, name=name))


if __name__ == "__main__":
    main()
