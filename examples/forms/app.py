"""Forms -- buffering helpers, builder proxies and a custom helper.

``form_for`` writes straight into the output buffer, so the router wraps it
in a capture scope. The builder handed to the block is proxied: every
``f.text_field(...)`` call lands in the form without ``<<``.

``badge`` is an application helper that also writes into the buffer, so it
is added to the template's classifier; without that its output would
appear twice.

Run:
    python app.py
"""

import logging

from minimal import DEFAULT_CLASSIFIER, Template, View


def badge(view, text):
    html = f'<span class="badge">{text}</span>'
    view.concat(html)
    return html


class SignupForm(Template):
    classifier = DEFAULT_CLASSIFIER.extend(names=["badge"])

    def content(self):
        self.badge("new")
        self.form_for("user", url="/signup", block=self.fields)

    def fields(self, f):
        self.div(block=lambda: f.text_field("email"))
        f.select("plan", [("Free", "free"), ("Pro", "pro")])


HELPERS = {"badge": badge}

view = View(helpers=HELPERS)

output = view.render(SignupForm)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    print(view.render(SignupForm))


if __name__ == "__main__":
    main()
