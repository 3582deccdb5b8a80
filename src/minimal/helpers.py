"""Helper catalog shipped with the reference view.

A deliberately small set covering both call kinds:

- Buffering: ``concat``, ``wrap_tag``, ``form_tag``, ``form_for`` write their
  markup into the view's active buffer and return None.
- Returning: ``content_tag``, ``tag``, ``link_to``, ``text_field_tag``,
  ``number_with_precision``/``format_number``, ``with_output_buffer`` and
  ``render`` return text and leave the buffer alone.

Helpers that take a block receive it as the keyword-only ``block`` argument
and decide themselves when to run it, usually through `capture`, so whatever
the block writes lands in a scope the helper owns.

The classifier's default allow-list (minimal.classifier) is kept in step
with this module.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from html import escape
from typing import TYPE_CHECKING, Any

from minimal.capture import capture, to_text

if TYPE_CHECKING:
    from minimal.template import Template


def tag_attributes(attrs: dict[str, Any]) -> str:
    """Render keyword attributes as ` key="value"` pairs.

    Trailing underscores are dropped so Python keywords can be used
    (``class_`` → ``class``). None and False values are omitted; True
    renders as ``key="key"``.
    """
    parts: list[str] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        key = key.rstrip("_")
        if value is True:
            value = key
        parts.append(f' {key}="{escape(str(value), quote=True)}"')
    return "".join(parts)


class HelperMixin:
    """Helpers available on `minimal.view.View`.

    Requires the host to provide ``output_buffer``.
    """

    output_buffer: Any

    # -- buffer access ------------------------------------------------------

    def concat(self, text: Any) -> None:
        """Append text to the active buffer."""
        self.output_buffer.append(to_text(text))

    def capture(self, block: Callable[..., Any], *args: Any) -> str:
        """Run ``block(*args)`` in a capture scope and return its output."""
        return capture(self, lambda: block(*args))

    def with_output_buffer(self, block: Callable[[], Any]) -> str:
        return capture(self, block)

    # -- tags ---------------------------------------------------------------

    def tag(self, name: str, /, **attrs: Any) -> str:
        return f"<{name}{tag_attributes(attrs)} />"

    def content_tag(
        self,
        name: str,
        content: Any = None,
        /,
        *,
        block: Callable[[], Any] | None = None,
        **attrs: Any,
    ) -> str:
        """Return ``<name attrs>content</name>``.

        ``content`` is trusted markup and is inserted as-is, since nested
        tags, captured blocks and rendered partials all arrive through it.
        Escape untrusted text with ``html.escape`` first. Attribute values
        are always escaped. With a block, the block's captured output is
        the content.
        """
        if block is not None:
            content = self.capture(block)
        return f"<{name}{tag_attributes(attrs)}>{to_text(content)}</{name}>"

    def wrap_tag(
        self,
        name: str,
        /,
        *,
        block: Callable[[], Any] | None = None,
        **attrs: Any,
    ) -> None:
        """Write a ``content_tag`` straight into the active buffer."""
        self.concat(self.content_tag(name, block=block, **attrs))

    def link_to(self, text: Any, href: str, **attrs: Any) -> str:
        return self.content_tag("a", text, href=href, **attrs)

    def text_field_tag(self, name: str, value: Any = None, **attrs: Any) -> str:
        element_id = attrs.pop("id", name)
        return self.tag("input", id=element_id, name=name, type="text", value=value, **attrs)

    # -- numbers ------------------------------------------------------------

    def number_with_precision(self, number: Any, precision: int = 3) -> str:
        """Format a number with a fixed count of decimals: 1234 → '1234.000'."""
        return f"{float(number):.{precision}f}"

    def format_number(self, number: Any, precision: int = 3) -> str:
        return self.number_with_precision(number, precision=precision)

    # -- forms --------------------------------------------------------------

    def _form(self, url: str, method: str, content: str) -> str:
        attrs = tag_attributes({"accept-charset": "UTF-8", "action": url, "method": method})
        return f"<form{attrs}>{content}</form>"

    def form_tag(
        self,
        url: str,
        *,
        method: str = "post",
        block: Callable[[], Any] | None = None,
    ) -> None:
        content = self.capture(block) if block is not None else ""
        self.concat(self._form(url, method, content))

    def form_for(
        self,
        object_name: str,
        *,
        url: str,
        method: str = "post",
        block: Callable[[FormBuilder], Any] | None = None,
    ) -> None:
        """Write a form whose block receives a `FormBuilder` for ``object_name``."""
        builder = FormBuilder(self, object_name)
        content = self.capture(block, builder) if block is not None else ""
        self.concat(self._form(url, method, content))

    # -- partials -----------------------------------------------------------

    def render(
        self,
        template: type[Template],
        assigns: dict[str, Any] | None = None,
        **local_assigns: Any,
    ) -> str:
        """Render a template class against this view and return its text."""
        merged = dict(assigns or {})
        merged.update(local_assigns)
        return template(self, merged).to_html()


class FormBuilder:
    """Field helpers scoped to one object name (``user[email]`` style names)."""

    def __init__(self, view: HelperMixin, object_name: str):
        self.view = view
        self.object_name = object_name

    def __repr__(self) -> str:
        return f"FormBuilder({self.object_name!r})"

    def field_name(self, field: str) -> str:
        return f"{self.object_name}[{field}]"

    def field_id(self, field: str) -> str:
        prefix = self.object_name.replace("][", "_").replace("[", "_").replace("]", "")
        return f"{prefix}_{field}"

    def text_field(self, field: str, value: Any = None, **attrs: Any) -> str:
        return self.view.tag(
            "input",
            id=self.field_id(field),
            name=self.field_name(field),
            type="text",
            value=value,
            **attrs,
        )

    def select(self, field: str, choices: Iterable[Any], **attrs: Any) -> str:
        """Return a select box; choices are values or (label, value) pairs."""
        options = []
        for choice in choices:
            label, value = choice if isinstance(choice, tuple) else (choice, choice)
            options.append(self.view.content_tag("option", escape(str(label)), value=value))
        return self.view.content_tag(
            "select",
            "".join(options),
            id=self.field_id(field),
            name=self.field_name(field),
            **attrs,
        )

    def fields_for(self, name: str, *, block: Callable[[FormBuilder], Any]) -> str:
        """Capture ``block`` with a nested builder for ``object_name[name]``."""
        nested = FormBuilder(self.view, self.field_name(name))
        return self.view.capture(block, nested)
