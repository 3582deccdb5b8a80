"""Template facade — the object template code talks to.

A Template is created once per render pass, bound to one view and one
table of local assigns. Template code writes output with ``<<`` and calls
view helpers as if they were its own methods:

    class Card(Template):
        def content(self):
            self.div(class_="card", block=self.card_body)

        def card_body(self):
            self.h2(self.heading)               # instance variable
            self.format_number(self.price)      # helper, appended here

Name lookup goes through the dispatch router (minimal.router): local
assigns first, then the view's instance variables, then view helpers.
Locals and instance variables read as plain attributes (raw values);
helpers come back as callables whose result is appended at the call site
and returned; builders those helpers pass to a block arrive wrapped in a
`BuilderProxy`. ``call(name, ...)`` dispatches by name and forwards the
block unchanged. To use a helper result as an argument without emitting it,
call with ``mode=BufferMode.RETURN``.

Reserved names (``view``, ``local_assigns``, ``classifier``, ``builder_types``,
``call``, ``responds_to``, ``content``, ``to_html``, ``tag_element`` and the tag
shortcuts in `TAG_NAMES`) are real attributes and shadow anything of the
same name in the three namespaces.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import partial
from types import MappingProxyType
from typing import Any, ClassVar

from minimal import router
from minimal.capture import capture, to_text
from minimal.classifier import DEFAULT_CLASSIFIER, BufferMode, Classifier
from minimal.helpers import FormBuilder
from minimal.view import ViewProtocol

TAG_NAMES: frozenset[str] = frozenset(
    {
        "a", "body", "div", "em", "fieldset", "h1", "h2", "h3", "h4", "head",
        "html", "img", "input", "label", "li", "ol", "option", "p", "pre",
        "script", "span", "strong", "table", "td", "th", "title", "tr", "ul",
    }
)


class BuilderProxy:
    """Wraps a builder so each call's result is appended to the template.

    Lets template code write ``f.text_field("email")`` instead of
    ``self << f.text_field("email")``. Blocks passed to builder methods
    (``fields_for``) get their builder arguments proxied as well.
    """

    __slots__ = ("_template", "_builder")

    def __init__(self, template: Template, builder: Any):
        self._template = template
        self._builder = builder

    def __getattr__(self, name: str) -> Any:
        target = getattr(self._builder, name)
        if not callable(target):
            return target

        def call(*args: Any, block: Callable[..., Any] | None = None, **kwargs: Any) -> str:
            if block is not None:
                kwargs["block"] = self._template._forward_block(block)
            result = to_text(target(*args, **kwargs))
            self._template << result
            return result

        return call

    def __repr__(self) -> str:
        return f"BuilderProxy({self._builder!r})"


class Template:
    """Facade binding template code to a view.

    Args:
        view: The view to render against
        local_assigns: Read-only local variables for this render pass
        classifier: Override of the class-level auto-buffer classifier

    Class Attributes:
        classifier: Auto-buffer classifier used for helper calls
        builder_types: Objects of these types reach blocks wrapped in a
            `BuilderProxy`
    """

    classifier: Classifier = DEFAULT_CLASSIFIER
    builder_types: ClassVar[tuple[type, ...]] = (FormBuilder,)

    def __init__(
        self,
        view: ViewProtocol,
        local_assigns: Mapping[str, Any] | None = None,
        classifier: Classifier | None = None,
    ):
        self.view = view
        self.local_assigns: Mapping[str, Any] = MappingProxyType(dict(local_assigns or {}))
        if classifier is not None:
            self.classifier = classifier

    def __repr__(self) -> str:
        return f"<{type(self).__name__} locals={sorted(self.local_assigns)}>"

    # -- rendering ----------------------------------------------------------

    def content(self) -> Any:
        """Write this template's output. Subclasses implement this."""
        raise NotImplementedError(f"{type(self).__name__} must implement content()")

    def to_html(self) -> str:
        """Run `content` in a capture scope and return the produced text."""
        return capture(self.view, self.content)

    # -- output -------------------------------------------------------------

    def __lshift__(self, text: Any) -> Template:
        self.view.output_buffer.append(to_text(text))
        return self

    # -- delegation ---------------------------------------------------------

    def responds_to(self, name: str) -> bool:
        """True if ``name`` is a local, an instance variable or a view helper."""
        return router.responds_to(self, name)

    def call(
        self,
        name: str,
        /,
        *args: Any,
        block: Callable[..., Any] | None = None,
        mode: BufferMode = BufferMode.AUTO,
        **kwargs: Any,
    ) -> str:
        """Dispatch ``name`` by name and return its text.

        Helper results are appended at the call site unless ``mode`` is
        `BufferMode.RETURN`. The block reaches the helper unchanged, so
        builders it receives are plain builders.
        """
        return router.dispatch(self, name, args, kwargs, block, mode)

    def _call_helper(
        self,
        name: str,
        /,
        *args: Any,
        block: Callable[..., Any] | None = None,
        mode: BufferMode = BufferMode.AUTO,
        **kwargs: Any,
    ) -> str:
        # Attribute-style helper calls hand builders to blocks as BuilderProxy
        if block is not None:
            block = self._forward_block(block)
        return router.dispatch(self, name, args, kwargs, block, mode)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("view", "local_assigns"):
            raise AttributeError(name)
        resolution = router.resolve(self, name)
        if resolution.namespace is router.Namespace.VIEW:
            return partial(self._call_helper, name)
        return resolution.value

    def _forward_block(self, block: Callable[..., Any]) -> Callable[..., Any]:
        builder_types = self.builder_types

        def forwarded(*args: Any) -> Any:
            wrapped = [BuilderProxy(self, a) if isinstance(a, builder_types) else a for a in args]
            return block(*wrapped)

        return forwarded

    # -- tag shortcuts ------------------------------------------------------

    def tag_element(
        self,
        name: str,
        content: Any = None,
        /,
        *,
        block: Callable[[], Any] | None = None,
        **attrs: Any,
    ) -> str:
        """Emit ``<name>`` through the view's ``content_tag`` helper."""
        return self.call("content_tag", name, content, block=block, **attrs)


def _make_tag_method(name: str) -> Callable[..., str]:
    def tag_method(
        self: Template,
        content: Any = None,
        /,
        *,
        block: Callable[[], Any] | None = None,
        **attrs: Any,
    ) -> str:
        return self.tag_element(name, content, block=block, **attrs)

    tag_method.__name__ = name
    tag_method.__qualname__ = f"Template.{name}"
    tag_method.__doc__ = f"Emit a <{name}> element."
    return tag_method


for _name in TAG_NAMES:
    setattr(Template, _name, _make_tag_method(_name))
del _name
