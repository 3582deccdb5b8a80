"""Dispatch router — resolve a name through three namespaces and invoke it.

Resolution order (first match wins):
1. **Local**: the template's local assigns. Value returned, no call made.
2. **Instance variable**: the view's instance-variable table.
3. **View**: a helper the view responds to. Buffering helpers run inside a
   capture scope; returning helpers are called directly with any block
   passed through untouched, so the helper chooses when (and under which
   buffer) the block runs.

Every helper invocation appends its result at the call site, through the
template's ``<<``, unless the call was made with ``BufferMode.RETURN``.

The capability probe (`responds_to`) walks exactly the same backends in
the same order, so ``responds_to(t, n)`` is True iff ``dispatch(t, n)``
does not raise CapabilityNotFoundError.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from minimal.capture import capture, to_text
from minimal.classifier import BufferMode, CallKind
from minimal.exceptions import CapabilityNotFoundError

if TYPE_CHECKING:
    from minimal.template import Template

logger = logging.getLogger(__name__)


class Namespace(Enum):
    """Where a name was resolved."""

    LOCAL = "local"
    INSTANCE_VARIABLE = "instance_variable"
    VIEW = "view"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a name.

    ``value`` holds the variable's value for LOCAL and INSTANCE_VARIABLE
    resolutions and is None for VIEW (nothing is called during resolution).
    """

    namespace: Namespace
    name: str
    value: Any = None


def _local_backend(template: Template, name: str) -> Resolution | None:
    assigns = template.local_assigns
    if name in assigns:
        return Resolution(Namespace.LOCAL, name, assigns[name])
    return None


def _instance_variable_backend(template: Template, name: str) -> Resolution | None:
    view = template.view
    if view.has_instance_variable(name):
        return Resolution(Namespace.INSTANCE_VARIABLE, name, view.instance_variable_get(name))
    return None


def _view_backend(template: Template, name: str) -> Resolution | None:
    if template.view.responds_to(name):
        return Resolution(Namespace.VIEW, name)
    return None


# Fixed precedence; responds_to and resolve both walk this tuple
BACKENDS: tuple[Callable[[Template, str], Resolution | None], ...] = (
    _local_backend,
    _instance_variable_backend,
    _view_backend,
)


def _available_names(template: Template) -> list[str]:
    view = template.view
    names = list(template.local_assigns)
    names.extend(getattr(view, "instance_variable_names", lambda: ())())
    names.extend(getattr(view, "helper_names", lambda: ())())
    return names


def resolve(template: Template, name: str) -> Resolution:
    """Resolve ``name`` without invoking anything.

    Raises:
        CapabilityNotFoundError: If no namespace knows the name.
    """
    for backend in BACKENDS:
        resolution = backend(template, name)
        if resolution is not None:
            return resolution
    raise CapabilityNotFoundError(name, _available_names(template))


def responds_to(template: Template, name: str) -> bool:
    """Capability probe: can ``name`` be resolved on ``template``?"""
    return any(backend(template, name) is not None for backend in BACKENDS)


def dispatch(
    template: Template,
    name: str,
    args: tuple[Any, ...] = (),
    kwargs: Mapping[str, Any] | None = None,
    block: Callable[..., Any] | None = None,
    mode: BufferMode = BufferMode.AUTO,
) -> str:
    """Resolve ``name`` and produce its text.

    Args:
        template: The template facade the call was made on
        name: Local, instance variable or helper name
        args: Positional arguments for a helper
        kwargs: Keyword arguments for a helper
        block: Optional block forwarded to the helper as ``block=``
        mode: Classifier override for helper calls

    Returns:
        The variable's value or the helper's result, as text.

    Raises:
        CapabilityNotFoundError: If ``name`` resolves nowhere.
    """
    resolution = resolve(template, name)
    if resolution.namespace is not Namespace.VIEW:
        logger.debug("dispatch %s -> %s", name, resolution.namespace.value)
        return to_text(resolution.value)

    view = template.view
    kwargs = dict(kwargs or {})
    if block is not None:
        kwargs["block"] = block

    def invoke() -> Any:
        return view.invoke(name, *args, **kwargs)

    kind = template.classifier.kind_for(name, mode)
    logger.debug("dispatch %s -> helper (%s, mode=%s)", name, kind.value, mode.value)
    if kind is CallKind.BUFFERING:
        result = capture(view, invoke)
    else:
        result = to_text(invoke())

    if mode is not BufferMode.RETURN:
        template << result
    return result
