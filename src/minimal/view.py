"""The view boundary: what the delegation layer needs from a host view.

`ViewProtocol` is the whole contract. Any rendering engine can plug in by
providing an active output buffer, an instance-variable table, a way to call
named helpers and a way to tell which helpers exist.

`View` is the reference implementation used by the test suite and the
examples: an in-memory instance-variable table plus the helper catalog from
`minimal.helpers`. It resolves no template files and compiles nothing.

Example:
    >>> view = View()
    >>> view.assign(title="Hello")
    >>> view.render(Page)
    '<h1>Hello</h1>'

"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from minimal.buffer import OutputBuffer
from minimal.helpers import HelperMixin


@runtime_checkable
class ViewProtocol(Protocol):
    """Operations the router and capture scopes use on a view."""

    output_buffer: OutputBuffer

    def has_instance_variable(self, name: str) -> bool: ...

    def instance_variable_get(self, name: str) -> Any: ...

    def responds_to(self, name: str) -> bool: ...

    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any: ...


# Protocol plumbing is not part of the helper surface
_PROTOCOL_NAMES = frozenset(
    {
        "assign",
        "define_helper",
        "has_instance_variable",
        "helper_names",
        "instance_variable_get",
        "instance_variable_names",
        "invoke",
        "output_buffer",
        "responds_to",
    }
)


class View(HelperMixin):
    """Reference view: instance variables, helpers and one active buffer.

    Args:
        assigns: Initial instance variables
        output_buffer: Initial active buffer (a fresh one by default)
        helpers: Extra helpers, ``name -> func(view, *args, **kwargs)``
    """

    def __init__(
        self,
        assigns: Mapping[str, Any] | None = None,
        *,
        output_buffer: OutputBuffer | None = None,
        helpers: Mapping[str, Callable[..., Any]] | None = None,
    ):
        self.output_buffer = output_buffer if output_buffer is not None else OutputBuffer()
        self._instance_variables: dict[str, Any] = {}
        self._helpers: dict[str, Callable[..., Any]] = {}
        if assigns:
            self.assign(assigns)
        for name, func in (helpers or {}).items():
            self.define_helper(name, func)

    def __repr__(self) -> str:
        return f"<View ivars={sorted(self._instance_variables)}>"

    # -- instance variables -------------------------------------------------

    def assign(self, mapping: Mapping[str, Any] | None = None, **values: Any) -> None:
        """Set instance variables, as a controller would before rendering."""
        if mapping:
            self._instance_variables.update(mapping)
        self._instance_variables.update(values)

    def has_instance_variable(self, name: str) -> bool:
        return name in self._instance_variables

    def instance_variable_get(self, name: str) -> Any:
        return self._instance_variables[name]

    def instance_variable_names(self) -> Iterator[str]:
        return iter(self._instance_variables)

    # -- helpers ------------------------------------------------------------

    def define_helper(self, name: str, func: Callable[..., Any]) -> None:
        """Register a helper; it is called as ``func(view, *args, **kwargs)``."""
        if name.startswith("_") or name in _PROTOCOL_NAMES:
            raise ValueError(f"Reserved helper name: {name!r}")
        self._helpers[name] = func

    def helper_names(self) -> Iterator[str]:
        for name in dir(type(self)):
            if self.responds_to(name):
                yield name
        yield from self._helpers

    def responds_to(self, name: str) -> bool:
        if name.startswith("_") or name in _PROTOCOL_NAMES:
            return False
        if name in self._helpers:
            return True
        return callable(getattr(type(self), name, None))

    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Call helper ``name``; a ``block`` keyword is passed through as-is."""
        func = self._helpers.get(name)
        if func is not None:
            return func(self, *args, **kwargs)
        if not self.responds_to(name):
            raise AttributeError(f"{type(self).__name__} has no helper {name!r}")
        return getattr(self, name)(*args, **kwargs)
