"""Exceptions for the minimal delegation layer.

Exception Hierarchy:
MinimalError (base)
├── CapabilityNotFoundError   # Name resolves in no namespace (also AttributeError)
└── CaptureScopeError         # Active buffer changed behind a capture scope's back

Helper exceptions are never wrapped: whatever a view helper raises reaches
the caller unchanged, after any open capture scope has restored its buffer.

Example:
    ```
    M-DSP-001: 'foramt_number' is not a local, instance variable or view helper.
    Did you mean 'format_number'?
      Hint: Pass it in local_assigns, assign it on the view, or define a helper
    ```

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from minimal import terminal


class ErrorCode(Enum):
    """Searchable error codes.

    Format: M-{CATEGORY}-{NUMBER}
    Categories: DSP (dispatch), CAP (capture)
    """

    CAPABILITY_NOT_FOUND = "M-DSP-001"
    SCOPE_IMBALANCE = "M-CAP-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'dispatch', 'capture')."""
        prefix = self.value.split("-")[1]
        return {
            "DSP": "dispatch",
            "CAP": "capture",
        }.get(prefix, "unknown")


class MinimalError(Exception):
    """Base exception for all errors raised by the delegation layer.

        >>> try:
        ...     html = view.render(Page)
        ... except MinimalError as e:
        ...     log.error(e.format_compact())

    Attributes:
        code: ErrorCode for searchable identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format the error as a short terminal diagnostic, code first."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = terminal.format_error_header(self.code.value, header)
        return header


class CapabilityNotFoundError(MinimalError, AttributeError):
    """A name resolved in none of the three namespaces.

    Raised by the dispatch router when a name is neither a local variable,
    nor an instance variable of the view, nor a helper the view responds to.
    Subclasses AttributeError so ``getattr(template, name, default)`` and
    ``hasattr`` keep their usual meaning on a template.

    If ``available_names`` is given, a "Did you mean?" suggestion is added
    when a close match exists (``difflib.get_close_matches``).
    """

    code: ErrorCode | None = ErrorCode.CAPABILITY_NOT_FOUND

    def __init__(self, name: str, available_names: Iterable[str] | None = None):
        self.name = name
        self._available_names = frozenset(available_names or ())
        # AttributeError.__init__ resets .name unless it is passed along
        super().__init__(self._format_message(), name=name)

    @property
    def suggestion(self) -> str | None:
        if not self._available_names:
            return None
        from difflib import get_close_matches

        matches = get_close_matches(self.name, sorted(self._available_names), n=1, cutoff=0.6)
        return matches[0] if matches else None

    def _format_message(self) -> str:
        msg = f"'{terminal.name(self.name)}' is not a local, instance variable or view helper"
        suggested = self.suggestion
        if suggested:
            msg += f". Did you mean '{terminal.suggestion(suggested)}'?"
        return msg

    def format_compact(self) -> str:
        parts = [super().format_compact()]
        hint_text = "Pass it in local_assigns, assign it on the view, or define a helper"
        parts.append(f"  {terminal.hint('Hint:')} {hint_text}")
        return "\n".join(parts)


class CaptureScopeError(MinimalError):
    """A capture scope closed while a different buffer was active.

    Capture scopes nest strictly: the buffer a scope installs must still be
    active when that scope closes. Anything else means a buffer was swapped
    directly on the view instead of through `capture_scope`. The replaced
    buffer is restored before this is raised.
    """

    code: ErrorCode | None = ErrorCode.SCOPE_IMBALANCE

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Active output buffer changed inside a capture scope; "
            "buffers must be swapped only through capture_scope()"
        )
