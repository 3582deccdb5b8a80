"""Capture scopes — isolate everything written to a view during a unit of work.

A capture scope installs a fresh, empty `OutputBuffer` as the view's active
buffer, runs the work, and restores the previous buffer on every exit path.
Scopes nest strictly (LIFO): closing an inner scope restores the outer
scope's buffer, never the view's original one.

Return rule:
    If the installed buffer received any content, that content is the
    result and the work's own return value is discarded. Otherwise the
    work's return value, coerced to text, is the result. A block that only
    computes a value therefore still produces output.

Example:
    >>> def work():
    ...     view.concat("foo")
    ...     view.concat("bar")
    ...     return "baz"
    >>> capture(view, work)
    'foobar'

Thread Safety:
    None. A view's active buffer is plain mutable state; scopes on one view
    must run on one thread, strictly nested.

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Protocol

from minimal.buffer import OutputBuffer
from minimal.exceptions import CaptureScopeError

logger = logging.getLogger(__name__)


class BufferHost(Protocol):
    """Anything holding an active output buffer (a view, in practice)."""

    output_buffer: OutputBuffer


def to_text(value: Any) -> str:
    """Coerce a helper or block result to text. None becomes ''."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(slots=True)
class CaptureScope:
    """One open capture boundary on a view.

    Attributes:
        view: The view whose buffer was swapped
        installed: The fresh buffer that is active while the scope is open
        replaced: The buffer that was active before and is restored on exit
    """

    view: BufferHost
    installed: OutputBuffer
    replaced: OutputBuffer

    @property
    def captured(self) -> str:
        return self.installed.getvalue()


@contextmanager
def capture_scope(view: BufferHost) -> Iterator[CaptureScope]:
    """Install a fresh output buffer on ``view`` for the duration of the block.

    The replaced buffer is restored unconditionally, and exceptions raised
    inside the block propagate unchanged after restoration.

    Raises:
        CaptureScopeError: If the scope exits normally while a buffer other
            than the one it installed is active.
    """
    replaced = view.output_buffer
    scope = CaptureScope(view=view, installed=OutputBuffer(), replaced=replaced)
    view.output_buffer = scope.installed
    failed = False
    try:
        yield scope
    except BaseException:
        failed = True
        raise
    finally:
        balanced = view.output_buffer is scope.installed
        view.output_buffer = replaced
        if not balanced:
            if failed:
                logger.warning("Capture scope unwound with a foreign buffer active on %r", view)
            else:
                raise CaptureScopeError()


def capture(view: BufferHost, work: Callable[[], Any]) -> str:
    """Run ``work`` inside a capture scope and return what it produced.

    Args:
        view: The view whose active buffer is redirected
        work: Zero-argument callable, typically a block or a helper call

    Returns:
        The text written during ``work`` if any, else ``work``'s return
        value as text.
    """
    with capture_scope(view) as scope:
        result = work()
    if scope.installed:
        return scope.captured
    return to_text(result)
