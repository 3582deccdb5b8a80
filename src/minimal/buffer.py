"""Output buffer — the appendable text accumulator a View writes into.

Uses the StringBuilder pattern: fragments are collected in a list and joined
only when the content is read, so repeated appends stay O(n) overall.

Exactly one buffer is *active* on a View at any time. Capture scopes swap the
active buffer out and back (see `minimal.capture`); nothing else should
replace it.

"""

from __future__ import annotations


class OutputBuffer:
    """Ordered sequence of text fragments exposed as one logical string.

    Example:
        >>> buf = OutputBuffer()
        >>> buf.append("foo").append("bar")
        OutputBuffer('foobar')
        >>> buf.getvalue()
        'foobar'
        >>> buf.replace()
        >>> bool(buf)
        False

    """

    __slots__ = ("_parts",)

    def __init__(self, initial: str = ""):
        self._parts: list[str] = [initial] if initial else []

    def append(self, text: str) -> OutputBuffer:
        """Append text and return the buffer for chaining."""
        if text:
            self._parts.append(text)
        return self

    def replace(self, text: str = "") -> None:
        """Drop the current content, optionally seeding new content."""
        self._parts = [text] if text else []

    def getvalue(self) -> str:
        if len(self._parts) > 1:
            # Collapse so later reads are a single lookup
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __str__(self) -> str:
        return self.getvalue()

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"OutputBuffer({self.getvalue()!r})"
