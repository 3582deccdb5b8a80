"""Auto-buffer classifier — which helpers write into the output buffer.

Some view helpers produce their markup by appending to the view's active
buffer (``form_for`` and friends); others simply return a string. The
dispatch router has to know which is which without running the helper, so
classification is a pure function of the helper *name*, driven by an
explicit allow-list:

- ``names``: exact helper names known to buffer
- ``fragments``: substrings; any name containing one is buffering

Unknown names are RETURNING. A helper that buffers but is missing from the
list has its output appended twice (once by itself, once by the router), so
the list must track the helper catalog. Listing a helper that only returns
is harmless: its capture scope stays empty and its return value is used.

Example:
    >>> is_buffering("form_for")
    True
    >>> is_buffering("format_number")
    False
    >>> strict = DEFAULT_CLASSIFIER.extend(names=["breadcrumbs"])
    >>> strict.classify("breadcrumbs")
    <CallKind.BUFFERING: 'buffering'>

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class CallKind(Enum):
    """Side-effect kind of a helper call."""

    BUFFERING = "buffering"
    RETURNING = "returning"


class BufferMode(Enum):
    """Per-call override of the classifier.

    AUTO classifies by name. BUFFER forces a capture scope around the call.
    RETURN forces a direct call and hands the result back without appending
    it at the call site.
    """

    AUTO = "auto"
    BUFFER = "buffer"
    RETURN = "return"


# Allow-list version 1, mirrors the helper catalog in minimal.helpers
DEFAULT_BUFFERING_NAMES: frozenset[str] = frozenset({"concat", "capture"})
DEFAULT_BUFFERING_FRAGMENTS: tuple[str, ...] = (
    "render",
    "tag",
    "error_message_",
    "select",
    "debug",
    "_to",
    "_for",
    "_field",
)


@dataclass(frozen=True, slots=True)
class Classifier:
    """Immutable name → CallKind rule set.

    Classifiers are values: `extend` returns a new classifier and leaves
    the original untouched, so a shared default can be specialised per
    template class without copy bookkeeping.
    """

    names: frozenset[str] = DEFAULT_BUFFERING_NAMES
    fragments: tuple[str, ...] = DEFAULT_BUFFERING_FRAGMENTS
    version: int = field(default=1, compare=False)

    def classify(self, name: str) -> CallKind:
        if name in self.names or any(fragment in name for fragment in self.fragments):
            return CallKind.BUFFERING
        return CallKind.RETURNING

    def is_buffering(self, name: str) -> bool:
        return self.classify(name) is CallKind.BUFFERING

    def kind_for(self, name: str, mode: BufferMode = BufferMode.AUTO) -> CallKind:
        """Resolve the effective kind of a call, honoring an explicit override."""
        if mode is BufferMode.BUFFER:
            return CallKind.BUFFERING
        if mode is BufferMode.RETURN:
            return CallKind.RETURNING
        return self.classify(name)

    def extend(
        self,
        names: Iterable[str] = (),
        fragments: Iterable[str] = (),
    ) -> Classifier:
        """Return a new classifier with additional buffering names/fragments."""
        new_fragments = tuple(f for f in fragments if f not in self.fragments)
        return Classifier(
            names=self.names | frozenset(names),
            fragments=self.fragments + new_fragments,
            version=self.version + 1,
        )


DEFAULT_CLASSIFIER = Classifier()


def classify(name: str) -> CallKind:
    """Classify ``name`` with the default allow-list."""
    return DEFAULT_CLASSIFIER.classify(name)


def is_buffering(name: str) -> bool:
    """True if the default allow-list marks ``name`` as a buffering helper."""
    return DEFAULT_CLASSIFIER.is_buffering(name)
