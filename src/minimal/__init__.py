"""Minimal — call delegation and output capture between templates and views.

Template code calls view helpers through one calling convention, whether a
helper writes into the view's output buffer or returns a string. Whatever a
helper (or a block passed to it) writes is captured in a scope of its own,
and view state reads like native template attributes.

Quickstart:
    >>> from minimal import Template, View
    >>> class Greeting(Template):
    ...     def content(self):
    ...         self.h1(self.name)
    ...         self.format_number(1234)
    >>> View().render(Greeting, name="World")
    '<h1>World</h1>1234.000'

Architecture:
Template facade → Dispatch router → Auto-buffer classifier → Capture scope → View

1. **OutputBuffer**: appendable text accumulator owned by the view
2. **capture / capture_scope**: install a fresh buffer, run work, restore
3. **Classifier**: name allow-list deciding buffering vs returning helpers
4. **dispatch / responds_to**: locals → instance variables → view helpers
5. **Template**: ``<<``, ``responds_to``, attribute and call forwarding

Thread-Safety:
A render pass runs on one thread. Capture scopes mutate the view's active
buffer and nest strictly; do not share a view across threads mid-render.

"""

from minimal.buffer import OutputBuffer
from minimal.capture import CaptureScope, capture, capture_scope, to_text
from minimal.classifier import (
    DEFAULT_CLASSIFIER,
    BufferMode,
    CallKind,
    Classifier,
    classify,
    is_buffering,
)
from minimal.exceptions import (
    CapabilityNotFoundError,
    CaptureScopeError,
    ErrorCode,
    MinimalError,
)
from minimal.helpers import FormBuilder, HelperMixin
from minimal.router import Namespace, Resolution, dispatch, resolve, responds_to
from minimal.template import TAG_NAMES, BuilderProxy, Template
from minimal.view import View, ViewProtocol

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CLASSIFIER",
    "TAG_NAMES",
    "BufferMode",
    "BuilderProxy",
    "CallKind",
    "CapabilityNotFoundError",
    "CaptureScope",
    "CaptureScopeError",
    "Classifier",
    "ErrorCode",
    "FormBuilder",
    "HelperMixin",
    "MinimalError",
    "Namespace",
    "OutputBuffer",
    "Resolution",
    "Template",
    "View",
    "ViewProtocol",
    "__version__",
    "capture",
    "capture_scope",
    "classify",
    "dispatch",
    "is_buffering",
    "resolve",
    "responds_to",
    "to_text",
]
