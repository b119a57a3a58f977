"""
xerrors

Structured application errors: a domain code, an optional message and any
number of nested causes, with pluggable JSON serialization.
"""

from __future__ import annotations

from .chain import as_app_error, is_error, iter_chain
from .errors import AppError, MarshalError
from .marshallers import (
    MarshalFunc,
    MarshallerRegistry,
    XErrorView,
    default_marshaller,
    get_marshaller,
    setup_marshaller,
    verbose_marshaller,
)
from .xerror import XError, new

__all__ = [
    "AppError",
    "MarshalError",
    "MarshalFunc",
    "MarshallerRegistry",
    "XError",
    "XErrorView",
    "__version__",
    "as_app_error",
    "default_marshaller",
    "get_marshaller",
    "is_error",
    "iter_chain",
    "new",
    "setup_marshaller",
    "verbose_marshaller",
]

__version__ = "0.1.0"
