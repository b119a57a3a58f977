"""Marshalling strategies and the process-wide registry."""

from __future__ import annotations

import logging

from ..config import settings
from .base import MarshalFunc, XErrorView
from .default import default_marshaller
from .registries import MarshallerRegistry
from .verbose import verbose_marshaller

__all__ = [
    "MarshalFunc",
    "MarshallerRegistry",
    "XErrorView",
    "default_marshaller",
    "get_marshaller",
    "registry",
    "setup_marshaller",
    "verbose_marshaller",
]

log = logging.getLogger(__name__)


def get_marshaller(name: str) -> MarshalFunc:
    """Get marshaller by name."""
    marshallers: dict[str, MarshalFunc] = {
        "default": default_marshaller,
        "verbose": verbose_marshaller,
    }

    if name not in marshallers:
        raise ValueError(f"Unknown marshaller: {name}. Available: {', '.join(marshallers.keys())}")

    return marshallers[name]


def _configured_marshaller() -> MarshalFunc:
    try:
        return get_marshaller(settings.marshaller)
    except ValueError:
        log.warning("unknown_marshaller", extra={"marshaller": settings.marshaller})
        return default_marshaller


registry = MarshallerRegistry(_configured_marshaller())


def setup_marshaller(marshaller: MarshalFunc) -> None:
    """Replace the process-wide marshaller.

    Applies to every XError serialized afterwards, including ones created
    earlier. Call it during start-up, before errors are serialized
    concurrently.
    """
    registry.setup(marshaller)
