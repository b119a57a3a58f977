"""Holder for the active marshalling strategy."""

from __future__ import annotations

import logging
import threading

from .base import MarshalFunc, XErrorView
from .default import default_marshaller

log = logging.getLogger(__name__)


class MarshallerRegistry:
    """One swappable marshaller shared by every XError bound to it.

    Swapping is lock-protected, but strategies should still be installed
    during start-up: an XError serialized concurrently with a swap may use
    either strategy.
    """

    def __init__(self, marshaller: MarshalFunc = default_marshaller) -> None:
        self._lock = threading.Lock()
        self._marshaller = marshaller

    def setup(self, marshaller: MarshalFunc) -> None:
        with self._lock:
            self._marshaller = marshaller
        log.debug(
            "marshaller_replaced",
            extra={"marshaller": getattr(marshaller, "__name__", repr(marshaller))},
        )

    def get(self) -> MarshalFunc:
        with self._lock:
            return self._marshaller

    def reset(self) -> None:
        self.setup(default_marshaller)

    def marshal(self, view: XErrorView) -> bytes:
        return self.get()(view)
