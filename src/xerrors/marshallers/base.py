"""Marshaller interface."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..errors import MarshalError


@dataclass(frozen=True, slots=True)
class XErrorView:
    """Read-only snapshot of an XError handed to a marshaller."""

    app_error: Any
    errors: tuple[BaseException, ...]
    message: str


MarshalFunc = Callable[[XErrorView], bytes]


def dump_json(payload: Any, app_error: Any) -> bytes:
    """Encode *payload* as compact UTF-8 JSON.

    Raises:
        MarshalError: *payload* holds a value JSON cannot represent.
    """
    try:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise MarshalError(app_error, f"error marshalling: {e}") from e
