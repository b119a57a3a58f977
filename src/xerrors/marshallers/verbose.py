"""Diagnostic marshaller including message and causes."""

from __future__ import annotations

from typing import Any

from ..chain import as_app_error
from ..errors import MarshalError
from .base import XErrorView, dump_json


def verbose_marshaller(view: XErrorView) -> bytes:
    app = as_app_error(view.app_error)
    if app is None:
        raise MarshalError(view.app_error)

    payload: dict[str, Any] = {
        "code": app.code,
        "message": view.message,
        "errors": [str(e) for e in view.errors],
    }
    return dump_json(payload, view.app_error)
