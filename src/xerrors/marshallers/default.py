"""Code-only marshaller."""

from __future__ import annotations

from ..chain import as_app_error
from ..errors import MarshalError
from .base import XErrorView, dump_json


def default_marshaller(view: XErrorView) -> bytes:
    """Serialize as ``{"code": <code>}``.

    The code keeps its own JSON type (string, integer, ...).
    """
    app = as_app_error(view.app_error)
    if app is None:
        raise MarshalError(view.app_error)
    return dump_json({"code": app.code}, view.app_error)
