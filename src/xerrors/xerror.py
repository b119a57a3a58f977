"""Structured application errors."""

from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from .chain import as_app_error, is_error
from .config import settings
from .errors import AppError
from .marshallers import MarshallerRegistry, XErrorView, registry

E = TypeVar("E", bound=AppError)


class XError(Exception, Generic[E]):
    """Wraps a domain error with an optional message and nested causes.

    The text form is always prefixed with the domain code, e.g.
    ``[ENTRY_NOT_FOUND]: lookup failed: sql: no rows in result set``.

    Serialization goes through a :class:`MarshallerRegistry`: the one passed
    as ``marshaller``, else the process-wide registry as it stands when
    :meth:`marshal_json` is called.
    """

    def __init__(
        self,
        app: E,
        message: str = "",
        *causes: BaseException | None,
        marshaller: MarshallerRegistry | None = None,
    ) -> None:
        kept = tuple(c for c in causes if c is not None)
        super().__init__(app, message, *kept)
        self._app = app
        self._causes = kept
        self._message = message or ""
        self._registry = marshaller

    @property
    def app(self) -> E:
        return self._app

    @property
    def causes(self) -> tuple[BaseException, ...]:
        return self._causes

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> Any:
        return self._app.code

    def get_app(self) -> E:
        return self._app

    def error(self) -> str:
        return f"[{self._app.code}]: {self._text()}"

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._app.code!r}, message={self._message!r}, "
            f"causes={len(self._causes)})"
        )

    def _text(self) -> str:
        if not self._causes:
            return self._message or self._app.message

        joined = settings.cause_separator.join(str(c) for c in self._causes)
        if not self._message:
            return joined
        return f"{self._message}: {joined}"

    def _match_code(self, target: Any) -> bool | None:
        """Compare codes when *target* carries an AppError, else None."""
        other = as_app_error(target)
        if other is None:
            return None
        return other.code == self._app.code

    def is_(self, target: Any) -> bool:
        """Report whether this error represents or contains *target*.

        A target carrying an AppError matches on code alone, whatever the
        causes hold. Any other target matches when one of the causes
        wraps it or is wrapped by it.
        """
        decided = self._match_code(target)
        if decided is not None:
            return decided
        return any(
            is_error(cause, target) or is_error(target, cause) for cause in self._causes
        )

    def view(self) -> XErrorView:
        return XErrorView(app_error=self._app, errors=self._causes, message=self.error())

    def marshal_json(self) -> bytes:
        """Serialize with the active marshaller.

        Raises:
            MarshalError: the marshaller does not recognize the domain error.
        """
        active = self._registry if self._registry is not None else registry
        return active.marshal(self.view())

    def to_dict(self) -> dict[str, Any]:
        return json.loads(self.marshal_json())


def new(
    app: E,
    message: str = "",
    *causes: BaseException | None,
    marshaller: MarshallerRegistry | None = None,
) -> XError[E]:
    return XError(app, message, *causes, marshaller=marshaller)
