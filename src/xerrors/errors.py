from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AppError(Protocol):
    """A domain error that can be wrapped by an XError.

    Anything exposing a stable ``code`` and a human ``message`` qualifies;
    the concrete types belong to the application.
    """

    @property
    def code(self) -> Any: ...

    @property
    def message(self) -> str: ...


class MarshalError(Exception):
    """Raised when the active marshaller does not recognize a domain error."""

    code = "MARSHAL_ERROR"

    def __init__(self, app_error: object = None, message: str = "error marshalling") -> None:
        super().__init__(message)
        self.app_error = app_error
        self.message = message

    def __str__(self) -> str:
        if self.app_error is None:
            return self.message
        return f"{self.message}: unsupported {type(self.app_error).__name__}"
