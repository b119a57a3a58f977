"""Options-pattern helpers.

Build a configuration object by applying a sequence of options to a fresh or
default value::

    @dataclass
    class ClientOptions:
        timeout: float = 0.0
        retries: int = 0

    def with_retries(n: int) -> OptionFn[ClientOptions]:
        def apply(o: ClientOptions) -> None:
            o.retries = n
        return OptionFn(apply)

    opts = parse_with_defaults(ClientOptions(timeout=5.0), with_retries(3))
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

O = TypeVar("O")  # noqa: E741
O_contra = TypeVar("O_contra", contravariant=True)


class Applier(Protocol[O_contra]):
    def apply(self, options: O_contra) -> None: ...


class OptionFn(Generic[O]):
    """Adapts a plain mutator function to :class:`Applier`."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[O], None]) -> None:
        self._fn = fn

    def apply(self, options: O) -> None:
        self._fn(options)

    def __call__(self, options: O) -> None:
        self._fn(options)


def _apply_all(options: O, opts: tuple[Applier[O] | Callable[[O], None], ...]) -> O:
    for opt in opts:
        apply = getattr(opt, "apply", None)
        if callable(apply):
            apply(options)
        else:
            opt(options)  # type: ignore[operator]
    return options


def parse(factory: Callable[[], O], *opts: Applier[O] | Callable[[O], None]) -> O:
    """Apply *opts* in order to ``factory()``."""
    return _apply_all(factory(), opts)


def parse_with_defaults(defaults: O, *opts: Applier[O] | Callable[[O], None]) -> O:
    """Apply *opts* in order to a shallow copy of *defaults*.

    Later options win over earlier ones on the same field.
    """
    return _apply_all(copy.copy(defaults), opts)
