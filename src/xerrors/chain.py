"""Walking and probing chains of nested errors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .errors import AppError


def _children(err: Any) -> tuple[Any, ...]:
    from .xerror import XError

    if isinstance(err, XError):
        return err.causes
    if isinstance(err, BaseExceptionGroup):
        return tuple(err.exceptions)
    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return (err.__cause__,)
    return ()


def iter_chain(err: Any) -> Iterator[Any]:
    """Yield *err* and everything it explicitly wraps, depth-first.

    Only XError causes, ``__cause__`` (``raise ... from``) and exception group
    members are followed; the implicit ``__context__`` is not.

    Each error is visited once, so self-referencing chains terminate.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(_children(current)))


def as_app_error(err: Any) -> AppError | None:
    """Return the first AppError in *err*'s chain, or None.

    An XError counts as its wrapped domain error.
    """
    from .xerror import XError

    for link in iter_chain(err):
        if isinstance(link, XError):
            return link.app
        if isinstance(link, AppError):
            return link
    return None


def is_error(err: Any, target: Any) -> bool:
    """Report whether *err* or anything it wraps matches *target*.

    A link matches when it is *target*, compares equal to it, or defines an
    ``is_`` method that accepts it. An XError link is decided by its code
    alone when *target* carries an AppError; its causes are searched only
    otherwise.
    """
    from .xerror import XError

    if err is None or target is None:
        return err is target

    seen: set[int] = set()
    stack = [err]
    while stack:
        link = stack.pop()
        if link is None or id(link) in seen:
            continue
        seen.add(id(link))

        if link is target or link == target:
            return True
        if isinstance(link, XError):
            decided = link._match_code(target)
            if decided is not None:
                if decided:
                    return True
                continue
        else:
            matcher = getattr(link, "is_", None)
            if callable(matcher) and matcher(target):
                return True
        stack.extend(reversed(_children(link)))
    return False
