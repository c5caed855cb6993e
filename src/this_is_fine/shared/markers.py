"""Marker decorators for API methods."""

from collections.abc import Callable
from typing import TypeVar

C = TypeVar("C", bound=Callable[..., object])


def must_use(reason: str) -> Callable[[C], C]:
    """Mark a function whose return value must not be silently discarded.

    Sets ``__must_use__`` on the function (the way ``typing.final`` sets
    ``__final__``) and appends ``reason`` to its docstring so it shows up in
    ``help()``. The function itself is returned unchanged.

    Args:
        reason: Why discarding the result is likely a mistake

    Returns:
        Decorator returning the marked function
    """

    def decorator(func: C) -> C:
        func.__must_use__ = reason  # type: ignore[attr-defined]
        doc = func.__doc__ or ""
        func.__doc__ = f"{doc.rstrip()}\n\n        Must use: {reason}\n"
        return func

    return decorator
