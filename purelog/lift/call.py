"""
Call functions for Writer.

Call and decorators that attach a fixed log entry to plain functions.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from ..writer import Writer


def call[T, W, **P](
    log: W,
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Writer[T, W]:
    """
    Call plain function, pair its return value with log.

    Example:
        L.call("used scream! ", str.upper, "hi")  # Writer("HI", "used scream! ")
    """
    return Writer(func(*args, **kwargs), log)


def logged[T, W, **P](log: W) -> Callable[[Callable[P, T]], Callable[P, Writer[T, W]]]:
    """
    Decorator: plain function -> stage writing a fixed log entry.

    Example:
        @L.logged("used scream! ")
        def uppercase(s: str) -> str:
            return s.upper()

        uppercase("hi")  # Writer("HI", "used scream! ")
    """

    def decorator(func: Callable[P, T]) -> Callable[P, Writer[T, W]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Writer[T, W]:
            return Writer(func(*args, **kwargs), log)

        return wrapper

    return decorator


__all__ = (
    "call",
    "logged",
)
