"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .._types import NoError


class WriterResult[T, E, W = str]:
    """
    Result with accumulated writer log.

    Combines:
    - Result[T, E]: outcome of a fallible stage (success or error)
    - W: log written up to and including that stage

    The log is kept on both branches: a failing stage still reports
    what happened before it failed.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    _result: Result[T, E]
    _log: W

    def __init__(self, result: Result[T, E], log: W) -> None:
        object.__setattr__(self, "_result", result)
        object.__setattr__(self, "_log", log)

    def __setattr__(self, name: str, value: typing.Any) -> typing.NoReturn:
        raise AttributeError(f"WriterResult is immutable, cannot set {name!r}")

    @staticmethod
    def ok[V, LogT](value: V, log: LogT) -> WriterResult[V, NoError, LogT]:
        """Successful result with log."""
        return WriterResult(Ok(value), log)

    @staticmethod
    def error[Err, LogT](error: Err, log: LogT) -> WriterResult[NoError, Err, LogT]:
        """Failed result with log."""
        return WriterResult(Error(error), log)

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return self._result == other._result and self._log == other._log

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
