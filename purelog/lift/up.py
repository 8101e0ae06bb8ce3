"""
Подъем значений в Writer / WriterResult.

Functions for building writers and stages from plain values, Results,
total stages and exception-raising functions.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._types import FallibleStage, NoError, Stage
from ..writer import Writer, WriterResult


def pure[T](value: T, *, log: str = "") -> Writer[T, str]:
    """
    Lift value into Writer with optional log.

    Example:
        from purelog import lift as L

        L.up.pure(42)                  # Writer(42, "")
        L.up.pure(42, log="answered")  # Writer(42, "answered")
    """
    return Writer(value, log)


def tell[W](log: W) -> Writer[None, W]:
    """Create Writer with only log, no value."""
    return Writer(None, log)


def ok[T, W](value: T, *, log: W = "") -> WriterResult[T, NoError, W]:  # type: ignore[assignment]
    """Lift value into successful WriterResult."""
    return WriterResult(Ok(value), log)


def fail[E, W](error: E, *, log: W = "") -> WriterResult[NoError, E, W]:  # type: ignore[assignment]
    """
    Create failed WriterResult. Dual of ok().

    **When to use:** to stop a compose_result pipeline from inside a stage.
    """
    return WriterResult(Error(error), log)


def from_result[T, E, W](result: Result[T, E], *, log: W = "") -> WriterResult[T, E, W]:  # type: ignore[assignment]
    """Attach a log to an already-computed Result."""
    return WriterResult(result, log)


def from_writer[T, W](writer: Writer[T, W]) -> WriterResult[T, NoError, W]:
    """Writer that cannot fail -> WriterResult, log untouched."""
    return WriterResult(Ok(writer.value), writer.log)


def fallible[A, B, W](stage: Stage[A, B, W]) -> FallibleStage[A, B, NoError, W]:
    """
    Turn a total stage into a fallible one.

    **When to use:** mixing total stages into a compose_result pipeline.

    Example:
        compose_result(parse, L.up.fallible(shout))
    """

    def run(x: A) -> WriterResult[B, NoError, W]:
        return from_writer(stage(x))

    return run


def catching[A, B, E, W](
    func: Callable[[A], B],
    *,
    on_error: Callable[[Exception], E],
    log: W,
) -> FallibleStage[A, B, E, W]:
    """
    Turn an exception-raising function into a fallible stage.

    The same log is written whether func succeeds or raises, so the
    pipeline log still shows the stage was attempted.

    Example:
        parse_int = L.up.catching(int, on_error=str, log="used parse! ")
        parse_int("42")    # WriterResult(Ok(42), log='used parse! ')
        parse_int("nope")  # WriterResult(Error("invalid literal ..."), log='used parse! ')

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """

    def run(x: A) -> WriterResult[B, E, W]:
        try:
            return WriterResult(Ok(func(x)), log)
        except Exception as exc:
            return WriterResult(Error(on_error(exc)), log)

    return run


__all__ = (
    "pure",
    "tell",
    "ok",
    "fail",
    "from_result",
    "from_writer",
    "fallible",
    "catching",
)
