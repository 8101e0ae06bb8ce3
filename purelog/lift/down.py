"""
Lower Writer / WriterResult.

Functions for leaving the pure pipeline: unpacking, unwrapping and
handing the accumulated log to a real logger.
"""

from __future__ import annotations

import logging
from typing import assert_never

from kungfu import Error, Ok, Result

from ..writer import Log, Writer, WriterResult


def to_tuple[T, W](writer: Writer[T, W]) -> tuple[T, W]:
    """Return (value, log)."""
    return (writer.value, writer.log)


def to_result[T, E, W](wr: WriterResult[T, E, W]) -> Result[T, E]:
    """Return only Result (discard log)."""
    return wr.result


def unsafe[T, E, W](wr: WriterResult[T, E, W]) -> tuple[T, W]:
    """Unwrap, raises kungfu.UnwrapError on Error. Returns (value, log)."""
    return (wr.result.unwrap(), wr.log)


def or_else[T, E, W](wr: WriterResult[T, E, W], default: T) -> tuple[T, W]:
    """Return (value or default, log)."""
    match wr.result:
        case Ok(v):
            return (v, wr.log)
        case Error(_):
            return (default, wr.log)
        case _ as unreachable:
            assert_never(unreachable)


def _emit_log(log: object, logger: logging.Logger, level: int) -> None:
    if isinstance(log, Log):
        log.emit_to(logger, level)
    elif log != "":
        logger.log(level, "%s", log)


def emit[T, W](
    writer: Writer[T, W],
    logger: logging.Logger,
    *,
    level: int = logging.INFO,
) -> T:
    """
    Send the accumulated log to logger and return the value.

    This is the only place where a log stops being a value and becomes an
    effect. A Log is emitted one record per entry; any other
    log is emitted as a single record, empty strings are skipped.

    Example:
        words = emit(process("hello world"), logging.getLogger("app"))
    """
    _emit_log(writer.log, logger, level)
    return writer.value


def emit_result[T, E, W](
    wr: WriterResult[T, E, W],
    logger: logging.Logger,
    *,
    level: int = logging.INFO,
) -> Result[T, E]:
    """emit() for WriterResult: the log is sent on both branches, the Result is returned."""
    _emit_log(wr.log, logger, level)
    return wr.result


__all__ = (
    "to_tuple",
    "to_result",
    "unsafe",
    "or_else",
    "emit",
    "emit_result",
)
