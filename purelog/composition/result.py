"""
Fallible composition
====================

compose для стадий, которые могут упасть: A -> WriterResult[B, E, W].
Первая ошибка останавливает конвейер, лог до неё сохраняется.
"""

from __future__ import annotations

import typing
from functools import reduce
from typing import assert_never

from kungfu import Error, Ok

from .._errors import EmptyPipelineError
from .._types import FallibleStage, LogJoin
from ..join import SPACE
from ..writer import WriterResult


def compose_result[A, B, C, E, W](
    f: FallibleStage[A, B, E, W],
    g: FallibleStage[B, C, E, W],
    /,
    *,
    join: LogJoin[W] = SPACE,  # type: ignore[assignment]
) -> FallibleStage[A, C, E, W]:
    """
    Compose two fallible stages.

    - On Ok: runs g on the value, joins both logs (f's log first)
    - On Error: short-circuit, g is never called, f's log is kept as is
    """

    def composed(x: A) -> WriterResult[C, E, W]:
        first = f(x)
        match first.result:
            case Ok(value):
                second = g(value)
                return WriterResult(second.result, join(first.log, second.log))
            case Error(err):
                return WriterResult(Error(err), first.log)
            case _ as unreachable:
                assert_never(unreachable)

    return composed


def compose_result_all[E, W](
    *stages: FallibleStage[typing.Any, typing.Any, E, W],
    join: LogJoin[W] = SPACE,  # type: ignore[assignment]
) -> FallibleStage[typing.Any, typing.Any, E, W]:
    """Compose one or more fallible stages left to right, stopping at the first Error."""
    if not stages:
        raise EmptyPipelineError("compose_result_all")

    def step(
        acc: FallibleStage[typing.Any, typing.Any, E, W],
        stage: FallibleStage[typing.Any, typing.Any, E, W],
    ) -> FallibleStage[typing.Any, typing.Any, E, W]:
        return compose_result(acc, stage, join=join)

    return reduce(step, stages)


__all__ = ("compose_result", "compose_result_all")
