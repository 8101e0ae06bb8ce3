"""
Kleisli composition for Writer
==============================

Склеивает стадии A -> Writer[B] в одну функцию, протаскивая значение
и соединяя логи в порядке выполнения.
"""

from __future__ import annotations

import typing
from functools import reduce

from .._errors import EmptyPipelineError
from .._types import LogJoin, Stage
from ..join import SPACE
from ..writer import Writer


def compose[A, B, C, W](
    f: Stage[A, B, W],
    g: Stage[B, C, W],
    /,
    *,
    join: LogJoin[W] = SPACE,  # type: ignore[assignment]
) -> Stage[A, C, W]:
    """
    Compose two stages: run f, feed its value to g, join the logs.

    For any x:
        compose(f, g)(x) == Writer(g(f(x).value).value,
                                   join(f(x).log, g(f(x).value).log))

    The default join puts one space between the fragments and never trims
    them, so the first stage's log always reads before the second's.

    Example:
        shout = lambda s: Writer(s.upper(), "used scream! ")
        split = lambda s: Writer(s.split(), "used words! ")

        compose(shout, split)("hello world")
        # Writer(['HELLO', 'WORLD'], 'used scream!  used words! ')
    """

    def composed(x: A) -> Writer[C, W]:
        first = f(x)
        second = g(first.value)
        return Writer(second.value, join(first.log, second.log))

    return composed


def compose_all[W](
    *stages: Stage[typing.Any, typing.Any, W],
    join: LogJoin[W] = SPACE,  # type: ignore[assignment]
) -> Stage[typing.Any, typing.Any, W]:
    """
    Compose one or more stages left to right.

    compose_all(f, g, h) == compose(compose(f, g), h). With the default
    join the logs of f, g and h appear in that order whatever the grouping.
    A single stage is returned as is.
    """
    if not stages:
        raise EmptyPipelineError("compose_all")

    def step(
        acc: Stage[typing.Any, typing.Any, W],
        stage: Stage[typing.Any, typing.Any, W],
    ) -> Stage[typing.Any, typing.Any, W]:
        return compose(acc, stage, join=join)

    return reduce(step, stages)


def pipe[A, W](
    value: A,
    *stages: Stage[typing.Any, typing.Any, W],
    join: LogJoin[W] = SPACE,  # type: ignore[assignment]
) -> Writer[typing.Any, W]:
    """Run value through stages immediately: pipe(x, f, g) == compose(f, g)(x)."""
    if not stages:
        raise EmptyPipelineError("pipe")
    return compose_all(*stages, join=join)(value)


__all__ = ("compose", "compose_all", "pipe")
