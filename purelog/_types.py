"""
Core type definitions for purelog.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .writer import Writer, WriterResult

# ============================================================================
# Type aliases
# ============================================================================

# LogJoin = how two log fragments become one, first stage on the left
type LogJoin[W] = Callable[[W, W], W]

# Stage = total function producing a value together with its log
type Stage[A, B, W = str] = Callable[[A], Writer[B, W]]

# FallibleStage = stage that may fail; the log survives the failure
type FallibleStage[A, B, E, W = str] = Callable[[A], WriterResult[B, E, W]]

# NoError = error type of a stage that never fails
type NoError = typing.Never

__all__ = (
    "LogJoin",
    "Stage",
    "FallibleStage",
    "NoError",
)
