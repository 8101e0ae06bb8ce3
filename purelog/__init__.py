"""
purelog - logging for pure functions.

Stages return their log together with their value (Writer) instead of
appending to shared mutable state; compose chains stages and joins the
logs in execution order.

Architecture:
- Writer[A, W]: immutable value + log
- compose / compose_all / pipe: composition of total stages
- WriterResult + compose_result: stages that may fail (kungfu Result),
  short-circuit on the first Error
- lift: build stages from plain functions, leave the pipeline at the edge
"""

# Core types
from ._types import FallibleStage, LogJoin, NoError, Stage

# Writer
from . import writer
from .writer import Log, Writer, WriterResult

# Log joining
from .join import CONCAT, SPACE, JoinPolicy

# Composition
from .composition import compose, compose_all, compose_result, compose_result_all, pipe

# Lift helpers
from . import lift

# Errors
from ._errors import EmptyPipelineError

__all__ = (
    # Types
    "FallibleStage",
    "LogJoin",
    "NoError",
    "Stage",
    # Writer module
    "writer",
    "Log",
    "Writer",
    "WriterResult",
    # Join
    "CONCAT",
    "JoinPolicy",
    "SPACE",
    # Composition
    "compose",
    "compose_all",
    "compose_result",
    "compose_result_all",
    "pipe",
    # Lift module
    "lift",
    # Errors
    "EmptyPipelineError",
)
