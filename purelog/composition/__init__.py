from .kleisli import compose, compose_all, pipe
from .result import compose_result, compose_result_all

__all__ = (
    # Total stages (Writer)
    "compose",
    "compose_all",
    "pipe",
    # Fallible stages (WriterResult)
    "compose_result",
    "compose_result_all",
)
