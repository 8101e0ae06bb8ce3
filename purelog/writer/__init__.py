"""
Writer
======

Writer[A, W] - значение + лог, без общего изменяемого состояния.
WriterResult[T, E, W] - то же самое для стадий, которые могут упасть
(Result из kungfu).
"""

from .log import Log
from .result import WriterResult
from .writer import Writer

__all__ = (
    "Log",
    "Writer",
    "WriterResult",
)
