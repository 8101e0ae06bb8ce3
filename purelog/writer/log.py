"""
Log - list-backed log for Writer
================================

Альтернатива строковому логу: каждая запись стадии хранится отдельно
и уходит в logging отдельной записью.
"""

from __future__ import annotations

import logging


class Log[A](list[A]):
    """
    Entry-per-stage log usable as the ``W`` of ``Writer[A, W]``.

    Unlike a string log there is no separator question: ``combine`` keeps
    both stages' entries side by side, first stage first, so ``Log()`` is a
    true identity and ``Log.combine`` can be passed straight to compose:

        compose(f, g, join=Log.combine)

    Every operation returns a new Log; the receiver is never extended in place.
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Log holding entries in order."""
        return Log[T](entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Entries of self followed by entries of other."""
        return Log([*self, *other])

    def tell(self, entry: A, /) -> Log[A]:
        """New log with one more entry at the end."""
        return Log([*self, entry])

    def render(self, separator: str = " ") -> str:
        """
        Flatten into a string log.

        Example:
            Log.of("used scream!", "used words!").render()  # "used scream! used words!"
        """
        return separator.join(str(entry) for entry in self)

    def emit_to(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        """Send each entry to logger as its own record."""
        for entry in self:
            logger.log(level, "%s", entry)


__all__ = ("Log",)
