"""Writer - value paired with its log

Immutable carrier returned by every stage. The log travels with the value
instead of living in shared state, so stages stay pure and can run in isolation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .._types import LogJoin
from ..join import SPACE


@dataclass(frozen=True, slots=True)
class Writer[A, W = str]:
    """Value with accumulated log.

    Fields are stored as given (no trimming, no validation) and cannot be
    reassigned. Every operation below returns a new Writer.

    Equality is structural: Writer(1, "a") == Writer(1, "a").
    """

    value: A
    log: W

    @staticmethod
    def pure[V, LogT](value: V, empty: LogT = "") -> Writer[V, LogT]:  # type: ignore[assignment]
        """Lift a value with an empty log ("" unless another empty log is given, e.g. Log())."""
        return Writer(value, empty)

    @staticmethod
    def tell[LogT](log: LogT) -> Writer[None, LogT]:
        """Write to the log without producing a value."""
        return Writer(None, log)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> Writer[U, W]:
        """Apply function to the value, keep the log."""
        return Writer(f(self.value), self.log)

    def map_log[V](self, f: Callable[[W], V], /) -> Writer[A, V]:
        """Transform the log, keep the value."""
        return Writer(self.value, f(self.log))

    # Monad operations

    def then[U](
        self,
        f: Callable[[A], Writer[U, W]],
        /,
        *,
        join: LogJoin[W] = SPACE,  # type: ignore[assignment]
    ) -> Writer[U, W]:
        """
        Bind (>>=): run f on the value, join this log with f's log.

        Writer("hi", "a").then(g) has the log join("a", g("hi").log).
        """
        following = f(self.value)
        return Writer(following.value, join(self.log, following.log))

    # Writer operations

    def listen(self) -> Writer[tuple[A, W], W]:
        """Expose the log alongside the value."""
        return Writer((self.value, self.log), self.log)

    def censor(self, f: Callable[[W], W], /) -> Writer[A, W]:
        """Rewrite the log with a function of the same log type, keep the value."""
        return Writer(self.value, f(self.log))

    def to_tuple(self) -> tuple[A, W]:
        """Return (value, log)."""
        return (self.value, self.log)


__all__ = ("Writer",)
