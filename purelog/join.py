"""
Log joining
===========

Configuration for how two log fragments are concatenated during composition.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JoinPolicy:
    """
    Join two string logs with a fixed separator, first fragment first.

    Fragments are used verbatim: a fragment that already ends with a space
    still gets the separator, so "a " and "b " join to "a  b ".
    """

    separator: str = " "

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str):
            raise ValueError("JoinPolicy.separator must be a str")

    def __call__(self, first: str, second: str, /) -> str:
        return f"{first}{self.separator}{second}"


# Default join: a single space between fragments
SPACE = JoinPolicy()

# NOTE: no separator at all, for logs whose fragments carry their own spacing
CONCAT = JoinPolicy(separator="")

__all__ = ("JoinPolicy", "SPACE", "CONCAT")
