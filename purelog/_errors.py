from __future__ import annotations

class EmptyPipelineError(Exception):
    """A pipeline was built from zero stages."""

    combinator: str

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(f"{combinator}() requires at least one stage")

__all__ = ("EmptyPipelineError",)
