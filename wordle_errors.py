"""Exceptions raised by the solver core."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """A guess or feedback string has the wrong shape or alphabet."""


class EmptyPoolError(RuntimeError):
    """No candidate word is consistent with the feedback received so far."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Either your word is not in my dictionary, or you made a mistake."
        )


class DuplicateWordError(ValueError):
    """Two dictionary entries normalise to the same word."""
