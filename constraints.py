"""Constraint model: feedback symbols, constraint types and derivation.

Each round's (guess, feedback) pair is turned into two kinds of
constraints:

  - ``PositionConstraint``: a letter must (or must not) sit at an index.
  - ``LetterCountConstraint``: a letter occurs at least / at most N times.

Feedback encoding (same integers as ``wordle_env.feedback``):
  2 = exact     (correct letter, correct position)
  1 = misplaced (letter present elsewhere)
  0 = absent    (no further copies of the letter)
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from wordle_errors import InvalidInputError

WORD_LENGTH = 5

_LETTERS = frozenset(string.ascii_uppercase)


class Mark(IntEnum):
    ABSENT = 0
    MISPLACED = 1
    EXACT = 2


Feedback = tuple[Mark, ...]


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------

@dataclass(frozen=True)
class SolverConfig:
    """Word length and the text symbols used for feedback.

    Attributes
    ----------
    word_length : int
        Number of letters in every word.
    exact, misplaced, absent : str
        Single characters the player types for each mark.  Matching is
        case-sensitive.
    """

    word_length: int = WORD_LENGTH
    exact: str = "G"
    misplaced: str = "Y"
    absent: str = "W"

    def __post_init__(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive, got {self.word_length}")
        symbols = (self.exact, self.misplaced, self.absent)
        if any(len(s) != 1 for s in symbols):
            raise ValueError(f"feedback symbols must be single characters: {symbols}")
        if len(set(symbols)) != 3:
            raise ValueError(f"feedback symbols must be distinct: {symbols}")

    @classmethod
    def from_symbols(cls, symbols: str, word_length: int = WORD_LENGTH) -> SolverConfig:
        """Build a config from a string like ``"GYW"`` (exact, misplaced, absent)."""
        if len(symbols) != 3:
            raise ValueError(
                f"expected three symbols (exact, misplaced, absent), got {symbols!r}"
            )
        return cls(word_length, symbols[0], symbols[1], symbols[2])

    @property
    def solved_feedback(self) -> str:
        return self.exact * self.word_length

    def symbol_for(self, mark: Mark) -> str:
        return {Mark.EXACT: self.exact, Mark.MISPLACED: self.misplaced,
                Mark.ABSENT: self.absent}[mark]


DEFAULT_CONFIG = SolverConfig()


# ------------------------------------------------------------------
# Constraint types
# ------------------------------------------------------------------

def _check_letter(letter: str) -> None:
    if letter not in _LETTERS:
        raise InvalidInputError(f"letter must be one of A-Z, got {letter!r}")


@dataclass(frozen=True)
class PositionConstraint:
    """``word[index] == letter`` must equal ``should_match``."""

    index: int
    letter: str
    should_match: bool

    def __post_init__(self) -> None:
        if self.index < 0:
            raise InvalidInputError(f"index must be non-negative, got {self.index}")
        _check_letter(self.letter)

    def satisfies(self, word: str) -> bool:
        return (word[self.index] == self.letter) == self.should_match

    def __str__(self) -> str:
        if self.should_match:
            return f"Position {self.index} must be a {self.letter}."
        return f"Position {self.index} may not be {self.letter}."


@dataclass(frozen=True)
class LetterCountConstraint:
    """The number of copies of ``letter`` is bounded below or above by ``count``."""

    count: int
    letter: str
    is_minimum: bool

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidInputError(f"count must be non-negative, got {self.count}")
        _check_letter(self.letter)

    def satisfies(self, word: str) -> bool:
        amount = word.count(self.letter)
        if self.is_minimum:
            return amount >= self.count
        return amount <= self.count

    def __str__(self) -> str:
        bound = "at least" if self.is_minimum else "at most"
        return f"Word must contain {bound} {self.count} copies of {self.letter}."


Constraint = PositionConstraint | LetterCountConstraint


# ------------------------------------------------------------------
# Text surface
# ------------------------------------------------------------------

def normalize_guess(text: str, config: SolverConfig = DEFAULT_CONFIG) -> str:
    """Upper-case a typed guess and check it is a well-formed word."""
    word = text.strip().upper()
    _validate_guess(word, config.word_length)
    return word


def parse_feedback(text: str, config: SolverConfig = DEFAULT_CONFIG) -> Feedback:
    """Turn a response like ``"GYWWG"`` into a tuple of marks.

    Raises
    ------
    InvalidInputError
        If *text* has the wrong length or contains a symbol outside the
        configured alphabet.
    """
    if len(text) != config.word_length:
        raise InvalidInputError(
            f"feedback must have {config.word_length} symbols, got {len(text)}: {text!r}"
        )
    lookup = {config.exact: Mark.EXACT, config.misplaced: Mark.MISPLACED,
              config.absent: Mark.ABSENT}
    marks = []
    for ch in text:
        if ch not in lookup:
            allowed = config.exact + config.misplaced + config.absent
            raise InvalidInputError(
                f"feedback symbol {ch!r} is not one of {allowed!r}"
            )
        marks.append(lookup[ch])
    return tuple(marks)


def format_feedback(feedback: Sequence[Mark], config: SolverConfig = DEFAULT_CONFIG) -> str:
    return "".join(config.symbol_for(Mark(m)) for m in feedback)


# ------------------------------------------------------------------
# Derivation
# ------------------------------------------------------------------

def _validate_guess(guess: str, word_length: int) -> None:
    if len(guess) != word_length:
        raise InvalidInputError(
            f"guess must have {word_length} letters, got {len(guess)}: {guess!r}"
        )
    bad = [ch for ch in guess if ch not in _LETTERS]
    if bad:
        raise InvalidInputError(f"guess {guess!r} contains non A-Z characters: {bad}")


def _validate_round(guess: str, feedback: Sequence[Mark], word_length: int) -> None:
    _validate_guess(guess, word_length)
    if len(feedback) != word_length:
        raise InvalidInputError(
            f"feedback must have {word_length} marks, got {len(feedback)}"
        )
    for m in feedback:
        if not isinstance(m, Mark):
            raise InvalidInputError(f"feedback element {m!r} is not a Mark")


def derive_position_constraints(
    guess: str,
    feedback: Sequence[Mark],
    word_length: int = WORD_LENGTH,
) -> set[PositionConstraint]:
    """Exact pins a letter to its index; misplaced bans it from that index."""
    _validate_round(guess, feedback, word_length)
    found: set[PositionConstraint] = set()
    for i, (letter, mark) in enumerate(zip(guess, feedback)):
        if mark == Mark.EXACT:
            found.add(PositionConstraint(i, letter, True))
        elif mark == Mark.MISPLACED:
            found.add(PositionConstraint(i, letter, False))
    return found


def derive_letter_count_constraints(
    guess: str,
    feedback: Sequence[Mark],
    word_length: int = WORD_LENGTH,
) -> set[LetterCountConstraint]:
    """Bound letter counts from misplaced and absent marks.

    For every misplaced/absent position the confirmed count of that letter
    is taken over the whole guess (exact + misplaced copies).  A misplaced
    mark gives a minimum; an absent mark gives a maximum, so a repeated
    letter with one green and one gray copy is capped at one rather than
    zero.
    """
    _validate_round(guess, feedback, word_length)
    confirmed: dict[str, int] = {}
    for letter, mark in zip(guess, feedback):
        if mark in (Mark.MISPLACED, Mark.EXACT):
            confirmed[letter] = confirmed.get(letter, 0) + 1

    found: set[LetterCountConstraint] = set()
    for letter, mark in zip(guess, feedback):
        if mark == Mark.MISPLACED:
            found.add(LetterCountConstraint(confirmed.get(letter, 0), letter, True))
        elif mark == Mark.ABSENT:
            found.add(LetterCountConstraint(confirmed.get(letter, 0), letter, False))
    return found
