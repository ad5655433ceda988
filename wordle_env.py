"""Simulated games: a feedback oracle and a single-game environment.

Used to play the solver against a known secret (benchmarks and tests).
"""

from __future__ import annotations

import random
from collections import Counter

from constraints import Feedback, Mark, WORD_LENGTH


def feedback(secret: str, guess: str) -> Feedback:
    """Return the marks *guess* earns against *secret*.

    Exact matches consume their letter first; remaining copies of a letter
    are handed out as misplaced marks left to right, and any copy beyond
    the secret's supply is absent.
    """
    n = len(secret)
    if len(guess) != n:
        raise ValueError(
            f"guess length ({len(guess)}) != secret length ({n})"
        )

    secret = secret.upper()
    guess = guess.upper()

    marks = [Mark.ABSENT] * n
    remaining = Counter(secret)

    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            marks[i] = Mark.EXACT
            remaining[g] -= 1

    for i, g in enumerate(guess):
        if marks[i] == Mark.EXACT:
            continue
        if remaining[g] > 0:
            marks[i] = Mark.MISPLACED
            remaining[g] -= 1

    return tuple(marks)


class WordleEnv:
    """A single game against a hidden secret.

    Parameters
    ----------
    vocabulary : iterable of str
        Words the secret may be drawn from (upper case, same length).
    word_length : int
        Expected word length (validated against vocabulary).
    max_guesses : int
        Maximum allowed guesses before the game is lost.
    """

    def __init__(
        self,
        vocabulary,
        word_length: int = WORD_LENGTH,
        max_guesses: int = 6,
    ) -> None:
        vocab = sorted(vocabulary)
        bad = [w for w in vocab if len(w) != word_length]
        if bad:
            raise ValueError(
                f"Words with wrong length (expected {word_length}): {bad[:5]}"
            )
        self._vocab = vocab
        self._vocab_set = set(vocab)
        self._word_length = word_length
        self._max_guesses = max_guesses

        self._secret: str | None = None
        self._history: list[tuple[str, Feedback]] = []
        self._solved = False

    def reset(self, secret: str | None = None, rng: random.Random | None = None) -> None:
        """Start a new game. Random secret (from *rng*) if *secret* is None."""
        if secret is not None:
            secret = secret.upper()
            if secret not in self._vocab_set:
                raise ValueError(f"secret {secret!r} is not in vocabulary")
        else:
            secret = (rng or random.Random()).choice(self._vocab)
        self._secret = secret
        self._history = []
        self._solved = False

    def guess(self, word: str) -> Feedback:
        """Submit a guess and receive its marks.

        Raises
        ------
        RuntimeError
            If no game was started or the game is over.
        ValueError
            If *word* has the wrong length.
        """
        if self._secret is None:
            raise RuntimeError("Call reset() before guessing")
        if self.game_over():
            raise RuntimeError("Game is already over")
        word = word.upper()
        if len(word) != self._word_length:
            raise ValueError(
                f"Guess length ({len(word)}) != word_length ({self._word_length})"
            )

        marks = feedback(self._secret, word)
        self._history.append((word, marks))
        if word == self._secret:
            self._solved = True
        return marks

    def is_solved(self) -> bool:
        return self._solved

    def game_over(self) -> bool:
        return self._solved or len(self._history) >= self._max_guesses

    @property
    def history(self) -> list[tuple[str, Feedback]]:
        return list(self._history)

    @property
    def secret(self) -> str:
        """Reveal the secret word (only after game over)."""
        if self._secret is None:
            raise RuntimeError("No game in progress")
        if not self.game_over():
            raise RuntimeError("Game is still in progress")
        return self._secret
