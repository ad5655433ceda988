"""The working set of words still consistent with every applied constraint."""

from __future__ import annotations

import random
import string
from typing import Callable, Iterable, Iterator

import numpy as np

from wordle_errors import EmptyPoolError

_ALPHABET = string.ascii_uppercase
_INDEX = {ch: i for i, ch in enumerate(_ALPHABET)}


def _presence_matrix(words: list[str]) -> np.ndarray:
    """Boolean (len(words), 26) matrix: does word i contain letter j."""
    presence = np.zeros((len(words), len(_ALPHABET)), dtype=bool)
    for i, w in enumerate(words):
        presence[i, [_INDEX[ch] for ch in set(w)]] = True
    return presence


class CandidatePool:
    """Words that could still be the secret.

    The pool only ever shrinks: words are removed by ``filter`` and never
    added back.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: set[str] = set(words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    @property
    def words(self) -> frozenset[str]:
        return frozenset(self._words)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _scored(self) -> tuple[list[str], np.ndarray, np.ndarray]:
        words = sorted(self._words)
        presence = _presence_matrix(words)
        freq = presence.sum(axis=0)
        scores = presence.astype(np.int64) @ freq
        return words, freq, scores

    def letter_frequencies(self) -> dict[str, int]:
        """How many candidates contain each letter at least once."""
        _, freq, _ = self._scored()
        return {ch: int(n) for ch, n in zip(_ALPHABET, freq)}

    def scores(self) -> dict[str, int]:
        """Sum of letter frequencies over each word's distinct letters."""
        words, _, scores = self._scored()
        return {w: int(s) for w, s in zip(words, scores)}

    def best_guess(self, rng: random.Random) -> str:
        """Pick uniformly among the highest-scoring candidates.

        Letters that appear in many candidates split the pool the most, so
        words made of common (distinct) letters are preferred.

        Raises
        ------
        EmptyPoolError
            If no candidates remain.
        """
        if not self._words:
            raise EmptyPoolError()
        words, _, scores = self._scored()
        best = scores.max()
        tied = [w for w, s in zip(words, scores) if s == best]
        return rng.choice(tied)

    # ------------------------------------------------------------------
    # Pruning
    # ------------------------------------------------------------------

    def filter(self, predicates: Iterable[Callable[[str], bool]]) -> int:
        """Drop every word failing at least one predicate; return how many went."""
        preds = list(predicates)
        if not preds:
            return 0
        kept = {w for w in self._words if all(p(w) for p in preds)}
        removed = len(self._words) - len(kept)
        self._words = kept
        return removed
