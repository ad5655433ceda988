#!/usr/bin/env python3
"""Interactive Wordle helper.

Suggests a guess, reads back the colours the game showed, prunes the
dictionary and suggests again until the word is found.

Usage:
    python solver.py                        # system word list
    python solver.py words.txt --seed 7     # custom list, reproducible picks
    python solver.py --symbols GYB          # type B (black) for absent letters
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from candidate_pool import CandidatePool
from constraints import (
    DEFAULT_CONFIG,
    Constraint,
    Feedback,
    Mark,
    SolverConfig,
    derive_letter_count_constraints,
    derive_position_constraints,
    format_feedback,
    normalize_guess,
    parse_feedback,
)
from ledger import ConstraintLedger
from lexicon import DEFAULT_DICT_PATH, load_words
from wordle_errors import EmptyPoolError, InvalidInputError


@dataclass(frozen=True)
class RoundOutcome:
    """What one (guess, feedback) round did to the session."""

    guess: str
    feedback: Feedback
    solved: bool
    admitted: frozenset[Constraint]
    removed: int
    remaining: int


class WordleSolver:
    """One solving session: candidate pool, constraint ledger and RNG.

    Parameters
    ----------
    words : iterable of str
        Initial candidates (normally the output of ``lexicon.load_words``).
    config : SolverConfig
        Word length and feedback symbols.
    seed : int or None
        Seed for tie-breaking between equally good guesses.
    rng : random.Random or None
        Explicit randomness source; overrides *seed*.
    """

    def __init__(
        self,
        words: Iterable[str],
        config: SolverConfig = DEFAULT_CONFIG,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config
        self._pool = CandidatePool(normalize_guess(w, config) for w in words)
        self._ledger = ConstraintLedger()
        self._rng = rng if rng is not None else random.Random(seed)
        self._num_guesses = 0
        self._solved = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def recommend(self) -> str:
        """Best next guess.  Raises ``EmptyPoolError`` once nothing fits."""
        return self._pool.best_guess(self._rng)

    def record(self, guess: str, feedback: str | Sequence[Mark]) -> RoundOutcome:
        """Learn from the marks *guess* received and prune the pool.

        *feedback* is either the typed response (``"GYWWG"``) or a
        sequence of ``Mark``.

        Raises
        ------
        InvalidInputError
            If the guess or feedback is malformed.  Nothing is recorded.
        RuntimeError
            If the session is already solved.
        """
        if self._solved:
            raise RuntimeError("Puzzle already solved")
        word = normalize_guess(guess, self._config)
        if isinstance(feedback, str):
            marks = parse_feedback(feedback, self._config)
        else:
            try:
                marks = tuple(Mark(m) for m in feedback)
            except ValueError as exc:
                raise InvalidInputError(str(exc)) from exc
        length = self._config.word_length
        positions = derive_position_constraints(word, marks, length)
        counts = derive_letter_count_constraints(word, marks, length)
        self._num_guesses += 1

        if all(m == Mark.EXACT for m in marks):
            self._solved = True
            return RoundOutcome(word, marks, True, frozenset(), 0, len(self._pool))

        admitted = frozenset(c for c in (*positions, *counts) if self._ledger.admit(c))
        removed = self._ledger.apply_pending(self._pool)
        return RoundOutcome(word, marks, False, admitted, removed, len(self._pool))

    @property
    def config(self) -> SolverConfig:
        return self._config

    @property
    def pool(self) -> CandidatePool:
        return self._pool

    @property
    def ledger(self) -> ConstraintLedger:
        return self._ledger

    @property
    def num_guesses(self) -> int:
        return self._num_guesses

    @property
    def remaining(self) -> int:
        return len(self._pool)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def exhausted(self) -> bool:
        return not self._solved and len(self._pool) == 0


# ------------------------------------------------------------------
# Interaction loop
# ------------------------------------------------------------------

def _example_response(config: SolverConfig) -> str:
    n = config.word_length
    if n < 4:
        return (config.exact + config.misplaced + config.absent)[:n]
    return config.exact + config.misplaced + config.absent * (n - 3) + config.exact


def play(
    solver: WordleSolver,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
    verbose: bool = False,
) -> bool:
    """Drive rounds until solved, out of candidates, or out of input.

    Each response is either the feedback alone, or ``WORD FEEDBACK`` when
    a different word than the suggested one was played.  Malformed
    responses are reported and asked for again.

    Returns True if the puzzle was solved.
    """
    read = read or input
    write = write or print
    prompt = f"Enter a response like {_example_response(solver.config)}: "
    while True:
        try:
            guess = solver.recommend()
        except EmptyPoolError as exc:
            write(str(exc))
            return False
        write(f"You should guess {guess}")

        while True:
            try:
                line = read(prompt)
            except EOFError:
                write("")
                return False
            parts = line.split()
            if not parts:
                continue
            try:
                if len(parts) == 1:
                    outcome = solver.record(guess, parts[0])
                elif len(parts) == 2:
                    outcome = solver.record(parts[0], parts[1])
                else:
                    raise InvalidInputError(
                        f"expected FEEDBACK or WORD FEEDBACK, got {line.strip()!r}"
                    )
            except InvalidInputError as exc:
                write(f"Invalid response: {exc}")
                continue
            break

        if outcome.solved:
            write(f"Yay, we got it in {solver.num_guesses} guesses!")
            return True

        if verbose:
            write(f"  {outcome.guess} {format_feedback(outcome.feedback, solver.config)}")
            for c in sorted(outcome.admitted, key=str):
                write(f"    {c}")
            write(f"  removed {outcome.removed}, {outcome.remaining} candidates remain")


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Interactive Wordle helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
responses:
  GYWWG          colours for the suggested word (G exact, Y misplaced, W absent)
  CRANE GYWWG    colours for a different word you played instead
""",
    )
    parser.add_argument("dictionary", nargs="?", default=None,
                        help=f"Word list to draw from (default: {DEFAULT_DICT_PATH})")
    parser.add_argument("--length", type=int, default=DEFAULT_CONFIG.word_length,
                        help="Word length (default: 5)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for tie-breaking (default: random)")
    parser.add_argument("--symbols", type=str, default="GYW",
                        help="Feedback symbols for exact, misplaced, absent (default: GYW)")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on duplicate dictionary entries instead of merging them")
    parser.add_argument("--verbose", action="store_true",
                        help="Print the constraints learned each round")
    args = parser.parse_args(argv)

    try:
        config = SolverConfig.from_symbols(args.symbols, word_length=args.length)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        words = load_words(args.dictionary, word_length=args.length, strict=args.strict)
    except (OSError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    print(f"Dictionary: {len(words)} words of length {args.length}", flush=True)

    solver = WordleSolver(words, config=config, seed=args.seed)
    play(solver, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
