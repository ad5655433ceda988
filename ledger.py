"""Bookkeeping of which constraints have already pruned the pool.

Constraints move Unseen -> New -> Finished.  ``apply_pending`` prunes the
pool with every New constraint and then promotes them all; a Finished
constraint is never admitted again, so replaying an already processed
round changes nothing.
"""

from __future__ import annotations

from typing import Iterable

from candidate_pool import CandidatePool
from constraints import Constraint, LetterCountConstraint, PositionConstraint


class ConstraintLedger:
    def __init__(self) -> None:
        self._finished_positions: set[PositionConstraint] = set()
        self._finished_counts: set[LetterCountConstraint] = set()
        self._new_positions: set[PositionConstraint] = set()
        self._new_counts: set[LetterCountConstraint] = set()

    def admit(self, constraint: Constraint) -> bool:
        """Queue *constraint* unless it is already finished or pending.

        Returns True only when the constraint was newly queued.
        """
        if isinstance(constraint, PositionConstraint):
            finished, new = self._finished_positions, self._new_positions
        elif isinstance(constraint, LetterCountConstraint):
            finished, new = self._finished_counts, self._new_counts
        else:
            raise TypeError(f"not a constraint: {constraint!r}")
        if constraint in finished or constraint in new:
            return False
        new.add(constraint)
        return True

    def admit_all(self, constraints: Iterable[Constraint]) -> int:
        return sum(1 for c in constraints if self.admit(c))

    def apply_pending(self, pool: CandidatePool) -> int:
        """Prune *pool* with all pending constraints, then mark them finished."""
        predicates = [c.satisfies for c in self._new_positions]
        predicates += [c.satisfies for c in self._new_counts]
        removed = pool.filter(predicates)
        self._finished_positions |= self._new_positions
        self._finished_counts |= self._new_counts
        self._new_positions = set()
        self._new_counts = set()
        return removed

    @property
    def finished_positions(self) -> frozenset[PositionConstraint]:
        return frozenset(self._finished_positions)

    @property
    def finished_counts(self) -> frozenset[LetterCountConstraint]:
        return frozenset(self._finished_counts)

    @property
    def pending_positions(self) -> frozenset[PositionConstraint]:
        return frozenset(self._new_positions)

    @property
    def pending_counts(self) -> frozenset[LetterCountConstraint]:
        return frozenset(self._new_counts)

    @property
    def finished(self) -> frozenset[Constraint]:
        return frozenset(self._finished_positions | self._finished_counts)

    @property
    def pending(self) -> frozenset[Constraint]:
        return frozenset(self._new_positions | self._new_counts)
