from __future__ import annotations

import pytest

from constraints import Mark
from wordle_env import WordleEnv, feedback

E, M, A = Mark.EXACT, Mark.MISPLACED, Mark.ABSENT


def test_feedback_basic():
    assert feedback("CRANE", "CRANE") == (E,) * 5
    assert feedback("CRANE", "NACRE") == (M, M, M, M, E)
    assert feedback("CRANE", "MUMMY") == (A,) * 5


def test_feedback_repeated_letters():
    # only one L in the secret: the exact copy consumes it
    assert feedback("PLAZA", "ALLOW") == (M, E, A, A, A)
    assert feedback("WORLD", "ALLOW") == (A, M, A, M, M)
    # three Es each: two exact, the leading one misplaced
    assert feedback("GEESE", "EERIE") == (M, E, A, A, E)


def test_feedback_length_mismatch():
    with pytest.raises(ValueError):
        feedback("CRANE", "CRANES")


def test_env_game_flow():
    env = WordleEnv(["CRANE", "GRADE", "CRATE"], max_guesses=3)
    env.reset(secret="crate")
    assert env.guess("crane") == (E, E, E, A, E)
    assert not env.game_over()
    env.guess("CRATE")
    assert env.is_solved()
    assert env.game_over()
    assert env.secret == "CRATE"
    assert [g for g, _ in env.history] == ["CRANE", "CRATE"]


def test_env_runs_out_of_guesses():
    env = WordleEnv(["CRANE", "GRADE"], max_guesses=1)
    env.reset(secret="GRADE")
    env.guess("CRANE")
    assert env.game_over()
    assert not env.is_solved()
    with pytest.raises(RuntimeError):
        env.guess("GRADE")


def test_env_validation():
    with pytest.raises(ValueError):
        WordleEnv(["CRANE", "CAT"])
    env = WordleEnv(["CRANE"])
    with pytest.raises(RuntimeError):
        env.guess("CRANE")
    with pytest.raises(ValueError):
        env.reset(secret="GRADE")
    env.reset()
    with pytest.raises(RuntimeError):
        env.secret
