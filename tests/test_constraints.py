from __future__ import annotations

import pytest

from constraints import (
    LetterCountConstraint,
    Mark,
    PositionConstraint,
    SolverConfig,
    derive_letter_count_constraints,
    derive_position_constraints,
    format_feedback,
    normalize_guess,
    parse_feedback,
)
from wordle_errors import InvalidInputError

E, M, A = Mark.EXACT, Mark.MISPLACED, Mark.ABSENT


# ------------------------------------------------------------------
# Constraint types
# ------------------------------------------------------------------

def test_position_constraint_must_equal():
    c = PositionConstraint(0, "C", True)
    assert c.satisfies("CRANE")
    assert not c.satisfies("GRADE")


def test_position_constraint_must_not_equal():
    c = PositionConstraint(2, "A", False)
    assert c.satisfies("CLOTH")
    assert not c.satisfies("CRANE")


def test_letter_count_minimum_and_maximum():
    assert LetterCountConstraint(2, "L", True).satisfies("ALLOW")
    assert not LetterCountConstraint(2, "L", True).satisfies("PLANT")
    assert LetterCountConstraint(1, "L", False).satisfies("PLANT")
    assert not LetterCountConstraint(1, "L", False).satisfies("ALLOW")
    assert LetterCountConstraint(0, "Z", False).satisfies("CRANE")


def test_constraints_are_value_types():
    assert PositionConstraint(1, "R", True) == PositionConstraint(1, "R", True)
    assert len({LetterCountConstraint(0, "E", False), LetterCountConstraint(0, "E", False)}) == 1
    assert PositionConstraint(1, "R", True) != PositionConstraint(1, "R", False)


@pytest.mark.parametrize("args", [(0, "c", True), (0, "1", True), (-1, "C", True)])
def test_position_constraint_rejects_bad_fields(args):
    with pytest.raises(InvalidInputError):
        PositionConstraint(*args)


def test_letter_count_rejects_negative_count():
    with pytest.raises(InvalidInputError):
        LetterCountConstraint(-1, "A", True)


def test_constraint_descriptions():
    assert str(PositionConstraint(0, "C", True)) == "Position 0 must be a C."
    assert str(PositionConstraint(3, "N", False)) == "Position 3 may not be N."
    assert str(LetterCountConstraint(1, "L", False)) == "Word must contain at most 1 copies of L."
    assert str(LetterCountConstraint(2, "E", True)) == "Word must contain at least 2 copies of E."


# ------------------------------------------------------------------
# Derivation
# ------------------------------------------------------------------

def test_crane_single_exact():
    marks = (E, A, A, A, A)
    assert derive_position_constraints("CRANE", marks) == {PositionConstraint(0, "C", True)}
    assert derive_letter_count_constraints("CRANE", marks) == {
        LetterCountConstraint(0, "R", False),
        LetterCountConstraint(0, "A", False),
        LetterCountConstraint(0, "N", False),
        LetterCountConstraint(0, "E", False),
    }


def test_allow_repeated_letter_split_feedback():
    marks = (M, A, E, A, A)
    positions = derive_position_constraints("ALLOW", marks)
    counts = derive_letter_count_constraints("ALLOW", marks)

    assert positions == {PositionConstraint(0, "A", False), PositionConstraint(2, "L", True)}
    assert LetterCountConstraint(1, "L", False) in counts
    assert LetterCountConstraint(0, "L", False) not in counts
    assert counts == {
        LetterCountConstraint(1, "A", True),
        LetterCountConstraint(1, "L", False),
        LetterCountConstraint(0, "O", False),
        LetterCountConstraint(0, "W", False),
    }
    # a word with exactly one L survives
    assert LetterCountConstraint(1, "L", False).satisfies("PLAZA")


def test_confirmed_count_uses_whole_guess():
    # the absent E comes before the misplaced E; the count must still be 1
    marks = (A, M, A, A, A)
    counts = derive_letter_count_constraints("EERIE", marks)
    assert counts == {
        LetterCountConstraint(1, "E", False),
        LetterCountConstraint(1, "E", True),
        LetterCountConstraint(0, "R", False),
        LetterCountConstraint(0, "I", False),
    }


def test_two_misplaced_copies_give_minimum_two():
    marks = (M, A, A, M, A)
    counts = derive_letter_count_constraints("SASSY", marks)
    assert LetterCountConstraint(2, "S", True) in counts
    assert LetterCountConstraint(2, "S", False) in counts


def test_all_exact_yields_no_count_constraints():
    marks = (E,) * 5
    assert derive_letter_count_constraints("CRATE", marks) == set()
    assert len(derive_position_constraints("CRATE", marks)) == 5


@pytest.mark.parametrize(
    "guess, marks",
    [
        ("CRAN", (E, A, A, A)),
        ("CRANE", (E, A, A, A)),
        ("crane", (E, A, A, A, A)),
        ("CR4NE", (E, A, A, A, A)),
        ("CRANE", (2, 0, 0, 0, 0)),
    ],
)
def test_derivation_rejects_malformed_input(guess, marks):
    with pytest.raises(InvalidInputError):
        derive_position_constraints(guess, marks)
    with pytest.raises(InvalidInputError):
        derive_letter_count_constraints(guess, marks)


def test_derivation_honours_configured_length():
    marks = (E, M, A, A, A, A)
    positions = derive_position_constraints("PLANET", marks, word_length=6)
    assert PositionConstraint(1, "L", False) in positions


# ------------------------------------------------------------------
# Text surface
# ------------------------------------------------------------------

def test_parse_and_format_feedback():
    assert parse_feedback("GYWWG") == (E, M, A, A, E)
    assert format_feedback((E, M, A, A, E)) == "GYWWG"


@pytest.mark.parametrize("text", ["GYWW", "GYWWGG", "gywwg", "GYXWG"])
def test_parse_feedback_rejects_malformed(text):
    with pytest.raises(InvalidInputError):
        parse_feedback(text)


def test_custom_symbols():
    config = SolverConfig.from_symbols("GYB")
    assert parse_feedback("BBGYB", config) == (A, A, E, M, A)
    assert config.solved_feedback == "GGGGG"
    with pytest.raises(InvalidInputError):
        parse_feedback("WWWWW", config)


@pytest.mark.parametrize("symbols", ["GY", "GGW", "GYWX"])
def test_config_rejects_bad_symbols(symbols):
    with pytest.raises(ValueError):
        SolverConfig.from_symbols(symbols)


def test_normalize_guess():
    assert normalize_guess(" crane\n") == "CRANE"
    with pytest.raises(InvalidInputError):
        normalize_guess("cranes")
    with pytest.raises(InvalidInputError):
        normalize_guess("cr-ne")
