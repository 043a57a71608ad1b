"""Tests for structural puzzle validation."""

import pytest

from src.puzzle.errors import ValidationError
from src.puzzle.types import Puzzle, PuzzleElement, PuzzleType
from src.puzzle.validator import validate


def _make_puzzle(**overrides):
    elements = [
        PuzzleElement(id=f"plate_{i}", element_type="pressure_plate", position=(i, i), state=False)
        for i in range(3)
    ]
    fields = dict(
        id="pressure_1",
        type=PuzzleType.PRESSURE_PLATE,
        difficulty=3,
        solution=["plate_0", "plate_2"],
        element_count=3,
        elements=elements,
        hint_text="Step on 2 pressure plates to unlock the door",
        description="Ancient pressure plates guard this passage",
        reward_type="door",
    )
    fields.update(overrides)
    return Puzzle(**fields)


def test_valid_puzzle_passes():
    validate(_make_puzzle())


def test_rejects_non_puzzle():
    with pytest.raises(ValidationError):
        validate({"id": "pressure_1"})


def test_rejects_missing_id():
    with pytest.raises(ValidationError, match="missing ID"):
        validate(_make_puzzle(id=""))


def test_rejects_zero_elements():
    with pytest.raises(ValidationError, match="no elements"):
        validate(_make_puzzle(element_count=0, elements=[]))


def test_rejects_empty_solution():
    with pytest.raises(ValidationError, match="no solution"):
        validate(_make_puzzle(solution=[]))


@pytest.mark.parametrize("difficulty", [0, 11, -3])
def test_rejects_difficulty_out_of_range(difficulty):
    with pytest.raises(ValidationError, match="out of range"):
        validate(_make_puzzle(difficulty=difficulty))


def test_rejects_element_count_mismatch():
    with pytest.raises(ValidationError, match="element count mismatch"):
        validate(_make_puzzle(element_count=4))


def test_rejects_unknown_solution_id():
    with pytest.raises(ValidationError, match="plate_9"):
        validate(_make_puzzle(solution=["plate_0", "plate_9"]))


def test_rejects_duplicate_element_ids():
    puzzle = _make_puzzle()
    puzzle.elements[1].id = "plate_0"
    with pytest.raises(ValidationError, match="duplicate"):
        validate(puzzle)


def test_timed_challenge_needs_time_limit():
    with pytest.raises(ValidationError, match="time limit"):
        validate(_make_puzzle(type=PuzzleType.TIMED_CHALLENGE, time_limit=0.0))
    validate(_make_puzzle(type=PuzzleType.TIMED_CHALLENGE, time_limit=12.5))


def test_rejects_untyped_element():
    puzzle = _make_puzzle()
    puzzle.elements[1] = {"id": "plate_1", "element_type": "pressure_plate"}
    with pytest.raises(ValidationError, match="not a PuzzleElement"):
        validate(puzzle)


@pytest.mark.parametrize("difficulty", ["5", 5.0, None, True])
def test_rejects_non_integer_difficulty(difficulty):
    with pytest.raises(ValidationError, match="difficulty must be an integer"):
        validate(_make_puzzle(difficulty=difficulty))


def test_rejects_non_integer_element_count():
    with pytest.raises(ValidationError, match="element count must be an integer"):
        validate(_make_puzzle(element_count="3"))


def test_rejects_non_numeric_time_limit():
    with pytest.raises(ValidationError, match="time limit must be a number"):
        validate(_make_puzzle(type=PuzzleType.TIMED_CHALLENGE, time_limit="30"))


def test_rejects_non_string_solution_id():
    with pytest.raises(ValidationError, match="solution id must be a string"):
        validate(_make_puzzle(solution=["plate_0", 2]))
