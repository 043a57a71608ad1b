"""Structural checks for puzzles, usable independently of generation."""

from numbers import Real
from typing import Any, Set

from .errors import ValidationError
from .types import Puzzle, PuzzleElement, PuzzleType


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_field_types(puzzle: Puzzle) -> None:
    # Puzzles rebuilt from stored data may carry untyped fields.
    if not _is_int(puzzle.difficulty):
        raise ValidationError(f"puzzle difficulty must be an integer, got {puzzle.difficulty!r}")
    if not _is_int(puzzle.element_count):
        raise ValidationError(f"element count must be an integer, got {puzzle.element_count!r}")
    if not isinstance(puzzle.time_limit, Real) or isinstance(puzzle.time_limit, bool):
        raise ValidationError(f"time limit must be a number, got {puzzle.time_limit!r}")
    if not isinstance(puzzle.elements, (list, tuple)):
        raise ValidationError("puzzle elements must be a list")
    if not isinstance(puzzle.solution, (list, tuple)):
        raise ValidationError("puzzle solution must be a list")

    for index, element in enumerate(puzzle.elements):
        if not isinstance(element, PuzzleElement):
            raise ValidationError(
                f"element {index} is not a PuzzleElement: {type(element).__name__}"
            )
    for solution_id in puzzle.solution:
        if not isinstance(solution_id, str):
            raise ValidationError(f"solution id must be a string, got {solution_id!r}")


def validate(puzzle: Any) -> None:
    """Raise ValidationError if `puzzle` breaks any structural invariant."""
    if not isinstance(puzzle, Puzzle):
        raise ValidationError(f"invalid puzzle type: expected Puzzle, got {type(puzzle).__name__}")

    _check_field_types(puzzle)

    if not puzzle.id:
        raise ValidationError("puzzle missing ID")

    if puzzle.element_count < 1:
        raise ValidationError("puzzle has no elements")

    if not puzzle.solution:
        raise ValidationError("puzzle has no solution")

    if not 1 <= puzzle.difficulty <= 10:
        raise ValidationError(f"puzzle difficulty {puzzle.difficulty} out of range [1-10]")

    if len(puzzle.elements) != puzzle.element_count:
        raise ValidationError(
            f"element count mismatch: declared={puzzle.element_count}, "
            f"actual={len(puzzle.elements)}"
        )

    element_ids: Set[str] = set()
    for element in puzzle.elements:
        if element.id in element_ids:
            raise ValidationError(f"duplicate element id: {element.id}")
        element_ids.add(element.id)

    for solution_id in puzzle.solution:
        if solution_id not in element_ids:
            raise ValidationError(f"solution references non-existent element: {solution_id}")

    if puzzle.type == PuzzleType.TIMED_CHALLENGE and puzzle.time_limit <= 0:
        raise ValidationError("timed challenge must have positive time limit")
