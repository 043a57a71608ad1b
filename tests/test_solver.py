"""Integration-style tests for the top-level puzzle interface."""

import pytest

from solver import generate_puzzle, solve_puzzle, validate_puzzle
from src.csp.errors import NoSolutionError
from src.csp.model import CSP, Constraint
from src.csp.patterns import PuzzleSolver
from src.puzzle.errors import ValidationError
from src.puzzle.types import GenerationParams, Puzzle


def _plate_is_pressed_after_lever(assignment):
    order = {"off": 0, "on": 1}
    return order[assignment["Lever_Position"]] <= int(assignment["Plate_Pressed"])


def _build_demo_room() -> CSP:
    csp = CSP(seed=3)
    csp.add_variable("Lever_Position", ["off", "on"])
    csp.add_variable("Plate_Pressed", [False, True])
    csp.add_variable("Door_Symbol", ["moon", "sun", "star"])

    csp.add(Constraint.equals("Lever_Position", "on"))
    csp.add_constraint(
        ["Lever_Position", "Plate_Pressed"],
        _plate_is_pressed_after_lever,
        "Plate pressed once lever is on",
    )
    csp.add_constraint(["Door_Symbol"], lambda a: a["Door_Symbol"] != "moon")
    return csp


def test_solver_solves_small_room():
    csp = _build_demo_room()
    solution = solve_puzzle(csp)

    assert set(solution.keys()) == set(csp.variable_names())
    assert solution["Lever_Position"] == "on"
    assert solution["Plate_Pressed"] is True
    assert solution["Door_Symbol"] == "sun"


def test_solver_accepts_pattern_builder():
    builder = PuzzleSolver()
    for name in ("a", "b"):
        builder.add_element(name, [1, 2, 3])
    builder.add_sequence_constraint(["a", "b"])
    assert solve_puzzle(builder) == {"a": 1, "b": 2}


def test_solver_reports_unsatisfiable():
    csp = CSP()
    csp.add_variable("A", [1])
    csp.add_variable("B", [1])
    csp.add(Constraint.all_diff(["A", "B"]))
    with pytest.raises(NoSolutionError):
        solve_puzzle(csp)


def test_solver_rejects_other_inputs():
    with pytest.raises(TypeError):
        solve_puzzle({"A": [1, 2]})


def test_generate_puzzle_accepts_mapping_params():
    from_mapping = generate_puzzle(12345, {"difficulty": 0.5, "depth": 5, "genreID": "fantasy"})
    from_params = generate_puzzle(12345, GenerationParams(difficulty=0.5, depth=5))

    assert isinstance(from_mapping, Puzzle)
    assert from_mapping == from_params
    assert from_mapping.difficulty == 5
    validate_puzzle(from_mapping)


def test_validate_puzzle_rejects_tampered_solution():
    puzzle = generate_puzzle(7, GenerationParams(difficulty=0.3, depth=4))
    puzzle.solution.append("missing_element")
    with pytest.raises(ValidationError):
        validate_puzzle(puzzle)
