"""Top-level puzzle interface.

Expose `generate_puzzle(seed, params)` and `validate_puzzle(puzzle)` for the
systems that place puzzles in dungeons, and `solve_puzzle(problem)` for running
the CSP engine on a hand-built problem.
"""

from typing import Any, Dict, Mapping, Union

from src.csp.model import CSP
from src.csp.patterns import PuzzleSolver
from src.puzzle.generator import Generator
from src.puzzle.types import GenerationParams, Puzzle
from src.puzzle.validator import validate

_default_generator = Generator()


def solve_puzzle(problem: Any) -> Dict[str, Any]:
    """
    Solve a constraint problem and return a mapping from variable name to assigned value.
    Accepts:
      - CSP instances (solved directly)
      - PuzzleSolver instances (integer-valued results)
    Raises NoSolutionError if no consistent assignment exists.
    """
    if isinstance(problem, PuzzleSolver):
        return problem.solve()
    if isinstance(problem, CSP):
        return problem.solve()
    raise TypeError("solve_puzzle expects a CSP or PuzzleSolver instance")


def generate_puzzle(seed: int, params: Union[GenerationParams, Mapping[str, Any]]) -> Puzzle:
    """Generate one validated puzzle; `params` may also be a plain mapping."""
    if not isinstance(params, GenerationParams):
        params = GenerationParams.from_dict(params)
    return _default_generator.generate(seed, params)


def validate_puzzle(puzzle: Any) -> None:
    validate(puzzle)


__all__ = ["solve_puzzle", "generate_puzzle", "validate_puzzle"]
