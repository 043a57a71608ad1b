"""CSP models, solver core, and integer constraint patterns for puzzle generation."""

from .errors import (
    ConstraintError,
    DuplicateVariableError,
    NoSolutionError,
    SearchLimitExceeded,
    UnknownVariableError,
)
from .model import Variable, Constraint, CSP
from .patterns import PuzzleSolver
from .solver_core import solve

__all__ = [
    "Variable",
    "Constraint",
    "CSP",
    "PuzzleSolver",
    "solve",
    "ConstraintError",
    "DuplicateVariableError",
    "UnknownVariableError",
    "NoSolutionError",
    "SearchLimitExceeded",
]
