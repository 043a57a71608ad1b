"""Integer constraint patterns (ordering, uniqueness, sums) over the CSP engine."""

from itertools import combinations
from typing import Dict, Sequence

from .errors import ConstraintError
from .model import CSP, Constraint


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PuzzleSolver:
    """Builds puzzle-style CSPs whose elements take integer states."""

    def __init__(self, seed: int = 0) -> None:
        self._csp = CSP(seed)

    @property
    def csp(self) -> CSP:
        return self._csp

    def add_element(self, name: str, possible_states: Sequence[int]) -> None:
        states = list(possible_states)
        for state in states:
            if not _is_int(state):
                raise ConstraintError(f"element {name}: state {state!r} is not an integer")
        self._csp.add_variable(name, states)

    def add_sequence_constraint(self, sequence: Sequence[str]) -> None:
        """Each element's state must be strictly less than the next one's."""
        names = list(sequence)
        if len(names) < 2:
            raise ConstraintError("sequence must have at least 2 elements")

        for first, second in zip(names, names[1:]):
            self._csp.add(Constraint.less_than(first, second))

    def add_uniqueness_constraint(self, elements: Sequence[str]) -> None:
        names = list(elements)
        if len(names) < 2:
            raise ConstraintError("uniqueness requires at least 2 elements")

        for first, second in combinations(names, 2):
            self._csp.add(Constraint.not_equal(first, second))

    def add_sum_constraint(self, elements: Sequence[str], target_sum: int) -> None:
        names = list(elements)
        if not names:
            raise ConstraintError("sum constraint requires at least 1 element")

        self._csp.add(Constraint.sum_equals(names, target_sum))

    def solve(self) -> Dict[str, int]:
        solution = self._csp.solve()

        int_solution: Dict[str, int] = {}
        for key, value in solution.items():
            if not _is_int(value):
                raise TypeError(f"invalid value type for {key}: {type(value).__name__}")
            int_solution[key] = value
        return int_solution
