"""CSP core data structures and helper logic."""

import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import ConstraintError, DuplicateVariableError, UnknownVariableError

DomainValue = Union[int, str, bool]
Assignment = Dict[str, DomainValue]
Predicate = Callable[[Assignment], bool]

_SUPPORTED_VALUE_TYPES = (int, str, bool)


@dataclass
class Variable:
    name: str
    domain: Tuple[DomainValue, ...] = ()
    value: Optional[DomainValue] = None

    @property
    def is_assigned(self) -> bool:
        return self.value is not None


@dataclass
class Constraint:
    """
    A constraint is defined by a scope (the variables it touches) and a predicate
    over an assignment. The predicate only decides anything once every variable
    in the scope is assigned; before that the constraint is vacuously satisfied.
    """

    description: str
    scope: List[str] = field(default_factory=list)
    predicate: Optional[Predicate] = None

    @classmethod
    def all_diff(cls, variables: Iterable[str]) -> "Constraint":
        vars_list = list(variables)
        desc = f"AllDiff: {', '.join(vars_list)}"

        def _predicate(assignment: Assignment) -> bool:
            values = [assignment[var] for var in vars_list]
            return len(values) == len(set(values))

        return cls(description=desc, scope=vars_list, predicate=_predicate)

    @classmethod
    def not_equal(cls, first: str, second: str) -> "Constraint":
        def _predicate(assignment: Assignment) -> bool:
            return assignment[first] != assignment[second]

        return cls(description=f"{first} != {second}", scope=[first, second], predicate=_predicate)

    @classmethod
    def less_than(cls, first: str, second: str) -> "Constraint":
        def _predicate(assignment: Assignment) -> bool:
            return assignment[first] < assignment[second]

        return cls(description=f"{first} < {second}", scope=[first, second], predicate=_predicate)

    @classmethod
    def sum_equals(cls, variables: Iterable[str], target: int) -> "Constraint":
        vars_list = list(variables)
        desc = f"Sum({', '.join(vars_list)}) == {target}"

        def _predicate(assignment: Assignment) -> bool:
            return sum(assignment[var] for var in vars_list) == target

        return cls(description=desc, scope=vars_list, predicate=_predicate)

    @classmethod
    def equals(cls, variable: str, value: DomainValue) -> "Constraint":
        def _predicate(assignment: Assignment) -> bool:
            return assignment[variable] == value

        return cls(description=f"{variable} == {value}", scope=[variable], predicate=_predicate)

    def involves(self, variable: str) -> bool:
        return variable in self.scope

    def is_fully_assigned(self, assignment: Assignment) -> bool:
        return all(var in assignment for var in self.scope)

    def is_satisfied(self, assignment: Assignment) -> bool:
        if not self.is_fully_assigned(assignment):
            return True
        if self.predicate is None:
            return True
        return bool(self.predicate(assignment))


class CSP:
    """
    A constraint satisfaction problem built incrementally.

    Variables keep their registration order, which together with name-based
    tie-breaking in the solver makes every search reproducible. The seeded RNG
    is reserved for randomized tie-breaking and is not used by the search.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self.variables: Dict[str, Variable] = {}
        self.constraints: List[Constraint] = []
        # Map each variable to the constraints that mention it.
        self.constraints_by_var: Dict[str, List[Constraint]] = {}

    def add_variable(self, name: str, domain: Sequence[DomainValue]) -> Variable:
        if not name:
            raise ConstraintError("variable name must be non-empty")
        if name in self.variables:
            raise DuplicateVariableError(name)
        values = tuple(domain)
        for value in values:
            if not isinstance(value, _SUPPORTED_VALUE_TYPES):
                raise ConstraintError(
                    f"variable {name}: unsupported domain value {value!r} "
                    f"({type(value).__name__}); expected int, str or bool"
                )

        variable = Variable(name=name, domain=values)
        self.variables[name] = variable
        self.constraints_by_var[name] = []
        return variable

    def add_constraint(
        self,
        scope: Sequence[str],
        predicate: Predicate,
        description: Optional[str] = None,
    ) -> Constraint:
        scope_list = list(scope)
        constraint = Constraint(
            description=description or f"Constraint({', '.join(scope_list)})",
            scope=scope_list,
            predicate=predicate,
        )
        return self.add(constraint)

    def add(self, constraint: Constraint) -> Constraint:
        """Register a prebuilt constraint after checking its scope."""
        for var in constraint.scope:
            if var not in self.variables:
                raise UnknownVariableError(var)

        self.constraints.append(constraint)
        for var in dict.fromkeys(constraint.scope):
            self.constraints_by_var[var].append(constraint)
        return constraint

    def solve(self, node_limit: Optional[int] = None) -> Assignment:
        """Run backtracking search and record the assigned values on each variable."""
        from .solver_core import solve

        self.reset()
        solution = solve(self, node_limit=node_limit)
        for name, value in solution.items():
            self.variables[name].value = value
        return solution

    def reset(self) -> None:
        """Clear recorded values; variables and constraints are kept."""
        for variable in self.variables.values():
            variable.value = None

    def variable_names(self) -> List[str]:
        return list(self.variables)

    def domain_size(self, name: str) -> int:
        variable = self.variables.get(name)
        return len(variable.domain) if variable is not None else 0

    def constraint_count(self) -> int:
        return len(self.constraints)

    def constraints_for(self, variable: str) -> List[Constraint]:
        return self.constraints_by_var.get(variable, [])
