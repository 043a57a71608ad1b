"""Backtracking CSP solver with the MRV heuristic."""

from typing import TYPE_CHECKING, List, Optional

from src import config
from src.utils.logging_utils import get_logger
from src.utils.trace import Tracer, get_tracer

from .errors import NoSolutionError, SearchLimitExceeded
from .model import Assignment, DomainValue

if TYPE_CHECKING:
    from .model import CSP

logger = get_logger("csp")


class _SearchBudget:
    def __init__(self, node_limit: Optional[int]):
        self.node_limit = node_limit
        self.nodes = 0

    def spend(self) -> None:
        self.nodes += 1
        if self.node_limit is not None and self.nodes > self.node_limit:
            raise SearchLimitExceeded(self.node_limit)


def solve(csp: "CSP", node_limit: Optional[int] = None) -> Assignment:
    """
    Solve a CSP instance using chronological backtracking with MRV.
    Returns an assignment mapping variable -> value.
    Raises NoSolutionError if the instance is unsatisfiable, or
    SearchLimitExceeded if more than `node_limit` assignments were tried.
    The global tracer holds the steps of this search only.
    """
    tracer = get_tracer()
    tracer.clear()
    if node_limit is None:
        node_limit = config.SOLVER_NODE_LIMIT
    budget = _SearchBudget(node_limit)

    result = _backtrack(csp, {}, tracer, budget)
    if result is None:
        tracer.log_no_solution(variable_count=len(csp.variables))
        logger.debug(
            "No solution for %d variables after %d nodes", len(csp.variables), budget.nodes
        )
        raise NoSolutionError("no solution found")
    return result


def _backtrack(
    csp: "CSP", assignment: Assignment, tracer: Tracer, budget: _SearchBudget
) -> Optional[Assignment]:
    if len(assignment) == len(csp.variables):
        tracer.log_solution_found(assignment_size=len(assignment))
        return dict(assignment)

    var = _select_unassigned_variable(csp, assignment)
    if var is None:
        return None

    for value in _order_domain_values(csp, var):
        budget.spend()
        # Each level works on its own snapshot; the caller's assignment is never mutated.
        local_assignment = dict(assignment)
        local_assignment[var] = value
        tracer.log_assign(
            variable=var,
            value=value,
            domain_size=csp.domain_size(var),
            assignment_size=len(local_assignment),
        )

        if not _is_value_consistent(csp, var, local_assignment, tracer):
            continue

        result = _backtrack(csp, local_assignment, tracer, budget)
        if result is not None:
            return result

    tracer.log_backtrack(var)
    return None


def _select_unassigned_variable(csp: "CSP", assignment: Assignment) -> Optional[str]:
    unassigned = [v for v in csp.variables if v not in assignment]
    if not unassigned:
        return None
    # Minimum Remaining Values (MRV) heuristic, ties broken by name.
    return min(unassigned, key=lambda v: (csp.domain_size(v), v))


def _order_domain_values(csp: "CSP", variable: str) -> List[DomainValue]:
    # Stored order; no shuffling.
    return list(csp.variables[variable].domain)


def _is_value_consistent(
    csp: "CSP", variable: str, assignment: Assignment, tracer: Tracer
) -> bool:
    """Evaluate the constraints on `variable` whose scope just became fully assigned."""
    for constraint in csp.constraints_for(variable):
        if not constraint.is_fully_assigned(assignment):
            continue
        if not constraint.is_satisfied(assignment):
            tracer.log_constraint_check(constraint.description, is_valid=False, variable=variable)
            return False
    return True
