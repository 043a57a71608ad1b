"""Exceptions raised while building or solving a CSP."""


class ConstraintError(ValueError):
    """Malformed CSP structure: bad variable, bad scope, or bad pattern arguments."""


class DuplicateVariableError(ConstraintError):
    def __init__(self, name: str):
        super().__init__(f"variable {name} already exists")
        self.name = name


class UnknownVariableError(ConstraintError):
    def __init__(self, name: str):
        super().__init__(f"variable {name} does not exist")
        self.name = name


class NoSolutionError(RuntimeError):
    """Backtracking exhausted the search space without a consistent assignment."""


class SearchLimitExceeded(NoSolutionError):
    def __init__(self, node_limit: int):
        super().__init__(f"search aborted after {node_limit} nodes")
        self.node_limit = node_limit
