"""Tracing module: records CSP solver steps for inspection and export."""

import csv
from dataclasses import dataclass, asdict, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from src import config
from src.utils.logging_utils import get_logger

logger = get_logger("trace")


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'constraint_check', 'backtrack', 'solution_found', 'no_solution'
    variable: Optional[str] = None
    value: Optional[Any] = None
    domain_size: Optional[int] = None
    assignment_size: Optional[int] = None  # Number of variables assigned
    constraint_checked: Optional[str] = None
    is_valid: Optional[bool] = None
    reason: Optional[str] = None  # Why backtracking occurred, etc.


TRACE_FIELDS = [f.name for f in fields(TraceStep)]


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def clear(self) -> None:
        """Drop recorded steps and restart the clock; `enabled` is kept."""
        self.steps = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **details: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **details,
        ))

    def log_assign(self, variable: str, value: Any, domain_size: int, assignment_size: int):
        """Log a tentative variable assignment."""
        self._record(
            'assign',
            variable=variable,
            value=str(value),
            domain_size=domain_size,
            assignment_size=assignment_size,
        )

    def log_constraint_check(self, constraint_desc: str, is_valid: bool, variable: Optional[str] = None):
        """Log a constraint evaluation."""
        self._record(
            'constraint_check',
            constraint_checked=constraint_desc,
            is_valid=is_valid,
            variable=variable,
        )

    def log_backtrack(self, variable: str, reason: str = "Domain exhausted"):
        """Log a backtrack event."""
        self._record('backtrack', variable=variable, reason=reason)

    def log_solution_found(self, assignment_size: int):
        """Log when a solution is found."""
        self._record('solution_found', assignment_size=assignment_size)

    def log_no_solution(self, variable_count: int):
        """Log when the search space is exhausted."""
        self._record(
            'no_solution',
            reason=f"Search space exhausted for {variable_count} variables",
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Return the recorded steps as a DataFrame, one row per step."""
        return pd.DataFrame([asdict(step) for step in self.steps], columns=TRACE_FIELDS)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            logger.info("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=TRACE_FIELDS)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        logger.info("Trace written to %s (%d steps)", filepath, len(self.steps))

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        frame = self.to_dataframe()
        action_counts = {
            str(action): int(count)
            for action, count in frame['action_type'].value_counts(sort=False).items()
        }

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=config.TRACE_ENABLED)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
