"""Tests for the solver tracer."""

import pytest

from src.csp.errors import NoSolutionError
from src.csp.model import CSP, Constraint
from src.utils.trace import TRACE_FIELDS, Tracer, enable_tracing, get_tracer, reset_tracer


@pytest.fixture
def tracer():
    reset_tracer()
    tracer = get_tracer()
    tracer.enabled = True
    yield tracer
    reset_tracer()


def _make_backtracking_csp():
    csp = CSP()
    csp.add_variable("A", [1, 2])
    csp.add_variable("B", [1, 2])
    csp.add(Constraint.less_than("B", "A"))
    return csp


def test_tracer_captures_solver_steps(tracer):
    solution = _make_backtracking_csp().solve()
    assert solution == {"A": 2, "B": 1}

    actions = [step.action_type for step in tracer.steps]
    assert actions[0] == "assign"
    assert "constraint_check" in actions
    assert "backtrack" in actions
    assert actions[-1] == "solution_found"
    assert [step.step_number for step in tracer.steps] == list(range(1, len(actions) + 1))


def test_tracer_logs_exhaustion(tracer):
    csp = CSP()
    csp.add_variable("A", [1])
    csp.add_variable("B", [1])
    csp.add(Constraint.not_equal("A", "B"))
    with pytest.raises(NoSolutionError):
        csp.solve()
    assert tracer.steps[-1].action_type == "no_solution"


def test_summary_counts_actions(tracer):
    _make_backtracking_csp().solve()
    summary = tracer.summary()

    assert summary["total_steps"] == len(tracer.steps)
    assert summary["num_assignments"] == summary["action_counts"]["assign"]
    assert summary["num_backtracks"] == summary["action_counts"]["backtrack"]
    assert summary["elapsed_time_seconds"] >= 0


def test_to_dataframe_has_one_row_per_step(tracer):
    _make_backtracking_csp().solve()
    frame = tracer.to_dataframe()
    assert list(frame.columns) == TRACE_FIELDS
    assert len(frame) == len(tracer.steps)
    assert (frame["action_type"] == "assign").sum() == tracer.summary()["num_assignments"]


def test_to_csv_writes_trace(tracer, tmp_path):
    _make_backtracking_csp().solve()
    output_path = tmp_path / "traces" / "solve.csv"
    tracer.to_csv(output_path)

    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(TRACE_FIELDS)
    assert len(lines) == len(tracer.steps) + 1


def test_empty_tracer_summary_and_csv(tmp_path):
    tracer = Tracer()
    assert tracer.summary()["total_steps"] == 0
    assert tracer.to_dataframe().empty
    tracer.to_csv(tmp_path / "empty.csv")
    assert not (tmp_path / "empty.csv").exists()


def test_disabled_tracer_records_nothing(tracer):
    enable_tracing(False)
    _make_backtracking_csp().solve()
    assert tracer.steps == []


def test_repeated_solves_do_not_accumulate_steps(tracer):
    csp = CSP()
    for name in ("A", "B", "C"):
        csp.add_variable(name, [1, 2, 3])
    csp.add(Constraint.all_diff(["A", "B", "C"]))

    csp.solve()
    first_run = len(tracer.steps)
    csp.solve()
    csp.solve()

    assert first_run > 0
    assert len(get_tracer().steps) == first_run
    assert tracer.steps[0].step_number == 1


def test_clear_keeps_enabled_flag():
    tracer = Tracer(enabled=False)
    tracer.clear()
    assert not tracer.enabled
    assert tracer.steps == []
    assert tracer.step_counter == 0
