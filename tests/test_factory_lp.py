# tests/test_factory_lp.py

"""
Tests for the coefficient-form LP/MILP builder.

Uses the two-product factory toy: max 150x + 175y subject to
10x + 8y <= 80, 7x + 11y <= 77, x <= 8, x, y >= 0.
"""

import pytest

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.types import LinearProgram, LPConstraint, LPVariable
from expansion_lp.modeling import build_linear_program, read_lp_solution
from expansion_lp.solve import solve_model


def factory_lp(integer=False):
    return LinearProgram(
        name="factory",
        variables=(
            LPVariable("x", lb=0.0, ub=8.0, integer=integer),
            LPVariable("y", lb=0.0, integer=integer),
        ),
        objective={"x": 150.0, "y": 175.0},
        constraints=(
            LPConstraint("machine", {"x": 10.0, "y": 8.0}, "<=", 80.0),
            LPConstraint("labour", {"x": 7.0, "y": 11.0}, "<=", 77.0),
        ),
        sense="max",
    )


class TestFactoryLP:
    """Continuous and integer versions of the factory problem."""

    def test_continuous_optimum(self, solver):
        m = build_linear_program(factory_lp())
        outcome = solve_model(m, solver)
        sol = read_lp_solution(m)

        assert outcome.status == "optimal"
        assert sol["x"] == pytest.approx(4.8889, abs=1e-2)
        assert sol["y"] == pytest.approx(3.8889, abs=1e-2)
        assert outcome.objective == pytest.approx(1413.89, abs=1e-2)

    def test_integer_optimum(self, solver):
        m = build_linear_program(factory_lp(integer=True))
        outcome = solve_model(m, solver)
        sol = read_lp_solution(m)

        assert sol["x"] == pytest.approx(3.0, abs=1e-6)
        assert sol["y"] == pytest.approx(5.0, abs=1e-6)
        assert outcome.objective == pytest.approx(1325.0, abs=1e-6)

    def test_values_keyed_by_component_name(self, solver):
        m = build_linear_program(factory_lp())
        outcome = solve_model(m, solver)
        assert set(outcome.values) == {"v[x]", "v[y]"}

    def test_dual_suffix_only_for_continuous(self):
        assert hasattr(build_linear_program(factory_lp()), "dual")
        assert not hasattr(build_linear_program(factory_lp(integer=True)), "dual")


class TestLinearProgramValidation:
    """Malformed coefficient structures fail before reaching the solver."""

    def test_unknown_variable_in_constraint(self):
        lp = LinearProgram(
            variables=(LPVariable("x"),),
            objective={"x": 1.0},
            constraints=(LPConstraint("c", {"z": 1.0}, "<=", 1.0),),
        )
        with pytest.raises(InvalidInput):
            build_linear_program(lp)

    def test_bad_sense(self):
        lp = LinearProgram(
            variables=(LPVariable("x"),),
            objective={"x": 1.0},
            constraints=(LPConstraint("c", {"x": 1.0}, "<", 1.0),),
        )
        with pytest.raises(InvalidInput):
            build_linear_program(lp)

    def test_inverted_bounds(self):
        lp = LinearProgram(variables=(LPVariable("x", lb=2.0, ub=1.0),), objective={"x": 1.0})
        with pytest.raises(InvalidInput):
            build_linear_program(lp)

    def test_impossible_empty_row(self):
        lp = LinearProgram(
            variables=(LPVariable("x"),),
            objective={"x": 1.0},
            constraints=(LPConstraint("c", {}, ">=", 5.0),),
        )
        with pytest.raises(InvalidInput):
            build_linear_program(lp)
