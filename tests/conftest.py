# tests/conftest.py

"""
Shared fixtures for the expansion model tests.

Solver-dependent tests request the ``solver`` fixture, which skips when
HiGHS (``appsi_highs``) is not installed.
"""

from pathlib import Path

import pytest

from expansion_lp.core.config import SOLVER_NAME
from expansion_lp.core.types import ExpansionInputs, Generator, Variant
from expansion_lp.solve import solver_available

EXAMPLE_DIR = Path(__file__).resolve().parent.parent / "data" / "example"


@pytest.fixture(scope="session")
def solver():
    """Name of the LP/MILP solver, skipping if unavailable."""
    if not solver_available(SOLVER_NAME):
        pytest.skip(f"solver {SOLVER_NAME} not available")
    return SOLVER_NAME


@pytest.fixture
def example_dir():
    return EXAMPLE_DIR


@pytest.fixture
def single_gen_inputs():
    """One generator, one hour: fixed 100 $/MW-yr, variable 10 $/MWh, demand 50."""
    return ExpansionInputs(
        generators=(Generator("G", inv_cost=100.0, fom=0.0, var_cost=10.0),),
        demand=(50.0,),
        nse_cost=9000.0,
    )


@pytest.fixture
def thermal_inputs():
    """Three thermal options over a small daily profile (base / mid / peak)."""
    gens = (
        Generator("Base", inv_cost=90.0, fom=10.0, var_cost=5.0),
        Generator("Mid", inv_cost=40.0, fom=10.0, var_cost=20.0),
        Generator("Peak", inv_cost=15.0, fom=5.0, var_cost=60.0),
    )
    demand = (40.0, 35.0, 50.0, 80.0, 100.0, 90.0, 60.0, 45.0)
    return ExpansionInputs(generators=gens, demand=demand, nse_cost=9000.0)


@pytest.fixture
def renewable_inputs():
    """Solar with a zero capacity factor in hour 2 plus a gas backup."""
    gens = (
        Generator("Solar", inv_cost=10.0, fom=0.0, var_cost=0.0, cf=(1.0, 0.0)),
        Generator("Gas", inv_cost=100.0, fom=0.0, var_cost=50.0),
    )
    return ExpansionInputs(
        generators=gens, demand=(50.0, 50.0), nse_cost=9000.0, variant=Variant.RENEWABLES,
    )


@pytest.fixture
def brownfield_factory():
    """
    Build a brownfield case: one existing unit (100 MW) and one candidate
    (fixed 50 $/MW-yr, variable 10 $/MWh) serving 60 MW over two hours.
    """
    def _make(old_inv=0.0, old_fom=5.0, old_var=10.0, capex_sunk=True):
        gens = (
            Generator("Old", inv_cost=old_inv, fom=old_fom, var_cost=old_var,
                      existing_mw=100.0, candidate=False),
            Generator("New", inv_cost=40.0, fom=10.0, var_cost=10.0),
        )
        return ExpansionInputs(
            generators=gens, demand=(60.0, 60.0), nse_cost=9000.0,
            variant=Variant.BROWNFIELD, capex_sunk=capex_sunk,
        )
    return _make
