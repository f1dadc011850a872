# tests/test_main.py

"""
End-to-end runs of the command line entry point on the example data.
"""

import pandas as pd
import pytest

from expansion_lp.main import main


@pytest.mark.parametrize("variant", ["greenfield", "renewables", "brownfield"])
def test_variants_run_and_export(variant, example_dir, solver, tmp_path):
    out = tmp_path / variant
    code = main(["--data-dir", str(example_dir), "--variant", variant,
                 "--solver", solver, "--max-hours", "24", "--out", str(out)])

    assert code == 0
    summary = pd.read_csv(out / "summary.csv")
    assert summary["resource"].iloc[-1] == "NSE"
    dispatch = pd.read_csv(out / "dispatch.csv")
    assert len(dispatch) == 24


def test_fuel_sweep(example_dir, solver, tmp_path):
    code = main(["--data-dir", str(example_dir), "--variant", "greenfield", "--solver", solver,
                 "--max-hours", "12", "--sweep-fuel", "gas", "--prices", "2,4,8", "--out", str(tmp_path)])

    assert code == 0
    df = pd.read_csv(tmp_path / "sweep_gas.csv")
    assert sorted(df["value"].unique()) == [2.0, 4.0, 8.0]
    totals = df.groupby("value")["objective"].first().sort_index().tolist()
    assert totals == sorted(totals)


def test_sweep_requires_prices(example_dir, tmp_path):
    code = main(["--data-dir", str(example_dir), "--sweep-fuel", "gas", "--out", str(tmp_path)])
    assert code == 2


def test_invalid_data_returns_2(tmp_path):
    (tmp_path / "generators.csv").write_text("name,inv_cost,fom,var_cost\nG,1,1,1\nG,1,1,1\n")
    (tmp_path / "demand.csv").write_text("hour,demand\n1,5\n")
    assert main(["--data-dir", str(tmp_path)]) == 2


def test_penalty_below_variable_cost_returns_2(example_dir):
    assert main(["--data-dir", str(example_dir), "--nse-cost", "1"]) == 2
