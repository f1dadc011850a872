# tests/test_results.py

"""
Tests for result extraction and export.
"""

import math

import pandas as pd
import pytest

from expansion_lp.pipeline import run_expansion
from expansion_lp.results import BROWNFIELD_COLUMNS, NSE_ROW, SUMMARY_COLUMNS


class TestSummary:
    """Summary table: one row per generator plus the NSE row."""

    def test_columns_and_rows(self, thermal_inputs, solver):
        res = run_expansion(thermal_inputs, solver)

        assert list(res.summary.columns) == SUMMARY_COLUMNS
        assert list(res.summary["resource"]) == ["Base", "Mid", "Peak", NSE_ROW]

    def test_energy_shares_sum_to_100(self, thermal_inputs, solver):
        res = run_expansion(thermal_inputs, solver)
        assert res.summary["energy_share_pct"].sum() == pytest.approx(100.0, abs=1e-4)

    def test_single_generator_shares(self, single_gen_inputs, solver):
        res = run_expansion(single_gen_inputs, solver)
        row = res.summary.set_index("resource").loc["G"]
        assert row["capacity_share_pct"] == pytest.approx(100.0, abs=1e-6)
        assert row["energy_share_pct"] == pytest.approx(100.0, abs=1e-6)

    def test_brownfield_columns(self, brownfield_factory, solver):
        res = run_expansion(brownfield_factory(), solver)
        assert list(res.summary.columns) == SUMMARY_COLUMNS + BROWNFIELD_COLUMNS
        nse = res.summary.set_index("resource").loc[NSE_ROW]
        assert math.isnan(nse["existing_mw"])


class TestPricesAndExport:
    """Hourly marginal prices and CSV export."""

    def test_price_is_marginal_cost_of_capacity_and_energy(self, single_gen_inputs, solver):
        res = run_expansion(single_gen_inputs, solver)
        price = res.prices["price"].iloc[0]
        assert not math.isnan(price)
        assert abs(price) == pytest.approx(110.0, abs=1e-5)

    def test_every_hour_has_a_price_for_lp(self, thermal_inputs, solver):
        res = run_expansion(thermal_inputs, solver)
        assert not res.prices["price"].isna().any()

    def test_dispatch_has_demand_column(self, thermal_inputs, solver):
        res = run_expansion(thermal_inputs, solver)
        assert list(res.dispatch["demand"]) == list(thermal_inputs.demand)
        assert list(res.dispatch["hour"]) == list(thermal_inputs.hours)

    def test_export_writes_csvs(self, single_gen_inputs, solver, tmp_path):
        res = run_expansion(single_gen_inputs, solver)
        res.export(tmp_path / "out")

        for name in ("summary", "dispatch", "costs", "prices", "inputs_generators"):
            assert (tmp_path / "out" / f"{name}.csv").exists()
        summary = pd.read_csv(tmp_path / "out" / "summary.csv")
        assert list(summary["resource"]) == ["G", NSE_ROW]

    def test_model_can_be_dropped(self, single_gen_inputs, solver):
        res = run_expansion(single_gen_inputs, solver, keep_model=False)
        assert res.model is None
        assert res.objective == pytest.approx(5500.0, abs=1e-6)
