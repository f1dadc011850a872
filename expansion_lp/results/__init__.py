from .extract import (
    extract_summary, extract_dispatch, extract_costs, extract_prices,
    recompute_objective, capacity_by_generator, energy_by_generator,
    NSE_ROW, SUMMARY_COLUMNS, BROWNFIELD_COLUMNS,
)
from .bundle import ExpansionResult

__all__ = [
    "extract_summary", "extract_dispatch", "extract_costs", "extract_prices",
    "recompute_objective", "capacity_by_generator", "energy_by_generator",
    "NSE_ROW", "SUMMARY_COLUMNS", "BROWNFIELD_COLUMNS",
    "ExpansionResult",
]
