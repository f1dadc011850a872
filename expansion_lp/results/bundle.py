"""Paquete de resultados de una corrida y su exportación a CSV."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Tuple

import pandas as pd

from expansion_lp.core.types import ExpansionInputs
from expansion_lp.generators.io import generators_frame
from expansion_lp.solve.solver import SolveOutcome

log = logging.getLogger("results")


@dataclass
class ExpansionResult:
    inputs: ExpansionInputs
    outcome: SolveOutcome
    summary: pd.DataFrame
    dispatch: pd.DataFrame
    costs: pd.DataFrame
    prices: pd.DataFrame
    model: Optional[object] = field(default=None, repr=False)

    @property
    def objective(self) -> float:
        return self.outcome.objective

    @property
    def status(self) -> str:
        return self.outcome.status

    def capacity(self) -> pd.Series:
        """MW por generador (sin la fila ENS)."""
        s = self.summary.set_index("resource")["capacity_mw"]
        return s.drop(index="NSE")

    def nse_total(self) -> float:
        return float(self.summary.set_index("resource").loc["NSE", "energy_mwh"])

    def iter_export_frames(self) -> Iterator[Tuple[str, pd.DataFrame]]:
        yield "summary", self.summary
        yield "dispatch", self.dispatch
        yield "costs", self.costs
        yield "prices", self.prices
        yield "inputs_generators", generators_frame(self.inputs.generators)

    def export(self, out_dir: Path) -> None:
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        for name, frame in self.iter_export_frames():
            path = out_dir / f"{name}.csv"
            frame.to_csv(path, index=False)
        log.info("[results] exportado en %s", out_dir)
