# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

# ---- rutas base
RUTA_BASE = Path(__file__).resolve().parent.parent.parent
DATA_DIR  = RUTA_BASE / "data" / "example"
OUT_DIR   = RUTA_BASE / "outputs"

# ---- archivos estándar dentro de DATA_DIR
GENERATORS_CSV = "generators.csv"
DEMAND_CSV     = "demand.csv"
CF_CSV         = "capacity_factors.csv"

# ===== CONFIG =====
SOLVER_NAME  = "appsi_highs"   # HiGHS
NSE_COST     = 9000.0          # $/MWh, costo de energía no servida
CAPEX_SUNK   = True            # existentes: solo se cobra el FOM
DEMAND_COL   = "demand"
TOL          = 1e-6


@dataclass(frozen=True)
class RunConfig:
    """Parámetros de una corrida; inmutable, se sobreescribe vía ``with_overrides``."""

    data_dir: Path = DATA_DIR
    out_dir: Optional[Path] = None
    variant: str = "greenfield"
    solver_name: str = SOLVER_NAME
    nse_cost: float = NSE_COST
    capex_sunk: bool = CAPEX_SUNK
    demand_col: str = DEMAND_COL
    max_hours: Optional[int] = None
    tee: bool = False
    solver_options: Dict[str, Any] = field(default_factory=dict)

    def with_overrides(self, **kwargs) -> "RunConfig":
        clean = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **clean)

    @property
    def generators_csv(self) -> Path:
        return Path(self.data_dir) / GENERATORS_CSV

    @property
    def demand_csv(self) -> Path:
        return Path(self.data_dir) / DEMAND_CSV

    @property
    def cf_csv(self) -> Path:
        return Path(self.data_dir) / CF_CSV
