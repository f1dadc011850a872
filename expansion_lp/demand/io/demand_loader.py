# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.validators import validate_demand

log = logging.getLogger("demand_loader")


def load_demand_series(
    path_csv: Path,
    *,
    demand_col: str = "demand",
    max_hours: Optional[int] = None,
) -> pd.Series:
    """
    Lee la demanda horaria (MWh por hora) como ``pd.Series`` indexada por ``hour``, ordenada.
    Si no existe ``demand_col`` pero hay columnas por barra ``L_*``, se suman (demanda total).
    """
    df = pd.read_csv(path_csv)
    df.columns = [c.strip() for c in df.columns]
    hour_col = next((c for c in df.columns if c.lower() == "hour"), None)
    if hour_col is None:
        raise InvalidInput(f"[demand.csv] falta columna 'hour'. Presentes: {list(df.columns)}")
    if df[hour_col].duplicated().any():
        dups = df.loc[df[hour_col].duplicated(), hour_col].head(5).tolist()
        raise InvalidInput(f"[demand.csv] horas duplicadas: {dups}")

    if demand_col not in df.columns:
        load_cols = [c for c in df.columns if c.startswith("L_")]
        if not load_cols:
            raise InvalidInput(f"[demand.csv] falta columna '{demand_col}' (ni columnas L_*)")
        df[demand_col] = df[load_cols].sum(axis=1, skipna=True)

    df = df.sort_values(hour_col).reset_index(drop=True)
    if max_hours is not None:
        df = df.head(int(max_hours))

    values = pd.to_numeric(df[demand_col], errors="coerce")
    if values.isna().any():
        bad = df.loc[values.isna(), hour_col].head(5).tolist()
        raise InvalidInput(f"[demand.csv] demanda no numérica en horas: {bad}")

    series = pd.Series(values.astype(float).to_numpy(), index=pd.Index(df[hour_col], name="hour"), name="demand")
    validate_demand(series.tolist())
    log.info("[demand_loader] %d horas, peak=%.1f MW, total=%.1f MWh", len(series), series.max(), series.sum())
    return series


def load_demand(
    path_csv: Path,
    *,
    demand_col: str = "demand",
    max_hours: Optional[int] = None,
) -> Tuple[float, ...]:
    """Demanda horaria como tupla, en el orden de ``hour``."""
    series = load_demand_series(path_csv, demand_col=demand_col, max_hours=max_hours)
    return tuple(float(v) for v in series.to_numpy())
