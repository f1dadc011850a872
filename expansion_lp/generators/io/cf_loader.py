"""Cargador de factores de planta horarios para generación variable."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

import pandas as pd

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.types import Generator

log = logging.getLogger("cf_loader")


def load_capacity_factor_table(
    path_csv: Path,
    *,
    names: Optional[Iterable[str]] = None,
    max_hours: Optional[int] = None,
) -> pd.DataFrame:
    """
    Lee la tabla ancha de factores de planta: una fila por hora (columna ``hour``)
    y una columna por generador variable. Devuelve un DataFrame indexado por
    ``hour`` (ordenado) con valores recortados a [0, 1].
    """
    df = pd.read_csv(path_csv)
    df.columns = [c.strip() for c in df.columns]
    hour_col = next((c for c in df.columns if c.lower() == "hour"), None)
    if hour_col is None:
        raise InvalidInput(f"[capacity_factors.csv] falta columna 'hour'. Presentes: {list(df.columns)}")
    if df[hour_col].duplicated().any():
        dups = df.loc[df[hour_col].duplicated(), hour_col].head(5).tolist()
        raise InvalidInput(f"[capacity_factors.csv] horas duplicadas: {dups}")

    df = df.sort_values(hour_col).reset_index(drop=True)
    if max_hours is not None:
        df = df.head(int(max_hours))

    cols = [c for c in df.columns if c != hour_col]
    if names is not None:
        wanted = set(names)
        cols = [c for c in cols if c in wanted]
    if not cols:
        raise InvalidInput("[capacity_factors.csv] no hay columnas de generadores")

    values = df[cols].apply(pd.to_numeric, errors="coerce")
    if values.isna().any().any():
        bad = values.columns[values.isna().any()].tolist()
        raise InvalidInput(f"[capacity_factors.csv] valores no numéricos en columnas: {bad}")

    clipped = values.clip(lower=0.0, upper=1.0)
    n_clip = int((clipped != values).sum().sum())
    if n_clip:
        log.warning("[cf_loader] %d factores fuera de [0,1] recortados", n_clip)

    clipped.index = pd.Index(df[hour_col], name="hour")
    return clipped


def load_capacity_factors(
    path_csv: Path,
    *,
    names: Optional[Iterable[str]] = None,
    max_hours: Optional[int] = None,
) -> Dict[str, Tuple[float, ...]]:
    """Factores de planta por generador ``{name: tupla horaria}``, en el orden de ``hour``."""
    table = load_capacity_factor_table(path_csv, names=names, max_hours=max_hours)
    return cf_from_table(table)


def cf_from_table(table: pd.DataFrame) -> Dict[str, Tuple[float, ...]]:
    return {c: tuple(float(v) for v in table[c].to_numpy()) for c in table.columns}


def attach_capacity_factors(
    generators: Iterable[Generator],
    cf: Mapping[str, Tuple[float, ...]],
) -> Tuple[Generator, ...]:
    """Devuelve nuevas instancias con ``cf`` asignado a los generadores presentes en la tabla."""

    gens = tuple(generators)
    known = {g.name for g in gens}
    orphan = sorted(set(cf) - known)
    if orphan:
        log.warning("[cf_loader] columnas sin generador asociado (ignoradas): %s", orphan)
    return tuple(g.with_cf(cf[g.name]) if g.name in cf else g for g in gens)
