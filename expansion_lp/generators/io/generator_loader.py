"""Carga del catálogo de generadores y derivación de costos fijo/variable."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.finance import annualized_capex, variable_cost
from expansion_lp.core.types import Generator

log = logging.getLogger("generator_loader")

STATUS_OLD = "OLD"
STATUS_NEW = "NEW"


def _to_float(value: Any, where: str, col: str) -> float:
    """Convierte a ``float``; un valor presente que no es número levanta ``InvalidInput``."""

    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"[generators.csv] {where}: {col} no numérico ({value!r})") from exc


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value)) or str(value).strip() == ""


def _require_unique(series: pd.Series, context: str) -> None:
    """Asegura que ``series`` no contenga nombres duplicados."""

    duplicates = series[series.duplicated()].unique().tolist()
    if duplicates:
        raise InvalidInput(f"[{context}] nombres duplicados: {duplicates}")


def _first(row: pd.Series, *cols: str) -> Any:
    for c in cols:
        if c in row.index and not _is_missing(row[c]):
            return row[c]
    return None


def read_generator_table(path_csv: Path) -> pd.DataFrame:
    """
    Lee el CSV de generadores y normaliza columnas.

    Columnas esperadas (minúsculas, sin espacios):
      name, capex, wacc, lifetime, fom, vom, heat_rate, fuel_cost
    Opcionales: fuel, status (OLD/NEW), existing_mw, inv_cost, var_cost.
    """
    df = pd.read_csv(path_csv)
    df.columns = [c.strip().lower() for c in df.columns]
    if "resource" in df.columns and "name" not in df.columns:
        df = df.rename(columns={"resource": "name"})
    if "name" not in df.columns:
        raise InvalidInput(f"[generators.csv] falta columna 'name'. Presentes: {list(df.columns)}")

    df["name"] = df["name"].astype(str).str.strip()
    _require_unique(df["name"], "generators.csv")
    if "status" in df.columns:
        df["status"] = df["status"].fillna(STATUS_NEW).astype(str).str.strip().str.upper()
        bad = sorted(set(df["status"]) - {STATUS_OLD, STATUS_NEW})
        if bad:
            raise InvalidInput(f"[generators.csv] status inválido {bad}; se espera OLD/NEW")
    return df.reset_index(drop=True)


def _num(row: pd.Series, *cols: str, default: Optional[float] = None) -> Optional[float]:
    """Primer valor numérico presente entre ``cols``; celdas vacías toman ``default``."""
    for c in cols:
        if c in row.index and not _is_missing(row[c]):
            return _to_float(row[c], row["name"], c)
    return default


def _fixed_costs(row: pd.Series) -> Tuple[float, float]:
    name = row["name"]
    inv = _num(row, "inv_cost", "inv_cost_per_mwyr")
    if inv is None:
        capex = _num(row, "capex", "capex_per_mw")
        if capex is None:
            raise InvalidInput(f"[generators.csv] {name}: falta 'capex' o 'inv_cost'")
        wacc = _num(row, "wacc")
        life = _num(row, "lifetime", "life")
        if wacc is None or life is None:
            raise InvalidInput(f"[generators.csv] {name}: 'capex' requiere 'wacc' y 'lifetime'")
        inv = annualized_capex(capex, wacc, life)
    fom = _num(row, "fom", "fixed_om", "fom_per_mwyr", default=0.0)
    return inv, fom


def _var_cost(row: pd.Series, fuel_prices: Mapping[str, float]) -> float:
    fuel = str(_first(row, "fuel") or "").strip()
    direct = _num(row, "var_cost", "var_cost_per_mwh")
    if direct is not None and fuel not in fuel_prices:
        return direct
    fuel_cost = fuel_prices.get(fuel) if fuel else None
    if fuel_cost is None:
        fuel_cost = _num(row, "fuel_cost", "fuel_price", default=0.0)
    return variable_cost(
        _num(row, "vom", "var_om", default=0.0),
        _num(row, "heat_rate", "heatrate", default=0.0),
        fuel_cost,
    )


def generators_from_frame(
    df: pd.DataFrame,
    *,
    fuel_prices: Optional[Mapping[str, float]] = None,
) -> Tuple[Generator, ...]:
    """Convierte la tabla normalizada en ``Generator`` inmutables (sin factor de planta)."""

    fuel_prices = dict(fuel_prices or {})
    gens: List[Generator] = []
    for _, row in df.iterrows():
        inv, fom = _fixed_costs(row)
        status = str(row.get("status", STATUS_NEW) or STATUS_NEW).upper()
        existing = _num(row, "existing_mw", "existing_cap_mw", "existing_capacity", default=0.0)
        gens.append(
            Generator(
                name=str(row["name"]),
                inv_cost=inv,
                fom=fom,
                var_cost=_var_cost(row, fuel_prices),
                existing_mw=existing,
                candidate=(status != STATUS_OLD),
            )
        )

    no_existing = [g.name for g in gens if not g.candidate and g.existing_mw <= 0]
    if no_existing:
        log.warning("[generator_loader] unidades OLD sin capacidad existente: %s", no_existing)
    return tuple(gens)


def load_generators(
    path_csv: Path,
    *,
    fuel_prices: Optional[Mapping[str, float]] = None,
) -> Tuple[Generator, ...]:
    """Carga el catálogo de generadores y devuelve la tupla de ``Generator``."""

    df = read_generator_table(path_csv)
    gens = generators_from_frame(df, fuel_prices=fuel_prices)
    log.info("[generator_loader] %d generadores leídos desde %s", len(gens), Path(path_csv).name)
    return gens


def generators_frame(gens) -> pd.DataFrame:
    """Tabla de costos derivados, útil para exportar insumos del modelo."""

    rows: List[Dict[str, Any]] = []
    for g in gens:
        rows.append(
            {
                "name": g.name,
                "status": STATUS_NEW if g.candidate else STATUS_OLD,
                "inv_cost": g.inv_cost,
                "fom": g.fom,
                "fixed_cost": g.fixed_cost,
                "var_cost": g.var_cost,
                "existing_mw": g.existing_mw,
                "variable": g.is_variable,
            }
        )
    return pd.DataFrame(rows, columns=["name", "status", "inv_cost", "fom", "fixed_cost",
                                       "var_cost", "existing_mw", "variable"])
