# -*- coding: utf-8 -*-
"""
Barridos de parámetros: cada punto es una corrida independiente
(modelo nuevo, solve bloqueante, extracción), sin estado compartido.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

import pandas as pd

from expansion_lp.core.config import SOLVER_NAME
from expansion_lp.core.types import ExpansionInputs
from expansion_lp.generators.io import generators_from_frame
from expansion_lp.pipeline import run_expansion

log = logging.getLogger("sweep")


def _long_rows(result, param: str, level: float) -> pd.DataFrame:
    df = result.summary[["resource", "capacity_mw", "energy_mwh"]].copy()
    df.insert(0, "value", float(level))
    df.insert(0, "param", param)
    df["objective"] = result.objective
    return df


def sweep_nse_cost(
    inputs: ExpansionInputs,
    costs: Iterable[float],
    solver_name: str = SOLVER_NAME,
) -> pd.DataFrame:
    """Repite la corrida para cada penalización ENS; formato largo (param, value, resource, ...)."""
    pieces: List[pd.DataFrame] = []
    for c in costs:
        res = run_expansion(replace(inputs, nse_cost=float(c)), solver_name, keep_model=False)
        pieces.append(_long_rows(res, "nse_cost", c))
        log.info("[sweep] nse_cost=%s -> ENS=%.3f MWh", c, res.nse_total())
    return pd.concat(pieces, ignore_index=True)


def sweep_fuel_cost(
    inputs: ExpansionInputs,
    table: pd.DataFrame,
    fuel: str,
    prices: Iterable[float],
    solver_name: str = SOLVER_NAME,
) -> pd.DataFrame:
    """
    Recalcula los costos variables de ``table`` (ver ``read_generator_table``) para cada
    precio del combustible ``fuel`` y resuelve. Factores de planta y variante se
    conservan desde ``inputs``.
    """
    base = inputs.by_name()
    pieces: List[pd.DataFrame] = []
    for p in prices:
        gens = generators_from_frame(table, fuel_prices={fuel: float(p)})
        gens = tuple(g.with_cf(base[g.name].cf) for g in gens if g.name in base)
        res = run_expansion(replace(inputs, generators=gens), solver_name, keep_model=False)
        pieces.append(_long_rows(res, f"fuel_cost:{fuel}", p))
        log.info("[sweep] %s=%s -> costo total %s", fuel, p, f"{res.objective:,.0f}")
    return pd.concat(pieces, ignore_index=True)
