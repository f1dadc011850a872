# -*- coding: utf-8 -*-
"""Corrida completa: tablas -> datos inmutables -> modelo -> solver -> resultados."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import pandas as pd

from expansion_lp.core.config import RunConfig, SOLVER_NAME
from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.types import ExpansionInputs, Variant
from expansion_lp.demand.io import load_demand_series
from expansion_lp.generators.io import (
    attach_capacity_factors, cf_from_table, load_capacity_factor_table, load_generators,
)
from expansion_lp.modeling import build_expansion_model
from expansion_lp.results import (
    ExpansionResult, extract_costs, extract_dispatch, extract_prices, extract_summary,
)
from expansion_lp.solve import solve_model

log = logging.getLogger("pipeline")


def _check_hours_aligned(demand_hours: pd.Index, cf_hours: pd.Index) -> None:
    """Los factores de planta deben cubrir exactamente las mismas horas que la demanda."""
    if list(demand_hours) == list(cf_hours):
        return
    missing = sorted(set(demand_hours) - set(cf_hours))[:5]
    extra = sorted(set(cf_hours) - set(demand_hours))[:5]
    raise InvalidInput(
        f"[pipeline] horas de capacity_factors.csv no coinciden con demand.csv "
        f"(faltan {missing}, sobran {extra}, n={len(cf_hours)} vs {len(demand_hours)})"
    )


def load_inputs(cfg: RunConfig, *, fuel_prices: Optional[Mapping[str, float]] = None) -> ExpansionInputs:
    """Lee las tablas de ``cfg.data_dir`` y arma ``ExpansionInputs`` de la variante pedida."""
    variant = Variant(cfg.variant)

    gens = load_generators(cfg.generators_csv, fuel_prices=fuel_prices)
    demand = load_demand_series(cfg.demand_csv, demand_col=cfg.demand_col, max_hours=cfg.max_hours)

    if variant == Variant.RENEWABLES and not cfg.cf_csv.exists():
        raise InvalidInput(f"[pipeline] variante {variant.value} requiere {cfg.cf_csv.name}")
    if cfg.cf_csv.exists():
        table = load_capacity_factor_table(cfg.cf_csv, names=[g.name for g in gens], max_hours=cfg.max_hours)
        if variant == Variant.GREENFIELD:
            # greenfield térmico: los recursos con perfil horario quedan fuera
            log.warning("[pipeline] greenfield térmico: se excluyen renovables %s", sorted(table.columns))
            gens = tuple(g for g in gens if g.name not in table.columns)
        else:
            _check_hours_aligned(demand.index, table.index)
            gens = attach_capacity_factors(gens, cf_from_table(table))

    if variant != Variant.BROWNFIELD:
        # fuera de brownfield el catálogo se trata como candidatos puros
        n_old = sum(1 for g in gens if not g.candidate)
        if n_old:
            log.warning("[pipeline] %d unidades OLD ignoradas en variante %s", n_old, variant.value)
            gens = tuple(g for g in gens if g.candidate)

    return ExpansionInputs(
        generators=gens,
        demand=tuple(demand.tolist()),
        nse_cost=cfg.nse_cost,
        variant=variant,
        capex_sunk=cfg.capex_sunk,
    )


def run_expansion(
    inputs: ExpansionInputs,
    solver_name: str = SOLVER_NAME,
    *,
    tee: bool = False,
    options: Optional[Mapping[str, Any]] = None,
    keep_model: bool = True,
) -> ExpansionResult:
    """Arma, resuelve y extrae. Errores de datos o del solver se propagan; no hay resultados parciales."""
    m = build_expansion_model(inputs)
    outcome = solve_model(m, solver_name, tee=tee, options=options)

    result = ExpansionResult(
        inputs=inputs,
        outcome=outcome,
        summary=extract_summary(m, inputs),
        dispatch=extract_dispatch(m, inputs),
        costs=extract_costs(m),
        prices=extract_prices(m),
        model=m if keep_model else None,
    )
    log.info("[pipeline] costo total: %s $", f"{outcome.objective:,.0f}")
    return result
