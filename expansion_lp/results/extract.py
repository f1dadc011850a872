# -*- coding: utf-8 -*-
"""Extracción de resultados: capacidades, energía, ENS, costos y precios."""
from __future__ import annotations

import math
from typing import Dict, List

import numpy as np
import pandas as pd
from pyomo.environ import value

from expansion_lp.core.types import ExpansionInputs, Variant

NSE_ROW = "NSE"

SUMMARY_COLUMNS = ["resource", "capacity_mw", "capacity_share_pct", "energy_mwh", "energy_share_pct"]
BROWNFIELD_COLUMNS = ["existing_mw", "retired_mw", "new_mw"]


def _pct(num: float, den: float) -> float:
    return 100.0 * num / den if den > 0 else math.nan


def _val(component) -> float:
    v = value(component, exception=False)
    return 0.0 if v is None else float(v)


def capacity_by_generator(m) -> Dict[str, float]:
    """MW disponibles por generador en la solución (CAP para NEW, REM_CAP para OLD)."""
    return {str(g): _val(m.avail_cap[g]) for g in m.G}


def energy_by_generator(m) -> Dict[str, float]:
    return {str(g): sum(_val(m.GEN[g, h]) for h in m.H) for g in m.G}


def extract_summary(m, inputs: ExpansionInputs) -> pd.DataFrame:
    """
    Una fila por generador (capacidad y energía, absolutas y en % del peak /
    de la demanda anual) y una fila final ``NSE`` con el peak horario y el total anual.
    """
    peak = inputs.peak_demand
    total = inputs.total_demand
    cap = capacity_by_generator(m)
    energy = energy_by_generator(m)
    brownfield = inputs.variant == Variant.BROWNFIELD
    old = set(m.OLD)

    rows: List[Dict[str, float]] = []
    for g in m.G:
        g = str(g)
        row = {
            "resource": g,
            "capacity_mw": cap[g],
            "capacity_share_pct": _pct(cap[g], peak),
            "energy_mwh": energy[g],
            "energy_share_pct": _pct(energy[g], total),
        }
        if brownfield:
            if g in old:
                row["existing_mw"] = _val(m.existing_mw[g])
                row["retired_mw"] = _val(m.RET_CAP[g])
                row["new_mw"] = 0.0
            else:
                row["existing_mw"] = 0.0
                row["retired_mw"] = 0.0
                row["new_mw"] = _val(m.CAP[g])
        rows.append(row)

    nse = [_val(m.NSE[h]) for h in m.H]
    nse_peak = max(nse) if nse else 0.0
    nse_total = float(sum(nse))
    nse_row = {
        "resource": NSE_ROW,
        "capacity_mw": nse_peak,
        "capacity_share_pct": _pct(nse_peak, peak),
        "energy_mwh": nse_total,
        "energy_share_pct": _pct(nse_total, total),
    }
    if brownfield:
        nse_row.update({c: math.nan for c in BROWNFIELD_COLUMNS})
    rows.append(nse_row)

    columns = SUMMARY_COLUMNS + (BROWNFIELD_COLUMNS if brownfield else [])
    return pd.DataFrame(rows, columns=columns)


def extract_dispatch(m, inputs: ExpansionInputs) -> pd.DataFrame:
    """Despacho horario en formato ancho: hour, <generadores...>, NSE, demand."""
    hours = list(m.H)
    data = {"hour": hours}
    for g in m.G:
        data[str(g)] = [_val(m.GEN[g, h]) for h in hours]
    data[NSE_ROW] = [_val(m.NSE[h]) for h in hours]
    data["demand"] = list(inputs.demand)
    return pd.DataFrame(data)


def extract_costs(m) -> pd.DataFrame:
    fixed = _val(m.cost_fixed)
    var = _val(m.cost_var)
    nse = _val(m.cost_nse)
    return pd.DataFrame(
        {
            "component": ["fixed", "variable", "nse", "total"],
            "cost": [fixed, var, nse, fixed + var + nse],
        }
    )


def extract_prices(m) -> pd.DataFrame:
    """Precio marginal horario ($/MWh) = dual del balance; NaN si el solver no entrega duales."""
    hours = list(m.H)
    duals = getattr(m, "dual", None)
    prices = []
    for h in hours:
        d = duals.get(m.Balance[h]) if duals is not None else None
        prices.append(np.nan if d is None else float(d))
    return pd.DataFrame({"hour": hours, "price": prices})


def recompute_objective(m, inputs: ExpansionInputs) -> float:
    """Recalcula el costo total desde los valores de la solución (control de consistencia)."""
    gens = inputs.by_name()
    cap = capacity_by_generator(m)
    total = 0.0
    for g in m.G:
        g = str(g)
        total += gens[g].fixed_cost_for(inputs.capex_sunk) * cap[g]
        total += gens[g].var_cost * sum(_val(m.GEN[g, h]) for h in m.H)
    total += inputs.nse_cost * sum(_val(m.NSE[h]) for h in m.H)
    return total
