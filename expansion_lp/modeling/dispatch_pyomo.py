# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Iterable

from pyomo.environ import (
    Set, Param, Var, NonNegativeReals, UnitInterval, Constraint, Expression
)

from expansion_lp.core.types import Generator


def attach_dispatch_to_model(m, generators: Iterable[Generator]):
    """
    Despacho horario y energía no servida.
    Requiere en el modelo: m.G, m.H, m.avail_cap[g] (MW disponibles) y m.nse_cost.
    """
    gens: Dict[str, Generator] = {g.name: g for g in generators}

    # --------------------------------
    # Conjuntos y parámetros
    # --------------------------------
    is_variable = {g: gens[g].is_variable for g in m.G}
    m.VRE = Set(initialize=[g for g in m.G if is_variable[g]], ordered=True)

    m.var_cost = Param(m.G, initialize=lambda m, g: gens[g].var_cost, within=NonNegativeReals)
    m.cf = Param(m.VRE, m.H, initialize=lambda m, g, h: gens[g].cf[h - 1], within=UnitInterval)

    # --------------------------------
    # Variables
    # --------------------------------
    m.GEN = Var(m.G, m.H, within=NonNegativeReals)   # MWh
    m.NSE = Var(m.H, within=NonNegativeReals)        # MWh

    # --------------------------------
    # Restricciones
    # --------------------------------
    # cf = 0 fuerza GEN = 0 en esa hora, sin importar la capacidad construida
    def _cap_limit(m, g, h):
        if is_variable[g]:
            return m.GEN[g, h] <= m.avail_cap[g] * m.cf[g, h]
        return m.GEN[g, h] <= m.avail_cap[g]
    m.CapLimit = Constraint(m.G, m.H, rule=_cap_limit)

    m.gen_total = Expression(m.H, rule=lambda m, h: sum(m.GEN[g, h] for g in m.G))

    # --------------------------------
    # Costos
    # --------------------------------
    def _cost_var(m):
        return sum(m.var_cost[g] * m.GEN[g, h] for g in m.G for h in m.H)
    m.cost_var = Expression(rule=_cost_var)

    def _cost_nse(m):
        return sum(m.nse_cost * m.NSE[h] for h in m.H)
    m.cost_nse = Expression(rule=_cost_nse)

    return {
        "GEN": m.GEN,
        "NSE": m.NSE,
        "cost_var": m.cost_var,
        "cost_nse": m.cost_nse,
    }
