# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Iterable

from pyomo.environ import Param, Var, NonNegativeReals, Expression

from expansion_lp.core.types import Generator


def attach_existing_to_model(m, generators: Iterable[Generator], *, capex_sunk: bool = True):
    """
    Parque existente (brownfield) sobre ``m.OLD``: decisión de retiro
    0 <= RET_CAP <= existente y capacidad remanente REM_CAP = existente - RET_CAP.

    Con ``capex_sunk`` el costo fijo de una unidad existente es solo su FOM;
    si es False se cobra también la anualidad del capex (p.ej. refacción).
    """
    gens: Dict[str, Generator] = {g.name: g for g in generators}

    # ------------- Parámetros -------------
    m.existing_mw = Param(m.OLD, initialize=lambda m, g: gens[g].existing_mw, within=NonNegativeReals)
    m.old_fixed   = Param(m.OLD, initialize=lambda m, g: gens[g].fixed_cost_for(capex_sunk),
                          within=NonNegativeReals)

    # ------------- Variables -------------
    m.RET_CAP = Var(m.OLD, within=NonNegativeReals, bounds=lambda m, g: (0.0, gens[g].existing_mw))

    m.REM_CAP = Expression(m.OLD, rule=lambda m, g: m.existing_mw[g] - m.RET_CAP[g])

    # ------------- Costos -------------
    def _cost_fixed_old(m):
        return sum(m.old_fixed[g] * m.REM_CAP[g] for g in m.OLD)
    m.cost_fixed_old = Expression(rule=_cost_fixed_old)

    return {
        "RET_CAP": m.RET_CAP,
        "REM_CAP": m.REM_CAP,
        "cost_fixed_old": m.cost_fixed_old,
    }
