# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, Iterable

from pyomo.environ import Param, Var, NonNegativeReals, Expression

from expansion_lp.core.types import Generator


def attach_new_build_to_model(m, generators: Iterable[Generator]):
    """
    Capacidad nueva (candidatos) sobre ``m.NEW``.
    Requiere en el modelo: m.NEW (subconjunto de m.G).
    """
    gens: Dict[str, Generator] = {g.name: g for g in generators}

    # ------------- Parámetros -------------
    m.new_inv = Param(m.NEW, initialize=lambda m, g: gens[g].inv_cost, within=NonNegativeReals)
    m.new_fom = Param(m.NEW, initialize=lambda m, g: gens[g].fom, within=NonNegativeReals)

    # ------------- Variables -------------
    m.CAP = Var(m.NEW, within=NonNegativeReals)   # MW construidos

    # ------------- Costos -------------
    def _cost_fixed_new(m):
        return sum((m.new_inv[g] + m.new_fom[g]) * m.CAP[g] for g in m.NEW)
    m.cost_fixed_new = Expression(rule=_cost_fixed_new)

    return {
        "CAP": m.CAP,
        "cost_fixed_new": m.cost_fixed_new,
    }
