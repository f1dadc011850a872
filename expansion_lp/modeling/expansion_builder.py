# -*- coding: utf-8 -*-
"""
Modelo de expansión de capacidad (1 zona, horizonte horario de un año)
----------------------------------------------------------------------
min  Σ_g FC_g · cap_g + Σ_{g,h} VC_g · GEN_{g,h} + Σ_h C_ENS · NSE_h
s.a. Σ_g GEN_{g,h} + NSE_h = D_h                          ∀h
     GEN_{g,h} ≤ cap_g            (térmicas)              ∀g,h
     GEN_{g,h} ≤ cap_g · cf_{g,h} (renovables variables)  ∀g,h
     cap, GEN, NSE ≥ 0

Variantes:
  greenfield  -> cap_g = CAP_g para todo g
  renewables  -> igual, con cota horaria por factor de planta
  brownfield  -> OLD: cap_g = existente - RET_CAP_g, 0 ≤ RET_CAP_g ≤ existente
                 NEW: cap_g = CAP_g
"""
from __future__ import annotations
import logging

from pyomo.environ import (
    ConcreteModel, Set, Param, NonNegativeReals, PositiveReals, Constraint,
    Expression, Objective, Suffix, minimize,
)

from expansion_lp.core.types import ExpansionInputs, Variant
from expansion_lp.core.validators import validate_inputs
from .new_build_pyomo import attach_new_build_to_model
from .existing_pyomo import attach_existing_to_model
from .dispatch_pyomo import attach_dispatch_to_model


def build_expansion_model(inputs: ExpansionInputs) -> ConcreteModel:
    """Valida ``inputs`` y arma el ``ConcreteModel`` de la variante pedida."""
    log = logging.getLogger("expansion_builder")
    validate_inputs(inputs)

    m = ConcreteModel(name=f"Expansion_{inputs.variant.value}")

    # --- Conjuntos ---
    m.H   = Set(initialize=inputs.hours, ordered=True)
    m.G   = Set(initialize=inputs.names, ordered=True)
    m.NEW = Set(initialize=[g.name for g in inputs.new], within=m.G, ordered=True)
    m.OLD = Set(initialize=[g.name for g in inputs.old], within=m.G, ordered=True)

    # --- Parámetros de demanda ---
    m.demand   = Param(m.H, initialize=lambda m, h: inputs.demand[h - 1], within=NonNegativeReals)
    m.nse_cost = Param(initialize=inputs.nse_cost, within=PositiveReals)

    log.info("[expansion_builder] variante=%s, generadores=%d (NEW=%d, OLD=%d), horas=%d",
             inputs.variant.value, len(m.G), len(m.NEW), len(m.OLD), len(m.H))

    # --- Capacidad ---
    attach_new_build_to_model(m, inputs.new)
    if inputs.variant == Variant.BROWNFIELD:
        attach_existing_to_model(m, inputs.old, capex_sunk=inputs.capex_sunk)
    else:
        m.cost_fixed_old = Expression(expr=0.0)

    old = set(m.OLD)

    def _avail_cap(m, g):
        return m.REM_CAP[g] if g in old else m.CAP[g]
    m.avail_cap = Expression(m.G, rule=_avail_cap)

    # --- Despacho + ENS ---
    attach_dispatch_to_model(m, inputs.generators)
    if len(m.VRE):
        log.info("[expansion_builder] renovables variables: %s", list(m.VRE))

    # --- Balance de energía por hora (MWh) ---
    def _balance(m, h):
        return m.gen_total[h] + m.NSE[h] == m.demand[h]
    m.Balance = Constraint(m.H, rule=_balance)

    # --- Objetivo ---
    m.cost_fixed = Expression(expr=m.cost_fixed_new + m.cost_fixed_old)
    m.TotalCost = Objective(expr=m.cost_fixed + m.cost_var + m.cost_nse, sense=minimize)

    # precios marginales horarios = dual del balance
    m.dual = Suffix(direction=Suffix.IMPORT)

    log.info("[expansion_builder] modelo armado: %d restricciones de capacidad, %d de balance",
             len(m.CapLimit), len(m.Balance))
    return m
