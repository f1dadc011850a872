# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict

from pyomo.environ import (
    ConcreteModel, Set, Var, Reals, Integers, Constraint, Objective, Suffix,
    minimize, maximize, value,
)

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.types import LinearProgram
from expansion_lp.core.validators import validate_linear_program


def build_linear_program(lp: LinearProgram) -> ConcreteModel:
    """
    Construye un ``ConcreteModel`` a partir de un LP/MILP en forma de coeficientes.
    Variables en ``m.v[name]``, restricciones en ``m.rows[name]``.
    """
    validate_linear_program(lp)
    m = ConcreteModel(name=lp.name)

    variables = {v.name: v for v in lp.variables}
    rows = {c.name: c for c in lp.constraints}

    # ---------------- Conjuntos ----------------
    m.V = Set(initialize=list(variables), ordered=True)
    m.R = Set(initialize=list(rows), ordered=True)

    # ---------------- Variables ----------------
    m.v = Var(
        m.V,
        within=lambda m, i: Integers if variables[i].integer else Reals,
        bounds=lambda m, i: (variables[i].lb, variables[i].ub),
    )

    # ---------------- Restricciones ----------------
    def _row(m, r):
        row = rows[r]
        terms = [coef * m.v[name] for name, coef in row.coeffs.items() if coef != 0]
        if not terms:
            # fila trivial 0 (sense) rhs: se omite si se cumple, si no el LP es inválido
            ok = {"<=": 0 <= row.rhs, ">=": 0 >= row.rhs, "==": row.rhs == 0}[row.sense]
            if ok:
                return Constraint.Skip
            raise InvalidInput(f"[{lp.name}] {r}: fila vacía imposible (0 {row.sense} {row.rhs})")
        lhs = sum(terms)
        if row.sense == "<=":
            return lhs <= row.rhs
        if row.sense == ">=":
            return lhs >= row.rhs
        return lhs == row.rhs
    m.rows = Constraint(m.R, rule=_row)

    # ---------------- Objetivo ----------------
    sense = maximize if lp.sense == "max" else minimize
    m.OBJ = Objective(
        expr=sum(coef * m.v[name] for name, coef in lp.objective.items()),
        sense=sense,
    )

    # duales solo tienen sentido en LP continuo
    if not lp.is_mip:
        m.dual = Suffix(direction=Suffix.IMPORT)
    return m


def read_lp_solution(m: ConcreteModel) -> Dict[str, float]:
    """Valores de ``m.v`` indexados por nombre de variable (tras un solve óptimo)."""
    return {str(i): float(value(m.v[i])) for i in m.V}
