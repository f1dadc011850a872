# -*- coding: utf-8 -*-
"""Invocación del solver (caja negra) y traducción del estado de término."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pyomo.environ import Objective, Var, value
from pyomo.opt import SolverFactory, SolverStatus, TerminationCondition

from expansion_lp.core.config import SOLVER_NAME
from expansion_lp.core.errors import (
    SolverError, SolverInfeasible, SolverInfeasibleOrUnbounded, SolverUnbounded,
)

log = logging.getLogger("solver")

STATUS_OPTIMAL = "optimal"


@dataclass
class SolveOutcome:
    """Resultado de un solve óptimo: estado, objetivo y valor por variable declarada."""

    status: str
    objective: float
    values: Dict[str, float] = field(default_factory=dict)
    termination: str = STATUS_OPTIMAL
    solver_name: str = SOLVER_NAME
    wall_time: float = 0.0


def _get_solver(solver_name: str, options: Optional[Mapping[str, Any]] = None):
    try:
        opt = SolverFactory(solver_name)
    except Exception as exc:  # pyomo levanta distintos tipos según el plugin
        raise SolverError(f"[solver] no se pudo crear '{solver_name}': {exc}") from exc
    if opt is None or not opt.available(exception_flag=False):
        raise SolverError(
            f"[solver] solver '{solver_name}' no disponible. Instala highspy (HiGHS) o usa CBC/GLPK."
        )
    for key, val in (options or {}).items():
        opt.options[key] = val
    return opt


def _raise_for_termination(tc, status, solver_name: str) -> None:
    msg = f"[solver] {solver_name}: status={status}, termination={tc}"
    if tc == TerminationCondition.infeasible:
        raise SolverInfeasible(msg, termination=str(tc))
    if tc == TerminationCondition.unbounded:
        raise SolverUnbounded(msg, termination=str(tc))
    if tc == TerminationCondition.infeasibleOrUnbounded:
        raise SolverInfeasibleOrUnbounded(msg, termination=str(tc))
    raise SolverError(msg, termination=str(tc))


def _active_objective(m):
    objs = list(m.component_data_objects(Objective, active=True))
    if len(objs) != 1:
        raise SolverError(f"[solver] se esperaba 1 objetivo activo, hay {len(objs)}")
    return objs[0]


def solve_model(
    m,
    solver_name: str = SOLVER_NAME,
    *,
    tee: bool = False,
    options: Optional[Mapping[str, Any]] = None,
) -> SolveOutcome:
    """
    Resuelve ``m`` y carga la solución solo si el término es óptimo.
    Infactible / no acotado / error se levantan como excepciones distintas;
    no hay reintentos: el mismo modelo reproduce el mismo estado.
    """
    opt = _get_solver(solver_name, options)
    obj = _active_objective(m)

    t0 = time.perf_counter()
    try:
        results = opt.solve(m, tee=tee, load_solutions=False)
    except Exception as exc:
        raise SolverError(f"[solver] {solver_name} falló: {exc}") from exc
    wall = time.perf_counter() - t0

    tc = results.solver.termination_condition
    status = results.solver.status
    log.info("[solver] %s: status=%s, termination=%s (%.2fs)", solver_name, status, tc, wall)

    if tc != TerminationCondition.optimal or status not in (SolverStatus.ok, SolverStatus.warning):
        _raise_for_termination(tc, status, solver_name)

    m.solutions.load_from(results)

    values = {
        v.name: float(v.value)
        for v in m.component_data_objects(Var, active=True)
        if v.value is not None
    }
    return SolveOutcome(
        status=STATUS_OPTIMAL,
        objective=float(value(obj)),
        values=values,
        termination=str(tc),
        solver_name=solver_name,
        wall_time=wall,
    )


def solver_available(solver_name: str = SOLVER_NAME) -> bool:
    try:
        opt = SolverFactory(solver_name)
        return bool(opt is not None and opt.available(exception_flag=False))
    except Exception:
        return False
