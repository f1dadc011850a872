# -*- coding: utf-8 -*-
from __future__ import annotations
import math
from typing import Iterable

from .errors import InvalidInput
from .types import ExpansionInputs, LinearProgram, Variant

_SENSES = {"<=", ">=", "=="}


def ensure_names_unique(names: Iterable[str], where: str) -> None:
    s = set()
    for n in names:
        if n in s:
            raise InvalidInput(f"[{where}] nombre duplicado: {n}")
        s.add(n)


def _finite_non_negative(value: float) -> bool:
    return value is not None and math.isfinite(value) and value >= 0


def validate_demand(demand: Iterable[float]) -> None:
    demand = list(demand)
    if not demand:
        raise InvalidInput("[demand] la serie de demanda está vacía")
    bad = [h for h, d in enumerate(demand, start=1) if not _finite_non_negative(d)]
    if bad:
        raise InvalidInput(f"[demand] demanda negativa o no finita en horas: {bad[:10]}")


def validate_inputs(inputs: ExpansionInputs) -> None:
    """
    Valida los datos de una corrida antes de construir el modelo.
    Cualquier problema levanta ``InvalidInput``; nunca se llega al solver.
    """
    gens = inputs.generators
    if not gens:
        raise InvalidInput("[generators] el conjunto de generadores está vacío")
    validate_demand(inputs.demand)
    ensure_names_unique((g.name for g in gens), "generators")

    # 1) costos y capacidad existente
    for g in gens:
        if not g.name:
            raise InvalidInput("[generators] hay un generador sin nombre")
        for attr in ("inv_cost", "fom", "var_cost", "existing_mw"):
            if not _finite_non_negative(getattr(g, attr)):
                raise InvalidInput(f"[generators] {g.name}: {attr} debe ser >= 0 (recibido {getattr(g, attr)!r})")

    # 2) penalización ENS: positiva y por sobre el costo variable más caro
    nse = inputs.nse_cost
    if nse is None or not math.isfinite(nse) or nse <= 0:
        raise InvalidInput(f"[nse] penalización ENS debe ser > 0 (recibido {nse!r})")
    worst = max(gens, key=lambda g: g.var_cost)
    if nse <= worst.var_cost:
        raise InvalidInput(
            f"[nse] penalización ENS ({nse}) debe superar el costo variable más alto "
            f"({worst.name}: {worst.var_cost})"
        )

    # 3) factores de planta
    n = inputs.n_hours
    for g in gens:
        if g.cf is None:
            continue
        if len(g.cf) != n:
            raise InvalidInput(f"[cf] {g.name}: largo {len(g.cf)} != horas de demanda {n}")
        bad = [h for h, v in enumerate(g.cf, start=1) if not (math.isfinite(v) and 0.0 <= v <= 1.0)]
        if bad:
            raise InvalidInput(f"[cf] {g.name}: factores fuera de [0,1] en horas {bad[:10]}")

    # 4) coherencia con la variante
    variant = inputs.variant
    if variant == Variant.GREENFIELD:
        variable = [g.name for g in gens if g.is_variable]
        if variable:
            raise InvalidInput(f"[variant] greenfield térmico no admite factores de planta: {variable}")
    if variant == Variant.RENEWABLES and not any(g.is_variable for g in gens):
        raise InvalidInput("[variant] renewables requiere al menos un generador con factor de planta")
    if variant != Variant.BROWNFIELD:
        old = [g.name for g in gens if not g.candidate]
        if old:
            raise InvalidInput(f"[variant] {variant.value} no admite unidades existentes (OLD): {old}")
        existing = [g.name for g in gens if g.existing_mw > 0]
        if existing:
            raise InvalidInput(f"[variant] {variant.value} no admite capacidad existente: {existing}")
    else:
        if not inputs.old:
            raise InvalidInput("[variant] brownfield requiere al menos una unidad existente (OLD)")
        with_existing_new = [g.name for g in inputs.new if g.existing_mw > 0]
        if with_existing_new:
            raise InvalidInput(f"[variant] candidatos (NEW) con capacidad existente: {with_existing_new}")


def validate_linear_program(lp: LinearProgram) -> None:
    if not lp.variables:
        raise InvalidInput(f"[{lp.name}] no hay variables")
    ensure_names_unique((v.name for v in lp.variables), lp.name)
    known = {v.name for v in lp.variables}

    for v in lp.variables:
        if v.lb is not None and v.ub is not None and v.lb > v.ub:
            raise InvalidInput(f"[{lp.name}] {v.name}: cota inferior {v.lb} > superior {v.ub}")

    unknown = sorted(set(lp.objective) - known)
    if unknown:
        raise InvalidInput(f"[{lp.name}] objetivo con variables desconocidas: {unknown}")
    if lp.sense not in ("min", "max"):
        raise InvalidInput(f"[{lp.name}] sentido de optimización inválido: {lp.sense!r}")

    ensure_names_unique((c.name for c in lp.constraints), lp.name)
    for c in lp.constraints:
        if c.sense not in _SENSES:
            raise InvalidInput(f"[{lp.name}] {c.name}: sentido inválido {c.sense!r}")
        unknown = sorted(set(c.coeffs) - known)
        if unknown:
            raise InvalidInput(f"[{lp.name}] {c.name}: variables desconocidas {unknown}")
