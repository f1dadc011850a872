# -*- coding: utf-8 -*-
"""Derivación de costos fijos y variables por MW / MWh."""
from __future__ import annotations

import math

from .errors import InvalidInput


def capital_recovery_factor(wacc: float, lifetime: float) -> float:
    """Factor de recuperación de capital ``r(1+r)^n / ((1+r)^n - 1)``; ``1/n`` si ``r == 0``."""

    if lifetime is None or not math.isfinite(lifetime) or lifetime <= 0:
        raise InvalidInput(f"[finance] vida útil debe ser > 0 (recibido {lifetime!r})")
    if wacc is None or not math.isfinite(wacc) or wacc < 0:
        raise InvalidInput(f"[finance] wacc debe ser >= 0 (recibido {wacc!r})")
    if wacc == 0:
        return 1.0 / lifetime
    growth = (1.0 + wacc) ** lifetime
    return wacc * growth / (growth - 1.0)


def annualized_capex(capex: float, wacc: float, lifetime: float) -> float:
    """Anualidad del capex ($/MW-año)."""
    return float(capex) * capital_recovery_factor(wacc, lifetime)


def variable_cost(vom: float, heat_rate: float, fuel_cost: float) -> float:
    """Costo variable = VOM + heat rate * precio de combustible ($/MWh)."""
    return float(vom) + float(heat_rate) * float(fuel_cost)
