# -*- coding: utf-8 -*-
"""Jerarquía de errores del modelo de expansión."""
from __future__ import annotations


class InvalidInput(ValueError):
    """Datos de entrada inválidos; se detecta antes de construir el modelo."""


class SolverError(RuntimeError):
    """Falla del solver (error interno, no disponible, límite de tiempo, etc.)."""

    def __init__(self, message: str, termination: str | None = None):
        super().__init__(message)
        self.termination = termination


class SolverInfeasible(SolverError):
    """El solver declaró el problema infactible."""


class SolverUnbounded(SolverError):
    """El solver declaró el problema no acotado."""


class SolverInfeasibleOrUnbounded(SolverInfeasible, SolverUnbounded):
    """El solver no distingue entre infactible y no acotado (p.ej. presolve de HiGHS)."""
