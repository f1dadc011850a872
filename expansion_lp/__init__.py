"""Modelo lineal de expansión de capacidad de generación (greenfield, renovables, brownfield)."""

from .core import (
    Generator, ExpansionInputs, Variant, LinearProgram, LPVariable, LPConstraint,
    InvalidInput, SolverError, SolverInfeasible, SolverUnbounded, SolverInfeasibleOrUnbounded,
    RunConfig,
)
from .modeling import build_expansion_model, build_linear_program, read_lp_solution
from .solve import solve_model, SolveOutcome
from .pipeline import load_inputs, run_expansion
from .results import ExpansionResult

__version__ = "0.1.0"

__all__ = [
    "Generator", "ExpansionInputs", "Variant", "LinearProgram", "LPVariable", "LPConstraint",
    "InvalidInput", "SolverError", "SolverInfeasible", "SolverUnbounded", "SolverInfeasibleOrUnbounded",
    "RunConfig", "build_expansion_model", "build_linear_program", "read_lp_solution",
    "solve_model", "SolveOutcome", "load_inputs", "run_expansion", "ExpansionResult",
]
