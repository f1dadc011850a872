from .types import (
    Generator, ExpansionInputs, Variant, LinearProgram, LPVariable, LPConstraint,
)
from .errors import (
    InvalidInput, SolverError, SolverInfeasible, SolverUnbounded, SolverInfeasibleOrUnbounded,
)
from .validators import validate_inputs, validate_linear_program
from .config import RunConfig

__all__ = [
    "Generator", "ExpansionInputs", "Variant", "LinearProgram", "LPVariable", "LPConstraint",
    "InvalidInput", "SolverError", "SolverInfeasible", "SolverUnbounded", "SolverInfeasibleOrUnbounded",
    "validate_inputs", "validate_linear_program", "RunConfig",
]
