"""Punto de acceso a los constructores de modelos Pyomo.

``build_expansion_model`` arma el problema de expansión de capacidad en sus
tres variantes; ``build_linear_program`` traduce un LP/MILP descrito solo por
coeficientes.  Los módulos ``*_pyomo`` agregan bloques a un modelo existente.
"""

from .expansion_builder import build_expansion_model
from .lp_builder import build_linear_program, read_lp_solution

__all__ = ["build_expansion_model", "build_linear_program", "read_lp_solution"]
