"""Interfaces de carga para el catálogo de generadores y sus factores de planta."""

from .generator_loader import (
    load_generators, read_generator_table, generators_from_frame, generators_frame,
)
from .cf_loader import (
    load_capacity_factors, load_capacity_factor_table, cf_from_table, attach_capacity_factors,
)

__all__ = [
    "load_generators", "read_generator_table", "generators_from_frame", "generators_frame",
    "load_capacity_factors", "load_capacity_factor_table", "cf_from_table", "attach_capacity_factors",
]
