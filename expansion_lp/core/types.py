# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

# Identificadores semánticos
GenId = str
Hour = int


class Variant(str, Enum):
    """Variante del modelo de expansión (una por corrida)."""

    GREENFIELD = "greenfield"    # solo térmicas, sin capacidad existente
    RENEWABLES = "renewables"    # greenfield + renovables con factor de planta horario
    BROWNFIELD = "brownfield"    # parque existente (OLD) con retiros + candidatos (NEW)


@dataclass(frozen=True)
class Generator:
    """Parámetros de costo de un recurso de generación."""

    name: GenId
    inv_cost: float                     # $/MW-año (anualidad del capex)
    fom: float                          # $/MW-año (O&M fijo)
    var_cost: float                     # $/MWh (VOM + heat rate * combustible)
    existing_mw: float = 0.0            # MW instalados (solo OLD)
    candidate: bool = True              # True: NEW, False: OLD
    cf: Optional[Tuple[float, ...]] = None   # factor de planta horario (solo renovables)

    @property
    def fixed_cost(self) -> float:
        return self.inv_cost + self.fom

    @property
    def is_variable(self) -> bool:
        return self.cf is not None

    def fixed_cost_for(self, capex_sunk: bool) -> float:
        """Costo fijo cobrado por MW; en unidades existentes el capex puede ser hundido."""
        if not self.candidate and capex_sunk:
            return self.fom
        return self.fixed_cost

    def with_cf(self, cf) -> "Generator":
        return replace(self, cf=None if cf is None else tuple(float(v) for v in cf))


@dataclass(frozen=True)
class ExpansionInputs:
    """Datos completos de una corrida: parque, demanda horaria y penalización ENS."""

    generators: Tuple[Generator, ...]
    demand: Tuple[float, ...]
    nse_cost: float
    variant: Variant = Variant.GREENFIELD
    capex_sunk: bool = True

    def __post_init__(self):
        # normaliza a tuplas para que la instancia sea realmente inmutable
        object.__setattr__(self, "generators", tuple(self.generators))
        object.__setattr__(self, "demand", tuple(float(d) for d in self.demand))
        object.__setattr__(self, "variant", Variant(self.variant))

    @property
    def n_hours(self) -> int:
        return len(self.demand)

    @property
    def hours(self) -> Tuple[Hour, ...]:
        return tuple(range(1, self.n_hours + 1))

    @property
    def names(self) -> Tuple[GenId, ...]:
        return tuple(g.name for g in self.generators)

    @property
    def peak_demand(self) -> float:
        return max(self.demand) if self.demand else 0.0

    @property
    def total_demand(self) -> float:
        return float(sum(self.demand))

    @property
    def old(self) -> Tuple[Generator, ...]:
        return tuple(g for g in self.generators if not g.candidate)

    @property
    def new(self) -> Tuple[Generator, ...]:
        return tuple(g for g in self.generators if g.candidate)

    def by_name(self) -> Dict[GenId, Generator]:
        return {g.name: g for g in self.generators}

    def generator(self, name: GenId) -> Generator:
        return self.by_name()[name]


# ---------------------------------------------------------------------------
# LP genérico en forma de coeficientes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LPVariable:
    name: str
    lb: Optional[float] = 0.0
    ub: Optional[float] = None
    integer: bool = False


@dataclass(frozen=True)
class LPConstraint:
    name: str
    coeffs: Mapping[str, float]
    sense: str          # "<=", ">=", "=="
    rhs: float


@dataclass(frozen=True)
class LinearProgram:
    """Problema lineal (o entero mixto) descrito solo por coeficientes."""

    variables: Tuple[LPVariable, ...]
    objective: Mapping[str, float]
    constraints: Tuple[LPConstraint, ...] = field(default_factory=tuple)
    sense: str = "min"   # "min" | "max"
    name: str = "LP"

    @property
    def is_mip(self) -> bool:
        return any(v.integer for v in self.variables)
