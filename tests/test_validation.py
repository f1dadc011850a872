# tests/test_validation.py

"""
Tests for input validation.

Every malformed input must raise InvalidInput from build_expansion_model,
before any solver is involved.
"""

import pytest

from expansion_lp.core.errors import InvalidInput
from expansion_lp.core.types import ExpansionInputs, Generator, Variant
from expansion_lp.core.validators import validate_inputs
from expansion_lp.modeling import build_expansion_model


def _inputs(gens=None, demand=(50.0,), nse_cost=9000.0, variant=Variant.GREENFIELD):
    if gens is None:
        gens = (Generator("G", inv_cost=100.0, fom=0.0, var_cost=10.0),)
    return ExpansionInputs(generators=gens, demand=demand, nse_cost=nse_cost, variant=variant)


class TestRejectedInputs:
    """Degenerate or inconsistent data fails fast."""

    def test_valid_inputs_pass(self, single_gen_inputs):
        validate_inputs(single_gen_inputs)

    def test_empty_generator_set(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=()))

    def test_empty_demand(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(demand=()))

    def test_negative_demand(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(demand=(10.0, -1.0)))

    def test_nan_demand(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(demand=(float("nan"),)))

    @pytest.mark.parametrize("field", ["inv_cost", "fom", "var_cost"])
    def test_negative_costs(self, field):
        kwargs = {"inv_cost": 1.0, "fom": 1.0, "var_cost": 1.0, field: -1.0}
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=(Generator("G", **kwargs),)))

    @pytest.mark.parametrize("nse_cost", [0.0, -5.0])
    def test_non_positive_penalty(self, nse_cost):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(nse_cost=nse_cost))

    def test_penalty_must_exceed_variable_costs(self):
        gens = (Generator("G", inv_cost=1.0, fom=0.0, var_cost=100.0),)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens, nse_cost=100.0))

    def test_duplicate_names(self):
        g = Generator("G", inv_cost=1.0, fom=0.0, var_cost=1.0)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=(g, g)))


class TestCapacityFactorChecks:
    """Capacity factor series must align with demand and live in [0, 1]."""

    def test_length_mismatch(self):
        gens = (Generator("S", inv_cost=1.0, fom=0.0, var_cost=0.0, cf=(0.5,)),)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens, demand=(1.0, 2.0), variant=Variant.RENEWABLES))

    def test_out_of_range(self):
        gens = (Generator("S", inv_cost=1.0, fom=0.0, var_cost=0.0, cf=(1.2,)),)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens, variant=Variant.RENEWABLES))

    def test_thermal_variant_rejects_profiles(self):
        gens = (Generator("S", inv_cost=1.0, fom=0.0, var_cost=0.0, cf=(0.5,)),)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens, variant=Variant.GREENFIELD))

    def test_renewables_variant_needs_profile(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(variant=Variant.RENEWABLES))


class TestVariantConsistency:
    """Existing units belong only to the brownfield variant."""

    def test_old_unit_outside_brownfield(self):
        gens = (Generator("O", inv_cost=0.0, fom=1.0, var_cost=1.0, existing_mw=10.0, candidate=False),)
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens))

    def test_brownfield_needs_old_unit(self):
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(variant=Variant.BROWNFIELD))

    def test_new_unit_with_existing_capacity(self):
        gens = (
            Generator("O", inv_cost=0.0, fom=1.0, var_cost=1.0, existing_mw=10.0, candidate=False),
            Generator("N", inv_cost=1.0, fom=1.0, var_cost=1.0, existing_mw=5.0),
        )
        with pytest.raises(InvalidInput):
            build_expansion_model(_inputs(gens=gens, variant=Variant.BROWNFIELD))

    def test_unknown_variant_name(self):
        with pytest.raises(ValueError):
            _inputs(variant="offshore")
