"""Tests for the kinematics functions."""

import math

import numpy as np
import pytest

from kinecalc.core.errors import (
    ForbiddenDecayError,
    InvalidArgumentError,
    InvalidMassValueError,
    UnknownParticleError,
    ZeroParentMassError,
)
from kinecalc.core.functions import (
    decay_product_max_energy,
    lookup_mass,
    triangle_fn,
    two_particle_decay_energy,
)


class TestLookupMass:
    def test_found(self):
        assert lookup_mass({"p": 938.27}, "p") == 938.27

    def test_massless(self):
        assert lookup_mass({"γ": 0.0}, "γ") == 0.0

    def test_missing(self):
        with pytest.raises(UnknownParticleError, match="'n'"):
            lookup_mass({"p": 938.27}, "n")

    @pytest.mark.parametrize("bad", ["938.27", None, float("nan"), float("inf"), True])
    def test_invalid_value(self, bad):
        with pytest.raises(InvalidMassValueError):
            lookup_mass({"x": bad}, "x")

    def test_non_string_key(self):
        with pytest.raises(InvalidArgumentError):
            lookup_mass({"p": 938.27}, 1)


class TestTriangleFn:
    def test_three_values(self):
        # (1 + 4 + 9) - 2 * (2 + 3 + 6)
        assert triangle_fn([1, 2, 3]) == -8.0

    def test_two_values(self):
        # x² + y² - 2xy = (x - y)²
        assert triangle_fn([5, 2]) == 9.0

    def test_kallen_function(self):
        """λ(m², m1², m2²) vanishes at threshold."""
        assert triangle_fn([49.0, 9.0, 16.0]) == 0.0

    def test_matches_pairwise_definition(self):
        xs = [0.1, 2.5, -3.75, 4.0, 1e3]
        squares = 0.0
        for x in xs:
            squares += x * x
        products = 0.0
        for i in range(len(xs)):
            for j in range(i + 1, len(xs)):
                products += xs[i] * xs[j]
        assert triangle_fn(xs) == squares - 2 * products

    def test_tuple_and_array(self):
        assert triangle_fn((1, 2, 3)) == -8.0
        assert triangle_fn(np.array([1.0, 2.0, 3.0])) == -8.0

    def test_single_value(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn([5])

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn([])

    def test_not_a_list(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn(5)

    def test_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn("12")

    def test_non_numeric_item(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn([1, "a"])

    def test_2d_array(self):
        with pytest.raises(InvalidArgumentError):
            triangle_fn(np.ones((2, 2)))


class TestTwoParticleDecayEnergy:
    def test_first_product(self):
        assert two_particle_decay_energy(10, 3, 4, 1) == pytest.approx(4.65)

    def test_second_product(self):
        assert two_particle_decay_energy(10, 3, 4, 2) == pytest.approx(5.35)

    @pytest.mark.parametrize("m, m1, m2", [(10, 3, 4), (139.57, 105.66, 0.0), (7, 3.5, 3.5)])
    def test_energy_conservation(self, m, m1, m2):
        e1 = two_particle_decay_energy(m, m1, m2, 1)
        e2 = two_particle_decay_energy(m, m1, m2, 2)
        assert e1 + e2 == pytest.approx(m)

    def test_pion_decay_muon_energy(self):
        """π+ → μ+ ν: E_μ ≈ 109.78 MeV."""
        e_mu = two_particle_decay_energy(139.57, 105.66, 0.0, 1)
        assert e_mu == pytest.approx(109.78, abs=0.01)

    def test_sign_asymmetry(self):
        """Selecting n=2 is not the same as swapping m1 and m2 with n=1 unless equal."""
        assert two_particle_decay_energy(10, 3, 4, 2) == two_particle_decay_energy(10, 4, 3, 1)
        assert two_particle_decay_energy(10, 3, 4, 1) != two_particle_decay_energy(10, 3, 4, 2)

    def test_at_threshold(self):
        assert two_particle_decay_energy(7, 3, 4, 1) == pytest.approx(3.0)

    def test_forbidden(self):
        with pytest.raises(ForbiddenDecayError) as exc_info:
            two_particle_decay_energy(3, 2, 2, 1)
        assert exc_info.value.kind == "ForbiddenDecay"

    def test_zero_parent_mass(self):
        with pytest.raises(ZeroParentMassError):
            two_particle_decay_energy(0, 0, 0, 1)

    def test_zero_parent_mass_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            two_particle_decay_energy(0, 0, 0, 2)

    @pytest.mark.parametrize("n", [0, 3, 1.5, -1])
    def test_invalid_n(self, n):
        with pytest.raises(InvalidArgumentError):
            two_particle_decay_energy(10, 3, 4, n)

    def test_float_n_accepted(self):
        assert two_particle_decay_energy(10, 3, 4, 1.0) == pytest.approx(4.65)

    def test_forbidden_checked_before_n(self):
        with pytest.raises(ForbiddenDecayError):
            two_particle_decay_energy(3, 2, 2, 7)

    @pytest.mark.parametrize("args", [("10", 3, 4, 1), (10, None, 4, 1), (10, 3, math.nan, 1)])
    def test_non_numeric(self, args):
        with pytest.raises(InvalidArgumentError):
            two_particle_decay_energy(*args)


class TestDecayProductMaxEnergy:
    def test_example(self):
        # M = 6, (100 + 9 - 36) / 20
        assert decay_product_max_energy(10, 3, [2, 4]) == pytest.approx(3.65)

    def test_matches_two_body_with_summed_recoil(self):
        expected = two_particle_decay_energy(10, 3, 6, 1)
        assert decay_product_max_energy(10, 3, [2, 4]) == pytest.approx(expected)

    def test_muon_decay_electron_endpoint(self):
        """μ → e ν ν: E_max ≈ m_μ / 2."""
        e_max = decay_product_max_energy(105.66, 0.511, [0.0, 0.0])
        assert e_max == pytest.approx(52.83, abs=0.01)

    def test_empty_products(self):
        assert decay_product_max_energy(10, 3, []) == pytest.approx(109 / 20)

    def test_forbidden(self):
        with pytest.raises(ForbiddenDecayError):
            decay_product_max_energy(10, 3, [4, 4])

    def test_zero_parent_mass(self):
        with pytest.raises(ZeroParentMassError):
            decay_product_max_energy(0, 0, [0, 0])

    def test_products_not_a_list(self):
        with pytest.raises(InvalidArgumentError):
            decay_product_max_energy(10, 3, 6)
