"""Unit tests for the superformula and knot generators."""

import math
import unittest

import numpy as np
import pytest

from shape_lib.domain import Knot, Superformula
from shape_lib.geometry.curves import knot_pattern, superformula_r
from shape_lib.utils.prng import SeededRandom


class TestSuperformula(unittest.TestCase):
    """Tests for superformula_r."""

    def test_circle_has_unit_radius(self):
        theta = np.linspace(0, 2 * np.pi, 361)
        r = superformula_r(theta, Superformula(4, 2, 2, 2, 1, 1))
        np.testing.assert_allclose(r, 1.0, atol=1e-12)

    def test_scalar_input_returns_float(self):
        r = superformula_r(0.0, Superformula())
        self.assertIsInstance(r, float)
        self.assertAlmostEqual(r, 1.0)

    def test_array_shape_preserved(self):
        theta = np.zeros((3, 4))
        self.assertEqual(superformula_r(theta, Superformula()).shape, (3, 4))

    def test_star_has_spikes(self):
        theta = np.linspace(0, 2 * np.pi, 1000)
        r = superformula_r(theta, Superformula(5, 0.5, 0.5, 0.5, 1, 1))
        self.assertGreater(r.max() / r.min(), 2.0)

    def test_zero_n1_is_finite(self):
        theta = np.linspace(0, 2 * np.pi, 100)
        r = superformula_r(theta, Superformula(4, 0, 2, 2, 1, 1))
        self.assertTrue(np.all(np.isfinite(r)))

    def test_zero_scale_is_clamped(self):
        theta = np.linspace(0, 2 * np.pi, 100)
        r = superformula_r(theta, Superformula(4, 2, 2, 2, 0, 1))
        self.assertTrue(np.all(np.isfinite(r)))
        self.assertTrue(np.all(r >= 0))


class TestSuperformulaProperties:

    @pytest.mark.parametrize('seed', range(20))
    def test_random_parameters_finite_and_positive(self, seed):
        rng = SeededRandom(seed)
        params = Superformula(
            m=rng.randint(1, 24),
            n1=rng.range(0.1, 100),
            n2=rng.range(0.1, 100),
            n3=rng.range(0.1, 100),
            a=rng.range(0.5, 2.5),
            b=rng.range(0.5, 2.5),
        )
        theta = np.linspace(0, 2 * np.pi, 720)
        r = superformula_r(theta, params)
        assert np.all(np.isfinite(r))
        assert np.all(r > 0)


class TestKnotPattern(unittest.TestCase):
    """Tests for knot_pattern."""

    def test_endpoints(self):
        params = Knot(lobes=3, turns=2, amplitude=0.3, base_radius=1.0)
        r0, theta0 = knot_pattern(0.0, params)
        r1, theta1 = knot_pattern(1.0, params)
        self.assertAlmostEqual(r0, 1.3)
        self.assertAlmostEqual(theta0, 0.0)
        self.assertAlmostEqual(r1, r0)
        self.assertAlmostEqual(theta1, 4 * math.pi)

    def test_radius_bounds(self):
        params = Knot(lobes=5, turns=3, amplitude=0.25, base_radius=0.8)
        t = np.linspace(0, 1, 2001)
        r, _ = knot_pattern(t, params)
        self.assertAlmostEqual(r.max(), 1.05, places=6)
        self.assertAlmostEqual(r.min(), 0.55, places=4)

    def test_angle_is_linear(self):
        t = np.linspace(0, 1, 11)
        _, theta = knot_pattern(t, Knot(lobes=2, turns=1))
        np.testing.assert_allclose(np.diff(theta), 2 * np.pi / 10)
