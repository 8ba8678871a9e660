"""Unit tests for organic variation envelopes."""

import numpy as np
import pytest

from shape_lib.geometry.variation import (
    OrganicVariation,
    VariationEnvelope,
    control_point_count,
)


class TestControlPointCount:

    @pytest.mark.parametrize('symmetry, expected', [
        (0, 8), (2, 8), (4, 8), (5, 10), (6, 12), (12, 24), (18, 24), (4.25, 9),
    ])
    def test_clamped_double_symmetry(self, symmetry, expected):
        assert control_point_count(symmetry) == expected


class TestVariationEnvelope:

    def test_values_within_unit_range(self):
        env = VariationEnvelope(1234, 12)
        t = np.linspace(0, 1, 1001)
        values = env(t)
        assert np.all(values >= -1.0)
        assert np.all(values <= 1.0)

    def test_periodic(self):
        env = VariationEnvelope(77, 10)
        assert env(0.0) == pytest.approx(env(1.0))

    def test_passes_through_control_values(self):
        env = VariationEnvelope(5, 8)
        t = np.arange(8) / 8
        np.testing.assert_allclose(env(t), np.clip(env.values, -1, 1), atol=1e-12)

    def test_deterministic(self):
        np.testing.assert_array_equal(VariationEnvelope(9, 16).values,
                                      VariationEnvelope(9, 16).values)

    def test_count(self):
        assert len(VariationEnvelope(1, 20)) == 20

    def test_rejects_tiny_count(self):
        with pytest.raises(ValueError):
            VariationEnvelope(1, 1)


class TestOrganicVariation:

    def test_zero_amount_is_identity(self):
        variation = OrganicVariation.for_seed(42, 6, 0.0)
        t = np.linspace(0, 1, 50)
        r = np.ones(50)
        theta = t * 2 * np.pi
        r2, theta2 = variation.apply(t, r, theta)
        assert r2 is r
        assert theta2 is theta

    def test_angle_envelope_uses_offset_seed(self):
        variation = OrganicVariation.for_seed(42, 6, 0.1)
        assert variation.radius_envelope.seed == 42
        assert variation.angle_envelope.seed == 1042

    def test_radius_perturbation_bounded(self):
        amount = 0.2
        variation = OrganicVariation.for_seed(3, 5, amount)
        t = np.linspace(0, 1, 500)
        r2, _ = variation.apply(t, np.ones_like(t), t * 2 * np.pi)
        assert np.all(r2 >= 1 - amount - 1e-9)
        assert np.all(r2 <= 1 + amount + 1e-9)

    def test_angle_perturbation_damped(self):
        amount = 0.2
        variation = OrganicVariation.for_seed(3, 5, amount)
        t = np.linspace(0, 1, 500)
        theta = t * 2 * np.pi
        _, theta2 = variation.apply(t, np.ones_like(t), theta)
        assert np.max(np.abs(theta2 - theta)) <= amount * 0.25 + 1e-9

    def test_perturbed_path_closes(self):
        variation = OrganicVariation.for_seed(8, 4, 0.35)
        t = np.array([0.0, 1.0])
        r2, theta2 = variation.apply(t, np.ones(2), t * 2 * np.pi)
        assert r2[0] == pytest.approx(r2[1])
        assert theta2[1] - theta2[0] == pytest.approx(2 * np.pi)
