"""Organic variation envelopes.

Hand-drawn imperfection is simulated with smooth periodic perturbation
curves instead of per-sample noise, which would make the outline jagged.
An envelope is a ring of control values drawn from the seeded PRNG in
[-1, 1], spaced evenly over t in [0, 1) and joined by a periodic cubic
spline, so the value at t = 1 equals the value at t = 0 and the perturbed
path still closes.

Two independent envelopes perturb a curve: one scales the radius and one
shifts the angle (damped so angular displacement stays subtle)::

    r'     = r * (1 + radius_env(t) * k)
    theta' = theta + angle_env(t) * k * ANGLE_DAMPING

Example usage:
    Perturbing a sampled curve::

        from shape_lib.geometry.variation import OrganicVariation

        variation = OrganicVariation.for_seed(seed=1234, symmetry=6, amount=0.1)
        r2, theta2 = variation.apply(t, r, theta)
"""

from __future__ import annotations

import math

import numpy as np
from scipy.interpolate import CubicSpline

from ..config import (
    ANGLE_DAMPING,
    ANGLE_SEED_OFFSET,
    MAX_CONTROL_POINTS,
    MIN_CONTROL_POINTS,
)
from ..utils.prng import SeededRandom


def control_point_count(symmetry: float) -> int:
    """Control points for a curve: ``clamp(round(symmetry * 2), 8, 24)``."""
    return max(MIN_CONTROL_POINTS,
               min(MAX_CONTROL_POINTS, int(math.floor(abs(symmetry) * 2 + 0.5))))


class VariationEnvelope:
    """Smooth periodic curve with values in [-1, 1].

    Attributes:
        seed: Seed the control values were drawn from.
        values: Control values at t = i / n for i in range(n).
    """

    def __init__(self, seed: int, control_points: int = MIN_CONTROL_POINTS):
        if control_points < 2:
            raise ValueError(f"control_points must be >= 2, got {control_points}")
        rng = SeededRandom(seed)
        self.seed = seed
        self.values = np.array([rng.range(-1.0, 1.0) for _ in range(control_points)])

        knots = np.arange(control_points + 1) / control_points
        ring = np.append(self.values, self.values[0])
        self._spline = CubicSpline(knots, ring, bc_type='periodic')

    def __len__(self) -> int:
        return len(self.values)

    def __call__(self, t):
        """Envelope value(s) at ``t``; t is wrapped into [0, 1)."""
        wrapped = np.mod(np.asarray(t, dtype=float), 1.0)
        value = np.clip(self._spline(wrapped), -1.0, 1.0)
        if np.ndim(t) == 0:
            return float(value)
        return value


class OrganicVariation:
    """Radius and angle envelopes applied with a shared amount.

    Attributes:
        amount: Perturbation amount k in [0, 1).
        radius_envelope: Envelope scaling the radius.
        angle_envelope: Envelope shifting the angle, seeded ``seed + 1000``.
    """

    def __init__(self, radius_envelope: VariationEnvelope,
                 angle_envelope: VariationEnvelope, amount: float):
        self.radius_envelope = radius_envelope
        self.angle_envelope = angle_envelope
        self.amount = amount

    @classmethod
    def for_seed(cls, seed: int, symmetry: float, amount: float) -> OrganicVariation:
        count = control_point_count(symmetry)
        return cls(
            VariationEnvelope(seed, count),
            VariationEnvelope(seed + ANGLE_SEED_OFFSET, count),
            amount,
        )

    def apply(self, t, r, theta):
        """Perturb polar samples.

        Args:
            t: Curve parameter(s) in [0, 1].
            r: Unit radius at ``t``.
            theta: Angle at ``t``.

        Returns:
            Tuple of (r', theta'). With amount 0 the inputs come back
            unchanged.
        """
        if self.amount == 0:
            return r, theta
        r_out = r * (1.0 + self.radius_envelope(t) * self.amount)
        theta_out = theta + self.angle_envelope(t) * self.amount * ANGLE_DAMPING
        return r_out, theta_out
