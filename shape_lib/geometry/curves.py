"""Polar curve generators.

Both generators are pure functions of their numeric inputs and accept
either scalars or numpy arrays.

Superformula (Gielis)::

    r(theta) = (|cos(m*theta/4) / a|**n2 + |sin(m*theta/4) / b|**n3) ** (-1/n1)

Knot / rosette, for t in [0, 1]::

    r(t)     = base_radius + amplitude * cos(2 * lobes * pi * t)
    theta(t) = 2 * turns * pi * t

Example usage:
    Evaluating a circle::

        import numpy as np
        from shape_lib.domain import Superformula
        from shape_lib.geometry.curves import superformula_r

        theta = np.linspace(0, 2 * np.pi, 361)
        r = superformula_r(theta, Superformula(m=4, n1=2, n2=2, n3=2))
        # r == 1 everywhere
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..config import DENOMINATOR_FLOOR, MAX_UNIT_RADIUS
from ..domain.shape import Knot, Superformula


def _floor_magnitude(value: float, floor: float) -> float:
    """Push ``value`` away from zero to at least ``floor`` in magnitude."""
    if abs(value) >= floor:
        return value
    return floor if value >= 0 else -floor


def superformula_r(theta, params: Superformula):
    """Unit radius of the superformula at angle(s) ``theta``.

    The sum of the two trig terms is floored at 1e-12 before the power so
    that vanishing terms never divide by zero. A zero ``n1`` is floored the
    same way. The result is clamped to [0, MAX_UNIT_RADIUS]. Besides
    degenerate inputs such as a == 0, this also caps legitimate large
    radii, e.g. a small n1 (below 0.5) raising a small denominator to a
    large negative power.

    Args:
        theta: Angle in radians, scalar or array.
        params: Superformula parameters.

    Returns:
        Radius with the same shape as ``theta`` (a float for scalar input).
    """
    theta_arr = np.asarray(theta, dtype=float)
    quarter = params.m * theta_arr / 4.0
    n1 = _floor_magnitude(float(params.n1), DENOMINATOR_FLOOR)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        t1 = np.abs(np.cos(quarter) / params.a) ** params.n2
        t2 = np.abs(np.sin(quarter) / params.b) ** params.n3
        denom = np.maximum(t1 + t2, DENOMINATOR_FLOOR)
        r = denom ** (-1.0 / n1)

    r = np.clip(np.nan_to_num(r, nan=0.0, posinf=MAX_UNIT_RADIUS, neginf=0.0),
                0.0, MAX_UNIT_RADIUS)
    if np.ndim(theta) == 0:
        return float(r)
    return r


def knot_pattern(t, params: Knot) -> Tuple[np.ndarray, np.ndarray]:
    """Polar radius and angle of the rosette at parameter(s) ``t``.

    The angle sweeps ``turns`` full circles while the radius oscillates
    ``lobes`` times, so with integer lobes/turns both are periodic over
    t in [0, 1] and the sampled path closes.

    Args:
        t: Curve parameter in [0, 1], scalar or array.
        params: Knot parameters.

    Returns:
        Tuple of (r, theta), each shaped like ``t`` (floats for scalar input).
    """
    t_arr = np.asarray(t, dtype=float)
    r = params.base_radius + params.amplitude * np.cos(2.0 * params.lobes * np.pi * t_arr)
    theta = 2.0 * params.turns * np.pi * t_arr
    if np.ndim(t) == 0:
        return float(r), float(theta)
    return r, theta
