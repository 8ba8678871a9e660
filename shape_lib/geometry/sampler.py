"""Path sampling for shapes.

Walks a shape's curve (superformula or knot, optionally perturbed by its
organic variation) into a dense closed polyline in canvas coordinates. The
same sampler feeds on-screen rendering, hit testing and SVG export, so all
three agree on the outline.

Transform order: unit curve -> variation -> rotation -> scale by radius ->
translate to center (all optionally scaled by ``scale_factor`` for
rendering at a different pixel size).

Example usage:
    Sampling a circle preset::

        from shape_lib.domain import Shape
        from shape_lib.geometry.sampler import sample_shape

        points = sample_shape(Shape(radius=100), steps=360)
        points.shape   # (361, 2); points[0] == points[-1]
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from ..config import (
    RENDER_STEPS,
    SMALL_RASTER_MAX_SIZE,
    SMALL_RASTER_STEPS,
)
from ..domain.shape import Curve, Knot, Shape
from .curves import knot_pattern, superformula_r
from .seed import shape_seed
from .variation import OrganicVariation

logger = logging.getLogger(__name__)


def steps_for_size(size: int) -> int:
    """Sample count for a raster of ``size`` pixels."""
    return SMALL_RASTER_STEPS if size <= SMALL_RASTER_MAX_SIZE else RENDER_STEPS


def unit_curve(curve: Curve, steps: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sample a curve over t in [0, 1] at ``steps + 1`` points.

    Returns:
        Tuple of (t, r, theta) arrays with unit radius.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    t = np.arange(steps + 1) / steps
    if isinstance(curve, Knot):
        r, theta = knot_pattern(t, curve)
    else:
        theta = t * 2.0 * np.pi
        r = superformula_r(theta, curve)
    return t, r, theta


def shape_variation(shape: Shape, seed: Optional[int] = None) -> Optional[OrganicVariation]:
    """The organic variation for a shape, or None when its mode is 'none'."""
    amount = shape.variation_amount
    if amount <= 0:
        return None
    if seed is None:
        seed = shape_seed(shape)
    return OrganicVariation.for_seed(seed, shape.curve.symmetry, amount)


def sample_path(shape: Shape, steps: int, variation: Optional[OrganicVariation] = None,
                scale_factor: float = 1.0) -> np.ndarray:
    """Sample a shape with an explicit variation.

    Args:
        shape: Shape to sample.
        steps: Number of segments; ``steps + 1`` points are returned.
        variation: Perturbation to apply, or None for the exact curve.
        scale_factor: Extra scale applied to center and radius.

    Returns:
        Array of shape (steps + 1, 2) with finite canvas coordinates; the
        last point coincides with the first.
    """
    t, r, theta = unit_curve(shape.curve, steps)
    if variation is not None:
        r, theta = variation.apply(t, r, theta)

    angle = theta + shape.rotation
    scale = shape.radius * scale_factor
    x = shape.cx * scale_factor + scale * r * np.cos(angle)
    y = shape.cy * scale_factor + scale * r * np.sin(angle)
    points = np.column_stack([x, y])

    if not np.all(np.isfinite(points)):
        logger.warning("Non-finite samples for shape at (%s, %s); zeroing", shape.cx, shape.cy)
        points = np.nan_to_num(points, nan=0.0, posinf=0.0, neginf=0.0)
    return points


def sample_shape(shape: Shape, steps: int = RENDER_STEPS, scale_factor: float = 1.0) -> np.ndarray:
    """Sample a shape using its own variation mode.

    See ``sample_path`` for the return value.
    """
    return sample_path(shape, steps, shape_variation(shape), scale_factor)
