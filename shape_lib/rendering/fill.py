"""Fill strategy selection.

Each shape is filled by exactly one strategy, chosen from its style:

    none        fill color 'none' or empty
    gradient    gradient_mode with an edge color
    watercolor  watercolor_mode with intensity > 0
    solid       everything else

The selector returns descriptors (sampled points plus colors); painting
them is the drawing surface's job.

Watercolor fills are ``ceil(intensity * 0.15) + 3`` translucent passes.
Each pass re-samples the outline with its own variation envelope and draws
its opacity and color jitter from a PRNG seeded with
``shape_seed + 12345``, so the texture is identical on every render.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from ..color.parse import RGBA, parse_color
from ..config import (
    GRADIENT_OVERSHOOT,
    MAX_VARIATION,
    MAX_WATERCOLOR_INTENSITY,
    PEN_WIGGLE_SCALE,
    RENDER_STEPS,
    WATERCOLOR_BASE_LAYERS,
    WATERCOLOR_JITTER_FACTOR,
    WATERCOLOR_LAYER_FACTOR,
    WATERCOLOR_SEED_OFFSET,
)
from ..domain.shape import FillKind, Shape
from ..geometry.sampler import sample_path, sample_shape
from ..geometry.seed import shape_seed
from ..geometry.variation import OrganicVariation
from ..utils.prng import SeededRandom


@dataclass
class FillLayer:
    """One filled pass: a closed outline and its RGBA color."""
    points: np.ndarray
    color: RGBA


@dataclass
class SolidFill:
    layer: FillLayer
    kind: FillKind = FillKind.SOLID


@dataclass
class GradientFill:
    """Radial gradient from ``inner`` at the center to ``outer`` at ``radius``.

    ``radius`` is 1.2x the shape radius so that the outline is never
    under-covered.
    """
    points: np.ndarray
    center: Tuple[float, float]
    radius: float
    inner: RGBA
    outer: RGBA
    kind: FillKind = FillKind.GRADIENT


@dataclass
class WatercolorFill:
    layers: List[FillLayer] = field(default_factory=list)
    kind: FillKind = FillKind.WATERCOLOR


Fill = Union[SolidFill, GradientFill, WatercolorFill]


def watercolor_layer_count(intensity: float) -> int:
    intensity = min(max(intensity, 0), MAX_WATERCOLOR_INTENSITY)
    return math.ceil(intensity * WATERCOLOR_LAYER_FACTOR) + WATERCOLOR_BASE_LAYERS


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


def watercolor_fill(shape: Shape, steps: int = RENDER_STEPS,
                    scale_factor: float = 1.0) -> WatercolorFill:
    """Build the layered watercolor passes for a shape.

    Raises:
        ColorParseError: If the fill color is malformed.
    """
    r, g, b, base_opacity = parse_color(shape.fill_color)
    intensity = min(float(shape.watercolor_intensity or 0), MAX_WATERCOLOR_INTENSITY)
    count = watercolor_layer_count(intensity)
    rng = SeededRandom(shape_seed(shape) + WATERCOLOR_SEED_OFFSET)
    symmetry = shape.curve.symmetry

    layers = []
    for _ in range(count):
        opacity = (base_opacity / count) * rng.range(0.6, 1.4)
        wiggle = intensity * WATERCOLOR_JITTER_FACTOR * rng.range(0.5, 1.5)
        amount = min(MAX_VARIATION, wiggle * PEN_WIGGLE_SCALE)
        variation = OrganicVariation.for_seed(rng.next_seed(), symmetry, amount)
        points = sample_path(shape, steps, variation, scale_factor)

        jitter = math.floor(intensity * WATERCOLOR_JITTER_FACTOR * rng.range(-5, 5))
        color = (_clamp_channel(r + jitter), _clamp_channel(g + jitter),
                 _clamp_channel(b + jitter), min(1.0, opacity))
        layers.append(FillLayer(points, color))
    return WatercolorFill(layers)


def select_fill(shape: Shape, steps: int = RENDER_STEPS,
                scale_factor: float = 1.0) -> Optional[Fill]:
    """Choose and build the fill descriptor for a shape.

    Returns:
        A SolidFill, GradientFill or WatercolorFill, or None when the shape
        has no fill.

    Raises:
        ColorParseError: If a fill or gradient color is malformed.
    """
    kind = shape.fill_kind
    if kind is FillKind.NONE:
        return None
    if kind is FillKind.WATERCOLOR:
        return watercolor_fill(shape, steps, scale_factor)

    points = sample_shape(shape, steps, scale_factor)
    if kind is FillKind.GRADIENT:
        return GradientFill(
            points=points,
            center=(shape.cx * scale_factor, shape.cy * scale_factor),
            radius=shape.radius * scale_factor * GRADIENT_OVERSHOOT,
            inner=parse_color(shape.fill_color),
            outer=parse_color(shape.gradient_edge_color),
        )
    return SolidFill(FillLayer(points, parse_color(shape.fill_color)))
