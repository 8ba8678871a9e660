"""Pillow-backed drawing surface.

This module provides the raster surface that paints sampled outlines and
fill descriptors. Anti-aliasing comes from drawing at ``SUPERSAMPLE`` times
the target size and downsampling with a LANCZOS filter.

The module provides the following:
    RasterSurface: RGBA canvas with fill/gradient/stroke primitives.
    paint_shape: Paint one shape (fill then stroke) onto a surface.
    render_shapes: Render a shape list to a PIL image of a given size.

Example usage:
    Rendering an icon::

        from shape_lib.rendering.surface import render_shapes

        image = render_shapes(shapes, size=64)
        image.save('icon-64.png')
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..color.parse import RGBA, parse_color
from ..config import CANVAS_SIZE, FALLBACK_FILL, SUPERSAMPLE
from ..domain.shape import Shape
from ..errors import ColorParseError
from ..geometry.sampler import sample_shape, steps_for_size
from .fill import FillLayer, GradientFill, SolidFill, WatercolorFill, select_fill

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)


class RasterSurface:
    """Square RGBA surface.

    Coordinates passed to the drawing methods are in output pixels; the
    surface scales them to its oversampled buffer internally.

    Attributes:
        size: Output edge length in pixels.
        supersample: Oversampling factor.
    """

    def __init__(self, size: int, supersample: int = SUPERSAMPLE,
                 background: Tuple[int, int, int, int] = WHITE):
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self.supersample = max(1, int(supersample))
        full = size * self.supersample
        self._image = Image.new('RGBA', (full, full), background)

    @property
    def _full_size(self) -> Tuple[int, int]:
        return self._image.size

    def _scaled(self, points: np.ndarray) -> list:
        pts = np.asarray(points, dtype=float) * self.supersample
        return [(float(x), float(y)) for x, y in pts]

    def _mask(self, points: np.ndarray) -> np.ndarray:
        mask = Image.new('L', self._full_size, 0)
        ImageDraw.Draw(mask).polygon(self._scaled(points), fill=255)
        return np.asarray(mask, dtype=float) / 255.0

    def _composite(self, rgb: np.ndarray, alpha: np.ndarray) -> None:
        """Blend an overlay (per-pixel rgb and alpha in 0-1) over the buffer."""
        overlay = np.zeros(alpha.shape + (4,), dtype=np.uint8)
        overlay[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
        overlay[..., 3] = np.clip(np.rint(alpha * 255.0), 0, 255).astype(np.uint8)
        self._image = Image.alpha_composite(self._image, Image.fromarray(overlay, 'RGBA'))

    def fill_polygon(self, points: np.ndarray, color: RGBA) -> None:
        """Fill a closed outline with a flat color."""
        mask = self._mask(points)
        rgb = np.broadcast_to(np.array(color[:3], dtype=float), mask.shape + (3,))
        self._composite(rgb, mask * color[3])

    def fill_radial_gradient(self, points: np.ndarray, center: Tuple[float, float],
                             radius: float, inner: RGBA, outer: RGBA) -> None:
        """Fill a closed outline with a radial gradient clipped to it."""
        mask = self._mask(points)
        ss = self.supersample
        coords = (np.arange(mask.shape[0]) + 0.5) / ss
        xx, yy = np.meshgrid(coords, coords)
        dist = np.hypot(xx - center[0], yy - center[1])
        t = np.clip(dist / max(radius, 1e-9), 0.0, 1.0)[..., None]

        start = np.array(inner, dtype=float)
        end = np.array(outer, dtype=float)
        mixed = start + (end - start) * t
        self._composite(mixed[..., :3], mask * mixed[..., 3])

    def stroke_polygon(self, points: np.ndarray, color: RGBA, width: float) -> None:
        """Stroke a closed outline."""
        layer = Image.new('RGBA', self._full_size, (0, 0, 0, 0))
        pts = self._scaled(points)
        if pts and pts[0] != pts[-1]:
            pts.append(pts[0])
        line_width = max(1, int(round(width * self.supersample)))
        fill = (int(color[0]), int(color[1]), int(color[2]), int(round(color[3] * 255)))
        ImageDraw.Draw(layer).line(pts, fill=fill, width=line_width, joint='curve')
        self._image = Image.alpha_composite(self._image, layer)

    def to_image(self) -> Image.Image:
        """Downsample to the output size."""
        if self.supersample == 1:
            return self._image.copy()
        return self._image.resize((self.size, self.size), Image.LANCZOS)

    def rgba_array(self) -> np.ndarray:
        """Output pixels as a (size, size, 4) uint8 array in R, G, B, A order."""
        return np.asarray(self.to_image(), dtype=np.uint8)


def _parse_or_fallback(text: Optional[str], what: str) -> RGBA:
    try:
        return parse_color(text)
    except ColorParseError as e:
        logger.warning("Bad %s color, using fallback: %s", what, e)
        return FALLBACK_FILL


def paint_shape(surface: RasterSurface, shape: Shape, scale_factor: float = 1.0,
                steps: Optional[int] = None) -> None:
    """Paint a shape's fill and then its stroke."""
    if steps is None:
        steps = steps_for_size(surface.size)

    try:
        fill = select_fill(shape, steps, scale_factor)
    except ColorParseError as e:
        logger.warning("Bad fill color, using fallback: %s", e)
        fill = SolidFill(FillLayer(sample_shape(shape, steps, scale_factor), FALLBACK_FILL))

    outline = None
    if isinstance(fill, SolidFill):
        outline = fill.layer.points
        surface.fill_polygon(fill.layer.points, fill.layer.color)
    elif isinstance(fill, GradientFill):
        outline = fill.points
        surface.fill_radial_gradient(fill.points, fill.center, fill.radius, fill.inner, fill.outer)
    elif isinstance(fill, WatercolorFill):
        for layer in fill.layers:
            surface.fill_polygon(layer.points, layer.color)

    if shape.has_stroke:
        if outline is None:
            outline = sample_shape(shape, steps, scale_factor)
        surface.stroke_polygon(outline, _parse_or_fallback(shape.stroke_color, 'stroke'),
                               shape.stroke_width * scale_factor)


def render_shapes(shapes: Iterable[Shape], size: int = CANVAS_SIZE,
                  steps: Optional[int] = None, supersample: int = SUPERSAMPLE) -> Image.Image:
    """Render shapes in list order onto a white square of ``size`` pixels."""
    surface = RasterSurface(size, supersample=supersample)
    scale_factor = size / CANVAS_SIZE
    for shape in shapes:
        paint_shape(surface, shape, scale_factor, steps)
    return surface.to_image()


def render_rgba(shapes: Sequence[Shape], size: int) -> np.ndarray:
    """Render shapes and return the (size, size, 4) RGBA pixel array."""
    return np.asarray(render_shapes(shapes, size), dtype=np.uint8)
