"""SVG export.

Each shape becomes one ``<path>``: a move-to for the first sample, a
line-to per following sample and a closing ``Z``. The dense sample count
(360 per shape) is smooth enough that no curve fitting is needed.
The ``viewBox`` is always the native canvas, so the requested pixel size
only changes the outer width/height.

Example usage:
    Writing an SVG file::

        from shape_lib.export.svg import generate_svg

        with open('icon.svg', 'w', encoding='utf-8') as f:
            f.write(generate_svg(shapes, size=512))
"""

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import quoteattr

import numpy as np

from ..config import CANVAS_SIZE, SVG_STEPS
from ..domain.shape import Shape
from ..geometry.sampler import sample_shape


def path_data(points: np.ndarray) -> str:
    """Serialize a sampled outline as SVG path data with 2-decimal coordinates."""
    parts = []
    for i, (x, y) in enumerate(points):
        parts.append(f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}")
    parts.append('Z')
    return ' '.join(parts)


def svg_path(shape: Shape, steps: int = SVG_STEPS) -> str:
    """Path data for one shape."""
    return path_data(sample_shape(shape, steps))


def _style_attributes(shape: Shape) -> str:
    fill = quoteattr(shape.fill_color) if shape.has_fill else '"none"'
    if shape.has_stroke:
        stroke = f'stroke={quoteattr(shape.stroke_color)} stroke-width="{shape.stroke_width:g}"'
    else:
        stroke = 'stroke="none"'
    return f'fill={fill} {stroke}'


def generate_svg(shapes: Iterable[Shape], size: int = CANVAS_SIZE,
                 steps: int = SVG_STEPS) -> str:
    """Build a complete SVG document.

    Args:
        shapes: Shapes in paint order (later shapes on top).
        size: Outer width/height in pixels.
        steps: Samples per shape outline.

    Returns:
        UTF-8 XML text with a white background and one path per shape.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{size}" height="{size}" viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'  <rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" fill="white"/>',
    ]
    for shape in shapes:
        lines.append(f'  <path d="{svg_path(shape, steps)}" {_style_attributes(shape)}/>')
    lines.append('</svg>')
    return '\n'.join(lines)
