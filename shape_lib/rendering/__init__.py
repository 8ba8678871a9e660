"""Fill strategies and the raster drawing surface.

The module exports the following:

Fills:
    select_fill: Choose and build a shape's fill descriptor.
    SolidFill, GradientFill, WatercolorFill, FillLayer: Descriptors.

Surface:
    RasterSurface: Pillow RGBA canvas.
    render_shapes: Shape list -> PIL image.
    render_rgba: Shape list -> RGBA numpy array.

Example usage:
    Inspecting a watercolor fill::

        from shape_lib.rendering import select_fill

        fill = select_fill(shape)
        for layer in fill.layers:
            print(layer.color)
"""

from .fill import (
    FillLayer,
    GradientFill,
    SolidFill,
    WatercolorFill,
    select_fill,
    watercolor_fill,
    watercolor_layer_count,
)
from .surface import RasterSurface, paint_shape, render_rgba, render_shapes

__all__ = [
    'select_fill', 'watercolor_fill', 'watercolor_layer_count',
    'FillLayer', 'SolidFill', 'GradientFill', 'WatercolorFill',
    'RasterSurface', 'paint_shape', 'render_shapes', 'render_rgba',
]
