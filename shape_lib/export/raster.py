"""Raster exports (PNG, touch icon, ICO).

Rasterization is delegated to the Pillow drawing surface; this module only
chooses sizes and hands the pixels to the right encoder.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable, Sequence

from ..config import ICO_SIZES, TOUCH_ICON_SIZE
from ..domain.shape import Shape
from ..errors import ExportError
from ..rendering.surface import render_rgba, render_shapes
from .ico import MAX_ICON_SIZE, create_ico_file

logger = logging.getLogger(__name__)


def export_png(shapes: Sequence[Shape], size: int) -> bytes:
    """Render shapes to PNG bytes at ``size`` x ``size`` pixels."""
    if size < 1:
        raise ExportError(f"PNG size must be positive, got {size}")
    buf = io.BytesIO()
    render_shapes(shapes, size).save(buf, format='PNG')
    logger.debug("PNG encoded: %dpx, %d bytes", size, buf.tell())
    return buf.getvalue()


def export_touch_icon(shapes: Sequence[Shape]) -> bytes:
    """Apple touch icon (180 px PNG)."""
    return export_png(shapes, TOUCH_ICON_SIZE)


def export_ico(shapes: Sequence[Shape], sizes: Iterable[int] = ICO_SIZES) -> bytes:
    """Render shapes at each size and pack them into one ICO file.

    Raises:
        ExportError: If ``sizes`` is empty or a size is outside 1-256.
    """
    sizes = list(sizes)
    if not sizes:
        raise ExportError("ICO export needs at least one size")
    for size in sizes:
        if not 1 <= size <= MAX_ICON_SIZE:
            raise ExportError(f"ICO sizes must be 1-{MAX_ICON_SIZE}, got {size}")
    return create_ico_file([render_rgba(shapes, size) for size in sizes])
