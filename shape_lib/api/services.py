"""Service layer for icon rendering and export.

This module provides a high-level service class that encapsulates the
rendering and encoding pipeline behind a small, serialization-friendly
interface, suitable for the HTTP routes and the command-line tool.

The module contains:
    shape_cache_key: Fingerprint of the fields that affect a thumbnail.
    IconService: Export, preview, demo and palette operations.

Example usage:
    IconService operations::

        from shape_lib.api.services import IconService

        service = IconService()
        shapes = service.demo_shapes('geometricMandala')

        ico_bytes = service.export_ico(shapes)
        svg_text = service.export_svg(shapes, size=512)
        thumb = service.shape_preview(shapes[0])
"""

from __future__ import annotations

import io
import json
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..color.palette import random_palette
from ..config import (
    CANVAS_SIZE,
    FAVICON_PREVIEW_SIZES,
    ICO_SIZES,
    PREVIEW_RADIUS_FRACTION,
    PREVIEW_SIZE,
)
from ..domain.shape import Shape
from ..export.document import export_document, import_document
from ..export.raster import export_ico, export_png, export_touch_icon
from ..export.svg import generate_svg
from ..rendering.surface import RasterSurface, paint_shape
from ..templates.demos import generate_random_demo
from ..templates.presets import PRESETS
from ..templates.repository import DemoRepository

_logger = logging.getLogger(__name__)


def shape_cache_key(shape: Shape) -> str:
    """Fingerprint of the fields that change a shape's thumbnail.

    Position and radius are excluded because thumbnails are re-centered and
    re-scaled.
    """
    data = shape.to_dict()
    for key in ('cx', 'cy', 'radius'):
        data.pop(key, None)
    return json.dumps(data, sort_keys=True)


class IconService:
    """Service for icon export operations.

    Wraps the renderer and the encoders and memoizes shape thumbnails.
    All outputs are bytes or str, ready to be written to a file or an
    HTTP response.

    Attributes:
        demos: DemoRepository used for demo lookups.
        preview_size: Edge length of shape thumbnails in pixels.
    """

    def __init__(self, demos: Optional[DemoRepository] = None,
                 preview_size: int = PREVIEW_SIZE):
        self.demos = demos if demos is not None else DemoRepository.with_builtins()
        self.preview_size = preview_size
        self._preview_cache: Dict[str, bytes] = {}

    # -- exports -----------------------------------------------------------

    def export_svg(self, shapes: Iterable[Shape], size: int = CANVAS_SIZE) -> str:
        return generate_svg(shapes, size)

    def export_ico(self, shapes: Sequence[Shape], sizes: Iterable[int] = ICO_SIZES) -> bytes:
        return export_ico(shapes, sizes)

    def export_png(self, shapes: Sequence[Shape], size: int = CANVAS_SIZE) -> bytes:
        return export_png(shapes, size)

    def export_touch_icon(self, shapes: Sequence[Shape]) -> bytes:
        return export_touch_icon(shapes)

    def export_json(self, shapes: Iterable[Shape]) -> str:
        return export_document(shapes)

    def import_json(self, text: str) -> List[Shape]:
        """Parse a document.

        Raises:
            DocumentError: If the document is rejected.
        """
        return import_document(text)

    def favicon_previews(self, shapes: Sequence[Shape]) -> Dict[int, bytes]:
        """PNG previews at the favicon preview sizes."""
        return {size: export_png(shapes, size) for size in FAVICON_PREVIEW_SIZES}

    # -- previews ----------------------------------------------------------

    def shape_preview(self, shape: Shape) -> bytes:
        """PNG thumbnail of one shape, centered and scaled to fit.

        Thumbnails are cached by ``shape_cache_key``.
        """
        key = shape_cache_key(shape)
        cached = self._preview_cache.get(key)
        if cached is not None:
            _logger.debug("Preview cache hit")
            return cached

        size = self.preview_size
        centered = shape.copy(cx=size / 2, cy=size / 2, radius=size * PREVIEW_RADIUS_FRACTION)
        surface = RasterSurface(size)
        paint_shape(surface, centered, scale_factor=1.0)

        buf = io.BytesIO()
        surface.to_image().save(buf, format='PNG')
        data = buf.getvalue()
        self._preview_cache[key] = data
        return data

    def clear_preview_cache(self) -> None:
        self._preview_cache.clear()

    @property
    def preview_cache_size(self) -> int:
        return len(self._preview_cache)

    # -- templates ---------------------------------------------------------

    def demo_shapes(self, key: str) -> List[Shape]:
        """Shapes of a demo.

        Raises:
            KeyError: If the demo does not exist.
        """
        return self.demos.shapes(key)

    def list_demos(self) -> List[dict]:
        return self.demos.list_demos()

    def list_presets(self) -> List[dict]:
        return [preset.to_dict() for preset in PRESETS.values()]

    def random_demo(self, seed: int) -> List[Shape]:
        return generate_random_demo(seed)

    def random_palette(self, seed: int = 0, base: Optional[str] = None) -> dict:
        """Harmonious palette as a dict.

        Raises:
            ColorParseError: If ``base`` is malformed.
        """
        return random_palette(seed, base).to_dict()
