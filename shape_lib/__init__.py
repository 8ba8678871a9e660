"""Shape engine package.

Geometry and encoding engine for composing layered superformula and
rosette-knot shapes into icons and exporting them as PNG, ICO, SVG or JSON.

Architecture Overview:
    shape_lib holds everything that has numerical or format precision
    requirements; the editor UI and its event wiring live elsewhere and only
    pass Shape snapshots in.

    - shape_lib.domain defines the Shape record and its curve union
    - shape_lib.utils provides the seeded Mulberry32 generator
    - shape_lib.geometry generates, perturbs and samples curves
    - shape_lib.color converts between sRGB and OKLCH and builds palettes
    - shape_lib.rendering selects fills and paints them with Pillow
    - shape_lib.export encodes ICO, SVG, PNG and JSON documents
    - shape_lib.templates holds presets and demos
    - shape_lib.api offers high-level services for external consumers

Example usage:
    Exporting a demo::

        from shape_lib.api import IconService

        service = IconService()
        shapes = service.demo_shapes('bloomingFlower')
        with open('favicon.ico', 'wb') as f:
            f.write(service.export_ico(shapes))

    Working with geometry directly::

        from shape_lib.domain import Shape, Superformula
        from shape_lib.geometry import sample_shape

        shape = Shape(radius=100, superformula=Superformula(m=5, n1=0.5, n2=0.5, n3=0.5))
        points = sample_shape(shape, steps=360)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import EditorState, IconService, ImportResult
from .domain import FillKind, Knot, Shape, Superformula
from .errors import (
    ColorParseError,
    DocumentError,
    DocumentParseError,
    DocumentSchemaError,
    ExportError,
    ShapeLibError,
)
from .geometry import sample_shape, shape_seed

__all__ = [
    # Domain objects
    'Shape', 'Superformula', 'Knot', 'FillKind',
    # Geometry
    'sample_shape', 'shape_seed',
    # Services
    'IconService', 'EditorState', 'ImportResult',
    # Errors
    'ShapeLibError', 'ColorParseError', 'DocumentError', 'DocumentParseError',
    'DocumentSchemaError', 'ExportError',
]

__version__ = '1.0.0'
