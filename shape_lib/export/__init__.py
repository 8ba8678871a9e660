"""Export encoders and JSON persistence.

The module exports the following:

Raster:
    export_png, export_touch_icon, export_ico: Render and encode.
    create_ico_file, create_bmp_data, read_ico_directory: ICO container.

Vector:
    generate_svg, svg_path, path_data: SVG serialization.

Persistence:
    export_document, import_document: JSON shape documents.

Example usage:
    Exporting a favicon::

        from shape_lib.export import export_ico

        with open('favicon.ico', 'wb') as f:
            f.write(export_ico(shapes))
"""

from .document import document_dict, export_document, import_document, shapes_from_data
from .ico import IcoEntry, create_bmp_data, create_ico_file, mask_row_size, read_ico_directory
from .raster import export_ico, export_png, export_touch_icon
from .svg import generate_svg, path_data, svg_path

__all__ = [
    'export_png', 'export_touch_icon', 'export_ico',
    'create_ico_file', 'create_bmp_data', 'read_ico_directory', 'mask_row_size', 'IcoEntry',
    'generate_svg', 'svg_path', 'path_data',
    'export_document', 'import_document', 'document_dict', 'shapes_from_data',
]
