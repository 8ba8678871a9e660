"""HTTP routes for exports, imports, demos, palettes and previews.

Every export route takes a shape document (``{"version": "1.0", "shapes":
[...]}``) as its JSON body and returns the encoded file. Errors come back as
``{"error": message, "kind": kind}`` with status 400 (404 for an unknown
demo).
"""

import io
import logging

from flask import jsonify, request, send_file

from shape_flask import app, request_shapes, request_size, service
from shape_lib.api import EditorState
from shape_lib.domain import Shape
from shape_lib.errors import ColorParseError, DocumentError, DocumentSchemaError, ExportError
from shape_lib.export import document_dict

logger = logging.getLogger(__name__)

EXPORT_FORMATS = {
    'svg': ('image/svg+xml', 'icon.svg'),
    'ico': ('image/x-icon', 'favicon.ico'),
    'png': ('image/png', 'icon.png'),
    'touch-icon': ('image/png', 'apple-touch-icon.png'),
    'json': ('application/json', 'icon-layers.json'),
}


def _error(e: Exception, status: int = 400):
    kind = getattr(e, 'kind', type(e).__name__)
    return jsonify(error=str(e), kind=kind), status


def _encode(fmt: str, shapes: list, size: int) -> bytes:
    if fmt == 'svg':
        return service.export_svg(shapes, size).encode('utf-8')
    if fmt == 'ico':
        return service.export_ico(shapes)
    if fmt == 'png':
        return service.export_png(shapes, size)
    if fmt == 'touch-icon':
        return service.export_touch_icon(shapes)
    return service.export_json(shapes).encode('utf-8')


@app.route('/api/export/<fmt>', methods=['POST'])
def api_export(fmt):
    """Encode the posted document as svg, ico, png, touch-icon or json."""
    if fmt not in EXPORT_FORMATS:
        return jsonify(error=f"Unknown export format: {fmt}", kind='ExportError'), 404
    try:
        shapes = request_shapes()
        data = _encode(fmt, shapes, request_size())
    except (DocumentError, ExportError) as e:
        return _error(e)

    mimetype, filename = EXPORT_FORMATS[fmt]
    logger.info("Exported %d shapes as %s (%d bytes)", len(shapes), fmt, len(data))
    return send_file(io.BytesIO(data), mimetype=mimetype, as_attachment=True,
                     download_name=filename)


@app.route('/api/import', methods=['POST'])
def api_import():
    """Validate a document and echo it back in canonical form."""
    state = EditorState()
    result = state.load_document(request.get_data(as_text=True))
    if not result.ok:
        return jsonify(error=result.message, kind=result.error_kind), 400
    return jsonify(ok=True, shape_count=result.shape_count, **document_dict(state.shapes))


@app.route('/api/demos')
def api_demos():
    return jsonify(demos=service.list_demos())


@app.route('/api/demos/<key>')
def api_demo(key):
    try:
        shapes = service.demo_shapes(key)
    except KeyError:
        return jsonify(error=f"Unknown demo: {key}", kind='KeyError'), 404
    return jsonify(document_dict(shapes))


@app.route('/api/demos/random')
def api_random_demo():
    seed = request.args.get('seed', 0, type=int)
    return jsonify(document_dict(service.random_demo(seed)))


@app.route('/api/presets')
def api_presets():
    return jsonify(presets=service.list_presets())


@app.route('/api/palette/random')
def api_random_palette():
    seed = request.args.get('seed', 0, type=int)
    base = request.args.get('base')
    try:
        palette = service.random_palette(seed, base)
    except ColorParseError as e:
        return _error(e)
    return jsonify(palette)


@app.route('/api/preview', methods=['POST'])
def api_preview():
    """48 px PNG thumbnail of the posted shape (``{"shape": {...}}``)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('shape'), dict):
        return jsonify(error='Expected {"shape": {...}}', kind='SchemaError'), 400
    try:
        shape = Shape.from_dict(data['shape'])
    except DocumentSchemaError as e:
        return _error(e)
    return send_file(io.BytesIO(service.shape_preview(shape)), mimetype='image/png')
