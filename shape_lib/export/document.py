"""JSON persistence of shape documents.

Document format::

    {"version": "1.0", "shapes": [Shape, ...]}

Import is all-or-nothing: the whole document is parsed and validated before
any Shape list is returned, so a caller can keep its current shapes when
import fails.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List

from ..config import DOCUMENT_VERSION
from ..domain.shape import Shape
from ..errors import DocumentParseError, DocumentSchemaError

logger = logging.getLogger(__name__)


def document_dict(shapes: Iterable[Shape]) -> dict:
    return {'version': DOCUMENT_VERSION, 'shapes': [s.to_dict() for s in shapes]}


def export_document(shapes: Iterable[Shape]) -> str:
    """Serialize shapes as an indented JSON document."""
    return json.dumps(document_dict(shapes), indent=2)


def shapes_from_data(data: Any) -> List[Shape]:
    """Validate a decoded document and build its shapes.

    Raises:
        DocumentSchemaError: If ``data`` has no ``shapes`` array or a shape
            entry is invalid.
    """
    if not isinstance(data, dict):
        raise DocumentSchemaError('Document must be a JSON object')
    shapes = data.get('shapes')
    if not isinstance(shapes, list):
        raise DocumentSchemaError('Invalid document format. Expected a "shapes" array.')

    result = []
    for index, entry in enumerate(shapes):
        try:
            result.append(Shape.from_dict(entry))
        except DocumentSchemaError as e:
            raise DocumentSchemaError(f'Shape {index}: {e}') from e
    return result


def import_document(text: str) -> List[Shape]:
    """Parse a JSON document into shapes.

    Raises:
        DocumentParseError: If ``text`` is not valid JSON.
        DocumentSchemaError: If the JSON is not a shape document.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Rejected document: %s", e)
        raise DocumentParseError(f'Error parsing JSON: {e}') from e
    try:
        return shapes_from_data(data)
    except DocumentSchemaError as e:
        logger.warning("Rejected document: %s", e)
        raise
