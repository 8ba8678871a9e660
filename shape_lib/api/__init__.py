"""API layer for icon rendering and export.

This module provides the high-level entry points used by the HTTP routes
and the command-line tool.

The module exports the following:
    IconService: Export, preview, demo and palette operations.
    EditorState: Explicit editor state (shapes + selection).
    ImportResult: Structured outcome of a document import.
    shape_cache_key: Thumbnail fingerprint.

Example usage:
    Loading and exporting::

        from shape_lib.api import EditorState, IconService

        state = EditorState()
        result = state.load_document(open('icon-layers.json').read())
        if result.ok:
            svg = IconService().export_svg(state.shapes)
        else:
            print(result.error_kind, result.message)
"""

from .services import IconService, shape_cache_key
from .state import EditorState, ImportResult

__all__ = ['IconService', 'EditorState', 'ImportResult', 'shape_cache_key']
