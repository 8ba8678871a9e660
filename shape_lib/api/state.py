"""Explicit editor state.

The editor's shape list and selection live in an EditorState passed to
whatever handles user actions; the geometry and export engine never touches
it.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.shape import Shape
from ..errors import DocumentError
from ..export.document import export_document, import_document
from ..templates.repository import DemoRepository

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of loading a document.

    Attributes:
        ok: True when the shapes were replaced.
        shape_count: Number of shapes loaded (0 on failure).
        error_kind: 'ParseError' or 'SchemaError' on failure.
        message: Human-readable error message on failure.
    """
    ok: bool
    shape_count: int = 0
    error_kind: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> dict:
        return {'ok': self.ok, 'shape_count': self.shape_count,
                'error_kind': self.error_kind, 'message': self.message}


@dataclass
class EditorState:
    """Shape list plus selection.

    Attributes:
        shapes: Layers in paint order.
        selected: Index of the selected shape, or None.
    """
    shapes: List[Shape] = field(default_factory=list)
    selected: Optional[int] = None

    @property
    def selected_shape(self) -> Optional[Shape]:
        if self.selected is None or not 0 <= self.selected < len(self.shapes):
            return None
        return self.shapes[self.selected]

    def add(self, shape: Shape) -> int:
        """Append a shape and select it."""
        self.shapes.append(shape)
        self.selected = len(self.shapes) - 1
        return self.selected

    def update_selected(self, shape: Shape) -> bool:
        """Replace the selected shape. Returns False when nothing is selected."""
        if self.selected_shape is None:
            return False
        self.shapes[self.selected] = shape
        return True

    def delete(self, index: int) -> None:
        """Remove a shape, keeping the selection on a sensible neighbor."""
        del self.shapes[index]
        if self.selected == index:
            self.selected = max(0, index - 1) if self.shapes else None
        elif self.selected is not None and self.selected > index:
            self.selected -= 1

    def move(self, source: int, target: int) -> None:
        """Reorder a shape; the selection follows the moved shape if selected."""
        shape = self.shapes.pop(source)
        self.shapes.insert(target, shape)
        if self.selected == source:
            self.selected = target
        elif self.selected is not None:
            if source < self.selected <= target:
                self.selected -= 1
            elif target <= self.selected < source:
                self.selected += 1

    def clear(self) -> None:
        self.shapes = []
        self.selected = None

    def _replace(self, shapes: List[Shape]) -> None:
        self.shapes = shapes
        self.selected = len(shapes) - 1 if shapes else None

    def load_demo(self, repository: DemoRepository, key: str) -> None:
        """Replace the shapes with a fresh copy of a demo.

        Raises:
            KeyError: If the demo does not exist.
        """
        self._replace(repository.shapes(key))

    def load_document(self, text: str) -> ImportResult:
        """Replace the shapes from a JSON document.

        The current shapes are kept untouched unless the whole document
        parses and validates.
        """
        try:
            shapes = import_document(text)
        except DocumentError as e:
            return ImportResult(ok=False, error_kind=e.kind, message=str(e))
        self._replace(shapes)
        self.selected = None
        logger.info("Loaded document with %d shapes", len(shapes))
        return ImportResult(ok=True, shape_count=len(shapes))

    def to_document(self) -> str:
        return export_document(self.shapes)

    def snapshot(self) -> List[Shape]:
        """Deep copy of the shapes, safe to hand to a renderer."""
        return copy.deepcopy(self.shapes)
