"""Demo repository.

This module provides the DemoRepository class for managing collections of
demo compositions. The repository supports the built-in demos as well as
demos registered at runtime (e.g., loaded from JSON documents on disk).

Example usage:
    Basic repository operations::

        from shape_lib.templates.repository import DemoRepository

        repo = DemoRepository.with_builtins()
        shapes = repo.shapes('rainbowBurst')

        repo.register_shapes('mine', 'My Icon', my_shapes)
        repo.list_keys()
"""

from __future__ import annotations

import copy
from typing import Dict, List, Optional

from ..domain.shape import Shape
from .demos import DEMOS, Demo


class DemoRepository:
    """Repository for demo compositions.

    Attributes:
        _demos: Internal dictionary mapping demo keys to Demo objects.

    Example:
        >>> repo = DemoRepository.with_builtins()
        >>> 'geminEye' in repo.list_keys()
        True
    """

    def __init__(self):
        self._demos: Dict[str, Demo] = {}

    def register(self, demo: Demo) -> None:
        """Register a demo, replacing any demo with the same key."""
        self._demos[demo.key] = demo

    def register_shapes(self, key: str, name: str, shapes: List[Shape]) -> None:
        """Register a fixed shape list as a demo.

        The shapes are copied now and again on every retrieval, so neither
        the caller's list nor later consumers can mutate the stored demo.
        """
        frozen = copy.deepcopy(shapes)
        self.register(Demo(key, name, lambda: copy.deepcopy(frozen)))

    def get(self, key: str) -> Optional[Demo]:
        return self._demos.get(key)

    def shapes(self, key: str) -> List[Shape]:
        """Fresh shapes for a demo.

        Raises:
            KeyError: If the demo does not exist.
        """
        return self._demos[key].shapes()

    def list_keys(self) -> List[str]:
        return list(self._demos)

    def list_demos(self) -> List[dict]:
        """Key/name pairs for every registered demo."""
        return [{'key': d.key, 'name': d.name} for d in self._demos.values()]

    def __contains__(self, key: str) -> bool:
        return key in self._demos

    def __len__(self) -> int:
        return len(self._demos)

    @classmethod
    def with_builtins(cls) -> DemoRepository:
        repo = cls()
        for demo in DEMOS.values():
            repo.register(demo)
        return repo
