"""Superformula presets.

A preset is a named parameter set (and optionally a radius) applied to an
existing shape's curve.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Dict, Optional

from ..domain.shape import Shape, Superformula


@dataclass(frozen=True)
class Preset:
    name: str
    params: Superformula
    radius: Optional[float] = None

    def to_dict(self) -> dict:
        data = {'name': self.name, 'm': self.params.m, 'n1': self.params.n1,
                'n2': self.params.n2, 'n3': self.params.n3,
                'a': self.params.a, 'b': self.params.b}
        if self.radius is not None:
            data['radius'] = self.radius
        return data


PRESETS: Dict[str, Preset] = {
    'circle': Preset('circle', Superformula(4, 2, 2, 2, 1, 1)),
    'square': Preset('square', Superformula(4, 4, 4, 4, 1, 1)),
    'squircle': Preset('squircle', Superformula(4, 11, 11, 11, 1, 1), radius=188),
    'star4': Preset('star4', Superformula(4, 0.5, 0.5, 0.5, 1, 1)),
    'star5': Preset('star5', Superformula(5, 0.5, 0.5, 0.5, 1, 1)),
    'star8': Preset('star8', Superformula(8, 0.5, 0.5, 0.5, 1, 1)),
    'flower': Preset('flower', Superformula(6, 1, 4, 4, 1, 1)),
    'gear': Preset('gear', Superformula(8, 10, 10, 10, 1, 1)),
    'diamond': Preset('diamond', Superformula(4, 1, 1, 1, 1, 1)),
    'cross': Preset('cross', Superformula(4, 100, 100, 100, 1, 1)),
}


def apply_preset(shape: Shape, name: str) -> Shape:
    """Return a copy of ``shape`` using the named preset's curve.

    The copy switches to superformula mode: an active knot is kept but
    disabled by setting its lobes to 0.

    Raises:
        KeyError: If the preset does not exist.
    """
    preset = PRESETS[name]
    changes = {'superformula': preset.params}
    if preset.radius is not None:
        changes['radius'] = preset.radius
    if shape.knot is not None and shape.knot.active:
        changes['knot'] = dataclasses.replace(shape.knot, lobes=0)
    return shape.copy(**changes)
