"""Shape value objects.

This module provides the data model for a single icon layer. A Shape holds
its placement (center, radius, rotation), its curve definition and its
style. The curve definition is a tagged union:

    Superformula(m, n1, n2, n3, a, b) | Knot(lobes, turns, amplitude, base_radius)

A shape always carries its superformula parameters, even while a knot with
``lobes > 0`` is active. Those fields are inert for path generation but are
kept so that a JSON document survives an export/import round trip intact.

The module provides the following classes:
    Superformula: Gielis superformula parameters.
    Knot: Rosette/knot parameters.
    FillKind: Enumeration of fill strategies.
    Shape: One layer of the composition.

Example usage:
    Building and serializing a shape::

        from shape_lib.domain import Shape, Superformula, Knot

        star = Shape(radius=120, superformula=Superformula(m=5, n1=0.5, n2=0.5, n3=0.5))
        rosette = Shape(radius=90, knot=Knot(lobes=5, turns=2, amplitude=0.4))

        isinstance(star.curve, Superformula)   # True
        isinstance(rosette.curve, Knot)        # True

        data = star.to_dict()
        assert Shape.from_dict(data) == star
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union

from ..color.parse import parse_color
from ..config import (
    CANVAS_CENTER,
    MAX_VARIATION,
    MAX_WATERCOLOR_INTENSITY,
    PEN_WIGGLE_SCALE,
    VARIATION_AMOUNTS,
)
from ..errors import DocumentSchemaError


@dataclass(frozen=True)
class Superformula:
    """Superformula parameters.

    Attributes:
        m: Symmetry order.
        n1: Overall exponent. Must be non-zero.
        n2: Exponent of the cosine term.
        n3: Exponent of the sine term.
        a: Cosine axis scale. Must be non-zero.
        b: Sine axis scale. Must be non-zero.
    """
    m: float = 4
    n1: float = 2
    n2: float = 2
    n3: float = 2
    a: float = 1
    b: float = 1

    kind: ClassVar[str] = 'superformula'

    @property
    def symmetry(self) -> float:
        return self.m


@dataclass(frozen=True)
class Knot:
    """Rosette/knot parameters.

    Attributes:
        lobes: Radial oscillations over one full sweep. 0 disables the knot.
        turns: Number of full angular turns over one sweep.
        amplitude: Radial oscillation amplitude (unit radius).
        base_radius: Mean radius (unit radius).
    """
    lobes: float = 0
    turns: float = 1
    amplitude: float = 0.3
    base_radius: float = 1.0

    kind: ClassVar[str] = 'knot'

    @property
    def active(self) -> bool:
        return self.lobes > 0

    @property
    def symmetry(self) -> float:
        return self.lobes


Curve = Union[Superformula, Knot]


class FillKind(Enum):
    """Fill strategies, mutually exclusive per shape."""
    NONE = 'none'
    SOLID = 'solid'
    GRADIENT = 'gradient'
    WATERCOLOR = 'watercolor'


# JSON key -> attribute name
_SUPERFORMULA_KEYS = ('m', 'n1', 'n2', 'n3', 'a', 'b')
_KNOT_KEYS = {
    'knotLobes': 'lobes',
    'knotTurns': 'turns',
    'knotAmplitude': 'amplitude',
    'knotBaseRadius': 'base_radius',
}
_NUMBER_KEYS = {
    'cx': 'cx',
    'cy': 'cy',
    'radius': 'radius',
    'rotation': 'rotation',
    'strokeWidth': 'stroke_width',
}
_OPTIONAL_NUMBER_KEYS = {
    'watercolorIntensity': 'watercolor_intensity',
    'penWiggle': 'pen_wiggle',
}
_STRING_KEYS = {
    'fillColor': 'fill_color',
    'strokeColor': 'stroke_color',
}
_OPTIONAL_STRING_KEYS = {
    'gradientEdgeColor': 'gradient_edge_color',
    'variation': 'variation',
}
_OPTIONAL_BOOL_KEYS = {
    'gradientMode': 'gradient_mode',
    'watercolorMode': 'watercolor_mode',
    'penMode': 'pen_mode',
}
_KNOWN_KEYS = (
    set(_SUPERFORMULA_KEYS) | set(_KNOT_KEYS) | set(_NUMBER_KEYS)
    | set(_OPTIONAL_NUMBER_KEYS) | set(_STRING_KEYS)
    | set(_OPTIONAL_STRING_KEYS) | set(_OPTIONAL_BOOL_KEYS)
)


def _number(data: Dict[str, Any], key: str, default):
    """Read a numeric field, keeping int/float as given."""
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DocumentSchemaError(f"Field '{key}' must be a number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise DocumentSchemaError(
            f"Field '{key}' must be finite, got an integer too large for a float"
        ) from None
    if not finite:
        raise DocumentSchemaError(f"Field '{key}' must be finite, got {value!r}")
    return value


@dataclass
class Shape:
    """One layer of an icon composition.

    Coordinates are in native canvas units (see ``config.CANVAS_SIZE``).
    The radius is a uniform scale applied to the unit curve and the
    rotation is in radians.

    Attributes:
        cx: Center x.
        cy: Center y.
        radius: Scale factor applied to the unit curve.
        rotation: Rotation in radians.
        superformula: Superformula parameters (always present).
        knot: Knot parameters; when ``knot.lobes > 0`` the knot drives the
            path and the superformula fields are inert.
        fill_color: CSS color string or 'none'.
        stroke_color: CSS color string.
        stroke_width: Stroke width in canvas units; 0 disables the stroke.
        gradient_mode: Radial gradient fill toward ``gradient_edge_color``.
        gradient_edge_color: Edge color of the radial gradient.
        watercolor_mode: Layered translucent watercolor fill.
        watercolor_intensity: Watercolor strength (0-100).
        variation: Organic variation mode name (see VARIATION_AMOUNTS).
        pen_mode: Legacy hand-drawn flag.
        pen_wiggle: Legacy hand-drawn strength.
        extras: Unknown JSON fields, preserved verbatim.
    """
    cx: float = CANVAS_CENTER
    cy: float = CANVAS_CENTER
    radius: float = 100
    rotation: float = 0.0
    superformula: Superformula = field(default_factory=Superformula)
    knot: Optional[Knot] = None
    fill_color: str = 'rgba(255, 107, 107, 1)'
    stroke_color: str = '#000000'
    stroke_width: float = 0
    gradient_mode: Optional[bool] = None
    gradient_edge_color: Optional[str] = None
    watercolor_mode: Optional[bool] = None
    watercolor_intensity: Optional[float] = None
    variation: Optional[str] = None
    pen_mode: Optional[bool] = None
    pen_wiggle: Optional[float] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def curve(self) -> Curve:
        """The curve that drives path generation."""
        if self.knot is not None and self.knot.active:
            return self.knot
        return self.superformula

    @property
    def is_knot(self) -> bool:
        return isinstance(self.curve, Knot)

    @property
    def has_fill(self) -> bool:
        return bool(self.fill_color) and self.fill_color != 'none'

    @property
    def has_stroke(self) -> bool:
        return self.stroke_width > 0

    @property
    def fill_kind(self) -> FillKind:
        if not self.has_fill:
            return FillKind.NONE
        if self.gradient_mode and self.gradient_edge_color:
            return FillKind.GRADIENT
        if self.watercolor_mode and (self.watercolor_intensity or 0) > 0:
            return FillKind.WATERCOLOR
        return FillKind.SOLID

    @property
    def fill_opacity(self) -> float:
        """Alpha of the fill color (0 when there is no fill).

        Raises:
            ColorParseError: If the fill color is malformed.
        """
        if not self.has_fill:
            return 0.0
        return parse_color(self.fill_color)[3]

    @property
    def variation_amount(self) -> float:
        """Perturbation amount k in [0, 1) for the organic variation."""
        if self.variation is not None:
            return VARIATION_AMOUNTS.get(self.variation, 0.0)
        if self.pen_mode and self.pen_wiggle:
            return min(MAX_VARIATION, max(0.0, self.pen_wiggle * PEN_WIGGLE_SCALE))
        return 0.0

    def copy(self, **changes) -> Shape:
        """Return a copy with the given fields replaced."""
        changes.setdefault('extras', dict(self.extras))
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON document representation.

        Optional fields are written only when set, so documents written by
        older editors keep their exact set of keys.
        """
        data: Dict[str, Any] = {
            'cx': self.cx,
            'cy': self.cy,
            'radius': self.radius,
            'rotation': self.rotation,
        }
        for key in _SUPERFORMULA_KEYS:
            data[key] = getattr(self.superformula, key)
        if self.knot is not None:
            for key, attr in _KNOT_KEYS.items():
                data[key] = getattr(self.knot, attr)
        data['fillColor'] = self.fill_color
        data['strokeColor'] = self.stroke_color
        data['strokeWidth'] = self.stroke_width
        for mapping in (_OPTIONAL_BOOL_KEYS, _OPTIONAL_STRING_KEYS, _OPTIONAL_NUMBER_KEYS):
            for key, attr in mapping.items():
                value = getattr(self, attr)
                if value is not None:
                    data[key] = value
        for key, value in self.extras.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Shape:
        """Create a shape from its JSON representation.

        Missing fields take their defaults; unknown fields are kept in
        ``extras``.

        Raises:
            DocumentSchemaError: If ``data`` is not an object or a known
                field has the wrong type.
        """
        if not isinstance(data, dict):
            raise DocumentSchemaError(f"Shape must be an object, got {type(data).__name__}")

        defaults = cls()
        kwargs: Dict[str, Any] = {}
        for key, attr in _NUMBER_KEYS.items():
            kwargs[attr] = _number(data, key, getattr(defaults, attr))

        sf_defaults = Superformula()
        kwargs['superformula'] = Superformula(**{
            key: _number(data, key, getattr(sf_defaults, key)) for key in _SUPERFORMULA_KEYS
        })

        if any(key in data for key in _KNOT_KEYS):
            knot_defaults = Knot()
            kwargs['knot'] = Knot(**{
                attr: _number(data, key, getattr(knot_defaults, attr))
                for key, attr in _KNOT_KEYS.items()
            })

        for key, attr in _STRING_KEYS.items():
            value = data.get(key, getattr(defaults, attr))
            if not isinstance(value, str):
                raise DocumentSchemaError(f"Field '{key}' must be a string, got {value!r}")
            kwargs[attr] = value

        for key, attr in _OPTIONAL_STRING_KEYS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise DocumentSchemaError(f"Field '{key}' must be a string, got {value!r}")
            kwargs[attr] = value

        for key, attr in _OPTIONAL_BOOL_KEYS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, bool):
                raise DocumentSchemaError(f"Field '{key}' must be a boolean, got {value!r}")
            kwargs[attr] = value

        for key, attr in _OPTIONAL_NUMBER_KEYS.items():
            kwargs[attr] = _number(data, key, None) if data.get(key) is not None else None

        intensity = kwargs['watercolor_intensity']
        if intensity is not None and not 0 <= intensity <= MAX_WATERCOLOR_INTENSITY:
            raise DocumentSchemaError(
                f"Field 'watercolorIntensity' must be between 0 and "
                f"{MAX_WATERCOLOR_INTENSITY}, got {intensity!r}")

        kwargs['extras'] = {k: v for k, v in data.items() if k not in _KNOWN_KEYS}
        return cls(**kwargs)
