"""Deterministic PRNG seeds derived from shape geometry.

The seed ties a shape's organic variation and watercolor texture to its
geometry: recoloring a shape keeps its texture, moving or resizing it
reshuffles the texture.

Numbers are formatted with a fixed six-decimal representation before
hashing so that the seed does not depend on a platform's float-to-string
conversion.
"""

from __future__ import annotations

from ..domain.shape import Shape

_SIGNED_LIMIT = 1 << 31
_MASK = 0xFFFFFFFF


def _format_number(value: float) -> str:
    text = f'{float(value):.6f}'
    # -0.000000 and 0.000000 must hash alike
    return '0.000000' if text == '-0.000000' else text


def canonical_key(shape: Shape) -> str:
    """Pipe-joined geometric fields used for hashing.

    Fields: cx|cy|radius|rotation|m|n1|n2|n3|a|b, followed by
    lobes|turns|amplitude|baseRadius when a knot is active.
    """
    sf = shape.superformula
    values = [shape.cx, shape.cy, shape.radius, shape.rotation,
              sf.m, sf.n1, sf.n2, sf.n3, sf.a, sf.b]
    if shape.is_knot:
        knot = shape.knot
        values.extend([knot.lobes, knot.turns, knot.amplitude, knot.base_radius])
    return '|'.join(_format_number(v) for v in values)


def string_hash(text: str) -> int:
    """Rolling ``hash * 31 + code`` hash truncated to signed 32 bits, then abs."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & _MASK
    if h >= _SIGNED_LIMIT:
        h -= 1 << 32
    return abs(h)


def shape_seed(shape: Shape) -> int:
    """PRNG seed (uint32) for a shape.

    Example:
        >>> a = Shape(radius=80)
        >>> shape_seed(a) == shape_seed(a.copy(fill_color='#000000'))
        True
    """
    return string_hash(canonical_key(shape))
