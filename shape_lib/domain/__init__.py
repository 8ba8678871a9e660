"""Domain objects for icon composition.

This module provides the value objects shared by every part of the engine:
the Shape layer record and its curve definitions.

The module exports the following classes:
    Shape: One layer of the composition (placement, curve, style).
    Superformula: Gielis superformula parameters.
    Knot: Rosette/knot parameters.
    Curve: Union of Superformula and Knot.
    FillKind: Enumeration of fill strategies.

Example usage:
    Working with shapes::

        from shape_lib.domain import Shape, Superformula

        shape = Shape(cx=192, cy=192, radius=100,
                      superformula=Superformula(m=6, n1=1, n2=4, n3=4))
        print(shape.fill_kind)       # FillKind.SOLID
        print(shape.to_dict()['m'])  # 6
"""

from .shape import Curve, FillKind, Knot, Shape, Superformula

__all__ = ['Shape', 'Superformula', 'Knot', 'Curve', 'FillKind']
