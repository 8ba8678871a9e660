"""Curve generation, seeding, organic variation and path sampling.

The module exports the following:

Curves:
    superformula_r: Gielis superformula radius.
    knot_pattern: Rosette radius and angle.

Seeding:
    shape_seed: Deterministic PRNG seed from a shape's geometry.

Variation:
    VariationEnvelope: Smooth periodic perturbation curve.
    OrganicVariation: Radius + angle envelopes applied together.

Sampling:
    sample_shape: Shape -> closed (steps + 1, 2) point array.
    sample_path: Same, with an explicit variation.
    point_in_shape: Non-zero winding hit test.

Example usage:
    Sampling and hit testing::

        from shape_lib.domain import Shape
        from shape_lib.geometry import sample_shape, point_in_shape

        shape = Shape(cx=192, cy=192, radius=100)
        points = sample_shape(shape, steps=360)
        point_in_shape(192, 192, shape)   # True
"""

from .curves import knot_pattern, superformula_r
from .hit_test import point_in_shape, winding_number
from .sampler import sample_path, sample_shape, shape_variation, steps_for_size, unit_curve
from .seed import canonical_key, shape_seed
from .variation import OrganicVariation, VariationEnvelope, control_point_count

__all__ = [
    'superformula_r', 'knot_pattern',
    'shape_seed', 'canonical_key',
    'VariationEnvelope', 'OrganicVariation', 'control_point_count',
    'sample_shape', 'sample_path', 'shape_variation', 'steps_for_size', 'unit_curve',
    'point_in_shape', 'winding_number',
]
