"""Utility functions for the shape engine.

The module exports the seeded pseudo-random generator used for every
reproducible random choice in the engine.

Example usage:
    Drawing reproducible values::

        from shape_lib.utils import SeededRandom

        rng = SeededRandom(1234)
        jitter = rng.range(-0.1, 0.1)
"""

from .prng import SeededRandom, next_random, random_range

__all__ = ['SeededRandom', 'next_random', 'random_range']
