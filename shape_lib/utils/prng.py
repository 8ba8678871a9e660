"""Seeded pseudo-random numbers (Mulberry32).

All randomness in the engine (organic variation, watercolor layers,
procedural palettes and random demos) is drawn from this generator so that
the same seed reproduces the same output on every platform. Arithmetic is
masked to unsigned 32 bits after every step.

The module provides:
    next_random: Pure step function, state -> (value, new_state).
    random_range: Pure step returning a value in [lo, hi).
    SeededRandom: Small stateful wrapper for call sites that draw many values.

Example usage:
    Pure form::

        value, state = next_random(42)
        other, state = next_random(state)

    Wrapper form::

        rng = SeededRandom(42)
        rng.next()          # same value as next_random(42)[0]
        rng.range(-1, 1)
"""

from __future__ import annotations

from typing import Tuple

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def next_random(state: int) -> Tuple[float, int]:
    """Advance a Mulberry32 state.

    Args:
        state: Current 32-bit state. Any int is accepted and reduced
            modulo 2**32.

    Returns:
        Tuple of (value in [0, 1), new 32-bit state).
    """
    state = (state + _INCREMENT) & _MASK
    t = state
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
    t &= _MASK
    return ((t ^ (t >> 14)) & _MASK) / _TWO_32, state


def random_range(state: int, lo: float, hi: float) -> Tuple[float, int]:
    """Uniform value in [lo, hi) plus the advanced state."""
    value, state = next_random(state)
    return lo + value * (hi - lo), state


class SeededRandom:
    """Mulberry32 generator holding its own state.

    Attributes:
        state: Current 32-bit state.
    """

    def __init__(self, seed: int):
        self.state = int(seed) & _MASK

    def next(self) -> float:
        """Next value in [0, 1)."""
        value, self.state = next_random(self.state)
        return value

    def range(self, lo: float, hi: float) -> float:
        """Next value in [lo, hi)."""
        value, self.state = random_range(self.state, lo, hi)
        return value

    def randint(self, lo: int, hi: int) -> int:
        """Next integer in [lo, hi] inclusive."""
        return lo + int(self.next() * (hi - lo + 1))

    def choice(self, items):
        """Pick one element of a non-empty sequence."""
        return items[int(self.next() * len(items))]

    def next_seed(self) -> int:
        """Draw a fresh 32-bit seed for a derived stream."""
        return int(self.next() * _TWO_32) & _MASK
