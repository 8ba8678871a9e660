"""Color palettes.

Provides the static editor palette and procedural harmonious palettes built
in OKLCH, where hue rotation keeps perceived lightness and chroma balanced
(rotating hues in RGB space does not).

The module provides:
    DEFAULT_PALETTE: The 42 editor swatches; the last six are greys.
    Palette: Ordered list of hex colors with the scheme that produced it.
    harmonious_palette: Build a related set of hues from a seed color.
    random_palette: Harmonious palette from a seeded random base color.

Example usage:
    Building a palette::

        from shape_lib.color.palette import harmonious_palette

        palette = harmonious_palette('#4D96FF', seed=7)
        print(palette.scheme, palette.colors)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..utils.prng import SeededRandom
from .oklab import hex_to_oklch, oklch_to_hex

DEFAULT_PALETTE = (
    '#FF6B6B', '#FF8E53', '#FFA64D', '#FFD93D', '#6BCF7F', '#4ECDC4',
    '#45B7D1', '#4D96FF', '#6C5CE7', '#A78BFA', '#F472B6', '#FB7185',
    '#EF4444', '#F97316', '#F59E0B', '#EAB308', '#22C55E', '#14B8A6',
    '#06B6D4', '#3B82F6', '#6366F1', '#8B5CF6', '#EC4899', '#F43F5E',
    '#DC2626', '#EA580C', '#D97706', '#CA8A04', '#16A34A', '#0D9488',
    '#0891B2', '#2563EB', '#4F46E5', '#7C3AED', '#DB2777', '#E11D48',
    '#000000', '#374151', '#6B7280', '#9CA3AF', '#D1D5DB', '#FFFFFF',
)
GREY_COUNT = 6
CHROMATIC_PALETTE = DEFAULT_PALETTE[:-GREY_COUNT]

SPLIT_ANGLES = (30.0, 60.0, 120.0)
COMPLEMENT_ANGLE = 180.0

LIGHTNESS_JITTER = 0.1
LIGHTNESS_RANGE = (0.3, 0.85)
CHROMA_JITTER = 0.025
CHROMA_RANGE = (0.05, 0.25)


def _clamp(value: float, bounds: Tuple[float, float]) -> float:
    return max(bounds[0], min(bounds[1], value))


@dataclass
class Palette:
    """An ordered set of hex colors.

    Attributes:
        colors: Hex colors, base color first.
        scheme: 'complementary', 'split-30', 'split-60', 'split-120' or
            'static'.
        base: The seed color the palette was derived from.
    """
    colors: List[str] = field(default_factory=list)
    scheme: str = 'static'
    base: Optional[str] = None

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    def to_dict(self) -> dict:
        return {'colors': list(self.colors), 'scheme': self.scheme, 'base': self.base}


def hue_offsets(rng: SeededRandom) -> Tuple[str, List[float]]:
    """Choose a harmony scheme and the hue offsets of the related colors.

    Complementary yields one related hue (+180). Split schemes pick one
    angle magnitude from 30/60/120 and yield two related hues (+a, -a).
    """
    if rng.next() < 0.5:
        return 'complementary', [COMPLEMENT_ANGLE]
    angle = rng.choice(SPLIT_ANGLES)
    return f'split-{int(angle)}', [angle, -angle]


def harmonious_palette(base_hex: str, seed: int = 0) -> Palette:
    """Build a harmonious palette around ``base_hex``.

    Each related hue gets independently jittered lightness (+/-0.1, clamped
    to [0.3, 0.85]) and chroma (+/-0.025, clamped to [0.05, 0.25]).

    Args:
        base_hex: Seed color.
        seed: PRNG seed; the same seed reproduces the same palette.

    Returns:
        Palette whose first color is the base color (normalized to lowercase).

    Raises:
        ColorParseError: If ``base_hex`` is malformed.
    """
    rng = SeededRandom(seed)
    L, C, H = hex_to_oklch(base_hex)
    scheme, offsets = hue_offsets(rng)

    colors = [oklch_to_hex(L, C, H)]
    for offset in offsets:
        hue = (H + offset) % 360.0
        lightness = _clamp(L + rng.range(-LIGHTNESS_JITTER, LIGHTNESS_JITTER), LIGHTNESS_RANGE)
        chroma = _clamp(C + rng.range(-CHROMA_JITTER, CHROMA_JITTER), CHROMA_RANGE)
        colors.append(oklch_to_hex(lightness, chroma, hue))

    return Palette(colors=colors, scheme=scheme, base=colors[0])


def random_palette(seed: int = 0, base_hex: Optional[str] = None) -> Palette:
    """Harmonious palette around ``base_hex`` or a seeded chromatic swatch."""
    if base_hex is None:
        base_hex = SeededRandom(seed).choice(CHROMATIC_PALETTE)
    return harmonious_palette(base_hex, seed=seed)
