"""Color parsing, perceptual color spaces and palettes.

The module exports the following:

Parsing:
    parse_color: Parse CSS-style color strings into (r, g, b, alpha).
    hex_to_rgba, rgb_to_hex, format_rgba, lighten_color: Formatting helpers.

Perceptual color:
    hex_to_oklch, oklch_to_hex: Hex <-> OKLCH.
    rgb_to_oklab, oklab_to_rgb, rgb_to_oklch, oklch_to_rgb: Float pipelines.

Palettes:
    DEFAULT_PALETTE: Static editor swatches.
    Palette, harmonious_palette, random_palette: Procedural palettes.

Example usage:
    Round-tripping through OKLCH::

        from shape_lib.color import hex_to_oklch, oklch_to_hex

        assert oklch_to_hex(*hex_to_oklch('#4d96ff')) == '#4d96ff'
"""

from .oklab import (
    hex_to_oklch,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_hex,
    oklch_to_oklab,
    oklch_to_rgb,
    rgb_to_oklab,
    rgb_to_oklch,
)
from .palette import DEFAULT_PALETTE, Palette, harmonious_palette, random_palette
from .parse import format_rgba, hex_to_rgba, lighten_color, parse_color, rgb_to_hex

__all__ = [
    'parse_color', 'hex_to_rgba', 'rgb_to_hex', 'format_rgba', 'lighten_color',
    'hex_to_oklch', 'oklch_to_hex', 'rgb_to_oklab', 'oklab_to_rgb',
    'rgb_to_oklch', 'oklch_to_rgb', 'oklab_to_oklch', 'oklch_to_oklab',
    'DEFAULT_PALETTE', 'Palette', 'harmonious_palette', 'random_palette',
]
