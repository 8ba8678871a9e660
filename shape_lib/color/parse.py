"""CSS color string helpers.

Shapes store their colors as the strings the editor produced: hex
('#FF6B6B'), rgb()/rgba() functional notation, or a handful of keywords.
These helpers turn them into channel tuples and back.

The module provides the following functions:
    parse_color: Parse a color string into an (r, g, b, alpha) tuple.
    rgb_to_hex: Format 8-bit channels as '#rrggbb'.
    hex_to_rgba: Convert a hex color plus alpha into an rgba() string.
    format_rgba: Format channels as an rgba() string.
    lighten_color: Brighten a hex color by a percentage.
"""

from __future__ import annotations

import re
from typing import Tuple

from ..errors import ColorParseError

RGBA = Tuple[int, int, int, float]

_HEX_RE = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')
_FUNC_RE = re.compile(
    r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)$'
)
_NAMED = {
    'white': (255, 255, 255, 1.0),
    'black': (0, 0, 0, 1.0),
    'transparent': (0, 0, 0, 0.0),
}


def parse_color(text: str) -> RGBA:
    """Parse a color string.

    Args:
        text: '#rgb', '#rrggbb', '#rrggbbaa', 'rgb(r, g, b)',
            'rgba(r, g, b, a)', 'white', 'black' or 'transparent'.

    Returns:
        Tuple of (r, g, b) as ints in 0-255 and alpha as a float in 0-1.

    Raises:
        ColorParseError: If the string is not a supported color.

    Example:
        >>> parse_color('rgba(244, 114, 182, 0.5)')
        (244, 114, 182, 0.5)
        >>> parse_color('#FFF')
        (255, 255, 255, 1.0)
    """
    if not isinstance(text, str):
        raise ColorParseError(text)
    value = text.strip()

    named = _NAMED.get(value.lower())
    if named is not None:
        return named

    match = _HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return (r, g, b, alpha)

    match = _FUNC_RE.match(value)
    if match:
        r, g, b = (int(match.group(i)) for i in (1, 2, 3))
        if max(r, g, b) > 255:
            raise ColorParseError(text)
        alpha = 1.0
        if match.group(4) is not None:
            try:
                alpha = float(match.group(4))
            except ValueError:
                raise ColorParseError(text) from None
            if not 0.0 <= alpha <= 1.0:
                raise ColorParseError(text)
        return (r, g, b, alpha)

    raise ColorParseError(text)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as a lowercase '#rrggbb' string."""
    return '#{:02x}{:02x}{:02x}'.format(int(r), int(g), int(b))


def format_rgba(r: int, g: int, b: int, alpha: float) -> str:
    return f'rgba({int(r)}, {int(g)}, {int(b)}, {alpha:g})'


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """Convert '#rrggbb' plus an alpha into an 'rgba(r, g, b, a)' string.

    Example:
        >>> hex_to_rgba('#FF6B6B', 0.7)
        'rgba(255, 107, 107, 0.7)'
    """
    r, g, b, _ = parse_color(hex_color)
    return format_rgba(r, g, b, alpha)


def lighten_color(hex_color: str, percent: float) -> str:
    """Brighten every channel by ``round(2.55 * percent)``, capped at 255."""
    r, g, b, _ = parse_color(hex_color)
    amount = int(2.55 * percent + 0.5)
    return rgb_to_hex(min(255, r + amount), min(255, g + amount), min(255, b + amount))
