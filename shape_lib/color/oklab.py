"""Perceptual color space conversions (sRGB, linear RGB, XYZ, Oklab, OKLCH).

The forward pipeline is::

    hex -> sRGB (0-1) -> linear RGB -> CIE XYZ (D65) -> LMS -> cube root
        -> Oklab -> OKLCH

Every step has an exact inverse, so converting to OKLCH and back returns
the original 8-bit channels. Gamut clipping happens only when quantizing
back to hex.

The module provides the following functions:
    srgb_to_linear / linear_to_srgb: sRGB transfer function.
    rgb_to_oklab / oklab_to_rgb: Float RGB (0-1) <-> Oklab.
    oklab_to_oklch / oklch_to_oklab: Cartesian <-> cylindrical.
    rgb_to_oklch / oklch_to_rgb: Float RGB (0-1) <-> OKLCH.
    hex_to_oklch / oklch_to_hex: Hex string <-> OKLCH.

Example usage:
    Shifting a hue perceptually::

        from shape_lib.color.oklab import hex_to_oklch, oklch_to_hex

        L, C, H = hex_to_oklch('#4D96FF')
        complement = oklch_to_hex(L, C, H + 180)
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .parse import parse_color, rgb_to_hex

# Linear sRGB -> CIE XYZ (D65)
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# CIE XYZ -> LMS cone response (Ottosson's M1)
XYZ_TO_LMS = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
])

# Non-linear LMS -> Oklab (Ottosson's M2)
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)

# sRGB transfer function breakpoints
_DECODE_THRESHOLD = 0.04045
_ENCODE_THRESHOLD = 0.0031308


def srgb_to_linear(values) -> np.ndarray:
    """Decode gamma-encoded sRGB channels (0-1) to linear light."""
    c = np.asarray(values, dtype=float)
    return np.where(
        c <= _DECODE_THRESHOLD,
        c / 12.92,
        ((np.abs(c) + 0.055) / 1.055) ** 2.4,
    )


def linear_to_srgb(values) -> np.ndarray:
    """Encode linear-light channels back to gamma-encoded sRGB (0-1)."""
    c = np.asarray(values, dtype=float)
    return np.where(
        c <= _ENCODE_THRESHOLD,
        c * 12.92,
        1.055 * np.abs(c) ** (1 / 2.4) - 0.055,
    )


def rgb_to_oklab(rgb) -> Tuple[float, float, float]:
    """Convert float sRGB channels (0-1) to Oklab (L, a, b)."""
    linear = srgb_to_linear(rgb)
    xyz = RGB_TO_XYZ @ linear
    lms = np.cbrt(XYZ_TO_LMS @ xyz)
    lab = LMS_TO_OKLAB @ lms
    return float(lab[0]), float(lab[1]), float(lab[2])


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert Oklab to float sRGB channels.

    The result is not clipped; out-of-gamut colors fall outside 0-1.
    """
    lms = (OKLAB_TO_LMS @ np.array([L, a, b], dtype=float)) ** 3
    xyz = LMS_TO_XYZ @ lms
    rgb = linear_to_srgb(XYZ_TO_RGB @ xyz)
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Cartesian Oklab to cylindrical OKLCH with hue in degrees [0, 360)."""
    C = math.sqrt(a * a + b * b)
    H = math.degrees(math.atan2(b, a)) % 360.0
    if H >= 360.0:
        H = 0.0
    return L, C, H


def oklch_to_oklab(L: float, C: float, H: float) -> Tuple[float, float, float]:
    h = math.radians(H % 360.0)
    return L, C * math.cos(h), C * math.sin(h)


def rgb_to_oklch(rgb) -> Tuple[float, float, float]:
    return oklab_to_oklch(*rgb_to_oklab(rgb))


def oklch_to_rgb(L: float, C: float, H: float) -> Tuple[float, float, float]:
    return oklab_to_rgb(*oklch_to_oklab(L, C, H))


def hex_to_oklch(hex_color: str) -> Tuple[float, float, float]:
    """Convert a hex color to OKLCH.

    Raises:
        ColorParseError: If ``hex_color`` is malformed.

    Example:
        >>> L, C, H = hex_to_oklch('#ffffff')
        >>> round(L, 3), round(C, 3)
        (1.0, 0.0)
    """
    r, g, b, _ = parse_color(hex_color)
    return rgb_to_oklch(np.array([r, g, b], dtype=float) / 255.0)


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """Convert OKLCH to a hex color, clipping to the sRGB gamut."""
    rgb = np.clip(np.array(oklch_to_rgb(L, C, H)), 0.0, 1.0)
    channels = np.floor(rgb * 255.0 + 0.5).astype(int)
    return rgb_to_hex(*channels)
