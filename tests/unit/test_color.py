"""Unit tests for color parsing, OKLCH conversion and palettes."""

import unittest

import numpy as np
import pytest

from shape_lib.color import (
    DEFAULT_PALETTE,
    hex_to_oklch,
    hex_to_rgba,
    lighten_color,
    oklch_to_hex,
    oklch_to_rgb,
    parse_color,
    rgb_to_hex,
    rgb_to_oklch,
)
from shape_lib.color.palette import CHROMATIC_PALETTE, harmonious_palette, random_palette
from shape_lib.errors import ColorParseError


class TestParseColor(unittest.TestCase):
    """Tests for parse_color."""

    def test_hex6(self):
        self.assertEqual(parse_color('#FF6B6B'), (255, 107, 107, 1.0))

    def test_hex3(self):
        self.assertEqual(parse_color('#fff'), (255, 255, 255, 1.0))

    def test_hex8(self):
        r, g, b, a = parse_color('#00000080')
        self.assertEqual((r, g, b), (0, 0, 0))
        self.assertAlmostEqual(a, 128 / 255)

    def test_rgb(self):
        self.assertEqual(parse_color('rgb(1, 2, 3)'), (1, 2, 3, 1.0))

    def test_rgba(self):
        self.assertEqual(parse_color('rgba(244, 114, 182, 0.5)'), (244, 114, 182, 0.5))

    def test_named(self):
        self.assertEqual(parse_color('transparent')[3], 0.0)
        self.assertEqual(parse_color('White'), (255, 255, 255, 1.0))

    def test_invalid_raises(self):
        for text in ('', '#12', '#GGGGGG', 'rgb(300, 0, 0)', 'rgba(0, 0, 0, 2)',
                     'hsl(0, 0%, 0%)', None):
            with self.assertRaises(ColorParseError):
                parse_color(text)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_color('nope')


class TestColorHelpers:

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(255, 107, 107) == '#ff6b6b'

    def test_hex_to_rgba(self):
        assert hex_to_rgba('#FF6B6B', 0.7) == 'rgba(255, 107, 107, 0.7)'

    def test_hex_to_rgba_integral_alpha(self):
        assert hex_to_rgba('#000000', 1) == 'rgba(0, 0, 0, 1)'

    def test_lighten_color(self):
        assert lighten_color('#102030', 10) == '#2a3a4a'

    def test_lighten_color_caps_at_255(self):
        assert lighten_color('#F0F0F0', 50) == '#ffffff'


class TestOklch:

    def test_white_and_black(self):
        L, C, _ = hex_to_oklch('#ffffff')
        assert L == pytest.approx(1.0, abs=1e-4)
        assert C == pytest.approx(0.0, abs=1e-4)
        L, C, _ = hex_to_oklch('#000000')
        assert L == pytest.approx(0.0, abs=1e-9)

    def test_hue_in_range(self):
        for color in DEFAULT_PALETTE:
            _, _, H = hex_to_oklch(color)
            assert 0.0 <= H < 360.0

    @pytest.mark.parametrize('color', DEFAULT_PALETTE)
    def test_hex_round_trip(self, color):
        assert oklch_to_hex(*hex_to_oklch(color)) == color.lower()

    def test_float_round_trip(self):
        rgb = np.array([0.2, 0.55, 0.9])
        back = np.array(oklch_to_rgb(*rgb_to_oklch(rgb)))
        np.testing.assert_allclose(back, rgb, atol=1e-6)

    @pytest.mark.parametrize('L, C, H', [
        (0.2, 0.05, 10.0), (0.5, 0.2, 145.0), (0.7, 0.4, 300.0), (0.95, 0.01, 359.0),
    ])
    def test_unclipped_lch_round_trip(self, L, C, H):
        back = rgb_to_oklch(np.array(oklch_to_rgb(L, C, H)))
        np.testing.assert_allclose(back, (L, C, H), atol=1e-6)

    def test_out_of_gamut_is_clipped(self):
        assert oklch_to_hex(0.7, 0.5, 145.0).startswith('#')


class TestPalette:

    def test_default_palette_size(self):
        assert len(DEFAULT_PALETTE) == 42
        assert len(CHROMATIC_PALETTE) == 36

    def test_deterministic(self):
        assert harmonious_palette('#FF6B6B', seed=7) == harmonious_palette('#FF6B6B', seed=7)

    def test_base_first(self):
        palette = harmonious_palette('#4D96FF', seed=3)
        assert palette.colors[0] == '#4d96ff'
        assert palette.base == '#4d96ff'

    def test_scheme_sizes(self):
        for seed in range(30):
            palette = harmonious_palette('#6BCF7F', seed=seed)
            if palette.scheme == 'complementary':
                assert len(palette) == 2
            else:
                assert palette.scheme in ('split-30', 'split-60', 'split-120')
                assert len(palette) == 3

    def test_related_colors_clamped(self):
        for seed in range(30):
            palette = harmonious_palette('#EF4444', seed=seed)
            for color in palette.colors[1:]:
                L, C, _ = hex_to_oklch(color)
                # 8-bit quantization and gamut clipping move L/C slightly
                assert 0.28 <= L <= 0.87
                assert C <= 0.27

    def test_complementary_hue(self):
        for seed in range(30):
            palette = harmonious_palette('#45B7D1', seed=seed)
            if palette.scheme == 'complementary':
                base_h = hex_to_oklch(palette.colors[0])[2]
                other_h = hex_to_oklch(palette.colors[1])[2]
                diff = abs((other_h - base_h + 180) % 360 - 180)
                assert diff == pytest.approx(180, abs=25)
                break

    def test_random_palette_without_base(self):
        palette = random_palette(seed=11)
        assert palette.base in [c.lower() for c in CHROMATIC_PALETTE]

    def test_bad_base_raises(self):
        with pytest.raises(ColorParseError):
            harmonious_palette('not-a-color')

    def test_to_dict(self):
        data = harmonious_palette('#FF6B6B', seed=1).to_dict()
        assert set(data) == {'colors', 'scheme', 'base'}
