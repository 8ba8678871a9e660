"""Integration tests running every demo through the full export pipeline."""

import io
import xml.etree.ElementTree as ET

import numpy as np
import pytest
from PIL import Image

from shape_lib.api import EditorState, IconService
from shape_lib.domain import Knot
from shape_lib.export import read_ico_directory
from shape_lib.export.ico import read_bmp_header
from shape_lib.templates import DEMOS, generate_random_demo

pytestmark = pytest.mark.integration

SVG_NS = '{http://www.w3.org/2000/svg}'


@pytest.fixture(scope='module')
def service():
    return IconService()


@pytest.mark.slow
@pytest.mark.parametrize('key', sorted(DEMOS))
def test_demo_exports(service, key):
    shapes = service.demo_shapes(key)

    root = ET.fromstring(service.export_svg(shapes))
    assert len(root.findall(SVG_NS + 'path')) == len(shapes)

    ico = service.export_ico(shapes, sizes=(16, 32, 48))
    for entry in read_ico_directory(ico):
        assert read_bmp_header(ico, entry)[2] == entry.height * 2
        assert entry.offset + entry.size <= len(ico)

    png = Image.open(io.BytesIO(service.export_png(shapes, 96)))
    pixels = np.asarray(png)
    # something other than the white background was painted
    assert (pixels[..., :3] < 250).any()


def test_document_round_trip_through_state(service):
    shapes = generate_random_demo(2024)
    shapes[0] = shapes[0].copy(knot=Knot(lobes=4, turns=3), variation='medium',
                               watercolor_mode=True, watercolor_intensity=35)
    text = service.export_json(shapes)

    state = EditorState()
    result = state.load_document(text)
    assert result.ok
    assert state.shapes == shapes
    assert state.to_document() == text


def test_svg_and_raster_share_outline(service, knot_shape):
    """The SVG path and the raster agree on where the shape is."""
    svg = service.export_svg([knot_shape])
    d = ET.fromstring(svg).find(SVG_NS + 'path').get('d')
    coords = [float(v) for v in d.replace('M', '').replace('L', '').replace('Z', '').split()]
    xs, ys = coords[0::2], coords[1::2]

    pixels = np.asarray(Image.open(io.BytesIO(service.export_png([knot_shape], 384))))
    painted = np.argwhere((pixels[..., :3] < 250).any(axis=-1))
    assert painted[:, 1].min() == pytest.approx(min(xs), abs=3)
    assert painted[:, 1].max() == pytest.approx(max(xs), abs=3)
    assert painted[:, 0].min() == pytest.approx(min(ys), abs=3)
    assert painted[:, 0].max() == pytest.approx(max(ys), abs=3)


def test_ico_pixels_match_png(service, circle_shape):
    ico = service.export_ico([circle_shape], sizes=(32,))
    (entry,) = read_ico_directory(ico)
    start = entry.offset + 40
    bgra = np.frombuffer(ico[start:start + 32 * 32 * 4], dtype=np.uint8).reshape(32, 32, 4)
    rgba = bgra[::-1, :, [2, 1, 0, 3]]

    png = np.asarray(Image.open(io.BytesIO(service.export_png([circle_shape], 32))).convert('RGBA'))
    np.testing.assert_array_equal(rgba, png)
