"""Unit tests for the editor state and the icon service."""

import io
import json
import logging
import unittest

import pytest
from PIL import Image

from shape_lib.api import EditorState, IconService, shape_cache_key
from shape_lib.domain import Shape
from shape_lib.errors import ColorParseError
from shape_lib.export import export_document, read_ico_directory
from shape_lib.templates import DemoRepository


class TestEditorState(unittest.TestCase):
    """Tests for EditorState operations."""

    def setUp(self):
        self.state = EditorState()
        for radius in (10, 20, 30):
            self.state.add(Shape(radius=radius))

    def radii(self):
        return [s.radius for s in self.state.shapes]

    def test_add_selects(self):
        self.assertEqual(self.state.selected, 2)
        self.assertEqual(self.state.selected_shape.radius, 30)

    def test_update_selected(self):
        self.state.selected = 0
        self.assertTrue(self.state.update_selected(Shape(radius=99)))
        self.assertEqual(self.radii(), [99, 20, 30])

    def test_update_without_selection(self):
        self.state.selected = None
        self.assertFalse(self.state.update_selected(Shape(radius=99)))

    def test_delete_selected(self):
        self.state.selected = 1
        self.state.delete(1)
        self.assertEqual(self.radii(), [10, 30])
        self.assertEqual(self.state.selected, 0)

    def test_delete_before_selection(self):
        self.state.selected = 2
        self.state.delete(0)
        self.assertEqual(self.state.selected_shape.radius, 30)

    def test_delete_last(self):
        state = EditorState()
        state.add(Shape())
        state.delete(0)
        self.assertIsNone(state.selected)

    def test_move_follows_selection(self):
        self.state.selected = 0
        self.state.move(0, 2)
        self.assertEqual(self.radii(), [20, 30, 10])
        self.assertEqual(self.state.selected, 2)

    def test_move_shifts_other_selection(self):
        self.state.selected = 2
        self.state.move(0, 2)
        self.assertEqual(self.state.selected_shape.radius, 30)

    def test_clear(self):
        self.state.clear()
        self.assertEqual(self.state.shapes, [])
        self.assertIsNone(self.state.selected)

    def test_load_demo(self):
        self.state.load_demo(DemoRepository.with_builtins(), 'nestedSquares')
        self.assertTrue(self.state.shapes)

    def test_load_document_success(self):
        text = export_document([Shape(radius=5), Shape(radius=6)])
        result = self.state.load_document(text)
        self.assertTrue(result.ok)
        self.assertEqual(result.shape_count, 2)
        self.assertEqual(self.radii(), [5, 6])
        self.assertIsNone(self.state.selected)

    def test_load_document_failure_keeps_shapes(self):
        result = self.state.load_document('{"shapes": "nope"}')
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, 'SchemaError')
        self.assertEqual(self.radii(), [10, 20, 30])

    def test_load_document_parse_error(self):
        result = self.state.load_document('not json')
        self.assertEqual(result.error_kind, 'ParseError')
        self.assertEqual(result.to_dict()['ok'], False)

    def test_load_document_huge_integer(self):
        result = self.state.load_document('{"shapes": [{"radius": 1' + '0' * 400 + '}]}')
        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, 'SchemaError')
        self.assertEqual(self.radii(), [10, 20, 30])

    def test_to_document(self):
        data = json.loads(self.state.to_document())
        self.assertEqual(len(data['shapes']), 3)

    def test_snapshot_is_independent(self):
        snap = self.state.snapshot()
        snap[0].radius = 1000
        self.assertEqual(self.state.shapes[0].radius, 10)


class TestShapeCacheKey:

    def test_ignores_placement(self, circle_shape):
        moved = circle_shape.copy(cx=10, cy=20, radius=5)
        assert shape_cache_key(moved) == shape_cache_key(circle_shape)

    @pytest.mark.parametrize('change', [
        {'fill_color': '#000000'}, {'stroke_width': 2}, {'rotation': 1.0},
        {'variation': 'wild'}, {'watercolor_mode': True},
    ])
    def test_style_changes_key(self, circle_shape, change):
        assert shape_cache_key(circle_shape.copy(**change)) != shape_cache_key(circle_shape)


class TestIconService:

    @pytest.fixture
    def service(self):
        return IconService()

    def test_shape_preview_png(self, service, star_shape):
        image = Image.open(io.BytesIO(service.shape_preview(star_shape)))
        assert image.format == 'PNG'
        assert image.size == (48, 48)

    def test_preview_is_cached(self, service, circle_shape, caplog):
        first = service.shape_preview(circle_shape)
        with caplog.at_level(logging.DEBUG, logger='shape_lib.api.services'):
            second = service.shape_preview(circle_shape.copy(cx=10))
        assert first is second
        assert service.preview_cache_size == 1
        assert 'cache hit' in caplog.text

    def test_clear_cache(self, service, circle_shape):
        service.shape_preview(circle_shape)
        service.clear_preview_cache()
        assert service.preview_cache_size == 0

    def test_favicon_previews(self, service, circle_shape):
        previews = service.favicon_previews([circle_shape])
        assert sorted(previews) == [16, 32, 64]
        assert Image.open(io.BytesIO(previews[32])).size == (32, 32)

    def test_export_ico(self, service, circle_shape):
        assert len(read_ico_directory(service.export_ico([circle_shape]))) == 6

    def test_json_round_trip(self, service, sample_shapes):
        assert service.import_json(service.export_json(sample_shapes)) == sample_shapes

    def test_demo_shapes(self, service):
        assert service.demo_shapes('bloomingFlower')
        with pytest.raises(KeyError):
            service.demo_shapes('nope')

    def test_list_presets(self, service):
        names = [p['name'] for p in service.list_presets()]
        assert 'star5' in names

    def test_random_palette(self, service):
        palette = service.random_palette(3, '#FF6B6B')
        assert palette['base'] == '#ff6b6b'
        with pytest.raises(ColorParseError):
            service.random_palette(3, 'zzz')
