"""Shared pytest fixtures for the shape engine test suite.

Fixtures:
    circle_shape: Default superformula circle (m=4, n=2) at the canvas center
    star_shape: Five-point star with a stroke
    knot_shape: Three-lobe, two-turn rosette
    sample_shapes: Small mixed composition (solid, gradient, watercolor)
    flask_client: Flask test client with the export routes registered
    restore_logging: Saves and restores root logger handlers around a test

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shape_lib.domain import Knot, Shape, Superformula  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow-running")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture
def circle_shape():
    """Unit-circle superformula with radius 100 at the canvas center."""
    return Shape(radius=100, superformula=Superformula(4, 2, 2, 2, 1, 1),
                 fill_color='#FF6B6B')


@pytest.fixture
def star_shape():
    return Shape(radius=120, rotation=0.3,
                 superformula=Superformula(5, 0.5, 0.5, 0.5, 1, 1),
                 fill_color='rgba(255, 217, 61, 0.8)',
                 stroke_color='#fec700', stroke_width=2)


@pytest.fixture
def knot_shape():
    return Shape(radius=90, knot=Knot(lobes=3, turns=2, amplitude=0.3, base_radius=1.0),
                 fill_color='rgba(78, 205, 196, 0.7)')


@pytest.fixture
def sample_shapes(circle_shape, star_shape):
    """Solid, gradient and watercolor layers, bottom to top."""
    gradient = Shape(radius=150, superformula=Superformula(6, 1, 4, 4, 1, 1),
                     fill_color='#4D96FF', gradient_mode=True,
                     gradient_edge_color='#6C5CE7')
    watercolor = Shape(radius=60, superformula=Superformula(8, 10, 10, 10, 1, 1),
                       fill_color='rgba(244, 114, 182, 0.9)',
                       watercolor_mode=True, watercolor_intensity=40)
    return [gradient, circle_shape, star_shape, watercolor]


@pytest.fixture
def flask_client():
    """Flask test client for the export server."""
    import shape_routes  # noqa: F401
    from shape_flask import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers.copy()
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
