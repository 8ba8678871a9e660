"""Shared configuration for the shape engine.

This module centralizes the constants used by:
    - geometry.sampler (sample resolutions)
    - rendering.surface (canvas size, supersampling)
    - export.ico / export.svg / export.png (export sizes)
    - api.services (preview size)

Having these values in one place keeps the on-screen renderer and every
exporter in agreement about the native canvas.
"""

# Native canvas dimensions (pixels). Shape coordinates live in this space.
CANVAS_SIZE = 384
CANVAS_CENTER = CANVAS_SIZE / 2

# Sample counts per consumer
RENDER_STEPS = 1500
SVG_STEPS = 360
SMALL_RASTER_STEPS = 180
SMALL_RASTER_MAX_SIZE = 32

# Export sizes
ICO_SIZES = (16, 32, 48, 64, 128, 256)
FAVICON_PREVIEW_SIZES = (16, 32, 64)
TOUCH_ICON_SIZE = 180
PREVIEW_SIZE = 48
PREVIEW_RADIUS_FRACTION = 0.4

# Raster surface oversampling factor (downsampled with LANCZOS)
SUPERSAMPLE = 4

# JSON persistence
DOCUMENT_VERSION = '1.0'

# Superformula guards
DENOMINATOR_FLOOR = 1e-12
MAX_UNIT_RADIUS = 1e6

# Organic variation modes -> perturbation amount k in [0, 1)
VARIATION_AMOUNTS = {
    'none': 0.0,
    'light': 0.04,
    'medium': 0.1,
    'heavy': 0.2,
    'wild': 0.35,
}
PEN_WIGGLE_SCALE = 0.02
MAX_VARIATION = 0.95
ANGLE_DAMPING = 0.25
MIN_CONTROL_POINTS = 8
MAX_CONTROL_POINTS = 24

# Seed offsets decorrelating derived random streams
ANGLE_SEED_OFFSET = 1000
WATERCOLOR_SEED_OFFSET = 12345

# Fills
GRADIENT_OVERSHOOT = 1.2
WATERCOLOR_LAYER_FACTOR = 0.15
WATERCOLOR_BASE_LAYERS = 3
MAX_WATERCOLOR_INTENSITY = 100
WATERCOLOR_JITTER_FACTOR = 0.3
FALLBACK_FILL = (0, 0, 0, 1.0)
