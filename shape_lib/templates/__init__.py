"""Presets and demo compositions.

The module exports the following:
    PRESETS, Preset, apply_preset: Named superformula parameter sets.
    DEMOS, Demo: Built-in demo compositions.
    DemoRepository: Registry of demos.
    generate_random_demo: Seeded random composition.

Example usage:
    Loading a demo::

        from shape_lib.templates import DemoRepository, apply_preset

        repo = DemoRepository.with_builtins()
        shapes = repo.shapes('clockworkGears')
        shapes[0] = apply_preset(shapes[0], 'star5')
"""

from .demos import DEMOS, Demo, generate_random_demo
from .presets import PRESETS, Preset, apply_preset
from .repository import DemoRepository

__all__ = [
    'PRESETS', 'Preset', 'apply_preset',
    'DEMOS', 'Demo', 'DemoRepository', 'generate_random_demo',
]
