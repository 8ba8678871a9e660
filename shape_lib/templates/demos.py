"""Demo compositions.

Demos are read-only reference data: every call to ``Demo.shapes()``
builds fresh Shape objects, so callers can edit the result freely.

``generate_random_demo`` builds a random composition from a seed, drawing
every choice from the seeded PRNG.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List

from ..color.palette import CHROMATIC_PALETTE
from ..color.parse import hex_to_rgba, lighten_color
from ..config import CANVAS_CENTER
from ..domain.shape import Shape, Superformula
from ..utils.prng import SeededRandom


@dataclass(frozen=True)
class Demo:
    """A named, immutable composition template."""
    key: str
    name: str
    builder: Callable[[], List[Shape]]

    def shapes(self) -> List[Shape]:
        return self.builder()


def _layer(radius, rotation, params, fill, stroke, stroke_width,
           cx=CANVAS_CENTER, cy=CANVAS_CENTER) -> Shape:
    return Shape(cx=cx, cy=cy, radius=radius, rotation=rotation,
                 superformula=Superformula(*params), fill_color=fill,
                 stroke_color=stroke, stroke_width=stroke_width)


def descending_star() -> List[Shape]:
    colors = ['#FF6B6B', '#FF8E53', '#FFA64D', '#FFD93D', '#6BCF7F', '#4ECDC4',
              '#45B7D1', '#4D96FF', '#6C5CE7', '#A78BFA', '#F472B6', '#FB7185',
              '#EF4444', '#F97316', '#F59E0B']
    shapes = []
    for i in range(15):
        base = colors[i % len(colors)]
        shapes.append(_layer(
            radius=160 - i * 8,
            rotation=math.radians(i * 8),
            params=(18 - i, 0.5, 0.5, 0.5, 1, 1),
            fill=hex_to_rgba(lighten_color(base, i * 3), 0.9 - i * 0.03),
            stroke=lighten_color(base, i * 2),
            stroke_width=2,
        ))
    return shapes


_BLOOMING_FLOWER = [
    (94, 0.3316125578789226, (6, 1, 4, 4, 1, 1), 'rgba(244, 114, 182, 0.5)', '#F472B6', 1),
    (94, 0.6632251157578452, (4, 1, 4, 4, 1, 1), 'rgba(236, 72, 153, 0.56)', '#EC4899', 1),
    (90, 1.413716694115407, (5, 1, 4, 4, 1, 1), 'rgba(219, 39, 119, 0.62)', '#DB2777', 1),
    (90, 2.199114857512855, (6, 1, 4, 4, 1, 1), 'rgba(190, 24, 93, 0.68)', '#BE185D', 1),
    (72, 0.715584993317675, (15, 1, 4, 4, 1, 1), 'rgba(159, 18, 57, 0.74)', '#9F1239', 1),
    (94, 0.8552113334772214, (8, 1, 4, 4, 1, 1), 'rgba(136, 19, 55, 0.8)', '#881337', 1),
    (67, 1.8151424220741028, (9, 1, 4, 4, 1, 1), 'rgba(112, 26, 71, 0.86)', '#701A47', 1),
    (67, 3.6477381366681487, (9, 1, 4, 4, 1, 1), 'rgba(93, 26, 87, 0.82)', '#5D1A57', 1),
    (18, 1.8325957145940461, (4, 2, 2, 2, 1, 1), 'rgba(234, 179, 8, 0.82)', '#a96800', 4),
    (10, 0.3316125578789226, (4, 2, 2, 2, 1, 1), 'rgba(255, 217, 61, 0.5)', '#F472B6', 0),
]


def blooming_flower() -> List[Shape]:
    return [_layer(*row) for row in _BLOOMING_FLOWER]


def clockwork_gears() -> List[Shape]:
    gears = [(12, 140, '#6B7280', 0), (10, 110, '#9CA3AF', 18),
             (8, 85, '#D1D5DB', 22.5), (6, 60, '#E5E7EB', 30)]
    return [
        _layer(size, math.radians(rotation), (teeth, 10, 10, 10, 1, 1),
               hex_to_rgba(color, 0.7), '#374151', 3)
        for teeth, size, color, rotation in gears
    ]


def rainbow_burst() -> List[Shape]:
    colors = ['#FF0000', '#FF7F00', '#FFFF00', '#00FF00', '#0000FF', '#4B0082', '#9400D3']
    return [
        _layer(150 - i * 15, math.radians(i * 25), (12, 0.5, 0.5, 0.5, 1, 1),
               hex_to_rgba(color, 0.6), color, 2)
        for i, color in enumerate(colors)
    ]


def geometric_mandala() -> List[Shape]:
    layers = [
        ((8, 0.5, 0.5, 0.5), 150, '#6366F1', 0),
        ((8, 2, 2, 2), 120, '#8B5CF6', 22.5),
        ((8, 4, 4, 4), 90, '#A78BFA', 0),
        ((12, 1, 4, 4), 65, '#C4B5FD', 15),
        ((4, 2, 5, 5), 40, '#DDD6FE', 0),
    ]
    return [
        _layer(size, math.radians(rotation), params + (1, 1),
               hex_to_rgba(color, 0.7), color, 2)
        for params, size, color, rotation in layers
    ]


def nested_squares() -> List[Shape]:
    start_radius, min_radius = 188, 25
    ratio = 167 / 188
    step = math.radians(80)
    start, end = (70, 130, 180), (220, 220, 220)
    total = math.ceil(math.log(min_radius / start_radius) / math.log(ratio))

    shapes = []
    radius, rotation, i = float(start_radius), 0.0, 0
    while radius >= min_radius:
        t = i / (total - 1)
        r, g, b = (int(math.floor(s + (e - s) * t + 0.5)) for s, e in zip(start, end))
        shapes.append(_layer(int(math.floor(radius + 0.5)), rotation, (4, 11, 11, 11, 1, 1),
                             f'rgb({r}, {g}, {b})', '#000000', 2))
        radius *= ratio
        rotation += step
        i += 1

    shapes.append(_layer(186, 0, (8, 0.5, 0.5, 0.5, 1, 0.6),
                         'rgba(255, 217, 61, 1)', '#d3d7da', 3))
    return shapes


_GEMIN_EYE = [
    (187, 0, (4, 0.6, 0.6, 0.7, 1, 1), 'rgba(255, 217, 61, 1)', '#fec700', 6),
    (186, 0, (2, 0.5, 0.5, 0.5, 1, 1), 'rgba(59, 130, 246, 0.82)', '#000000', 2),
    (157, 0, (2, 0.5, 0.5, 0.5, 1, 1), 'rgba(255, 255, 255, 0.72)', '#000000', 1),
    (46, 0, (4, 2, 2, 2, 1, 1), 'rgba(255, 255, 255, 1)', '#000000', 1),
    (38, 0, (4, 2, 2, 2, 1, 1), 'rgba(88, 52, 0, 1)', '#000000', 1),
    (25, 0, (4, 2, 2, 2, 1, 1), 'rgba(0, 0, 0, 0.82)', '#000000', 2),
    (10, 0, (4, 2, 2, 2, 1, 1), 'rgba(255, 255, 255, 1)', '#000000', 1, 175, 172),
    (41, math.pi / 2, (4, 0.6, 0.7, 0.8, 1, 1), 'rgba(255, 217, 61, 1)', '#fec700', 3, 73, 305),
    (23, 0, (4, 0.6, 0.6, 0.6, 1, 1), 'rgba(255, 217, 61, 1)', '#fec700', 2, 68, 52),
]


def gemin_eye() -> List[Shape]:
    return [_layer(*row) for row in _GEMIN_EYE]


DEMOS: Dict[str, Demo] = {
    'descendingStar': Demo('descendingStar', 'Descending Star', descending_star),
    'bloomingFlower': Demo('bloomingFlower', 'Blooming Flower', blooming_flower),
    'clockworkGears': Demo('clockworkGears', 'Clockwork Gears', clockwork_gears),
    'rainbowBurst': Demo('rainbowBurst', 'Rainbow Burst', rainbow_burst),
    'geometricMandala': Demo('geometricMandala', 'Geometric Mandala', geometric_mandala),
    'nestedSquares': Demo('nestedSquares', 'Nested Squares', nested_squares),
    'geminEye': Demo('geminEye', 'Gemin-EYE', gemin_eye),
}


def generate_random_demo(seed: int) -> List[Shape]:
    """Random 3-8 layer composition, reproducible from ``seed``."""
    rng = SeededRandom(seed)
    shapes = []
    for _ in range(rng.randint(3, 8)):
        m = rng.randint(3, 18)
        n1, n2, n3 = (round(rng.range(0.5, 9.5), 1) for _ in range(3))
        a, b = (round(rng.range(0.5, 2.5), 1) for _ in range(2))

        # Mostly 40-100, sometimes 100-140
        span = 60 if rng.next() < 0.7 else 40
        base = 40 if rng.next() < 0.7 else 100
        radius = int(rng.range(base, base + span))

        rotation = rng.range(0.0, 2 * math.pi)
        opacity = round(rng.range(0.4, 0.9), 2)
        color = rng.choice(CHROMATIC_PALETTE)
        stroke_width = rng.randint(1, 3) if rng.next() > 0.5 else 0

        shapes.append(Shape(
            cx=CANVAS_CENTER, cy=CANVAS_CENTER, radius=radius, rotation=rotation,
            superformula=Superformula(m, n1, n2, n3, a, b),
            fill_color=hex_to_rgba(color, opacity),
            stroke_color=color,
            stroke_width=stroke_width,
        ))
    return shapes
