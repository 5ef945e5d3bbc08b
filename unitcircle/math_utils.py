from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]

TAU = 2.0 * math.pi


def _vec2(a: Point, b: Point) -> Point:
    return b[0] - a[0], b[1] - a[1]


def _dot2(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _norm_sq2(v: Point) -> float:
    return _dot2(v, v)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into ``[0, 2π)``."""

    return ((angle % TAU) + TAU) % TAU


def distance_to_segment(start: Point, end: Point, point: Point) -> float:
    """Distance from ``point`` to the closed segment ``start``–``end``."""

    direction = _vec2(start, end)
    length_sq = _norm_sq2(direction)
    if length_sq == 0:
        return distance(point, start)
    t = _dot2(_vec2(start, point), direction) / length_sq
    t = max(0.0, min(1.0, t))
    projection = (start[0] + t * direction[0], start[1] + t * direction[1])
    return distance(point, projection)


def arrow_head(tip: Point, heading: float, size: float) -> Tuple[Point, Point, Point]:
    """Triangle for an arrow pointing along ``heading`` (canvas radians) ending at ``tip``."""

    spread = math.pi / 6
    left = (
        tip[0] - size * math.cos(heading - spread),
        tip[1] - size * math.sin(heading - spread),
    )
    right = (
        tip[0] - size * math.cos(heading + spread),
        tip[1] - size * math.sin(heading + spread),
    )
    return left, tip, right
