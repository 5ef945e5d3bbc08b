"""Mapping between canvas space (origin top-left, y down) and math space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import EngineConfig, get_engine_config

Point = Tuple[float, float]


@dataclass(frozen=True)
class Viewport:
    """Current drawing geometry supplied by the rendering surface."""

    width: float
    height: float
    center_x: float
    center_y: float
    radius: float

    @classmethod
    def from_size(
        cls, width: float, height: float, *, config: Optional[EngineConfig] = None
    ) -> "Viewport":
        if width < 0 or height < 0:
            raise ValueError(f"viewport size must be non-negative (got {width}x{height})")
        cfg = config or get_engine_config()
        return cls(
            width=float(width),
            height=float(height),
            center_x=width / 2,
            center_y=height / 2,
            radius=min(width, height) * cfg.radius_factor,
        )

    @property
    def center(self) -> Point:
        return (self.center_x, self.center_y)

    def to_math(self, canvas_x: float, canvas_y: float) -> Point:
        return (canvas_x - self.center_x, self.center_y - canvas_y)

    def to_canvas(self, math_x: float, math_y: float) -> Point:
        return (math_x + self.center_x, self.center_y - math_y)

    def distance_from_center(self, canvas_x: float, canvas_y: float) -> float:
        mx, my = self.to_math(canvas_x, canvas_y)
        return math.hypot(mx, my)

    def within(self, canvas_x: float, canvas_y: float, multiplier: float) -> bool:
        """``True`` when the point lies inside ``radius * multiplier`` of the center."""

        return self.distance_from_center(canvas_x, canvas_y) <= self.radius * multiplier

    def point_at(self, angle: float, scale: float = 1.0) -> Point:
        """Canvas point at math ``angle`` on a circle of ``radius * scale``."""

        r = self.radius * scale
        return self.to_canvas(math.cos(angle) * r, math.sin(angle) * r)
