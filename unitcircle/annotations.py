"""Arc, label and helper-line geometry used to annotate an angle.

All angles handed to a rendering surface use the canvas convention: 0 points
east and positive values turn clockwise on screen, so a math angle ``a`` is the
canvas angle ``-a``. Arcs are swept anticlockwise in canvas terms, which is the
counter-clockwise sweep on screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import EngineConfig, get_engine_config
from .engine import (
    QUADRANT_I,
    QUADRANT_II,
    QUADRANT_III,
    QUADRANT_IV,
    Y_AXIS,
    AngleEngine,
    AngleInfo,
    Quadrant,
)
from .formatting import format_coords, format_radians
from .math_utils import TAU, arrow_head, normalize_angle
from .options import DisplayOptions
from .special_angles import SPECIAL_ANGLES, SpecialAngle
from .transform import Viewport

Point = Tuple[float, float]
Triangle = Tuple[Point, Point, Point]


@dataclass(frozen=True)
class ArcSpec:
    center: Point
    radius: float
    start: float
    end: float
    anticlockwise: bool = True

    @property
    def math_start(self) -> float:
        return -self.start

    @property
    def math_end(self) -> float:
        return -self.end


@dataclass(frozen=True)
class ArcLabel:
    text: str
    position: Point
    math_angle: float


@dataclass(frozen=True)
class AngleArcs:
    quadrant: Quadrant
    angle: float
    reference_angle: float
    standard_arc: ArcSpec
    standard_arrow: Optional[Triangle]
    standard_label: Optional[ArcLabel]
    reference_arc: Optional[ArcSpec]
    reference_label: Optional[ArcLabel]


@dataclass(frozen=True)
class HoverLabel:
    text: str
    position: Point
    selected: bool


@dataclass(frozen=True)
class SpecialAngleMark:
    angle: SpecialAngle
    marker: Point
    label: Point
    lines: Tuple[Tuple[str, Point], ...]


def reference_arc_bounds(angle: float, quadrant: Quadrant) -> Tuple[Optional[Tuple[float, float]], float]:
    """Canvas ``(start, end)`` of the reference arc and the math angle of its label.

    ``angle`` must already be normalized. Axis angles get no arc; the label
    angle is still returned so callers can place text consistently.
    """

    if quadrant == QUADRANT_I:
        return (0.0, -angle), angle / 2
    if quadrant == QUADRANT_II:
        return (-angle, -math.pi), (math.pi + angle) / 2
    if quadrant == QUADRANT_III:
        return (-math.pi, -angle), (math.pi + angle) / 2
    if quadrant == QUADRANT_IV:
        mid = (angle + TAU) / 2
        if mid >= TAU:
            mid -= TAU
        return (-angle, -TAU), mid
    if quadrant == Y_AXIS:
        return None, (angle / 2 if angle < math.pi else (math.pi + angle) / 2)
    return None, angle


def compute_angle_arcs(
    info: AngleInfo,
    viewport: Viewport,
    *,
    config: Optional[EngineConfig] = None,
) -> AngleArcs:
    cfg = config or get_engine_config()
    engine = AngleEngine(cfg)
    angle = normalize_angle(info.radians)
    degrees = info.degrees
    ref = engine.reference_angle(angle)
    quadrant = engine.quadrant(angle)

    center = viewport.center
    std_radius = viewport.radius * cfg.standard_arc_factor
    ref_radius = viewport.radius * cfg.reference_arc_factor
    label_scale = cfg.arc_label_offset_factor

    standard_arc = ArcSpec(center, std_radius, 0.0, -angle)
    show_standard = abs(degrees) > cfg.standard_label_min_degrees

    standard_arrow: Optional[Triangle] = None
    standard_label: Optional[ArcLabel] = None
    if show_standard:
        tip = (
            center[0] + std_radius * math.cos(-angle),
            center[1] + std_radius * math.sin(-angle),
        )
        standard_arrow = arrow_head(tip, -angle - math.pi / 2, cfg.arrow_size)
        mid = 0.0 if abs(angle) < 0.01 else angle / 2
        standard_label = ArcLabel(
            text=f"{degrees:.0f}°",
            position=viewport.to_canvas(
                math.cos(mid) * std_radius * label_scale,
                math.sin(mid) * std_radius * label_scale,
            ),
            math_angle=mid,
        )

    bounds, ref_mid = reference_arc_bounds(angle, quadrant)
    reference_arc = None
    if bounds is not None:
        reference_arc = ArcSpec(center, ref_radius, bounds[0], bounds[1])

    reference_label: Optional[ArcLabel] = None
    if abs(ref) > cfg.reference_label_min_radians:
        reference_label = ArcLabel(
            text=f"{math.degrees(ref):.0f}°",
            position=viewport.to_canvas(
                math.cos(ref_mid) * ref_radius * label_scale,
                math.sin(ref_mid) * ref_radius * label_scale,
            ),
            math_angle=ref_mid,
        )

    return AngleArcs(
        quadrant=quadrant,
        angle=angle,
        reference_angle=ref,
        standard_arc=standard_arc,
        standard_arrow=standard_arrow,
        standard_label=standard_label,
        reference_arc=reference_arc,
        reference_label=reference_label,
    )


def ray_arrow(viewport: Viewport, tip: Point, size: float) -> Triangle:
    heading = math.atan2(tip[1] - viewport.center_y, tip[0] - viewport.center_x)
    return arrow_head(tip, heading, size)


def hover_label(
    info: AngleInfo,
    point: Point,
    *,
    selected: bool = False,
    config: Optional[EngineConfig] = None,
) -> HoverLabel:
    cfg = config or get_engine_config()
    if info.is_exact and info.exact_coords_str:
        text = info.exact_coords_str
    else:
        text = format_coords(info.x, info.y)
    offset = cfg.selected_label_offset if selected else cfg.hover_label_offset
    position = (
        point[0] + math.cos(info.radians) * offset,
        point[1] - math.sin(info.radians) * offset,
    )
    return HoverLabel(text=text, position=position, selected=selected)


def reference_triangle(point: Point, viewport: Viewport) -> Tuple[Tuple[Point, Point], Tuple[Point, Point]]:
    """Dashed legs dropping from ``point`` to the x-axis and back to the center."""

    foot = (point[0], viewport.center_y)
    return ((point, foot), (foot, viewport.center))


def special_angle_text(angle: SpecialAngle, options: DisplayOptions) -> Tuple[str, str]:
    line1 = ""
    if options.show_degrees and options.show_radians:
        line1 = f"{angle.degrees:.0f}° | {format_radians(angle.radians)}"
    elif options.show_degrees:
        line1 = f"{angle.degrees:.0f}°"
    elif options.show_radians:
        line1 = format_radians(angle.radians)
    line2 = angle.exact_coords_str if options.show_coordinates else ""
    return line1, line2


def special_angle_marks(
    viewport: Viewport,
    options: DisplayOptions,
    *,
    config: Optional[EngineConfig] = None,
    line_gap: float = 8.0,
) -> List[SpecialAngleMark]:
    cfg = config or get_engine_config()
    marks: List[SpecialAngleMark] = []
    for entry in SPECIAL_ANGLES:
        marker = viewport.point_at(entry.radians)
        label = viewport.point_at(entry.radians, cfg.special_label_factor)
        line1, line2 = special_angle_text(entry, options)
        lines: List[Tuple[str, Point]] = []
        if line1:
            lines.append((line1, (label[0], label[1] - (line_gap if line2 else 0.0))))
        if line2:
            lines.append((line2, (label[0], label[1] + (line_gap if line1 else 0.0))))
        marks.append(SpecialAngleMark(angle=entry, marker=marker, label=label, lines=tuple(lines)))
    return marks
