"""Full-frame drawing of the unit circle against a :class:`RenderingSurface`."""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Tuple

from .annotations import (
    AngleArcs,
    HoverLabel,
    compute_angle_arcs,
    hover_label,
    ray_arrow,
    reference_triangle,
    special_angle_marks,
)
from .config import EngineConfig, get_engine_config
from .engine import AngleInfo
from .options import DisplayOptions
from .pins import PinnedAngle, PinStore
from .surfaces import RenderingSurface
from .transform import Viewport

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

COLORS: Dict[str, str] = {
    "static": "rgba(136, 136, 136, 1)",
    "static_faded": "rgba(136, 136, 136, 0.2)",
    "hover": "#3498db",
    "pinned": "#27ae60",
    "axis": "#aaaaaa",
    "grid": "#eeeeee",
    "standard_arc": "rgba(231, 76, 60, 0.8)",
    "reference_arc": "rgba(46, 204, 113, 0.8)",
    "label_bg": "rgba(255, 255, 255, 0.8)",
    "label_bg_selected": "rgba(255, 255, 255, 0.9)",
}

ARC_FONT = "bold 12px Arial"
SPECIAL_FONT = "12px Arial"
HOVER_FONT = "14px Arial"
SELECTED_FONT = "bold 14px Arial"
TICK_LENGTH = 8.0
MARKER_RADIUS = 4.0
REF_TRIANGLE_DASH = (5.0, 3.0)

# (color, line width, arrow size) per pin state
_PIN_STYLES = {
    "selected": ("hover", 2.5, 14.0),
    "hovered": ("hover", 2.0, 12.0),
    "normal": ("pinned", 1.0, 10.0),
}


def draw_grid(surface: RenderingSurface, viewport: Viewport) -> None:
    spacing = viewport.radius / 5
    if spacing <= 0:
        return
    count = math.ceil(max(viewport.width, viewport.height) / spacing) + 1
    for i in range(-count, count + 1):
        x = viewport.center_x + i * spacing
        surface.line((x, 0.0), (x, viewport.height), color=COLORS["grid"])
    for i in range(-count, count + 1):
        y = viewport.center_y + i * spacing
        surface.line((0.0, y), (viewport.width, y), color=COLORS["grid"])


def draw_circle_and_axes(surface: RenderingSurface, viewport: Viewport) -> None:
    cx, cy, r = viewport.center_x, viewport.center_y, viewport.radius
    surface.circle((cx, cy), r, color=COLORS["static"], width=2.0)
    surface.line((0.0, cy), (viewport.width, cy), color=COLORS["axis"], width=2.0)
    surface.line((cx, 0.0), (cx, viewport.height), color=COLORS["axis"], width=2.0)
    half = TICK_LENGTH / 2
    for x in (cx + r, cx - r):
        surface.line((x, cy - half), (x, cy + half), color=COLORS["axis"], width=2.0)
    for y in (cy - r, cy + r):
        surface.line((cx - half, y), (cx + half, y), color=COLORS["axis"], width=2.0)


def draw_special_angles(
    surface: RenderingSurface,
    viewport: Viewport,
    options: DisplayOptions,
    *,
    faded: bool = False,
    config: Optional[EngineConfig] = None,
) -> None:
    color = COLORS["static_faded"] if faded else COLORS["static"]
    for mark in special_angle_marks(viewport, options, config=config):
        surface.circle(mark.marker, MARKER_RADIUS, color=color, fill=True)
        for text, position in mark.lines:
            surface.text(text, position, color=color, font=SPECIAL_FONT)


def draw_angle_arcs(surface: RenderingSurface, arcs: AngleArcs) -> None:
    std = arcs.standard_arc
    surface.arc(
        std.center,
        std.radius,
        std.start,
        std.end,
        anticlockwise=std.anticlockwise,
        color=COLORS["standard_arc"],
        width=2.0,
    )
    if arcs.standard_arrow is not None:
        left, tip, right = arcs.standard_arrow
        surface.line(left, tip, color=COLORS["standard_arc"], width=2.0)
        surface.line(tip, right, color=COLORS["standard_arc"], width=2.0)
    if arcs.standard_label is not None:
        surface.text(
            arcs.standard_label.text,
            arcs.standard_label.position,
            color=COLORS["standard_arc"],
            font=ARC_FONT,
        )
    ref = arcs.reference_arc
    if ref is not None:
        surface.arc(
            ref.center,
            ref.radius,
            ref.start,
            ref.end,
            anticlockwise=ref.anticlockwise,
            color=COLORS["reference_arc"],
            width=2.0,
        )
    if arcs.reference_label is not None:
        surface.text(
            arcs.reference_label.text,
            arcs.reference_label.position,
            color=COLORS["reference_arc"],
            font=ARC_FONT,
        )


def draw_hover_label(surface: RenderingSurface, label: HoverLabel) -> None:
    font = SELECTED_FONT if label.selected else HOVER_FONT
    background = COLORS["label_bg_selected"] if label.selected else COLORS["label_bg"]
    text_width = surface.measure_text(label.text, font)
    x, y = label.position
    surface.rect(x - text_width / 2 - 4, y - 10, text_width + 8, 20, color=background)
    surface.text(label.text, label.position, color=COLORS["hover"], font=font)


def draw_reference_triangle(surface: RenderingSurface, viewport: Viewport, point: Point) -> None:
    for start, end in reference_triangle(point, viewport):
        surface.line(start, end, color=COLORS["hover"], dash=REF_TRIANGLE_DASH)


def _draw_ray(
    surface: RenderingSurface,
    viewport: Viewport,
    tip: Point,
    color: str,
    width: float,
    arrow_size: float,
) -> None:
    surface.line(viewport.center, tip, color=color, width=width)
    surface.polygon(ray_arrow(viewport, tip, arrow_size), color=color)


def draw_pins(
    surface: RenderingSurface,
    viewport: Viewport,
    pins: PinStore,
    hovered_id: Optional[int],
    config: Optional[EngineConfig] = None,
) -> None:
    for pin in pins:
        selected = pin.id == pins.selected_id
        hovered = pin.id == hovered_id
        state = "selected" if selected else ("hovered" if hovered else "normal")
        color_key, width, arrow_size = _PIN_STYLES[state]
        color = COLORS[color_key]
        end = pin.endpoint(viewport)
        if selected or hovered:
            surface.line(viewport.center, end, color=color, width=width + 2, alpha=0.3)
        _draw_ray(surface, viewport, end, color, width, arrow_size)
        if selected or hovered:
            draw_hover_label(surface, hover_label(pin.angle_info, end, selected=selected, config=config))


def _draw_selected_highlight(
    surface: RenderingSurface,
    viewport: Viewport,
    pin: PinnedAngle,
    config: Optional[EngineConfig],
) -> None:
    end = pin.endpoint(viewport)
    _draw_ray(surface, viewport, end, COLORS["hover"], 3.0, 14.0)
    draw_hover_label(surface, hover_label(pin.angle_info, end, selected=True, config=config))


def draw_scene(
    surface: RenderingSurface,
    viewport: Viewport,
    options: DisplayOptions,
    pins: PinStore,
    *,
    active: bool,
    hovered_id: Optional[int] = None,
    current_info: Optional[AngleInfo] = None,
    current_point: Optional[Point] = None,
    config: Optional[EngineConfig] = None,
) -> None:
    """Clear ``surface`` and draw one complete frame."""

    cfg = config or get_engine_config()
    surface.clear(viewport.width, viewport.height)
    draw_grid(surface, viewport)
    draw_circle_and_axes(surface, viewport)
    draw_special_angles(surface, viewport, options, faded=active, config=cfg)

    selected = pins.selected()
    if selected is not None:
        if options.show_angle_arcs:
            draw_angle_arcs(surface, compute_angle_arcs(selected.angle_info, viewport, config=cfg))
        if options.show_ref_triangle:
            draw_reference_triangle(surface, viewport, selected.endpoint(viewport))

    draw_pins(surface, viewport, pins, hovered_id, cfg)

    if active and selected is None and current_info is not None and current_point is not None:
        if options.show_ref_triangle:
            draw_reference_triangle(surface, viewport, current_point)
        _draw_ray(surface, viewport, current_point, COLORS["hover"], 2.0, cfg.arrow_size)
        draw_hover_label(surface, hover_label(current_info, current_point, config=cfg))
        if options.show_angle_arcs:
            draw_angle_arcs(surface, compute_angle_arcs(current_info, viewport, config=cfg))

    if selected is not None:
        _draw_selected_highlight(surface, viewport, selected, cfg)
    logger.debug("Drew frame: active=%s pins=%d selected=%s", active, len(pins), pins.selected_id)
