"""Text shown in the info panel and the pinned-angle list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .engine import AngleEngine, AngleInfo
from .formatting import (
    format_coords,
    format_decimal,
    format_degrees,
    format_radians,
)
from .options import DisplayOptions
from .pins import PinnedAngle

PLACEHOLDER = "-"


@dataclass(frozen=True)
class AngleReadout:
    degrees: str
    radians: str
    coordinates: str
    sin: str
    cos: str
    tan: str
    csc: Optional[str]
    sec: Optional[str]
    cot: Optional[str]
    reference_angle: str
    quadrant: str
    is_exact: bool


@dataclass(frozen=True)
class PinRow:
    id: int
    label: str
    selected: bool


def _trig_text(info: AngleInfo, name: str) -> str:
    if info.is_exact:
        return getattr(info, f"{name}_str")
    return format_decimal(getattr(info, name), 3)


def build_readout(
    info: AngleInfo,
    options: DisplayOptions,
    *,
    engine: Optional[AngleEngine] = None,
) -> AngleReadout:
    engine = engine or AngleEngine()

    if info.is_exact:
        radians = f"{format_radians(info.radians)} rad"
    else:
        radians = f"{info.radians:.2f} rad"
    if info.is_exact and info.exact_coords_str:
        coordinates = info.exact_coords_str
    else:
        coordinates = format_coords(info.x, info.y)

    extra = options.show_extra_trig
    reference = PLACEHOLDER
    if options.show_ref_angle:
        ref = engine.reference_angle(info.radians)
        reference = f"{format_degrees(math.degrees(ref))} / {format_radians(ref)} rad"

    return AngleReadout(
        degrees=format_degrees(info.degrees),
        radians=radians,
        coordinates=coordinates,
        sin=_trig_text(info, "sin"),
        cos=_trig_text(info, "cos"),
        tan=_trig_text(info, "tan"),
        csc=_trig_text(info, "csc") if extra else None,
        sec=_trig_text(info, "sec") if extra else None,
        cot=_trig_text(info, "cot") if extra else None,
        reference_angle=reference,
        quadrant=engine.quadrant(info.radians) if options.show_quadrant else PLACEHOLDER,
        is_exact=info.is_exact,
    )


def pin_label(pin: PinnedAngle) -> str:
    return f"{format_degrees(pin.angle_info.degrees)} ({format_radians(pin.angle)})"


def build_pin_rows(pins: Iterable[PinnedAngle], selected_id: Optional[int]) -> List[PinRow]:
    return [PinRow(id=pin.id, label=pin_label(pin), selected=pin.id == selected_id) for pin in pins]
