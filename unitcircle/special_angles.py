"""Catalogue of the sixteen unit-circle angles with exact values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .formatting import exact_trig_string, format_exact_coords

_H2 = math.sqrt(2) / 2
_H3 = math.sqrt(3) / 2


@dataclass(frozen=True)
class SpecialAngle:
    radians: float
    degrees: float
    x: float
    y: float
    exact_coords_str: str
    sin: float
    cos: float
    tan: float
    csc: float
    sec: float
    cot: float
    sin_str: str
    cos_str: str
    tan_str: str
    csc_str: str
    sec_str: str
    cot_str: str

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.x, self.y)


def _ratio(num: float, den: float) -> float:
    return math.inf if den == 0 else num / den


def _make(numerator: int, denominator: int, degrees: int, x: float, y: float) -> SpecialAngle:
    values = {
        "sin": y,
        "cos": x,
        "tan": _ratio(y, x),
        "csc": _ratio(1, y),
        "sec": _ratio(1, x),
        "cot": _ratio(x, y),
    }
    strings = {f"{name}_str": exact_trig_string(value) for name, value in values.items()}
    return SpecialAngle(
        radians=numerator * math.pi / denominator,
        degrees=float(degrees),
        x=x,
        y=y,
        exact_coords_str=format_exact_coords([exact_trig_string(x), exact_trig_string(y)]),
        **values,
        **strings,
    )


SPECIAL_ANGLES: Tuple[SpecialAngle, ...] = (
    _make(0, 1, 0, 1.0, 0.0),
    _make(1, 6, 30, _H3, 0.5),
    _make(1, 4, 45, _H2, _H2),
    _make(1, 3, 60, 0.5, _H3),
    _make(1, 2, 90, 0.0, 1.0),
    _make(2, 3, 120, -0.5, _H3),
    _make(3, 4, 135, -_H2, _H2),
    _make(5, 6, 150, -_H3, 0.5),
    _make(1, 1, 180, -1.0, 0.0),
    _make(7, 6, 210, -_H3, -0.5),
    _make(5, 4, 225, -_H2, -_H2),
    _make(4, 3, 240, -0.5, -_H3),
    _make(3, 2, 270, 0.0, -1.0),
    _make(5, 3, 300, 0.5, -_H3),
    _make(7, 4, 315, _H2, -_H2),
    _make(11, 6, 330, _H3, -0.5),
)

_RADIANS = np.array([entry.radians for entry in SPECIAL_ANGLES], dtype=float)


def find_special_angle(angle: float, tolerance: float) -> Optional[SpecialAngle]:
    """Return the table entry circularly closest to ``angle`` if under ``tolerance``."""

    # circular distance in [0, pi] for any real angle
    diff = np.abs((_RADIANS - angle + math.pi) % (2 * math.pi) - math.pi)
    idx = int(np.argmin(diff))
    if diff[idx] < tolerance:
        return SPECIAL_ANGLES[idx]
    return None
