"""Angle normalization, snapping, classification and trig derivation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from typing import Literal

from .config import EngineConfig, get_engine_config
from .formatting import exact_trig_string
from .logging_utils import apply_debug_logging
from .math_utils import TAU, normalize_angle
from .special_angles import SpecialAngle, find_special_angle

logger = logging.getLogger(__name__)

Quadrant = Literal["I", "II", "III", "IV", "X-Axis", "Y-Axis"]

QUADRANT_I: Quadrant = "I"
QUADRANT_II: Quadrant = "II"
QUADRANT_III: Quadrant = "III"
QUADRANT_IV: Quadrant = "IV"
X_AXIS: Quadrant = "X-Axis"
Y_AXIS: Quadrant = "Y-Axis"


@dataclass(frozen=True)
class AngleInfo:
    """Derived facts about one angle; never stored beyond a pin snapshot."""

    radians: float
    degrees: float
    x: float
    y: float
    exact_coords_str: Optional[str]
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
    is_exact: bool
    special: Optional[SpecialAngle] = None

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_special(cls, special: SpecialAngle) -> "AngleInfo":
        return cls(
            radians=special.radians,
            degrees=special.degrees,
            x=special.x,
            y=special.y,
            exact_coords_str=special.exact_coords_str,
            sin=special.sin,
            cos=special.cos,
            tan=special.tan,
            csc=special.csc,
            sec=special.sec,
            cot=special.cot,
            sin_str=special.sin_str,
            cos_str=special.cos_str,
            tan_str=special.tan_str,
            csc_str=special.csc_str,
            sec_str=special.sec_str,
            cot_str=special.cot_str,
            is_exact=True,
            special=special,
        )


class AngleEngine:
    """Pure angle computations parameterized by an :class:`EngineConfig`."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or get_engine_config()

    @staticmethod
    def normalize(angle: float) -> float:
        return normalize_angle(angle)

    def find_closest_special_angle(self, angle: float) -> Optional[SpecialAngle]:
        return find_special_angle(angle, self.config.snap_tolerance)

    def snap(self, angle: float) -> float:
        special = self.find_closest_special_angle(angle)
        if special is None:
            return angle
        return special.radians

    def angle_info(self, angle: float, *, snap: bool = True) -> AngleInfo:
        """Return exact info for a nearby special angle, else computed values.

        ``snap=False`` skips the special-angle lookup, matching a disabled
        snap toggle.
        """

        if snap:
            special = self.find_closest_special_angle(angle)
            if special is not None:
                return AngleInfo.from_special(special)

        eps = self.config.division_epsilon
        x = math.cos(angle)
        y = math.sin(angle)
        tan = math.inf if abs(x) < eps else y / x
        csc = math.inf if abs(y) < eps else 1 / y
        sec = math.inf if abs(x) < eps else 1 / x
        cot = math.inf if abs(y) < eps else x / y
        return AngleInfo(
            radians=angle,
            degrees=math.degrees(angle),
            x=x,
            y=y,
            exact_coords_str=None,
            sin=y,
            cos=x,
            tan=tan,
            csc=csc,
            sec=sec,
            cot=cot,
            sin_str=exact_trig_string(y),
            cos_str=exact_trig_string(x),
            tan_str=exact_trig_string(tan),
            csc_str=exact_trig_string(csc),
            sec_str=exact_trig_string(sec),
            cot_str=exact_trig_string(cot),
            is_exact=False,
        )

    @staticmethod
    def reference_angle(angle: float) -> float:
        a = normalize_angle(angle)
        if a <= math.pi / 2:
            return a
        if a <= math.pi:
            return math.pi - a
        if a <= 3 * math.pi / 2:
            return a - math.pi
        return TAU - a

    def quadrant(self, angle: float) -> Quadrant:
        a = normalize_angle(angle)
        tol = self.config.axis_tolerance
        if abs(a) < tol or abs(a - TAU) < tol or abs(a - math.pi) < tol:
            return X_AXIS
        if abs(a - math.pi / 2) < tol or abs(a - 3 * math.pi / 2) < tol:
            return Y_AXIS
        if a < math.pi / 2:
            return QUADRANT_I
        if a < math.pi:
            return QUADRANT_II
        if a < 3 * math.pi / 2:
            return QUADRANT_III
        return QUADRANT_IV


def normalize(angle: float) -> float:
    return normalize_angle(angle)


def snap(angle: float) -> float:
    return AngleEngine().snap(angle)


def angle_info(angle: float, *, snap: bool = True) -> AngleInfo:
    return AngleEngine().angle_info(angle, snap=snap)


def reference_angle(angle: float) -> float:
    return AngleEngine.reference_angle(angle)


def quadrant(angle: float) -> Quadrant:
    return AngleEngine().quadrant(angle)


apply_debug_logging(globals(), logger=logger)
