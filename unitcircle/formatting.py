"""Exact and approximate text for trigonometric values and angles."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from .config import get_engine_config

UNDEFINED = "undefined"

_SQRT2 = math.sqrt(2)
_SQRT3 = math.sqrt(3)

EXACT_CONSTANTS: Tuple[Tuple[float, str], ...] = (
    (0.5, "1/2"),
    (_SQRT3 / 2, "√3/2"),
    (_SQRT2 / 2, "√2/2"),
    (1 / _SQRT3, "1/√3"),
    (_SQRT3, "√3"),
)

# (numerator, denominator) pairs of π checked by format_radians, in table order
PI_FRACTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 6),
    (1, 4),
    (1, 3),
    (1, 2),
    (2, 3),
    (3, 4),
    (5, 6),
    (7, 6),
    (5, 4),
    (4, 3),
    (3, 2),
    (5, 3),
    (7, 4),
    (11, 6),
)


def _fixed(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}"
    # no negative zero in rendered text
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


def exact_trig_string(value: float, *, tolerance: Optional[float] = None) -> str:
    """Return the exact symbolic form of ``value`` or a 3-decimal fallback.

    Total over all floats: infinities and NaN render as ``"undefined"``.
    """

    if value == 0:
        return "0"
    if value == 1:
        return "1"
    if value == -1:
        return "-1"
    if math.isinf(value) or math.isnan(value):
        return UNDEFINED

    tol = get_engine_config().exact_tolerance if tolerance is None else tolerance
    for constant, text in EXACT_CONSTANTS:
        if abs(value - constant) < tol:
            return text
        if abs(value + constant) < tol:
            return "-" + text
    return _fixed(value, 3)


def format_radians(angle: float, *, tolerance: Optional[float] = None) -> str:
    """Render ``angle`` as a multiple of π when it matches a canonical fraction."""

    tol = get_engine_config().radians_tolerance if tolerance is None else tolerance
    pi = math.pi
    if abs(angle) < tol:
        return "0"
    if abs(angle - pi) < tol:
        return "π"
    if abs(angle - 2 * pi) < tol:
        return "2π"
    for num, den in PI_FRACTIONS:
        if abs(angle - num * pi / den) < tol:
            return f"π/{den}" if num == 1 else f"{num}π/{den}"
    return _fixed(angle, 2)


def format_decimal(value: float, digits: int = 3) -> str:
    """Approximate display used for inexact trig values."""

    if math.isinf(value) or math.isnan(value):
        return UNDEFINED
    return _fixed(value, digits)


def format_degrees(degrees: float, digits: int = 1) -> str:
    return f"{_fixed(degrees, digits)}°"


def format_coords(x: float, y: float, digits: int = 2) -> str:
    return f"({_fixed(x, digits)}, {_fixed(y, digits)})"


def format_exact_coords(parts: Sequence[str]) -> str:
    return "(" + ", ".join(parts) + ")"
