"""Interfaces of the collaborators driven by the controller, plus recorders.

The controller never touches a real canvas or widget tree. Hosts provide
objects satisfying these protocols; tests and the CLI use the recording
implementations below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from typing import Protocol

from .engine import AngleInfo
from .panel import AngleReadout, PinRow
from .pins import PinnedAngle

Point = Tuple[float, float]


class RenderingSurface(Protocol):
    def clear(self, width: float, height: float) -> None: ...

    def line(
        self,
        start: Point,
        end: Point,
        *,
        color: str,
        width: float = 1.0,
        dash: Optional[Sequence[float]] = None,
        alpha: float = 1.0,
    ) -> None: ...

    def arc(
        self,
        center: Point,
        radius: float,
        start: float,
        end: float,
        *,
        anticlockwise: bool = False,
        color: str,
        width: float = 1.0,
    ) -> None: ...

    def circle(
        self,
        center: Point,
        radius: float,
        *,
        color: str,
        fill: bool = False,
        width: float = 1.0,
    ) -> None: ...

    def polygon(self, points: Sequence[Point], *, color: str) -> None: ...

    def rect(self, x: float, y: float, width: float, height: float, *, color: str) -> None: ...

    def text(self, text: str, position: Point, *, color: str, font: str) -> None: ...

    def measure_text(self, text: str, font: str) -> float: ...


class InfoPanelSurface(Protocol):
    def show(self, info: AngleInfo, readout: AngleReadout) -> None: ...

    def clear(self) -> None: ...


class PinListSurface(Protocol):
    def update(self, pins: Sequence[PinnedAngle], selected_id: Optional[int], rows: Sequence[PinRow]) -> None: ...


@dataclass
class DrawCall:
    op: str
    args: Dict[str, Any] = field(default_factory=dict)


def font_size(font: str) -> float:
    """Pixel size parsed from a CSS-like font string such as ``"bold 14px Arial"``."""

    for token in font.split():
        if token.endswith("px"):
            try:
                return float(token[:-2])
            except ValueError:
                break
    return 12.0


class RecordingSurface:
    """Rendering surface that records every call instead of drawing."""

    char_width_factor = 0.6

    def __init__(self) -> None:
        self.calls: List[DrawCall] = []
        self.frames = 0

    def _record(self, op: str, **kwargs: Any) -> None:
        self.calls.append(DrawCall(op, kwargs))

    def clear(self, width: float, height: float) -> None:
        self.calls = []
        self.frames += 1
        self._record("clear", width=width, height=height)

    def line(self, start, end, *, color, width=1.0, dash=None, alpha=1.0) -> None:
        self._record("line", start=start, end=end, color=color, width=width, dash=dash, alpha=alpha)

    def arc(self, center, radius, start, end, *, anticlockwise=False, color, width=1.0) -> None:
        self._record(
            "arc",
            center=center,
            radius=radius,
            start=start,
            end=end,
            anticlockwise=anticlockwise,
            color=color,
            width=width,
        )

    def circle(self, center, radius, *, color, fill=False, width=1.0) -> None:
        self._record("circle", center=center, radius=radius, color=color, fill=fill, width=width)

    def polygon(self, points, *, color) -> None:
        self._record("polygon", points=tuple(points), color=color)

    def rect(self, x, y, width, height, *, color) -> None:
        self._record("rect", x=x, y=y, width=width, height=height, color=color)

    def text(self, text, position, *, color, font) -> None:
        self._record("text", text=text, position=position, color=color, font=font)

    def measure_text(self, text: str, font: str) -> float:
        return len(text) * font_size(font) * self.char_width_factor

    def ops(self, op: str) -> List[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def texts(self) -> List[str]:
        return [call.args["text"] for call in self.ops("text")]


class RecordingInfoPanel:
    def __init__(self) -> None:
        self.shown: List[Tuple[AngleInfo, AngleReadout]] = []
        self.clears = 0
        self.current: Optional[AngleReadout] = None

    def show(self, info: AngleInfo, readout: AngleReadout) -> None:
        self.shown.append((info, readout))
        self.current = readout

    def clear(self) -> None:
        self.clears += 1
        self.current = None


class RecordingPinList:
    def __init__(self) -> None:
        self.updates = 0
        self.rows: List[PinRow] = []
        self.selected_id: Optional[int] = None

    def update(self, pins, selected_id, rows) -> None:
        self.updates += 1
        self.rows = list(rows)
        self.selected_id = selected_id
