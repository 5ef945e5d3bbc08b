"""In-memory collection of user-pinned angles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import get_engine_config
from .engine import AngleInfo
from .math_utils import distance, distance_to_segment
from .transform import Viewport

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class PinNotFoundError(KeyError):
    """Raised when a pin id does not exist in the store."""


@dataclass(frozen=True)
class PinnedAngle:
    id: int
    angle: float
    point: Point  # canvas position when the pin was created
    angle_info: AngleInfo

    def endpoint(self, viewport: Viewport) -> Point:
        """Terminal point of the pin's ray for the current viewport."""

        return viewport.point_at(self.angle)


class PinStore:
    """Ordered pins with exclusive selection and never-reused ids."""

    def __init__(self) -> None:
        self._pins: List[PinnedAngle] = []
        self._next_id = 1
        self.selected_id: Optional[int] = None

    def __len__(self) -> int:
        return len(self._pins)

    def __iter__(self) -> Iterator[PinnedAngle]:
        return iter(list(self._pins))

    def __contains__(self, pin_id: object) -> bool:
        return any(pin.id == pin_id for pin in self._pins)

    @property
    def pins(self) -> Tuple[PinnedAngle, ...]:
        return tuple(self._pins)

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(self, angle: float, point: Point, info: AngleInfo) -> int:
        pin_id = self._next_id
        self._next_id += 1
        self._pins.append(
            PinnedAngle(id=pin_id, angle=angle, point=(point[0], point[1]), angle_info=info)
        )
        logger.info("Pinned angle #%d at %.4f rad (exact=%s)", pin_id, angle, info.is_exact)
        return pin_id

    def get(self, pin_id: int) -> PinnedAngle:
        for pin in self._pins:
            if pin.id == pin_id:
                return pin
        raise PinNotFoundError(pin_id)

    def delete(self, pin_id: int) -> None:
        remaining = [pin for pin in self._pins if pin.id != pin_id]
        if len(remaining) == len(self._pins):
            raise PinNotFoundError(pin_id)
        self._pins = remaining
        if self.selected_id == pin_id:
            self.selected_id = None
        logger.info("Deleted pin #%d", pin_id)

    def clear(self) -> None:
        self._pins = []
        self.selected_id = None
        logger.info("Cleared all pins")

    def toggle_select(self, pin_id: int) -> Optional[int]:
        """Select ``pin_id``, or deselect it when it is already selected."""

        if pin_id not in self:
            raise PinNotFoundError(pin_id)
        self.selected_id = None if self.selected_id == pin_id else pin_id
        logger.info("Selected pin -> %s", self.selected_id)
        return self.selected_id

    def select(self, pin_id: Optional[int]) -> None:
        if pin_id is not None and pin_id not in self:
            raise PinNotFoundError(pin_id)
        self.selected_id = pin_id

    def selected(self) -> Optional[PinnedAngle]:
        """Return the selected pin; a dangling id is cleared and reads as none."""

        if self.selected_id is None:
            return None
        for pin in self._pins:
            if pin.id == self.selected_id:
                return pin
        logger.warning("Selected pin #%s no longer exists; clearing selection", self.selected_id)
        self.selected_id = None
        return None

    def find_nearest(
        self,
        x: float,
        y: float,
        viewport: Viewport,
        threshold: Optional[float] = None,
    ) -> Optional[int]:
        """Id of the pin whose endpoint or ray passes closest to ``(x, y)``.

        Only candidates strictly closer than ``threshold`` pixels qualify. For
        each pin the endpoint is checked first; the ray is only considered when
        the endpoint is not closer than the running minimum.
        """

        if not self._pins:
            return None
        limit = get_engine_config().pin_click_threshold if threshold is None else threshold
        nearest_id: Optional[int] = None
        min_distance = limit
        target = (x, y)
        for pin in self._pins:
            end = pin.endpoint(viewport)
            point_distance = distance(end, target)
            if point_distance < min_distance:
                min_distance = point_distance
                nearest_id = pin.id
                continue
            line_distance = distance_to_segment(viewport.center, end, target)
            if line_distance < min_distance:
                min_distance = line_distance
                nearest_id = pin.id
        return nearest_id
