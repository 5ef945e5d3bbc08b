"""Display toggles polled by the renderer and the info panel."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Tuple


class UnknownOptionError(AttributeError):
    """Raised when a toggle name does not match any display option."""


@dataclass
class DisplayOptions:
    show_degrees: bool = True
    show_radians: bool = True
    show_coordinates: bool = True
    show_ref_triangle: bool = True
    snap_to_angles: bool = True
    show_extra_trig: bool = False
    show_ref_angle: bool = True
    show_quadrant: bool = True
    show_angle_arcs: bool = True

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def set(self, name: str, value: bool) -> None:
        if name not in self.names():
            raise UnknownOptionError(f'unknown display option "{name}"')
        setattr(self, name, bool(value))

    def as_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in self.names()}


# Toggles that only affect the info panel; everything else changes the drawing.
PANEL_ONLY_OPTIONS = frozenset({"show_extra_trig", "show_ref_angle", "show_quadrant"})
# Toggles that change neither the drawing nor the panel until the next move.
PASSIVE_OPTIONS = frozenset({"snap_to_angles"})
