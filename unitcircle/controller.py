"""Pointer-driven state machine tying the engine, pins and surfaces together."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .config import EngineConfig, get_engine_config
from .engine import AngleEngine, AngleInfo
from .math_utils import distance, normalize_angle
from .options import PANEL_ONLY_OPTIONS, PASSIVE_OPTIONS, DisplayOptions
from .panel import build_pin_rows, build_readout
from .pins import PinNotFoundError, PinStore
from .scene import draw_scene
from .surfaces import (
    InfoPanelSurface,
    PinListSurface,
    RecordingInfoPanel,
    RecordingPinList,
    RecordingSurface,
    RenderingSurface,
)
from .transform import Viewport

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

IDLE = "Idle"
HOVERING = "Hovering"
PIN_SELECTED = "PinSelected"

CURSOR_DEFAULT = "crosshair"
CURSOR_PIN = "pointer"

MOUSE = "mouse"
TOUCH = "touch"

# event kind -> (action, pointer source); ``pointer*`` kinds read the source from meta
_EVENT_KINDS: Dict[str, Tuple[str, Optional[str]]] = {
    "pointerdown": ("down", None),
    "pointermove": ("move", None),
    "pointerup": ("up", None),
    "pointerleave": ("end", None),
    "pointercancel": ("end", None),
    "mousedown": ("down", MOUSE),
    "mousemove": ("move", MOUSE),
    "mouseup": ("up", MOUSE),
    "mouseleave": ("end", MOUSE),
    "touchstart": ("down", TOUCH),
    "touchmove": ("move", TOUCH),
    "touchend": ("up", TOUCH),
    "touchcancel": ("end", TOUCH),
}


class UnknownEventError(ValueError):
    """Raised for an event kind the controller does not understand."""


@dataclass
class InteractionState:
    is_interaction_active: bool = False
    pointer_down: bool = False
    pointer_canvas_pos: Point = (0.0, 0.0)
    current_angle: float = 0.0
    current_point: Point = (0.0, 0.0)
    hovered_pin_id: Optional[int] = None
    touch_moved: bool = False
    touch_start: Optional[Point] = None
    cursor: str = CURSOR_DEFAULT


class InteractionController:
    """Consumes pointer events and keeps display surfaces in sync.

    Every handler runs to completion and finishes with any redraw or panel
    refresh it caused; nothing is deferred.
    """

    def __init__(
        self,
        viewport: Viewport,
        options: Optional[DisplayOptions] = None,
        *,
        surface: Optional[RenderingSurface] = None,
        panel: Optional[InfoPanelSurface] = None,
        pin_list: Optional[PinListSurface] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config or get_engine_config()
        self.viewport = viewport
        self.options = options or DisplayOptions()
        self.surface = surface if surface is not None else RecordingSurface()
        self.panel = panel if panel is not None else RecordingInfoPanel()
        self.pin_list = pin_list if pin_list is not None else RecordingPinList()
        self.engine = AngleEngine(self.config)
        self.pins = PinStore()
        self.interaction = InteractionState(current_point=viewport.point_at(0.0))
        self._handlers: Dict[str, Callable[[float, float, str], None]] = {
            "down": self._on_down,
            "move": self._on_move,
            "up": self._on_up,
        }
        self.update_pin_list()
        self.redraw()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> str:
        if self.pins.selected() is not None:
            return PIN_SELECTED
        if self.interaction.is_interaction_active:
            return HOVERING
        return IDLE

    @property
    def selected_pin_id(self) -> Optional[int]:
        pin = self.pins.selected()
        return pin.id if pin is not None else None

    def current_angle_info(self) -> AngleInfo:
        return self.engine.angle_info(
            self.interaction.current_angle, snap=self.options.snap_to_angles
        )

    def _inside(self, x: float, y: float) -> bool:
        return self.viewport.within(x, y, self.config.interaction_radius_multiplier)

    def _nearest_pin(self, x: float, y: float) -> Optional[int]:
        return self.pins.find_nearest(x, y, self.viewport, self.config.pin_click_threshold)

    # ------------------------------------------------------------------
    # Event entry point
    # ------------------------------------------------------------------

    def handle_event(
        self,
        kind: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
        meta: Optional[Mapping[str, Any]] = None,
    ) -> None:
        try:
            action, source = _EVENT_KINDS[kind]
        except KeyError:
            raise UnknownEventError(f"unknown pointer event kind {kind!r}") from None
        if source is None:
            source = str((meta or {}).get("pointer_type", MOUSE))

        if action == "end":
            self._pointer_end()
            return
        if x is None or y is None:
            logger.debug("Ignoring %s without coordinates", kind)
            return
        self._handlers[action](float(x), float(y), source)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_down(self, x: float, y: float, source: str) -> None:
        if source == TOUCH:
            self.interaction.touch_moved = False
            self.interaction.touch_start = (x, y)
        self.interaction.pointer_down = True
        self.interaction.is_interaction_active = self._inside(x, y)
        if self.interaction.is_interaction_active:
            self._pointer_move(x, y)

    def _on_move(self, x: float, y: float, source: str) -> None:
        if source == TOUCH:
            start = self.interaction.touch_start
            if start is None or distance(start, (x, y)) > self.config.touch_slop:
                self.interaction.touch_moved = True
        self._pointer_move(x, y)

    def _pointer_move(self, x: float, y: float) -> None:
        st = self.interaction
        st.pointer_canvas_pos = (x, y)
        needs_redraw = False
        needs_info = False

        nearest = self._nearest_pin(x, y)
        if nearest != st.hovered_pin_id:
            logger.debug("Hovered pin -> %s", nearest)
            st.hovered_pin_id = nearest
            st.cursor = CURSOR_PIN if nearest is not None else CURSOR_DEFAULT
            needs_redraw = True

        # the tracked angle stays frozen while a pin is selected
        if self.pins.selected() is not None:
            if needs_redraw:
                self.redraw()
            return

        was_active = st.is_interaction_active
        st.is_interaction_active = self._inside(x, y)
        if was_active != st.is_interaction_active:
            logger.debug("Interaction active -> %s", st.is_interaction_active)
            needs_redraw = True
            needs_info = True

        if st.is_interaction_active:
            mx, my = self.viewport.to_math(x, y)
            angle = normalize_angle(math.atan2(my, mx))
            if self.options.snap_to_angles:
                angle = self.engine.snap(angle)
            if abs(st.current_angle - angle) > self.config.angle_change_threshold:
                st.current_angle = angle
                st.current_point = self.viewport.point_at(angle)
                needs_redraw = True
                needs_info = True

        if needs_info:
            self.refresh_info_panel()
        if needs_redraw:
            self.redraw()

    def _on_up(self, x: float, y: float, source: str) -> None:
        st = self.interaction
        if not st.pointer_down:
            logger.debug("Ignoring pointer up without a preceding down")
            self._pointer_end()
            return
        st.pointer_down = False
        clicked = self._nearest_pin(x, y)
        inside = self._inside(x, y)
        was_active = st.is_interaction_active

        if clicked is not None:
            self.pins.toggle_select(clicked)
            self._after_selection_change()
            self._pointer_move(x, y)
            return

        has_selection = self.pins.selected() is not None
        if has_selection and was_active and inside:
            # consumes the click: pinning a new angle takes a second click
            self.pins.select(None)
            logger.info("Deselected pin")
            self._after_selection_change()
            self._pointer_move(x, y)
            return

        if not has_selection and was_active and inside:
            if source != TOUCH or not st.touch_moved:
                info = self.current_angle_info()
                pin_id = self.pins.create(st.current_angle, st.current_point, info)
                self.pins.select(pin_id)
                self._after_selection_change()

        self._pointer_end()

    def _pointer_end(self) -> None:
        st = self.interaction
        if st.is_interaction_active or st.hovered_pin_id is not None:
            st.is_interaction_active = False
            st.hovered_pin_id = None
            st.cursor = CURSOR_DEFAULT
            self.redraw()
            self.refresh_info_panel()
        st.pointer_down = False
        st.touch_moved = False
        st.touch_start = None

    def _after_selection_change(self) -> None:
        self.update_pin_list()
        self.refresh_info_panel()
        self.redraw()

    # ------------------------------------------------------------------
    # Pin list and option callbacks
    # ------------------------------------------------------------------

    def delete_pin(self, pin_id: int) -> None:
        was_selected = self.pins.selected_id == pin_id
        try:
            self.pins.delete(pin_id)
        except PinNotFoundError:
            logger.warning("Ignoring delete of unknown pin #%s", pin_id)
            return
        if was_selected:
            self.refresh_info_panel()
        self.update_pin_list()
        self.redraw()

    def select_pin(self, pin_id: int) -> None:
        try:
            self.pins.toggle_select(pin_id)
        except PinNotFoundError:
            logger.warning("Ignoring selection of unknown pin #%s", pin_id)
            return
        self._after_selection_change()

    def clear_pins(self) -> None:
        self.pins.clear()
        self._after_selection_change()

    def set_option(self, name: str, value: bool) -> None:
        self.options.set(name, value)
        if name in PASSIVE_OPTIONS:
            return
        if name in PANEL_ONLY_OPTIONS:
            self.refresh_info_panel()
        else:
            self.redraw()

    def resize(self, width: float, height: float) -> None:
        self.viewport = Viewport.from_size(width, height, config=self.config)
        self.interaction.current_point = self.viewport.point_at(self.interaction.current_angle)
        logger.debug("Resized viewport to %sx%s", width, height)
        self.redraw()

    # ------------------------------------------------------------------
    # Surface updates
    # ------------------------------------------------------------------

    def refresh_info_panel(self) -> None:
        st = self.interaction
        if st.is_interaction_active:
            info = self.current_angle_info()
        else:
            pin = self.pins.selected()
            if pin is None:
                self.panel.clear()
                return
            info = pin.angle_info
        self.panel.show(info, build_readout(info, self.options, engine=self.engine))

    def update_pin_list(self) -> None:
        pins = self.pins.pins
        selected_id = self.pins.selected_id
        self.pin_list.update(pins, selected_id, build_pin_rows(pins, selected_id))

    def redraw(self) -> None:
        self.render(self.surface)

    def render(self, surface: RenderingSurface) -> None:
        """Draw the current frame onto ``surface``."""

        st = self.interaction
        draw_scene(
            surface,
            self.viewport,
            self.options,
            self.pins,
            active=st.is_interaction_active,
            hovered_id=st.hovered_pin_id,
            current_info=self.current_angle_info() if st.is_interaction_active else None,
            current_point=st.current_point,
            config=self.config,
        )
