"""Configuration helpers for the angle engine and interaction controller."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Numeric tolerances and geometry factors shared by all components."""

    snap_tolerance: float = 0.02
    axis_tolerance: float = 1e-10
    division_epsilon: float = 1e-10
    exact_tolerance: float = 1e-4
    radians_tolerance: float = 0.001

    pin_click_threshold: float = 15.0
    interaction_radius_multiplier: float = 1.3
    angle_change_threshold: float = 0.001
    radius_factor: float = 0.4
    touch_slop: float = 0.0

    standard_arc_factor: float = 0.2
    reference_arc_factor: float = 0.35
    arc_label_offset_factor: float = 1.3
    standard_label_min_degrees: float = 0.1
    reference_label_min_radians: float = 0.01
    arrow_size: float = 10.0
    special_label_factor: float = 1.15
    hover_label_offset: float = 30.0
    selected_label_offset: float = 35.0


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)
