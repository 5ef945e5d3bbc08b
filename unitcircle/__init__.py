from .config import EngineConfig, get_engine_config, set_engine_config
from .options import DisplayOptions, UnknownOptionError
from .transform import Viewport
from .formatting import (
    exact_trig_string,
    format_coords,
    format_decimal,
    format_degrees,
    format_radians,
)
from .special_angles import SPECIAL_ANGLES, SpecialAngle, find_special_angle
from .engine import AngleEngine, AngleInfo, Quadrant
from .pins import PinNotFoundError, PinnedAngle, PinStore
from .annotations import (
    AngleArcs,
    ArcLabel,
    ArcSpec,
    HoverLabel,
    compute_angle_arcs,
    hover_label,
    reference_triangle,
    special_angle_marks,
)
from .panel import AngleReadout, PinRow, build_pin_rows, build_readout
from .surfaces import (
    InfoPanelSurface,
    PinListSurface,
    RecordingInfoPanel,
    RecordingPinList,
    RecordingSurface,
    RenderingSurface,
)
from .scene import draw_scene
from .controller import InteractionController, InteractionState, UnknownEventError
from .tikz import TikzSurface, generate_tikz_code, generate_tikz_document

__all__ = [
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'DisplayOptions',
    'UnknownOptionError',
    'Viewport',
    'exact_trig_string',
    'format_coords',
    'format_decimal',
    'format_degrees',
    'format_radians',
    'SPECIAL_ANGLES',
    'SpecialAngle',
    'find_special_angle',
    'AngleEngine',
    'AngleInfo',
    'Quadrant',
    'PinNotFoundError',
    'PinnedAngle',
    'PinStore',
    'AngleArcs',
    'ArcLabel',
    'ArcSpec',
    'HoverLabel',
    'compute_angle_arcs',
    'hover_label',
    'reference_triangle',
    'special_angle_marks',
    'AngleReadout',
    'PinRow',
    'build_pin_rows',
    'build_readout',
    'InfoPanelSurface',
    'PinListSurface',
    'RecordingInfoPanel',
    'RecordingPinList',
    'RecordingSurface',
    'RenderingSurface',
    'draw_scene',
    'InteractionController',
    'InteractionState',
    'UnknownEventError',
    'TikzSurface',
    'generate_tikz_code',
    'generate_tikz_document',
]
