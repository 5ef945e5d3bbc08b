import logging
from dataclasses import dataclass

import numpy as np
import pytest

from unitcircle import DisplayOptions, EngineConfig, UnknownOptionError, get_engine_config, set_engine_config
from unitcircle.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from unitcircle.options import PANEL_ONLY_OPTIONS, PASSIVE_OPTIONS


def test_engine_config_round_trip_is_copied() -> None:
    original = get_engine_config()
    try:
        custom = EngineConfig(snap_tolerance=0.05)
        set_engine_config(custom)
        custom.snap_tolerance = 1.0

        assert get_engine_config().snap_tolerance == 0.05
        get_engine_config().snap_tolerance = 2.0
        assert get_engine_config().snap_tolerance == 0.05
    finally:
        set_engine_config(original)


def test_display_option_defaults_and_set() -> None:
    options = DisplayOptions()

    assert options.snap_to_angles and not options.show_extra_trig
    options.set("show_quadrant", False)
    assert options.as_dict()["show_quadrant"] is False
    with pytest.raises(UnknownOptionError):
        options.set("show_nothing", True)


def test_option_groups_are_known_names() -> None:
    names = set(DisplayOptions.names())

    assert PANEL_ONLY_OPTIONS <= names
    assert PASSIVE_OPTIONS <= names
    assert not PANEL_ONLY_OPTIONS & PASSIVE_OPTIONS


@dataclass(frozen=True)
class _Record:
    id: int
    radians: float
    note: str = "hidden"


def test_safe_repr_summarizes_records_and_arrays() -> None:
    assert _safe_repr(_Record(3, 0.5)) == "_Record(id=3, radians=0.5)"
    assert _safe_repr(np.array([1.0, 3.0])) == "ndarray(shape=(2,), min=1, max=3)"
    assert _safe_repr(list(range(10))).endswith("... (10 total)]")


def test_debug_log_call_logs_entry_result_and_errors(caplog) -> None:
    logger = logging.getLogger("unitcircle.tests.trace")

    @debug_log_call(logger)
    def halve(value):
        if value < 0:
            raise ValueError("negative")
        return value / 2

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert halve(4) == 2
        with pytest.raises(ValueError):
            halve(-1)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.endswith("halve(4)") for m in messages)
    assert any(m.endswith("halve = 2.0") for m in messages)
    assert any(m.startswith("!! ") and m.endswith("halve raised") for m in messages)


def test_debug_log_call_is_silent_above_debug(caplog) -> None:
    logger = logging.getLogger("unitcircle.tests.quiet")

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.INFO, logger=logger.name):
        assert double(3) == 6
    assert not caplog.records


def test_apply_debug_logging_wraps_static_methods() -> None:
    class Probe:
        @staticmethod
        def ping():
            return "pong"

    namespace = {"__name__": __name__, "Probe": Probe}
    apply_debug_logging(namespace)

    assert getattr(Probe.__dict__["ping"].__func__, "_debug_logging_wrapped", False)
    assert Probe.ping() == "pong"
