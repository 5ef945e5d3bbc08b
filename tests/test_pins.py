import math

import pytest

from unitcircle import AngleEngine, PinNotFoundError, PinStore, Viewport


VIEWPORT = Viewport.from_size(400, 400)  # center (200, 200), radius 160


def _pin(store: PinStore, angle: float) -> int:
    info = AngleEngine().angle_info(angle)
    return store.create(angle, VIEWPORT.point_at(angle), info)


def test_ids_are_monotonic_and_never_reused() -> None:
    store = PinStore()
    first = _pin(store, 0.0)
    second = _pin(store, math.pi / 2)
    store.delete(first)
    third = _pin(store, math.pi)

    assert (first, second, third) == (1, 2, 3)
    assert [pin.id for pin in store] == [2, 3]
    assert store.next_id == 4


def test_toggle_select_is_exclusive() -> None:
    store = PinStore()
    a = _pin(store, 0.0)
    b = _pin(store, math.pi)

    assert store.toggle_select(a) == a
    assert store.toggle_select(b) == b
    assert store.selected().id == b
    assert store.toggle_select(b) is None
    assert store.selected() is None


def test_deleting_selected_pin_clears_selection() -> None:
    store = PinStore()
    a = _pin(store, 0.0)
    store.toggle_select(a)
    store.delete(a)

    assert store.selected_id is None
    assert len(store) == 0


def test_unknown_ids_raise() -> None:
    store = PinStore()
    _pin(store, 0.0)

    with pytest.raises(PinNotFoundError):
        store.delete(42)
    with pytest.raises(PinNotFoundError):
        store.toggle_select(42)
    with pytest.raises(PinNotFoundError):
        store.get(42)


def test_dangling_selection_reads_as_none() -> None:
    store = PinStore()
    store.selected_id = 99

    assert store.selected() is None
    assert store.selected_id is None


def test_clear_removes_pins_but_keeps_id_counter() -> None:
    store = PinStore()
    a = _pin(store, 0.0)
    store.toggle_select(a)
    store.clear()

    assert len(store) == 0
    assert store.selected_id is None
    assert _pin(store, 1.0) == 2


def test_find_nearest_prefers_endpoint_then_ray() -> None:
    store = PinStore()
    pin_id = _pin(store, 0.0)  # endpoint at (360, 200)

    assert store.find_nearest(362, 200, VIEWPORT) == pin_id
    assert store.find_nearest(280, 205, VIEWPORT) == pin_id
    assert store.find_nearest(280, 230, VIEWPORT) is None
    assert store.find_nearest(400, 200, VIEWPORT) is None


def test_find_nearest_uses_strict_threshold() -> None:
    store = PinStore()
    _pin(store, 0.0)

    assert store.find_nearest(280, 215, VIEWPORT, threshold=15.0) is None
    assert store.find_nearest(280, 214, VIEWPORT, threshold=15.0) == 1


def test_find_nearest_picks_closest_of_several() -> None:
    store = PinStore()
    east = _pin(store, 0.0)
    north = _pin(store, math.pi / 2)

    assert store.find_nearest(205, 60, VIEWPORT) == north
    assert store.find_nearest(340, 196, VIEWPORT) == east


def test_find_nearest_on_empty_store() -> None:
    assert PinStore().find_nearest(200, 200, VIEWPORT) is None


def test_endpoint_follows_viewport() -> None:
    store = PinStore()
    _pin(store, 0.0)
    pin = store.get(1)

    assert pin.endpoint(Viewport.from_size(800, 800)) == (720.0, 400.0)
    assert pin.point == (360.0, 200.0)


def test_endpoint_hit_beats_nearby_ray_of_earlier_pin() -> None:
    store = PinStore()
    tilted = _pin(store, math.radians(5))
    east = _pin(store, 0.0)

    assert store.find_nearest(360, 200, VIEWPORT) == east
    assert store.find_nearest(*store.get(tilted).endpoint(VIEWPORT), VIEWPORT) == tilted
