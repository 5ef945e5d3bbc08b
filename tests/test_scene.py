import math

from unitcircle import AngleEngine, DisplayOptions, PinStore, RecordingSurface, Viewport, draw_scene
from unitcircle.scene import COLORS, MARKER_RADIUS


VIEWPORT = Viewport.from_size(400, 400)


def _draw(pins=None, *, active=False, angle=None, options=None, hovered_id=None):
    surface = RecordingSurface()
    info = AngleEngine().angle_info(angle) if angle is not None else None
    draw_scene(
        surface,
        VIEWPORT,
        options or DisplayOptions(),
        pins or PinStore(),
        active=active,
        hovered_id=hovered_id,
        current_info=info,
        current_point=VIEWPORT.point_at(angle) if angle is not None else None,
    )
    return surface


def _pin_store(*angles):
    store = PinStore()
    engine = AngleEngine()
    for angle in angles:
        store.create(angle, VIEWPORT.point_at(angle), engine.angle_info(angle))
    return store


def test_idle_frame_draws_static_layers() -> None:
    surface = _draw()

    assert surface.calls[0].op == "clear"
    circles = surface.ops("circle")
    assert circles[0].args["radius"] == 160.0
    markers = [c for c in circles if c.args["fill"]]
    assert len(markers) == 16
    assert all(c.args["radius"] == MARKER_RADIUS for c in markers)
    assert all(c.args["color"] == COLORS["static"] for c in markers)
    assert len(surface.texts()) == 32
    assert not surface.ops("arc")
    assert not surface.ops("polygon")


def test_grid_spacing_is_fifth_of_radius() -> None:
    surface = _draw()
    grid = [c for c in surface.ops("line") if c.args["color"] == COLORS["grid"]]
    xs = sorted({c.args["start"][0] for c in grid if c.args["start"][1] == 0.0})

    assert 200.0 in xs
    assert math.isclose(xs[xs.index(200.0) + 1] - 200.0, 32.0)


def test_active_frame_fades_specials_and_draws_live_angle() -> None:
    surface = _draw(active=True, angle=math.pi / 4)

    markers = [c for c in surface.ops("circle") if c.args["fill"]]
    assert all(c.args["color"] == COLORS["static_faded"] for c in markers)
    assert len(surface.ops("arc")) == 2
    assert len(surface.ops("polygon")) == 1
    dashed = [c for c in surface.ops("line") if c.args["dash"]]
    assert len(dashed) == 2
    texts = surface.texts()
    assert texts.count("45°") == 2
    assert "(√2/2, √2/2)" in texts
    assert surface.ops("rect")


def test_option_toggles_hide_arcs_and_triangle() -> None:
    options = DisplayOptions(show_angle_arcs=False, show_ref_triangle=False, show_coordinates=False)
    surface = _draw(active=True, angle=math.pi / 3, options=options)

    assert not surface.ops("arc")
    assert not [c for c in surface.ops("line") if c.args["dash"]]
    assert "(1/2, √3/2)" in surface.texts()
    assert len(surface.texts()) == 16 + 1


def test_pins_drawn_with_state_styles() -> None:
    pins = _pin_store(0.0, math.pi / 2)
    surface = _draw(pins, hovered_id=2)

    rays = [c for c in surface.ops("line") if c.args["start"] == VIEWPORT.center]
    normal = [c for c in rays if c.args["color"] == COLORS["pinned"]]
    hovered = [c for c in rays if c.args["color"] == COLORS["hover"]]
    assert len(normal) == 1 and normal[0].args["width"] == 1.0
    assert {c.args["alpha"] for c in hovered} == {0.3, 1.0}
    assert len(surface.ops("polygon")) == 2
    assert "(0, 1)" in surface.texts()


def test_selected_pin_draws_arcs_and_highlight_last() -> None:
    pins = _pin_store(2 * math.pi / 3)
    pins.toggle_select(1)
    surface = _draw(pins, active=True, angle=0.5)

    assert len(surface.ops("arc")) == 2
    last_text = surface.ops("text")[-1]
    assert last_text.args["text"] == "(-1/2, √3/2)"
    assert last_text.args["font"].startswith("bold")
    highlight = [c for c in surface.ops("line") if c.args["width"] == 3.0]
    assert len(highlight) == 1
    assert "(0.88, 0.48)" not in surface.texts()
