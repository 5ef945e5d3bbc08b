import math

from unitcircle import AngleEngine, DisplayOptions, Viewport, compute_angle_arcs, hover_label, special_angle_marks
from unitcircle.annotations import reference_arc_bounds, reference_triangle, special_angle_text


VIEWPORT = Viewport.from_size(400, 400)  # center (200, 200), radius 160


def _info(degrees: float, *, snap: bool = True):
    return AngleEngine().angle_info(math.radians(degrees), snap=snap)


def test_first_quadrant_arcs() -> None:
    arcs = compute_angle_arcs(_info(45), VIEWPORT)

    assert arcs.quadrant == "I"
    assert math.isclose(arcs.standard_arc.radius, 32.0)
    assert arcs.standard_arc.start == 0.0
    assert math.isclose(arcs.standard_arc.end, -math.pi / 4)
    assert arcs.standard_arc.anticlockwise
    assert math.isclose(arcs.reference_arc.radius, 56.0)
    assert math.isclose(arcs.reference_arc.end, -math.pi / 4)
    assert arcs.standard_label.text == "45°"
    assert arcs.reference_label.text == "45°"
    assert arcs.standard_arrow is not None


def test_standard_label_sits_at_arc_midpoint() -> None:
    arcs = compute_angle_arcs(_info(90), VIEWPORT)
    label = arcs.standard_label
    distance = 32.0 * 1.3

    assert math.isclose(label.math_angle, math.pi / 4)
    assert math.isclose(label.position[0], 200 + distance * math.cos(math.pi / 4))
    assert math.isclose(label.position[1], 200 - distance * math.sin(math.pi / 4))


def test_second_and_third_quadrant_reference_arcs() -> None:
    q2 = compute_angle_arcs(_info(150), VIEWPORT)
    assert q2.quadrant == "II"
    assert math.isclose(q2.reference_arc.start, -5 * math.pi / 6)
    assert math.isclose(q2.reference_arc.end, -math.pi)
    assert q2.reference_label.text == "30°"

    q3 = compute_angle_arcs(_info(200, snap=False), VIEWPORT)
    assert q3.quadrant == "III"
    assert math.isclose(q3.reference_arc.start, -math.pi)
    assert math.isclose(q3.reference_arc.end, -math.radians(200))
    assert q3.reference_label.text == "20°"


def test_fourth_quadrant_reference_arc_runs_to_full_turn() -> None:
    arcs = compute_angle_arcs(_info(300), VIEWPORT)

    assert arcs.quadrant == "IV"
    assert math.isclose(arcs.reference_arc.start, -5 * math.pi / 3)
    assert math.isclose(arcs.reference_arc.end, -2 * math.pi)
    assert math.isclose(arcs.reference_label.math_angle, (5 * math.pi / 3 + 2 * math.pi) / 2)
    assert arcs.reference_label.text == "60°"


def test_zero_angle_suppresses_arrow_and_labels() -> None:
    arcs = compute_angle_arcs(_info(0), VIEWPORT)

    assert arcs.quadrant == "X-Axis"
    assert arcs.standard_arrow is None
    assert arcs.standard_label is None
    assert arcs.reference_arc is None
    assert arcs.reference_label is None


def test_y_axis_has_label_but_no_reference_arc() -> None:
    arcs = compute_angle_arcs(_info(90), VIEWPORT)

    assert arcs.quadrant == "Y-Axis"
    assert arcs.reference_arc is None
    assert arcs.reference_label.text == "90°"


def test_reference_arc_bounds_for_axes() -> None:
    bounds, mid = reference_arc_bounds(3 * math.pi / 2, "Y-Axis")
    assert bounds is None
    assert math.isclose(mid, (math.pi + 3 * math.pi / 2) / 2)

    bounds, mid = reference_arc_bounds(math.pi, "X-Axis")
    assert bounds is None
    assert mid == math.pi


def test_hover_label_uses_exact_coordinates_and_offset() -> None:
    point = VIEWPORT.point_at(math.pi / 4)
    label = hover_label(_info(45), point)

    assert label.text == "(√2/2, √2/2)"
    assert math.isclose(label.position[0], point[0] + 30 * math.cos(math.pi / 4))
    assert math.isclose(label.position[1], point[1] - 30 * math.sin(math.pi / 4))

    selected = hover_label(_info(45), point, selected=True)
    assert selected.selected
    assert math.isclose(selected.position[0], point[0] + 35 * math.cos(math.pi / 4))


def test_hover_label_falls_back_to_decimals() -> None:
    info = AngleEngine().angle_info(0.5)
    label = hover_label(info, VIEWPORT.point_at(0.5))

    assert label.text == "(0.88, 0.48)"


def test_reference_triangle_drops_to_x_axis() -> None:
    (a, foot), (foot2, center) = reference_triangle((300.0, 100.0), VIEWPORT)

    assert a == (300.0, 100.0)
    assert foot == foot2 == (300.0, 200.0)
    assert center == (200.0, 200.0)


def test_special_angle_text_follows_toggles() -> None:
    entry = _info(135).special

    assert special_angle_text(entry, DisplayOptions()) == ("135° | 3π/4", "(-√2/2, √2/2)")
    assert special_angle_text(entry, DisplayOptions(show_radians=False)) == ("135°", "(-√2/2, √2/2)")
    assert special_angle_text(
        entry, DisplayOptions(show_degrees=False, show_coordinates=False)
    ) == ("3π/4", "")


def test_special_angle_marks_stack_two_lines() -> None:
    marks = special_angle_marks(VIEWPORT, DisplayOptions())

    assert len(marks) == 16
    east = marks[0]
    assert east.marker == (360.0, 200.0)
    assert math.isclose(east.label[0], 200 + 160 * 1.15)
    (line1, pos1), (line2, pos2) = east.lines
    assert line1 == "0° | 0"
    assert line2 == "(1, 0)"
    assert pos2[1] - pos1[1] == 16.0

    bare = special_angle_marks(VIEWPORT, DisplayOptions(show_degrees=False, show_radians=False, show_coordinates=False))
    assert all(mark.lines == () for mark in bare)
