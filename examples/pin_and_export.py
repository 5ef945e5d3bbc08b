"""Example: drive the controller with pointer events and export the frame to TikZ."""

import math
import sys

from unitcircle import (
    InteractionController,
    RecordingInfoPanel,
    RecordingPinList,
    Viewport,
    generate_tikz_document,
)


def canvas_point(viewport: Viewport, degrees: float, fraction: float = 0.6):
    rad = math.radians(degrees)
    return viewport.to_canvas(
        math.cos(rad) * viewport.radius * fraction,
        math.sin(rad) * viewport.radius * fraction,
    )


def main() -> None:
    viewport = Viewport.from_size(600, 600)
    panel = RecordingInfoPanel()
    pins = RecordingPinList()
    controller = InteractionController(viewport, panel=panel, pin_list=pins)

    # Hover near 44.9 degrees and drag to 45.3: both snap to pi/4.
    controller.handle_event("mousedown", *canvas_point(viewport, 44.9))
    controller.handle_event("mousemove", *canvas_point(viewport, 45.3))
    controller.handle_event("mouseup", *canvas_point(viewport, 45.3))
    print(f"After first tap: state={controller.state} readout={panel.current}")

    # Deselect with one tap, then pin 210 degrees with the next.
    for _ in range(2):
        controller.handle_event("mousedown", *canvas_point(viewport, 210))
        controller.handle_event("mouseup", *canvas_point(viewport, 210))

    print("Pinned angles:")
    for row in pins.rows:
        print(f"  #{row.id} {row.label}{' [selected]' if row.selected else ''}")

    if len(sys.argv) > 1:
        with open(sys.argv[1], "w", encoding="utf-8") as fout:
            fout.write(generate_tikz_document(controller, title="Pinned angles"))
        print(f"Wrote {sys.argv[1]}")


if __name__ == "__main__":
    main()
