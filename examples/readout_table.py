"""Example: print the exact readout for every special angle."""

from unitcircle import SPECIAL_ANGLES, AngleEngine, DisplayOptions, build_readout


def main() -> None:
    engine = AngleEngine()
    options = DisplayOptions(show_extra_trig=True)
    for entry in SPECIAL_ANGLES:
        info = engine.angle_info(entry.radians)
        readout = build_readout(info, options, engine=engine)
        print(
            f"{readout.degrees:>7} {readout.radians:>10}  {readout.coordinates:<16}"
            f" tan={readout.tan:<10} csc={readout.csc:<10} quadrant={readout.quadrant}"
        )

    info = engine.angle_info(0.5)
    print("\nArbitrary angle 0.5 rad:")
    print(f"  coordinates: ({info.x:.6f}, {info.y:.6f})")
    print(f"  sin={info.sin_str} cos={info.cos_str} tan={info.tan_str}")


if __name__ == "__main__":
    main()
