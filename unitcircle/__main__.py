import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from unitcircle import (
    DisplayOptions,
    InteractionController,
    RecordingInfoPanel,
    RecordingPinList,
    UnknownEventError,
    Viewport,
    generate_tikz_document,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_events(path: str) -> List[Dict[str, Any]]:
    try:
        with open(path, encoding="utf-8") as fin:
            data = json.load(fin)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read event script %s: %s", path, exc)
        raise SystemExit(1)

    if not isinstance(data, list):
        logger.error("Event script must be a JSON list, got %s", type(data).__name__)
        raise SystemExit(1)
    for idx, event in enumerate(data):
        if not isinstance(event, dict) or "kind" not in event:
            logger.error("Event %d is not an object with a 'kind' field: %r", idx, event)
            raise SystemExit(1)
    return data


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Replay pointer events against the unit circle")
    parser.add_argument("path", help="Path to a JSON list of {kind, x, y} events")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=800.0,
        help="Canvas width in pixels (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=600.0,
        help="Canvas height in pixels (default: 600)",
    )
    parser.add_argument(
        "--no-snap",
        action="store_true",
        help="Disable snapping to special angles",
    )
    parser.add_argument(
        "--extra-trig",
        action="store_true",
        help="Include csc, sec and cot in the readout",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the final frame to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    events = _load_events(args.path)
    logger.info("Loaded %d event(s) from %s", len(events), args.path)

    try:
        viewport = Viewport.from_size(args.width, args.height)
    except ValueError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    options = DisplayOptions(
        snap_to_angles=not args.no_snap,
        show_extra_trig=args.extra_trig,
    )
    panel = RecordingInfoPanel()
    pin_list = RecordingPinList()
    controller = InteractionController(viewport, options, panel=panel, pin_list=pin_list)

    for idx, event in enumerate(events):
        meta = {key: value for key, value in event.items() if key not in ("kind", "x", "y")}
        try:
            controller.handle_event(event["kind"], event.get("x"), event.get("y"), meta)
        except UnknownEventError as exc:
            logger.error("Event %d: %s", idx, exc)
            raise SystemExit(1)
        except (TypeError, ValueError) as exc:
            logger.error("Event %d has malformed coordinates: %s", idx, exc)
            raise SystemExit(1)

    print(f"Events replayed: {len(events)}")
    print(f"State: {controller.state}")
    print("Readout:")
    if panel.current is None:
        print("  (none)")
    else:
        for key, value in asdict(panel.current).items():
            if value is None:
                continue
            print(f"  {key}: {value}")

    print("Pinned angles:")
    if pin_list.rows:
        for row in pin_list.rows:
            marker = " [selected]" if row.selected else ""
            print(f"  #{row.id} {row.label}{marker}")
    else:
        print("  (none)")

    if args.tikz_output_path:
        tikz_path = Path(args.tikz_output_path)
        tikz_path.parent.mkdir(parents=True, exist_ok=True)
        document = generate_tikz_document(controller)
        tikz_path.write_text(document, encoding="utf-8")
        logger.info("Wrote TikZ document to %s", tikz_path)


if __name__ == "__main__":
    main()
