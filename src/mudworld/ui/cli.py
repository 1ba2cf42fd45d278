from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from mudworld.adapters.worldfile import read_place_classes, read_place_request
from mudworld.app import create_place, destroy_place, get_place, load_place_classes, update_place
from mudworld.config import configure_logging
from mudworld.domain.model import parse_direction

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from mudworld.domain.views import PlaceView

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage places of a mudworld")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classes = subparsers.add_parser("classes", help="Place class commands")
    classes_sub = classes.add_subparsers(dest="classes_command", required=True)
    classes_load = classes_sub.add_parser("load", help="Load place classes from a JSON file")
    classes_load.add_argument("file", type=Path, help="Place class catalogue (JSON)")

    place = subparsers.add_parser("place", help="Place commands")
    place_sub = place.add_subparsers(dest="place_command", required=True)

    place_show = place_sub.add_parser("show", help="Describe a place and its exits")
    place_show.add_argument("place_id", type=int)

    place_create = place_sub.add_parser("create", help="Create a place next to another one")
    place_create.add_argument(
        "--class",
        dest="place_class",
        type=str,
        required=True,
        help="Place class code of the new place",
    )
    place_create.add_argument(
        "--direction",
        type=str,
        required=True,
        help="Direction from the new place towards the target place",
    )
    place_create.add_argument(
        "--target",
        type=int,
        required=True,
        help="Code of the existing place to connect to",
    )

    place_update = place_sub.add_parser("update", help="Apply a requested state to a place")
    place_update.add_argument("place_id", type=int)
    place_update.add_argument("file", type=Path, help="Place request (JSON)")

    place_destroy = place_sub.add_parser("destroy", help="Destroy or demise a place")
    place_destroy.add_argument("place_id", type=int)

    return parser.parse_args(list(argv))


def _describe(view: PlaceView) -> None:
    log.info("Place %s (%s): %s", view.code, view.class_code, view.name or "-")
    for attr_code, value in sorted(view.attrs.items()):
        log.info("  %s = %s", attr_code, value)
    for direction, place_exit in sorted(view.exits.items()):
        log.info(
            "  %s -> %s (%s) opened=%s locked=%s visible=%s",
            direction,
            place_exit.target_place_code,
            place_exit.name or "?",
            place_exit.opened,
            place_exit.locked,
            place_exit.visible,
        )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        direction = (
            parse_direction(parsed_args.direction)
            if parsed_args.command == "place" and parsed_args.place_command == "create"
            else None
        )
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "classes" and parsed_args.classes_command == "load":
            count = load_place_classes(read_place_classes(parsed_args.file))
            log.info("Loaded %s place classes from %s", count, parsed_args.file)
        elif parsed_args.command == "place" and parsed_args.place_command == "show":
            _describe(get_place(parsed_args.place_id))
        elif parsed_args.command == "place" and parsed_args.place_command == "create":
            if direction is None:
                raise ValueError("Missing --direction")  # noqa: TRY301
            _describe(create_place(parsed_args.place_class, direction, parsed_args.target))
        elif parsed_args.command == "place" and parsed_args.place_command == "update":
            request = read_place_request(parsed_args.file)
            _describe(update_place(parsed_args.place_id, request))
        elif parsed_args.command == "place" and parsed_args.place_command == "destroy":
            status = destroy_place(parsed_args.place_id)
            log.info("Place %s %s", parsed_args.place_id, status)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Command failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
