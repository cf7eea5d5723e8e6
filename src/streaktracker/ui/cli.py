# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from streaktracker.adapters.filesystem import PLACEHOLDER_IMAGE, load_image
from streaktracker.app import load_store, record
from streaktracker.config import ConfigurationError, configure_logging, get_tracker_config
from streaktracker.domain.errors import SelectionError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from streaktracker.domain.store import StreakStore

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track win/loss streaks per character")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding streaks.json, the category files and media/ "
        "(defaults to STREAKTRACKER_DATA_DIR or the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List tracked characters")

    show = subparsers.add_parser("show", help="Show the streaks of one character")
    show.add_argument("name", help="Character name as listed by 'list'")
    show.add_argument("--category", help="Highlight one streak category")

    for command, help_text in (("win", "Record a win"), ("loss", "Record a loss")):
        outcome = subparsers.add_parser(command, help=help_text)
        outcome.add_argument("name", help="Character name as listed by 'list'")
        outcome.add_argument("category", help="Streak category to update")

    return parser.parse_args(list(argv))


def _show(store: StreakStore, name: str, category: str | None) -> None:
    if not store.select_entity(name):
        raise SelectionError(f"Unknown entity: {name}")
    if category is not None and not store.select_category(category):
        raise SelectionError(f"Unknown category for {name}: {category}")

    snapshot = store.snapshot()
    entity = snapshot.selected_entity
    selected = snapshot.selected_category
    if entity is None:
        raise SelectionError(f"Unknown entity: {name}")

    image = load_image(entity.image_path)
    status = "missing" if image == PLACEHOLDER_IMAGE else f"{len(image)} bytes"
    print(f"{entity.name} ({entity.group}) image={entity.image_path} [{status}]")
    for streak in entity.streaks:
        marker = "*" if selected is not None and streak.name == selected.name else " "
        print(f"{marker} {streak.name}: current={streak.current} best={streak.best}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(verbose=parsed_args.verbose)
        config = get_tracker_config(data_dir=parsed_args.data_dir)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    store = load_store(config)
    try:
        if parsed_args.command == "list":
            for name in store.list_entity_names():
                print(name)
        elif parsed_args.command == "show":
            _show(store, parsed_args.name, parsed_args.category)
        elif parsed_args.command in {"win", "loss"}:
            current, best = record(
                store,
                parsed_args.name,
                parsed_args.category,
                is_win=parsed_args.command == "win",
            )
            print(f"{parsed_args.name} / {parsed_args.category}: current={current} best={best}")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except SelectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
