# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tilesync.app import TileSyncApp, list_categories, render_category
from tilesync.config import ConfigurationError, configure_logging, get_registry_config
from tilesync.domain.model import ComponentName

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from tilesync.domain.model import Category, Tile

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--manifest",
        type=str,
        help="Path to the JSON tile manifest (defaults to TILESYNC_MANIFEST)",
    )
    common.add_argument(
        "--own-package",
        type=str,
        help="Package whose tiles are never renumbered (defaults to TILESYNC_OWN_PACKAGE)",
    )
    common.add_argument(
        "--block",
        action="append",
        default=[],
        metavar="PACKAGE/CLASS",
        help="Component to hide from every category; may be repeated",
    )

    parser = argparse.ArgumentParser(description="Inspect tile categories")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("categories", parents=[common], help="List every category")
    show = subparsers.add_parser("show", parents=[common], help="Render one category")
    show.add_argument("category", type=str, help="Category key to render")
    show.add_argument(
        "--exclude-package",
        action="append",
        default=[],
        help="Hide tiles of this package from the rendered host; may be repeated",
    )
    return parser.parse_args(list(argv))


def _parse_blocklist(values: Sequence[str]) -> set[ComponentName]:
    return {ComponentName.unflatten(value) for value in values}


def _format_tile(tile: Tile) -> str:
    label = tile.title or tile.component.short_class_name()
    return f"  [{tile.priority:>3}] {label} ({tile.component.flatten()})"


def _print_categories(categories: Sequence[Category]) -> None:
    for category in categories:
        print(f"{category.key} ({len(category)} tiles)")
        for tile in category:
            print(_format_tile(tile))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        blocked = _parse_blocklist(parsed_args.block)
        config = get_registry_config(
            own_package=parsed_args.own_package,
            manifest_path=parsed_args.manifest,
        )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        app = TileSyncApp(config=config)
        if parsed_args.command == "categories":
            _print_categories(list_categories(app, blocked=blocked))
        elif parsed_args.command == "show":
            excluded = set(parsed_args.exclude_package)
            container = render_category(
                app,
                parsed_args.category,
                blocked=blocked,
                predicate=(lambda tile: tile.package not in excluded) if excluded else None,
            )
            print(f"{parsed_args.category} ({container.child_count()} tiles)")
            for view in container:
                print(_format_tile(view.tile))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while building categories")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
