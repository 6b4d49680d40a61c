# main.py

"""Entry point for the catalog console (TUI or headless commands)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog",
        description="Browse and edit a remote product catalog.",
        epilog=f"API: {Settings.API_BASE_URL} (override with CATALOG_API_URL)",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Check connectivity to the catalog API.",
    )
    sub = parser.add_subparsers(
        dest="command",
        metavar="COMMAND",
        help="Omit to launch the interactive TUI.",
    )

    list_cmd = sub.add_parser("list", help="Print the product list.")
    list_cmd.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    list_cmd.add_argument(
        "--all",
        action="store_true",
        default=False,
        dest="show_all",
        help=f"Print every product, not just the first {Settings.DISPLAY_LIMIT}.",
    )

    add_cmd = sub.add_parser("add", help="Create a product.")
    add_cmd.add_argument("--title", default="", help="Product title (required).")
    add_cmd.add_argument("--description", default="")
    add_cmd.add_argument(
        "--price", default="", help="Sent to the API as typed."
    )
    add_cmd.add_argument("--thumbnail", default="", help="Thumbnail URL.")

    update_cmd = sub.add_parser("update", help="Update a product's title.")
    update_cmd.add_argument("id", help="Product id.")
    update_cmd.add_argument("--title", default=None, help="New title.")
    update_cmd.add_argument(
        "--suffix",
        action="store_true",
        default=False,
        help=f"Append '{Settings.UPDATED_SUFFIX.strip()}' to the current title.",
    )

    delete_cmd = sub.add_parser("delete", help="Delete a product.")
    delete_cmd.add_argument("id", help="Product id.")

    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import CatalogApp

    try:
        app = CatalogApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("catalog TUI shutting down")


def _run_command(args: argparse.Namespace) -> None:
    """Run one headless command and exit with its status."""
    from src.cli import runner
    from src.models.product import ProductDraft

    if args.command == "list":
        coro = runner.cli_list(args.output_format, args.show_all)
    elif args.command == "add":
        coro = runner.cli_add(
            ProductDraft(
                title=args.title,
                description=args.description,
                price=args.price,
                thumbnail=args.thumbnail,
            )
        )
    elif args.command == "update":
        coro = runner.cli_update(args.id, args.title, args.suffix)
    else:
        coro = runner.cli_delete(args.id)

    sys.exit(asyncio.run(coro))


def _run_health_check() -> None:
    """Run catalog API connectivity health check."""
    from src.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no command) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    tui = not args.health and args.command is None
    log_file = setup_logging(console=not tui)
    logger.info("catalog starting, log file: %s", log_file)

    if args.health:
        _run_health_check()
    elif tui:
        _run_tui()
    else:
        _run_command(args)


if __name__ == "__main__":
    main()
