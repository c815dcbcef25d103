"""Entry point for the slatus CLI."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from . import __version__
from .commands import COMMANDS, CommandContext
from .completions import SHELLS
from .errors import SlatusError
from .log import configure_logging, logger
from .platform import CONFIG_DIR_ENV, resolve_config_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slatus", description="Manage and quickly set Slack statuses"
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"slatus {__version__}",
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help=f"Configuration directory (default: ${CONFIG_DIR_ENV} or the "
        "platform config dir)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    # list
    p_list = sub.add_parser("list", help="List all saved statuses")
    p_list.add_argument(
        "--names",
        action="store_true",
        help="Print only preset names, one per line (used by completions)",
    )

    # add
    p_add = sub.add_parser("add", help="Add a new saved status")
    p_add.add_argument("name", help="Name to identify this status")
    p_add.add_argument("text", help='Status text (e.g. "In a meeting")')
    p_add.add_argument("emoji", help='Status emoji (e.g. ":calendar:")')

    # remove
    p_remove = sub.add_parser("remove", help="Remove a saved status")
    p_remove.add_argument("name", help="Name of the status to remove")

    # set
    p_set = sub.add_parser("set", help="Set your Slack status to a saved status")
    p_set.add_argument("name", help="Name of the saved status to set")
    p_set.add_argument(
        "--expires",
        "-e",
        type=int,
        default=0,
        metavar="MINUTES",
        help="Expiration in minutes (default: 0 = no expiration)",
    )

    sub.add_parser("clear", help="Clear your current Slack status")
    sub.add_parser("current", help="Show your current Slack status")

    # config
    p_config = sub.add_parser("config", help="Configure the Slack token")
    p_config.add_argument("token", help="Your Slack user token (xoxp-...)")

    # completions
    p_comp = sub.add_parser("completions", help="Generate shell completions")
    p_comp.add_argument("shell", choices=SHELLS, help="Shell to generate for")

    sub.add_parser("doctor", help="Check configuration and exit")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the slatus CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    err = Console(stderr=True, emoji=False, highlight=False, soft_wrap=True)

    try:
        config_dir = resolve_config_dir(args.config_dir)
        ctx = CommandContext.from_config_dir(config_dir)
        configure_logging("DEBUG" if args.verbose else ctx.prefs.logging.level)
        logger.debug("config dir: %s", config_dir)
        code = COMMANDS[args.command](ctx, args)
    except (SlatusError, OSError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        err.print(f"Error: {exc}", markup=False)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
