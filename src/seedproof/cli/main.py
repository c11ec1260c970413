from __future__ import annotations

import argparse
import logging

from rich.console import Console

from seedproof.cli.commands import commit_cmd, reconstruct_cmd, verify_cmd, web_cmd
from seedproof.cli.context import CLIContext
from seedproof.core.config import load_settings
from seedproof.core.errors import SeedproofError
from seedproof.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedproof",
        description="Verify provably fair game seeds and reconstruct their outcomes",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the full verification record alongside the summary",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    verify_cmd.register(subparsers)
    reconstruct_cmd.register(subparsers)
    commit_cmd.register(subparsers)
    web_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    try:
        settings = load_settings()
    except SeedproofError as exc:
        configure_logging(args.verbose)
        logger.error(str(exc))
        return 1

    configure_logging(args.verbose, settings.log_level)
    ctx = CLIContext(settings=settings, console=console, debug=args.debug)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args, ctx)
    except SeedproofError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
