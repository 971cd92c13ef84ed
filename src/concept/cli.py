"""Command line entry point: run upkeep tasks via the Notion API.

Usage:
    concept [--token TOKEN] trim <page_id> [--recursive] [--skip-unchanged]

The token may also come from CONCEPT_TOKEN (or a .env file).
"""

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from concept.config import LOG_LEVELS, get_settings
from concept.errors import ConceptError
from concept.logging_config import configure_logging
from concept.notion.client import build_notion_client
from concept.notion.directory import PageDirectory
from concept.trim.normalizer import normalize_title
from concept.trim.walker import walk_and_normalize

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concept",
        description="run various upkeep tasks via Notion API",
    )
    parser.add_argument("--token", help="Notion integration token [env: CONCEPT_TOKEN]")
    parser.add_argument(
        "--log-level",
        help=f"log level for stderr JSON logs, one of {', '.join(LOG_LEVELS)} [env: CONCEPT_LOG_LEVEL]",
    )

    commands = parser.add_subparsers(dest="command")
    trim = commands.add_parser(
        "trim",
        help="remove leading and trailing spaces from page title",
    )
    trim.add_argument("page_id", nargs="?", help="id of the page to trim")
    trim.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="process child pages recursively",
    )
    trim.add_argument(
        "--skip-unchanged",
        action="store_true",
        default=None,
        help="do not write titles that are already trimmed",
    )
    return parser


def trim_command(
    args: argparse.Namespace,
    directory: PageDirectory,
    out: TextIO,
    err: TextIO,
    skip_unchanged: bool = False,
) -> int:
    """Run the trim command against a resolved directory. Returns the exit code."""
    try:
        page = directory.fetch_page(args.page_id)
    except ConceptError as exc:
        err.write(f"{exc}\n")
        return EXIT_FAILURE

    if not args.recursive:
        try:
            normalize_title(page, directory, out, skip_unchanged=skip_unchanged)
        except ConceptError as exc:
            err.write(f"{exc}\n")
            return EXIT_FAILURE
        return 0

    out.write("trimming page titles recursively, any errors will not lead to non-zero exit code\n")
    errors = walk_and_normalize(page, directory, out, skip_unchanged=skip_unchanged)
    for exc in errors:
        err.write(f"error trimming page {exc.page_id}: {exc}\n")
    return 0


def main(
    argv: list[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Parse arguments, resolve settings and dispatch. Returns the exit code."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "trim":
        parser.print_help(err)
        return EXIT_USAGE
    if not args.page_id:
        err.write("please provide page id\n")
        return EXIT_USAGE

    try:
        settings = get_settings()
    except ValidationError as exc:
        err.write(f"invalid configuration: {exc}\n")
        return EXIT_USAGE

    overrides: dict = {}
    if args.token:
        overrides["token"] = args.token
    if args.log_level:
        level = args.log_level.upper()
        if level not in LOG_LEVELS:
            err.write(f"invalid log level {args.log_level!r}, expected one of {', '.join(LOG_LEVELS)}\n")
            return EXIT_USAGE
        overrides["log_level"] = level
    if args.skip_unchanged is not None:
        overrides["skip_unchanged"] = args.skip_unchanged
    settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)

    try:
        client = build_notion_client(settings)
    except ValueError as exc:
        err.write(f"{exc}\n")
        return EXIT_USAGE

    directory = PageDirectory(client, page_size=settings.page_size)
    logger.info("Trimming %s (recursive=%s)", args.page_id, args.recursive)
    return trim_command(args, directory, out, err, skip_unchanged=settings.skip_unchanged)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
