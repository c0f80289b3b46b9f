# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from plaindate.config import (
    ConfigurationError,
    TimezoneConfig,
    configure_logging,
    get_log_level,
    get_timezone_config,
    load_timezone,
)
from plaindate.domain import Date, DateError, parse

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Work with plain calendar dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    today = subparsers.add_parser("today", help="Print today's date")
    today.add_argument(
        "--tz",
        type=str,
        help="IANA timezone deciding the current day (defaults to PLAINDATE_TIMEZONE or local)",
    )

    parse_cmd = subparsers.add_parser("parse", help="Print a date in canonical YYYY-MM-DD form")
    parse_cmd.add_argument("text", type=str, help="Date text to parse")
    parse_cmd.add_argument(
        "--layout",
        type=str,
        help="strptime layout; without it YYYY-MM-DD, YYYY/MM/DD and 'DD Mon YYYY' are tried",
    )

    diff = subparsers.add_parser("diff", help="Print the number of days FIRST - SECOND")
    diff.add_argument("first", type=str, help="Date to subtract from")
    diff.add_argument("second", type=str, help="Date to subtract")

    return parser.parse_args(list(argv))


def _today(args: argparse.Namespace) -> Date:
    config = TimezoneConfig(timezone=load_timezone(args.tz)) if args.tz else get_timezone_config()
    return config.today()


def _run(args: argparse.Namespace) -> str:
    if args.command == "today":
        return str(_today(args))
    if args.command == "parse":
        result = parse(args.layout, args.text) if args.layout else Date.from_text(args.text)
        return str(result)
    if args.command == "diff":
        return str(Date.from_text(args.first) - Date.from_text(args.second))
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        output = _run(parsed_args)
    except (DateError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env``, configure logging and run."""
    load_dotenv()
    try:
        configure_logging(level=get_log_level())
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
