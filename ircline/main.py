#!/usr/bin/env python3
"""
Command-line front end: decode IRC lines from a file or stdin into JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .constants import CLI_JSON_INDENT
from .errors.handling import log_error, parse_lenient
from .logging_config import LoggerConfigurator, error_aggregator
from .logs.logger import logger


@dataclass
class LineStats:
    parsed: int = 0
    failed: int = 0
    skipped: int = 0


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ircline",
        description="Decode raw IRC / IRCv3 lines into JSON, one object per line",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File of CR LF or LF terminated lines (default: stdin)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any line is rejected",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log an error summary report when done",
    )
    return parser.parse_args(argv)


def process_lines(lines: Iterable[str], out: TextIO) -> LineStats:
    """Parse each line and write its JSON form to ``out``.

    Blank lines are skipped; rejected lines are logged and counted.
    """
    stats = LineStats()
    indent = CLI_JSON_INDENT or None
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            stats.skipped += 1
            continue
        message = parse_lenient(line, context={"lineno": lineno})
        if message is None:
            stats.failed += 1
            continue
        stats.parsed += 1
        out.write(json.dumps(message.to_dict(), indent=indent, ensure_ascii=False))
        out.write("\n")
    return stats


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = parse_args(argv)
    source = "stdin" if args.file == "-" else args.file
    logger.log_event("cli", "reading", level=logging.DEBUG, source=source)

    try:
        if args.file == "-":
            stats = process_lines(sys.stdin, sys.stdout)
        else:
            with open(args.file, encoding="utf-8", newline="") as f:
                stats = process_lines(f, sys.stdout)
    except OSError as e:
        log_error("Could not read input", e, context={"source": source})
        return 1

    logger.log_event(
        "cli",
        "summary",
        parsed=stats.parsed,
        failed=stats.failed,
        skipped=stats.skipped,
    )
    if args.summary:
        error_aggregator.log_summary_report()
    if args.strict and stats.failed:
        logger.log_event("cli", "strict_failure", level=logging.ERROR, failed=stats.failed)
        return 1
    return 0


def run() -> None:
    """Synchronous entry point for the console script."""
    LoggerConfigurator().configure()
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
