"""
logburst/main.py

Command-line entry point:

    logburst --log '/var/log/nginx/access.log*' --match wp-login.php --period 5m

Reads every matching file (gzip included), counts matching requests per IP in
epoch-aligned windows, and prints the IPs with the busiest single window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import timedelta
from typing import NoReturn, Sequence, TextIO

from pydantic import ValidationError

from .aggregation import WindowAggregator, select_top
from .config import Settings
from .durations import check_period, parse_duration
from .ingest import LineFilter, LogReader, LogSourceError
from .models import BurstRecord
from .report import write_report

logger = logging.getLogger("logburst.main")


def scan(
    pattern: str,
    match: str,
    status: str,
    period: timedelta,
    limit: int,
) -> tuple[list[BurstRecord], LogReader]:
    """
    Run one full scan and return the ranked records plus the reader (for stats).

    Raises:
        LogSourceError: if any file cannot be found, opened or read.
    """
    reader = LogReader(pattern, LineFilter(match=match, status=status))
    aggregator = WindowAggregator(period)
    aggregator.extend(reader.events())
    logger.info("Aggregated %r", aggregator)
    return select_top(aggregator.best_per_ip, limit), reader


def _duration_arg(value: str) -> timedelta:
    try:
        return check_period(parse_duration(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _parse_args(settings: Settings, argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="logburst",
        description="Find the IPs with the biggest request bursts in web-server access logs",
    )
    parser.add_argument("--log", default=settings.LOG_PATTERN, dest="pattern",
                        help="Log file glob pattern (gzip files are decompressed)")
    parser.add_argument("--match", default=settings.MATCH,
                        help="Substring a line must contain")
    parser.add_argument("--status", default=settings.STATUS,
                        help="HTTP status code to count (empty string: any)")
    parser.add_argument("--limit", type=int, default=settings.LIMIT,
                        help="Number of top results to display")
    parser.add_argument("--period", type=_duration_arg, default=settings.PERIOD,
                        help="Window size, e.g. 30s, 10m, 1h")
    parser.add_argument("--format", dest="output_format", default=settings.OUTPUT_FORMAT,
                        choices=["table", "json"])
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def run(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Parse arguments, scan, and write the report. Returns the exit status."""
    out = out if out is not None else sys.stdout
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return 1

    args = _parse_args(settings, argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        records, reader = scan(
            pattern=args.pattern,
            match=args.match,
            status=args.status,
            period=args.period,
            limit=args.limit,
        )
    except LogSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info("Scan stats: %s", reader.stats.as_dict())
    write_report(
        out,
        records,
        match=args.match,
        status=args.status,
        period=args.period,
        output_format=args.output_format,
    )
    return 0


def main() -> NoReturn:
    sys.exit(run())


if __name__ == "__main__":
    main()
