"""
ingest/reader.py

LogReader: streams Events out of every file matching a glob pattern.

Files are read one after another in sorted order, lines in file order, so the
event sequence (and with it the aggregator's tie-breaking) is reproducible.
Lines that fail the filter or cannot be parsed are counted and dropped; any
file-level failure propagates as LogSourceError.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..metrics import ScanStats
from ..models import Event
from .filter import LineFilter
from .parser import parse_line
from .sources import discover_files, open_log

logger = logging.getLogger(__name__)


class LogReader:
    """
    Bridges log files → line filter → parser → Event stream.

    Args:
        pattern:     Glob pattern for the log files, e.g. "/var/log/nginx/access.log*".
        line_filter: Predicate deciding which lines are parsed at all.
    """

    def __init__(self, pattern: str, line_filter: LineFilter) -> None:
        self.pattern = pattern
        self.line_filter = line_filter
        self.stats = ScanStats()

    def events(self) -> Iterator[Event]:
        """Yield Events from all matching files. Raises LogSourceError."""
        for path in discover_files(self.pattern):
            with open_log(path) as stream:
                yield from self.events_from_lines(stream)
            self.stats.files_scanned += 1
        logger.info("Scan complete: %s", self.stats.as_dict())

    def events_from_lines(self, lines: Iterable[str]) -> Iterator[Event]:
        """Filter and parse an already-open line source."""
        for line in lines:
            self.stats.lines_read += 1
            if not self.line_filter(line):
                continue
            self.stats.lines_matched += 1

            event = parse_line(line)
            if event is None:
                self.stats.lines_malformed += 1
                continue
            self.stats.events_emitted += 1
            yield event
