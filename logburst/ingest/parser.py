"""
ingest/parser.py

Converts one access-log line into an Event.

Design principles:
  - Positional, not regex-based: the address is the first whitespace-separated
    field and the timestamp is the fourth, e.g. for the combined log format

        203.0.113.7 - - [10/Oct/2023:13:55:36 +0000] "GET /wp-admin/ ..." 200 512
        ^ fields[0]     ^ fields[3]

  - The "+0000" offset lives in fields[4] and is ignored; the wall-clock time
    is interpreted as UTC so window boundaries match what the log shows.
  - Returns None for anything it cannot use. Never raises on bad input.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..models import Event

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S"

# Anything with fewer fields cannot carry both an address and a timestamp
# followed by the rest of the request.
_MIN_FIELDS = 5


def parse_timestamp(token: str) -> datetime | None:
    """
    Parse a bracket-stripped log timestamp ("10/Oct/2023:13:55:36").

    Returns an aware UTC datetime, or None if the token is malformed.
    """
    try:
        return datetime.strptime(token, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_line(line: str) -> Event | None:
    """
    Extract (ip, timestamp) from a log line.

    Returns:
        Event on success, None if the line has too few fields or its
        timestamp does not parse.
    """
    fields = line.split()
    if len(fields) < _MIN_FIELDS:
        logger.debug("Skipping short line (%d fields): %.80r", len(fields), line)
        return None

    timestamp = parse_timestamp(fields[3].strip("[]"))
    if timestamp is None:
        logger.debug("Skipping line with bad timestamp %r", fields[3])
        return None

    return Event(ip=fields[0], timestamp=timestamp)
