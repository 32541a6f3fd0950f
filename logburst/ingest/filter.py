"""
ingest/filter.py

Line-level match predicate applied before any field extraction.

A line is kept when it contains the match substring and, if a status code is
configured, the code surrounded by single spaces (" 200 "). Both checks are
plain substring tests; no field splitting happens here.

Usage:
    keep = LineFilter("wp-admin", "200")
    keep('1.2.3.4 - - [10/Oct/2023:10:00:05 +0000] "GET /wp-admin/ HTTP/1.1" 200 512')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineFilter:
    match: str = ""
    """Substring that must appear in the line. Empty matches everything."""

    status: str = ""
    """HTTP status code to require. Empty disables the check."""

    _status_token: str = field(init=False, repr=False, default="")

    def __post_init__(self) -> None:
        status = self.status.strip()
        object.__setattr__(self, "_status_token", f" {status} " if status else "")
        logger.debug("LineFilter built: match=%r status=%r", self.match, status)

    def __call__(self, line: str) -> bool:
        if self.match not in line:
            return False
        return not self._status_token or self._status_token in line
