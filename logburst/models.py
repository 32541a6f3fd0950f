"""
logburst/models.py

Shared dataclasses for every stage of a scan.

Event       - one (ip, timestamp) pair extracted from a matching log line
WindowKey   - hashable (ip, window_start) key for the per-window counters
BurstRecord - an IP's best (highest-count) window, the unit of the report
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple


# ---------------------------------------------------------------------------
# Extractor output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Event:
    """A single matching request, reduced to what the aggregator needs."""

    ip: str
    """Client address token, e.g. '203.0.113.7'."""

    timestamp: datetime
    """Request time. Naive values are interpreted as UTC."""


# ---------------------------------------------------------------------------
# Aggregation state / output
# ---------------------------------------------------------------------------

class WindowKey(NamedTuple):
    """Identifies one bucket: a single IP inside a single window."""

    ip: str
    window_start: datetime


@dataclass(slots=True)
class BurstRecord:
    """
    Best window seen so far for one IP.

    `count` is the highest number of events observed in any single window
    belonging to `ip`; `window_start`/`window_end` bound that window.
    """

    ip: str
    count: int
    window_start: datetime
    window_end: datetime

    def __repr__(self) -> str:
        return (
            f"BurstRecord({self.ip} "
            f"count={self.count} "
            f"{self.window_start.isoformat()}→{self.window_end.isoformat()})"
        )
