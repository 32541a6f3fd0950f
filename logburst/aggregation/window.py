"""
aggregation/window.py

WindowAggregator: buckets events into fixed-size, epoch-aligned windows per IP.

Design:
  - One instance per scan; all state lives on the instance
  - Windows are truncated to a fixed origin (the Unix epoch, UTC), so the
    same data always produces the same boundaries
  - Counters only ever increase; nothing is evicted (the log set is bounded)
  - An IP's best window is replaced only on a strictly greater count, so the
    first window to reach the maximum (in arrival order) wins ties

Thread safety: NOT thread-safe. A scan is a single sequential pass.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable

from ..durations import check_period
from ..models import BurstRecord, Event, WindowKey

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate(timestamp: datetime, period: timedelta) -> datetime:
    """
    Round `timestamp` down to the start of its containing window.

    Naive timestamps are treated as UTC. Assumes `period > 0`.

        >>> truncate(datetime(2023, 10, 10, 10, 7, 42), timedelta(minutes=10))
        datetime.datetime(2023, 10, 10, 10, 0, tzinfo=datetime.timezone.utc)
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    # timedelta // timedelta floors, so pre-epoch times still round down
    return EPOCH + (timestamp - EPOCH) // period * period


class WindowAggregator:
    """
    Accumulates per-(IP, window) counts and tracks each IP's best window.

    Args:
        period: Window duration. Must be positive and at most MAX_DURATION.
    """

    def __init__(self, period: timedelta) -> None:
        self.period = check_period(period)
        self.window_counts: dict[WindowKey, int] = {}
        self.best_per_ip: dict[str, BurstRecord] = {}
        self.events_processed = 0
        logger.debug("WindowAggregator initialised: period=%s", period)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, event: Event) -> int:
        """
        Count one event and update its IP's best window.

        Returns the updated count of the event's window.
        """
        window_start = truncate(event.timestamp, self.period)
        key = WindowKey(event.ip, window_start)

        count = self.window_counts.get(key, 0) + 1
        self.window_counts[key] = count
        self.events_processed += 1

        best = self.best_per_ip.get(event.ip)
        if best is None or count > best.count:
            self.best_per_ip[event.ip] = BurstRecord(
                ip=event.ip,
                count=count,
                window_start=window_start,
                window_end=window_start + self.period,
            )
            if best is not None:
                logger.debug("New best window for %s: %d events at %s",
                             event.ip, count, window_start.isoformat())
        return count

    def extend(self, events: Iterable[Event]) -> None:
        """Add every event from `events`, in order."""
        for event in events:
            self.add(event)

    def __len__(self) -> int:
        return len(self.window_counts)

    def __repr__(self) -> str:
        return (
            f"WindowAggregator(period={self.period} "
            f"events={self.events_processed} "
            f"windows={len(self.window_counts)} "
            f"ips={len(self.best_per_ip)})"
        )


def aggregate(
    events: Iterable[Event],
    period: timedelta,
) -> tuple[dict[WindowKey, int], dict[str, BurstRecord]]:
    """
    Run a full aggregation pass over `events`.

    Returns:
        (window_counts, best_per_ip): fresh dicts owned by the caller.
    """
    aggregator = WindowAggregator(period)
    aggregator.extend(events)
    return aggregator.window_counts, aggregator.best_per_ip
