"""
logburst/metrics.py

Per-scan counters for the ingest stage.

One ScanStats instance belongs to one LogReader; nothing is shared between
runs.

Usage:
    reader = LogReader(pattern, line_filter)
    aggregator.extend(reader.events())
    print(reader.stats.as_dict())
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class ScanStats:
    """Counters describing what a scan read and what it dropped."""

    files_scanned: int = 0
    """Log files opened and fully read."""

    lines_read: int = 0
    """Every line seen, matching or not."""

    lines_matched: int = 0
    """Lines that passed the substring/status filter."""

    lines_malformed: int = 0
    """Matching lines with too few fields or an unparseable timestamp."""

    events_emitted: int = 0
    """Events handed to the aggregator."""

    def as_dict(self) -> dict:
        """Return all counters as a plain dict (safe for JSON serialisation)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
