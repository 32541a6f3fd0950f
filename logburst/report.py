"""
logburst/report.py

Renders ranked BurstRecords for humans (fixed-width table) or machines (JSON).

The JSON shape is defined by pydantic models so it stays stable and
validated:

    {
      "match": "wp-admin",
      "status": "200",
      "period_seconds": 600.0,
      "results": [
        {"rank": 1, "ip": "203.0.113.7", "count": 42,
         "window_start": "2023-10-10T10:00:00Z", "window_end": "2023-10-10T10:10:00Z"}
      ]
    }
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Sequence, TextIO

from pydantic import BaseModel

from .durations import format_duration
from .ingest.parser import TIMESTAMP_FORMAT
from .models import BurstRecord


class BurstResponse(BaseModel):
    rank: int
    ip: str
    count: int
    window_start: datetime
    window_end: datetime

    @classmethod
    def from_record(cls, rank: int, record: BurstRecord) -> "BurstResponse":
        return cls(
            rank=rank,
            ip=record.ip,
            count=record.count,
            window_start=record.window_start,
            window_end=record.window_end,
        )


class BurstReport(BaseModel):
    match: str
    status: str
    period_seconds: float
    results: list[BurstResponse]

    @classmethod
    def build(
        cls,
        records: Sequence[BurstRecord],
        match: str,
        status: str,
        period: timedelta,
    ) -> "BurstReport":
        return cls(
            match=match,
            status=status,
            period_seconds=period.total_seconds(),
            results=[
                BurstResponse.from_record(rank, r)
                for rank, r in enumerate(records, start=1)
            ],
        )


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def _fmt_time(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FORMAT)


def render_table(
    records: Sequence[BurstRecord],
    match: str,
    status: str,
    period: timedelta,
) -> str:
    lines = [
        f"Top {len(records)} IPs with the highest number of {status} status codes "
        f"for {match} in a {format_duration(period)} period:",
        "Rank | IP Address | Max Count | Period",
        "-----|------------|-----------|------------------------",
    ]
    for rank, r in enumerate(records, start=1):
        lines.append(
            f"{rank:4d} | {r.ip:<10} | {r.count:9d} | "
            f"{_fmt_time(r.window_start)} to {_fmt_time(r.window_end)}"
        )
    return "\n".join(lines) + "\n"


def render_json(
    records: Sequence[BurstRecord],
    match: str,
    status: str,
    period: timedelta,
) -> str:
    report = BurstReport.build(records, match=match, status=status, period=period)
    return report.model_dump_json(indent=2) + "\n"


_RENDERERS = {
    "table": render_table,
    "json": render_json,
}


def write_report(
    out: TextIO,
    records: Sequence[BurstRecord],
    *,
    match: str,
    status: str,
    period: timedelta,
    output_format: str = "table",
) -> None:
    """Render `records` in `output_format` and write them to `out`."""
    try:
        render = _RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"unknown output format {output_format!r}") from None
    out.write(render(records, match, status, period))
