"""
logburst/durations.py

Parsing and formatting of window durations.

Accepts the compact notation operators already type for nginx/Go tooling:
    "90s"  "10m"  "1h30m"  "1.5h"  "250ms"
plus bare seconds ("600", "0.5"). Formatting produces the same notation with
every larger unit spelled out, e.g. 10 minutes → "10m0s", 1 hour → "1h0m0s".
"""

from __future__ import annotations

import re
from datetime import timedelta

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,   # U+00B5 micro sign
    "μs": 1e-6,   # U+03BC greek mu
    "ms": 1e-3,
    "s":  1.0,
    "m":  60.0,
    "h":  3600.0,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_PART_RE = re.compile(rf"({_NUMBER})(ns|us|µs|μs|ms|s|m|h)")
_FULL_RE = re.compile(rf"(?:{_NUMBER}(?:ns|us|µs|μs|ms|s|m|h))+")
_SECONDS_RE = re.compile(rf"{_NUMBER}")

# Largest duration a signed 64-bit nanosecond count can hold (2562047h47m16.854775s),
# truncated to the microsecond resolution of timedelta.
MAX_DURATION = timedelta(microseconds=(2**63 - 1) // 1000)
_MAX_SECONDS = MAX_DURATION.total_seconds()


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration string into a timedelta.

    Raises:
        ValueError: if `text` is not a valid duration.
    """
    s = text.strip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    if _SECONDS_RE.fullmatch(s):
        total = float(s)
    elif _FULL_RE.fullmatch(s):
        total = sum(
            float(number) * _UNIT_SECONDS[unit]
            for number, unit in _PART_RE.findall(s)
        )
    else:
        raise ValueError(f"invalid duration {text!r}")

    if total > _MAX_SECONDS:
        raise ValueError(f"duration {text!r} out of range (max {format_duration(MAX_DURATION)})")
    try:
        return sign * timedelta(seconds=total)
    except OverflowError:
        raise ValueError(f"duration {text!r} out of range") from None


def check_period(period: timedelta) -> timedelta:
    """
    Validate a window length: strictly positive and at most MAX_DURATION.

    Raises:
        ValueError: if `period` is out of range.
    """
    if period <= timedelta(0):
        raise ValueError(f"period must be positive, got {format_duration(period)}")
    if period > MAX_DURATION:
        raise ValueError(
            f"period must be at most {format_duration(MAX_DURATION)}, "
            f"got {format_duration(period)}"
        )
    return period


def _trim(value: int, unit: int) -> str:
    """Render value/unit as a decimal with trailing zeros removed."""
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(d: timedelta) -> str:
    """
    Render `d` in compact h/m/s notation.

        >>> format_duration(timedelta(minutes=10))
        '10m0s'
        >>> format_duration(timedelta(seconds=5400))
        '1h30m0s'
    """
    us = d // timedelta(microseconds=1)
    sign = "-" if us < 0 else ""
    us = abs(us)

    if us == 0:
        return "0s"
    if us < 1_000:
        return f"{sign}{us}µs"
    if us < 1_000_000:
        return f"{sign}{_trim(us, 1_000)}ms"

    out = _trim(us % 60_000_000, 1_000_000) + "s"
    minutes = us // 60_000_000
    if minutes:
        hours, minutes = divmod(minutes, 60)
        out = f"{minutes}m{out}"
        if hours:
            out = f"{hours}h{out}"
    return sign + out
