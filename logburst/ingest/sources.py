"""
ingest/sources.py

Log file discovery and opening.

  - discover_files() expands a glob pattern and sorts the result so that
    multi-file scans always see files (and therefore events) in the same order
  - open_log() yields a text stream, decompressing *.gz transparently
  - Every I/O failure is re-raised as LogSourceError naming the file, which
    aborts the whole scan before any report is written
"""

from __future__ import annotations

import glob
import gzip
import logging
from contextlib import contextmanager
from typing import IO, Iterator

logger = logging.getLogger(__name__)


class LogSourceError(Exception):
    """A log file (or pattern) could not be enumerated, opened or read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def discover_files(pattern: str) -> list[str]:
    """
    Expand `pattern` into a sorted list of file paths.

    Raises:
        LogSourceError: if nothing matches.
    """
    files = sorted(glob.glob(pattern))
    if not files:
        raise LogSourceError(pattern, "no log files match this pattern")
    logger.info("Found %d log file(s) for pattern %r", len(files), pattern)
    return files


def is_gzip(path: str) -> bool:
    return path.endswith(".gz")


@contextmanager
def open_log(path: str) -> Iterator[IO[str]]:
    """
    Open a log file for line iteration, decompressing gzip files.

    Undecodable bytes are replaced rather than raising. Errors raised while
    the caller iterates (e.g. a truncated gzip stream) are converted too.
    """
    try:
        if is_gzip(path):
            stream = gzip.open(path, "rt", encoding="utf-8", errors="replace")
        else:
            stream = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise LogSourceError(path, f"cannot open ({exc.strerror or exc})") from exc

    logger.info("Reading %s%s", path, " (gzip)" if is_gzip(path) else "")
    try:
        with stream:
            yield stream
    except (OSError, EOFError) as exc:
        # gzip.BadGzipFile is an OSError; a truncated archive raises EOFError
        raise LogSourceError(path, f"read failed ({exc})") from exc
