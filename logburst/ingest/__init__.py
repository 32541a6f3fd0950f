"""
ingest/__init__.py

Public API for the ingest sub-package.
"""

from .filter import LineFilter
from .parser import parse_line, parse_timestamp
from .reader import LogReader
from .sources import LogSourceError, discover_files, open_log

__all__ = [
    "LogReader",
    "LineFilter",
    "LogSourceError",
    "discover_files",
    "open_log",
    "parse_line",
    "parse_timestamp",
]
