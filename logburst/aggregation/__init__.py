"""
aggregation/__init__.py

Public API for the aggregation sub-package.
"""

from .ranking import select_top
from .window import EPOCH, WindowAggregator, aggregate, truncate

__all__ = [
    "WindowAggregator",
    "aggregate",
    "truncate",
    "select_top",
    "EPOCH",
]
