"""
aggregation/ranking.py

Top-N selection over per-IP best windows.

Ordering: count descending, then IP ascending (plain string order) so that
equal counts always come out in the same order regardless of dict history.
"""

from __future__ import annotations

import logging
from typing import Mapping

from ..models import BurstRecord

logger = logging.getLogger(__name__)


def _rank_key(record: BurstRecord) -> tuple[int, str]:
    return (-record.count, record.ip)


def select_top(
    best_per_ip: Mapping[str, BurstRecord],
    limit: int,
) -> list[BurstRecord]:
    """
    Return at most `limit` records, highest count first.

    `limit <= 0` yields an empty list; a limit above the number of IPs
    returns all of them.
    """
    if limit <= 0:
        return []
    ranked = sorted(best_per_ip.values(), key=_rank_key)
    logger.debug("Ranked %d IPs, keeping top %d", len(ranked), limit)
    return ranked[:limit]
