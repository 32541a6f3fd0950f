"""
tests/test_ranking.py

Tests for aggregation/ranking.py: top-N selection and tie ordering.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from logburst.aggregation.ranking import select_top
from logburst.models import BurstRecord


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

START = datetime(2023, 10, 10, 10, 0, tzinfo=timezone.utc)


def rec(ip: str, count: int) -> BurstRecord:
    return BurstRecord(ip=ip, count=count, window_start=START,
                       window_end=START + timedelta(minutes=10))


def best(*records: BurstRecord) -> dict[str, BurstRecord]:
    return {r.ip: r for r in records}


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

class TestSelectTopOrdering:

    def test_sorted_by_count_descending(self):
        result = select_top(best(rec("a", 1), rec("b", 5), rec("c", 3)), limit=10)
        assert [r.ip for r in result] == ["b", "c", "a"]

    def test_ties_broken_by_ip(self):
        result = select_top(best(rec("10.0.0.9", 4), rec("10.0.0.1", 4), rec("10.0.0.5", 4)),
                            limit=10)
        assert [r.ip for r in result] == ["10.0.0.1", "10.0.0.5", "10.0.0.9"]

    def test_tie_order_independent_of_insertion(self):
        records = [rec("c", 2), rec("a", 2), rec("b", 2)]
        forward = select_top(best(*records), limit=3)
        backward = select_top(best(*reversed(records)), limit=3)
        assert forward == backward


# ---------------------------------------------------------------------------
# Limit handling
# ---------------------------------------------------------------------------

class TestSelectTopLimit:

    def test_truncates_to_limit(self):
        result = select_top(best(rec("a", 1), rec("b", 2), rec("c", 3)), limit=2)
        assert [r.ip for r in result] == ["c", "b"]

    @pytest.mark.parametrize("limit", [0, -1, -100])
    def test_non_positive_limit_is_empty(self, limit):
        assert select_top(best(rec("a", 1)), limit=limit) == []

    def test_limit_above_size_returns_all(self):
        result = select_top(best(rec("a", 1), rec("b", 2)), limit=50)
        assert len(result) == 2

    @pytest.mark.parametrize("limit", [0, 1, 10])
    def test_empty_input(self, limit):
        assert select_top({}, limit=limit) == []

    def test_returned_counts_dominate_the_rest(self):
        records = best(*(rec(f"ip{i}", (i * 7) % 11) for i in range(20)))
        top = select_top(records, limit=5)
        kept = {r.ip for r in top}
        floor = min(r.count for r in top)
        assert all(r.count <= floor for ip, r in records.items() if ip not in kept)

    def test_does_not_mutate_input(self):
        records = best(rec("a", 1), rec("b", 2))
        select_top(records, limit=1)
        assert set(records) == {"a", "b"}
