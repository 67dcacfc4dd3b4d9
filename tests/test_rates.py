"""Tests for percentage-of-pool rates."""

from __future__ import annotations

import pytest

from reposcore.analyzers.rates import format_rate, pools, rate, rates_for
from reposcore.models.schemas import ScoreRecord
from reposcore.reports.rows import build_rows


def test_rate_is_share_of_pool() -> None:
    assert rate(1, 4) == 25.0
    assert rate(3, 3) == 100.0


def test_rate_of_empty_pool_is_zero() -> None:
    assert rate(0, 0) == 0.0


def test_pools_sum_each_category(sample_table) -> None:
    table_pools = pools(sample_table)
    assert table_pools.pr == 4 + 6 + 1
    assert table_pools.issue == 3 + 4 + 1


def test_rates_for_record(sample_table) -> None:
    pr_rate, is_rate = rates_for(sample_table["alice"], pools(sample_table))
    assert pr_rate == pytest.approx(4 / 11 * 100)
    assert is_rate == pytest.approx(3 / 8 * 100)


def test_rates_reconstruct_pool(sample_table) -> None:
    table_pools = pools(sample_table)
    rows = build_rows(sample_table)
    assert sum(row.pr_rate * table_pools.pr for row in rows) / 100 == pytest.approx(table_pools.pr)
    assert sum(row.is_rate * table_pools.issue for row in rows) / 100 == pytest.approx(table_pools.issue)


def test_zero_issue_pool_gives_zero_rates() -> None:
    table = {
        "alice": ScoreRecord.from_counts(pr_fb=2),
        "bob": ScoreRecord.from_counts(pr_doc=1),
    }
    rows = build_rows(table)
    assert all(row.is_rate == 0.0 for row in rows)
    assert sum(row.pr_rate for row in rows) == pytest.approx(100.0)


def test_format_rate_one_decimal() -> None:
    assert format_rate(100 / 3) == "33.3"
    assert format_rate(0.0) == "0.0"
