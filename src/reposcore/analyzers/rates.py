"""Percentage-of-pool rates for the PR and issue categories."""

from typing import NamedTuple

from reposcore.models.schemas import ScoreRecord, ScoreTable


class RatePools(NamedTuple):
    """Category sums across every user of one table."""

    pr: int
    issue: int


def rate(category_sum: float, pool_sum: float) -> float:
    """Share of a pool, as a percentage.

    Args:
        category_sum: One user's contributions in the category.
        pool_sum: Contributions of all users in the same table.

    Returns:
        ``category_sum / pool_sum * 100``, or exactly 0.0 for an empty pool.
    """
    if pool_sum == 0:
        return 0.0
    return category_sum / pool_sum * 100


def pools(table: ScoreTable) -> RatePools:
    """Sum the PR and issue categories over a whole table."""
    pr_pool = 0
    issue_pool = 0
    for record in table.values():
        pr_pool += record.pr_sum
        issue_pool += record.issue_sum
    return RatePools(pr=pr_pool, issue=issue_pool)


def rates_for(record: ScoreRecord, table_pools: RatePools) -> tuple[float, float]:
    """Return the (PR rate, issue rate) of one record against its table's pools."""
    return rate(record.pr_sum, table_pools.pr), rate(record.issue_sum, table_pools.issue)


def format_rate(value: float) -> str:
    """Format a rate for display (one decimal digit)."""
    return f"{value:.1f}"
