"""Shared report rows.

Every output format is built from the rows returned by :func:`build_rows`, so
ranks and rates are computed in one place and the formats cannot disagree.
"""

from reposcore.analyzers.ranker import Order, rank
from reposcore.analyzers.rates import format_rate, pools, rates_for
from reposcore.models.schemas import ReportRow, ScoreStats, ScoreTable

# Column labels shared by the CSV and text table
COLUMNS = ["f/b_PR", "doc_PR", "typo", "f/b_issue", "doc_issue", "PR_rate", "IS_rate", "total"]


def build_rows(table: ScoreTable, order: Order = "desc", with_rates: bool = True) -> list[ReportRow]:
    """Rank a table and attach each user's rates.

    Args:
        table: Scores of one repository, or the aggregate.
        order: "desc" for tables, "asc" for horizontal bar charts.
        with_rates: Compute PR/issue rates against the table's own pools.
            The aggregate view leaves them at 0.0.

    Returns:
        One row per user in the requested order.
    """
    table_pools = pools(table)
    rows = []
    for entry in rank(table, order):
        record = table[entry.user]
        pr_rate, is_rate = rates_for(record, table_pools) if with_rates else (0.0, 0.0)
        rows.append(
            ReportRow(
                rank=entry.rank,
                user=entry.user,
                record=record,
                pr_rate=pr_rate,
                is_rate=is_rate,
            )
        )
    return rows


def score_stats(table: ScoreTable) -> ScoreStats:
    """Average, max and min of the totals; all 0 for an empty table."""
    if not table:
        return ScoreStats()
    totals = [record.total for record in table.values()]
    return ScoreStats(
        average=sum(totals) / len(totals),
        maximum=max(totals),
        minimum=min(totals),
    )


def format_total(value: float) -> str:
    """Format a total without a trailing ``.0`` when it is whole."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def row_values(row: ReportRow) -> list[str]:
    """Cell values of a row, in :data:`COLUMNS` order."""
    record = row.record
    return [
        str(record.pr_fb),
        str(record.pr_doc),
        str(record.pr_typo),
        str(record.is_fb),
        str(record.is_doc),
        format_rate(row.pr_rate),
        format_rate(row.is_rate),
        format_total(record.total),
    ]
