"""Dense competition ranking over score totals."""

from typing import Literal

from reposcore.models.schemas import RankedEntry, ScoreTable

Order = Literal["desc", "asc"]

ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal_suffix(rank: int) -> str:
    """Suffix shown after a rank in chart labels.

    Only 1, 2 and 3 get their own suffix; 11, 12, 13 (and 21, 22, ...) all
    read "th", matching the labels earlier reports were generated with.
    """
    return ORDINAL_SUFFIXES.get(rank, "th")


def rank(table: ScoreTable, order: Order = "desc") -> list[RankedEntry]:
    """Rank users by total using "1224" ranking.

    Users with equal totals share a rank; the next lower total is ranked by
    the number of users placed before it plus one. Ties are ordered by user id
    so the output is reproducible.

    Args:
        table: Scores of one repository (or the aggregate).
        order: "desc" lists the best score first, "asc" lists it last
            (horizontal bar charts draw the last bar on top).

    Returns:
        Ranked entries in the requested order.
    """
    ordered = sorted(table.items(), key=lambda kv: (-kv[1].total, kv[0]))

    entries: list[RankedEntry] = []
    current_rank = 1
    prev_total: float | None = None
    for placed, (user, record) in enumerate(ordered, 1):
        if prev_total is not None and record.total != prev_total:
            current_rank = placed
        entries.append(RankedEntry(rank=current_rank, user=user, total=record.total))
        prev_total = record.total

    if order == "asc":
        entries.sort(key=lambda e: (e.total, e.user))
    return entries


def rank_label(entry: RankedEntry) -> str:
    """Axis label for a ranked user, e.g. ``"alice (1st)"``."""
    return f"{entry.user} ({entry.rank}{ordinal_suffix(entry.rank)})"
