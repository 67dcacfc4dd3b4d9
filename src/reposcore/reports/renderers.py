"""Text renderers: CSV export, fixed-width table and repository state summary."""

import csv
import io

from prettytable import PrettyTable

from reposcore.models.schemas import (
    WEIGHT_LEGEND,
    ReportArtifact,
    ReportContext,
    ReportRow,
    RepoStateSummary,
)
from reposcore.reports.rows import COLUMNS, row_values

CSV_USER_LABEL = "User"
TABLE_USER_LABEL = "UserId"

# Order is part of the file format
STATE_LABELS = [
    ("Merged PR", "merged_pr"),
    ("Unmerged PR", "unmerged_pr"),
    ("Open Issue", "open_issue"),
    ("Closed Issue", "closed_issue"),
]


def comment_header(context: ReportContext) -> list[str]:
    """Comment lines written above the CSV and text table."""
    return [
        f"# Generated: {context.timestamp}",
        f"# Score weights: {WEIGHT_LEGEND}",
    ]


def render_csv(rows: list[ReportRow], context: ReportContext) -> ReportArtifact:
    """Render rows as ``<repo>.csv``.

    Args:
        rows: Report rows, best score first.
        context: Repository name, folder and generation time.

    Returns:
        The CSV text and its destination path.
    """
    buffer = io.StringIO()
    for line in comment_header(context):
        buffer.write(line + "\n")

    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([CSV_USER_LABEL, *COLUMNS])
    for row in rows:
        writer.writerow([row.user, *row_values(row)])

    return ReportArtifact(
        path=context.folder / f"{context.repo_name}.csv",
        content=buffer.getvalue(),
    )


def format_table(rows: list[ReportRow]) -> str:
    """Lay rows out as a fixed-width table.

    The user column is left-aligned, every numeric column right-aligned.
    An empty table still prints its header.
    """
    table = PrettyTable()
    table.field_names = [TABLE_USER_LABEL, *COLUMNS]
    for column in COLUMNS:
        table.align[column] = "r"
    table.align[TABLE_USER_LABEL] = "l"

    for row in rows:
        table.add_row([row.user, *row_values(row)])

    return table.get_string() + "\n"


def render_text_table(rows: list[ReportRow], context: ReportContext) -> ReportArtifact:
    """Render rows as the ``<repo>1.txt`` table, prefixed by the comment header."""
    content = "\n".join(comment_header(context)) + "\n" + format_table(rows)
    return ReportArtifact(
        path=context.folder / f"{context.repo_name}1.txt",
        content=content,
    )


def render_state_summary(summary: RepoStateSummary, context: ReportContext) -> ReportArtifact:
    """Render the four PR/issue state counters as ``Label: value`` lines."""
    lines = [f"{label}: {getattr(summary, field)}" for label, field in STATE_LABELS]
    return ReportArtifact(
        path=context.folder / f"{context.repo_name}_state.txt",
        content="\n".join(lines) + "\n",
    )
