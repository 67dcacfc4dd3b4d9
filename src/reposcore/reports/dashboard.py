"""Combined multi-tab HTML dashboard for every repository of a run."""

import json
from datetime import datetime
from html import escape
from pathlib import Path

from reposcore.analyzers.aggregator import RepositoryAggregator
from reposcore.models.schemas import ReportArtifact, ReportRow, ScoreTable
from reposcore.reports.rows import COLUMNS, build_rows, row_values

TOTAL_TAB_ID = "total"
TOTAL_TAB_LABEL = "Total"

# Per-repository columns the total tab leaves out
RATE_COLUMNS = {"PR_rate", "IS_rate"}

REPO_HEADERS = ["Rank", "User", *COLUMNS]
TOTAL_HEADERS = ["Rank", "User", *(c for c in COLUMNS if c not in RATE_COLUMNS)]

STYLE = """
body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; margin: 24px; color: #24292f; }
h1 { font-size: 1.5em; }
.generated { color: #57606a; font-size: 0.9em; }
.tab { overflow: hidden; border-bottom: 1px solid #d0d7de; }
.tab button { background: none; border: none; outline: none; cursor: pointer; padding: 10px 16px; font-size: 1em; }
.tab button:hover { background-color: #f3f4f6; }
.tab button.active { border-bottom: 2px solid #fd8c73; font-weight: 600; }
.tabcontent { display: none; padding: 12px 0; }
table { border-collapse: collapse; }
th, td { border: 1px solid #d0d7de; padding: 4px 10px; }
th { background-color: #f6f8fa; }
td.num { text-align: right; }
"""

TAB_SCRIPT = """
function openTab(evt, tabName) {
  var i, tabcontent, tablinks;
  tabcontent = document.getElementsByClassName("tabcontent");
  for (i = 0; i < tabcontent.length; i++) {
    tabcontent[i].style.display = "none";
  }
  tablinks = document.getElementsByClassName("tablinks");
  for (i = 0; i < tablinks.length; i++) {
    tablinks[i].className = tablinks[i].className.replace(" active", "");
  }
  document.getElementById(tabName).style.display = "block";
  evt.currentTarget.className += " active";
}
document.addEventListener("DOMContentLoaded", function () {
  var tablinks = document.getElementsByClassName("tablinks");
  if (tablinks.length > 0) {
    tablinks[0].click();
  }
});
"""


def _cells(row: ReportRow, with_rates: bool) -> list[str]:
    values = [
        value
        for column, value in zip(COLUMNS, row_values(row))
        if with_rates or column not in RATE_COLUMNS
    ]
    return [f'<td class="num">{row.rank}</td>', f"<td>{escape(row.user)}</td>"] + [
        f'<td class="num">{value}</td>' for value in values
    ]


def _table_html(table: ScoreTable, with_rates: bool) -> str:
    headers = REPO_HEADERS if with_rates else TOTAL_HEADERS
    lines = ["<table>", "<tr>" + "".join(f"<th>{h}</th>" for h in headers) + "</tr>"]
    for row in build_rows(table, with_rates=with_rates):
        lines.append("<tr>" + "".join(_cells(row, with_rates)) + "</tr>")
    lines.append("</table>")
    return "\n".join(lines)


def _tab_button(tab_id: str, label: str) -> str:
    return (
        f'<button class="tablinks" onclick="openTab(event, {escape(json.dumps(tab_id))})">'
        f"{escape(label)}</button>"
    )


def _tab_content(tab_id: str, title: str, body: str) -> str:
    return f'<div id="{escape(tab_id)}" class="tabcontent">\n<h2>{escape(title)}</h2>\n{body}\n</div>'


def render_html_dashboard(
    aggregator: RepositoryAggregator,
    output_dir: Path,
    generated_at: datetime,
    timestamp_format: str = "%Y-%m-%d %H:%M",
) -> ReportArtifact:
    """Render ``index.html`` with one tab per repository plus a total tab.

    Repository tabs appear in ingestion order and show rates against that
    repository's own pools. The total tab is built from the aggregate and
    shows raw counts and totals only.

    Args:
        aggregator: Aggregator holding every repository of the run.
        output_dir: Root output folder.
        generated_at: Time shown in the page header.
        timestamp_format: strftime format for ``generated_at``.

    Returns:
        The HTML document and its destination path.
    """
    buttons = []
    contents = []
    for repo_name, table in aggregator.tables:
        buttons.append(_tab_button(repo_name, repo_name))
        contents.append(_tab_content(repo_name, repo_name, _table_html(table, with_rates=True)))

    buttons.append(_tab_button(TOTAL_TAB_ID, TOTAL_TAB_LABEL))
    contents.append(
        _tab_content(TOTAL_TAB_ID, TOTAL_TAB_LABEL, _table_html(aggregator.total_table, with_rates=False))
    )

    timestamp = generated_at.strftime(timestamp_format)
    document = "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            "<title>Contribution Scores</title>",
            f"<style>{STYLE}</style>",
            "</head>",
            "<body>",
            "<h1>Contribution Scores</h1>",
            f'<p class="generated">Generated: {escape(timestamp)}</p>',
            '<div class="tab">',
            *buttons,
            "</div>",
            *contents,
            f"<script>{TAB_SCRIPT}</script>",
            "</body>",
            "</html>",
        ]
    )
    return ReportArtifact(path=Path(output_dir) / "index.html", content=document + "\n")
