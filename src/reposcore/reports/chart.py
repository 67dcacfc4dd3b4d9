"""Horizontal bar chart of user totals."""

import io
import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from pydantic import BaseModel  # noqa: E402

from reposcore.analyzers.ranker import rank_label  # noqa: E402
from reposcore.models.schemas import (  # noqa: E402
    RankedEntry,
    ReportArtifact,
    ReportContext,
    ScoreTable,
)
from reposcore.reports.rows import build_rows, format_total, score_stats  # noqa: E402

logger = logging.getLogger(__name__)

BAR_SPACING = 10
BAR_HEIGHT = 5
BAR_COLOR = "steelblue"


class ChartData(BaseModel):
    """Geometry of the bar chart, bottom bar first."""

    title: str
    labels: list[str] = []
    values: list[float] = []
    positions: list[float] = []
    value_labels: list[tuple[float, str]] = []
    x_max: float = 0.0


def build_chart_data(table: ScoreTable, context: ReportContext) -> ChartData:
    """Compute bar order, labels and axis limits for a table.

    Bars are ascending by total starting at position 0, so the best score is
    drawn on top. An empty table yields an empty chart with zero statistics.
    """
    rows = build_rows(table, order="asc", with_rates=False)
    stats = score_stats(table)

    labels = []
    values = []
    for row in rows:
        labels.append(rank_label(RankedEntry(rank=row.rank, user=row.user, total=row.total)))
        values.append(float(row.total))

    offset = stats.maximum * 0.01
    title = (
        f"Repo: {context.repo_name} Date: {context.timestamp} "
        f"Avg: {stats.average:.1f} Max: {format_total(stats.maximum)} Min: {format_total(stats.minimum)}"
    )

    return ChartData(
        title=title,
        labels=labels,
        values=values,
        positions=[i * BAR_SPACING for i in range(len(values))],
        value_labels=[(value + offset, f"{value:.1f}") for value in values],
        x_max=stats.maximum * 1.1,
    )


def render_chart(
    table: ScoreTable,
    context: ReportContext,
    width: int = 1080,
    height: int = 1920,
    dpi: int = 100,
) -> ReportArtifact:
    """Render the ``<repo>_chart.png`` bar chart.

    Args:
        table: Scores of one repository.
        context: Repository name, folder and generation time.
        width: Image width in pixels.
        height: Image height in pixels.
        dpi: Resolution used to convert the pixel size to inches.

    Returns:
        PNG bytes and their destination path.
    """
    data = build_chart_data(table, context)

    fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        if data.values:
            ax.barh(data.positions, data.values, height=BAR_HEIGHT, color=BAR_COLOR)
            for position, (x, text) in zip(data.positions, data.value_labels):
                ax.text(x, position, text, ha="left", va="center")
            ax.set_yticks(data.positions)
            ax.set_yticklabels(data.labels)
        else:
            logger.debug(f"No scores for {context.repo_name}, rendering empty chart")

        if data.x_max > 0:
            ax.set_xlim(0, data.x_max)

        ax.set_title(data.title)
        ax.set_xlabel("Total Score")
        ax.set_ylabel("User")
        fig.tight_layout()

        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=dpi)
    finally:
        plt.close(fig)

    return ReportArtifact(
        path=context.folder / f"{context.repo_name}_chart.png",
        content=buffer.getvalue(),
    )
