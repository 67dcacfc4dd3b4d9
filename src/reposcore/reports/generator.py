"""Write per-repository reports and the combined dashboard to disk."""

import logging
from datetime import datetime
from pathlib import Path

from reposcore.analyzers.aggregator import RepositoryAggregator
from reposcore.config import ReportSettings
from reposcore.models.schemas import ReportArtifact, ReportContext, RepoStateSummary, ScoreTable
from reposcore.reports.chart import render_chart
from reposcore.reports.dashboard import render_html_dashboard
from reposcore.reports.renderers import render_csv, render_state_summary, render_text_table
from reposcore.reports.rows import build_rows

logger = logging.getLogger(__name__)


class OutputDirectoryError(Exception):
    """Raised when a report folder cannot be created."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Could not create output directory {path}: {error}")


def write_artifact(artifact: ReportArtifact) -> Path:
    """Write a rendered report to its path."""
    if artifact.is_binary:
        artifact.path.write_bytes(artifact.content)
    else:
        artifact.path.write_text(artifact.content, encoding="utf-8")
    logger.info(f"Wrote {artifact.path}")
    return artifact.path


class ReportGenerator:
    """Generates the report files of one repository under ``<output_dir>/<repo_name>/``.

    The folder is created on construction; failure raises
    :class:`OutputDirectoryError` immediately rather than on the first write.
    """

    def __init__(
        self,
        table: ScoreTable,
        repo_name: str,
        output_dir: Path,
        settings: ReportSettings | None = None,
        generated_at: datetime | None = None,
    ):
        self.table = table
        self.repo_name = repo_name
        self.settings = settings or ReportSettings()
        self.folder = Path(output_dir) / repo_name

        try:
            self.folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(self.folder, e) from e

        self.context = ReportContext(
            repo_name=repo_name,
            folder=self.folder,
            generated_at=generated_at or datetime.now(),
            timestamp_format=self.settings.timestamp_format,
        )
        self.rows = build_rows(table)

    def generate_csv(self) -> Path:
        return write_artifact(render_csv(self.rows, self.context))

    def generate_table(self) -> Path:
        return write_artifact(render_text_table(self.rows, self.context))

    def generate_chart(self) -> Path:
        artifact = render_chart(
            self.table,
            self.context,
            width=self.settings.chart_width,
            height=self.settings.chart_height,
            dpi=self.settings.chart_dpi,
        )
        return write_artifact(artifact)

    def generate_state_summary(self, summary: RepoStateSummary) -> Path:
        return write_artifact(render_state_summary(summary, self.context))

    def generate_all(self, summary: RepoStateSummary | None = None, chart: bool = True) -> list[Path]:
        """Write every per-repository report.

        Args:
            summary: PR/issue state counts; the state file is skipped without it.
            chart: Whether to render the PNG chart.

        Returns:
            Paths of the written files.
        """
        written = [self.generate_csv(), self.generate_table()]
        if chart:
            written.append(self.generate_chart())
        if summary is not None:
            written.append(self.generate_state_summary(summary))
        else:
            logger.warning(f"No state summary for {self.repo_name}, skipping {self.repo_name}_state.txt")
        return written


def write_dashboard(
    aggregator: RepositoryAggregator,
    output_dir: Path,
    settings: ReportSettings | None = None,
    generated_at: datetime | None = None,
) -> Path:
    """Write ``<output_dir>/index.html`` from every repository ingested so far."""
    settings = settings or ReportSettings()
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(output_dir, e) from e

    artifact = render_html_dashboard(
        aggregator,
        output_dir,
        generated_at or datetime.now(),
        timestamp_format=settings.timestamp_format,
    )
    return write_artifact(artifact)
