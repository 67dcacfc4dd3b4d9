"""Report renderers and file generation."""

from reposcore.reports.chart import ChartData, build_chart_data, render_chart
from reposcore.reports.dashboard import render_html_dashboard
from reposcore.reports.generator import OutputDirectoryError, ReportGenerator, write_dashboard
from reposcore.reports.renderers import render_csv, render_state_summary, render_text_table
from reposcore.reports.rows import build_rows, score_stats

__all__ = [
    "ChartData",
    "OutputDirectoryError",
    "ReportGenerator",
    "build_chart_data",
    "build_rows",
    "render_chart",
    "render_csv",
    "render_html_dashboard",
    "render_state_summary",
    "render_text_table",
    "score_stats",
    "write_dashboard",
]
