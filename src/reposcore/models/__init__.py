"""Data models and schemas."""

from reposcore.models.schemas import (
    RankedEntry,
    RepositoryScores,
    RepoStateSummary,
    ReportArtifact,
    ReportContext,
    ReportRow,
    ScoreRecord,
    ScoreStats,
    ScoreTable,
)

__all__ = [
    "ScoreRecord",
    "ScoreTable",
    "RepoStateSummary",
    "RepositoryScores",
    "RankedEntry",
    "ReportRow",
    "ScoreStats",
    "ReportContext",
    "ReportArtifact",
]
