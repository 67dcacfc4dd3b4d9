"""Shared fixtures."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from reposcore.models.schemas import ReportContext, ScoreRecord, ScoreTable


@pytest.fixture
def sample_table() -> ScoreTable:
    return {
        "alice": ScoreRecord.from_counts(pr_fb=3, pr_doc=1, pr_typo=0, is_fb=2, is_doc=1),
        "bob": ScoreRecord.from_counts(pr_fb=1, pr_doc=2, pr_typo=3, is_fb=0, is_doc=4),
        "carol": ScoreRecord.from_counts(pr_fb=0, pr_doc=0, pr_typo=1, is_fb=1, is_doc=0),
    }


@pytest.fixture
def generated_at() -> datetime:
    return datetime(2024, 5, 1, 9, 30)


@pytest.fixture
def context(tmp_path: Path, generated_at: datetime) -> ReportContext:
    return ReportContext(repo_name="repoA", folder=tmp_path / "repoA", generated_at=generated_at)
