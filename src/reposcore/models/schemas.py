"""Pydantic models for contribution scores and reports."""

from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Score weights per contribution category
WEIGHTS = {
    "pr_fb": 3,
    "pr_doc": 2,
    "pr_typo": 1,
    "is_fb": 2,
    "is_doc": 1,
}

WEIGHT_LEGEND = "PR_fb*3, PR_doc*2, PR_typo*1, IS_fb*2, IS_doc*1"


class ScoreRecord(BaseModel):
    """Per-user contribution breakdown with its weighted total.

    ``total`` is trusted as supplied. Merging two records adds every field,
    ``total`` included, so a consistent record stays consistent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pr_fb: int = Field(default=0, ge=0, alias="PR_fb")
    pr_doc: int = Field(default=0, ge=0, alias="PR_doc")
    pr_typo: int = Field(default=0, ge=0, alias="PR_typo")
    is_fb: int = Field(default=0, ge=0, alias="IS_fb")
    is_doc: int = Field(default=0, ge=0, alias="IS_doc")
    total: float = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _fill_total(cls, data: Any) -> Any:
        # Input documents may leave the total to us
        if isinstance(data, dict) and data.get("total") is None:
            try:
                total = sum(
                    int(data.get(name, data.get(cls.model_fields[name].alias, 0)) or 0) * weight
                    for name, weight in WEIGHTS.items()
                )
            except (TypeError, ValueError):
                # Leave it to field validation to report the bad count
                return data
            data = dict(data)
            data["total"] = total
        return data

    @classmethod
    def from_counts(
        cls,
        pr_fb: int = 0,
        pr_doc: int = 0,
        pr_typo: int = 0,
        is_fb: int = 0,
        is_doc: int = 0,
    ) -> "ScoreRecord":
        """Build a record whose total is the weighted sum of the counts."""
        counts = {
            "pr_fb": pr_fb,
            "pr_doc": pr_doc,
            "pr_typo": pr_typo,
            "is_fb": is_fb,
            "is_doc": is_doc,
        }
        total = sum(counts[name] * weight for name, weight in WEIGHTS.items())
        return cls(total=total, **counts)

    @property
    def pr_sum(self) -> int:
        """PR contributions of this user across all PR categories."""
        return self.pr_fb + self.pr_doc + self.pr_typo

    @property
    def issue_sum(self) -> int:
        """Issue contributions of this user across all issue categories."""
        return self.is_fb + self.is_doc

    def __add__(self, other: "ScoreRecord") -> "ScoreRecord":
        if not isinstance(other, ScoreRecord):
            return NotImplemented
        return ScoreRecord(
            pr_fb=self.pr_fb + other.pr_fb,
            pr_doc=self.pr_doc + other.pr_doc,
            pr_typo=self.pr_typo + other.pr_typo,
            is_fb=self.is_fb + other.is_fb,
            is_doc=self.is_doc + other.is_doc,
            total=self.total + other.total,
        )


# user id -> record, one table per repository
ScoreTable = dict[str, ScoreRecord]


class RepoStateSummary(BaseModel):
    """PR and issue state counts for one repository."""

    model_config = ConfigDict(populate_by_name=True)

    merged_pr: int = Field(default=0, ge=0, alias="MergedPR")
    unmerged_pr: int = Field(default=0, ge=0, alias="UnmergedPR")
    open_issue: int = Field(default=0, ge=0, alias="OpenIssue")
    closed_issue: int = Field(default=0, ge=0, alias="ClosedIssue")


class RankedEntry(BaseModel):
    """A user's place in a ranking."""

    rank: int = Field(ge=1)
    user: str
    total: float


class ReportRow(BaseModel):
    """One user's line in every report format."""

    rank: int
    user: str
    record: ScoreRecord
    pr_rate: float = 0.0
    is_rate: float = 0.0

    @property
    def total(self) -> float:
        return self.record.total


class ScoreStats(BaseModel):
    """Average, max and min of the totals in a table (all 0 when empty)."""

    average: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0


class ReportContext(BaseModel):
    """Metadata shared by the renderers of one repository."""

    repo_name: str
    folder: Path
    generated_at: datetime
    timestamp_format: str = "%Y-%m-%d %H:%M"

    @property
    def timestamp(self) -> str:
        return self.generated_at.strftime(self.timestamp_format)


class ReportArtifact(BaseModel):
    """A rendered report and where it belongs on disk."""

    path: Path
    content: str | bytes

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)


class RepositoryScores(BaseModel):
    """Everything loaded for one repository: its scores and optional state counts."""

    repo_name: str
    scores: dict[str, ScoreRecord] = Field(default_factory=dict)
    state: RepoStateSummary | None = None
