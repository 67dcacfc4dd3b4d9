"""Previously generated ``<repo>.csv`` exports."""

import csv
import io

from pydantic import ValidationError

from reposcore.adapters.base import ScoreSource, ScoreSourceError
from reposcore.models.schemas import RepositoryScores, ScoreRecord

# CSV column -> ScoreRecord field; rate columns are recomputed, never read
CSV_FIELDS = {
    "f/b_PR": "pr_fb",
    "doc_PR": "pr_doc",
    "typo": "pr_typo",
    "f/b_issue": "is_fb",
    "doc_issue": "is_doc",
    "total": "total",
}


class CsvScoreSource(ScoreSource):
    """Reads a CSV export back into a score table.

    Comment lines starting with ``#`` above the header row are skipped. The
    repository name is the file stem. A CSV carries no state summary.
    """

    suffixes = (".csv",)

    def load(self) -> RepositoryScores:
        lines = self.read_text().splitlines()
        # Comments only precede the header row; later "#" lines are user ids
        start = 0
        while start < len(lines) and lines[start].startswith("#"):
            start += 1
        reader = csv.DictReader(io.StringIO("\n".join(lines[start:])))

        if reader.fieldnames is None:
            return RepositoryScores(repo_name=self.path.stem)

        missing = [col for col in ["User", *CSV_FIELDS] if col not in reader.fieldnames]
        if missing:
            raise ScoreSourceError(self.path, f"missing columns: {', '.join(missing)}")

        scores = {}
        for line_no, row in enumerate(reader, 1):
            try:
                scores[row["User"]] = ScoreRecord(**{field: row[col] for col, field in CSV_FIELDS.items()})
            except ValidationError as e:
                raise ScoreSourceError(self.path, f"row {line_no}: {e}") from e

        return RepositoryScores(repo_name=self.path.stem, scores=scores)
