"""JSON score documents."""

import json

from pydantic import ValidationError

from reposcore.adapters.base import ScoreSource, ScoreSourceError
from reposcore.models.schemas import RepositoryScores


class JsonScoreSource(ScoreSource):
    """Reads ``{"repo_name": ..., "scores": {...}, "state": {...}}`` documents.

    ``repo_name`` defaults to the file stem. Records may use either
    ``PR_fb``-style or ``pr_fb``-style keys and may omit ``total``, which is
    then filled from the scoring weights.
    """

    suffixes = (".json",)

    def load(self) -> RepositoryScores:
        try:
            data = json.loads(self.read_text())
        except json.JSONDecodeError as e:
            raise ScoreSourceError(self.path, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ScoreSourceError(self.path, "expected a JSON object")

        data.setdefault("repo_name", self.path.stem)
        try:
            return RepositoryScores.model_validate(data)
        except ValidationError as e:
            raise ScoreSourceError(self.path, str(e)) from e
