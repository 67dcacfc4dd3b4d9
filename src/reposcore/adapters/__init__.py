"""Score input sources."""

from pathlib import Path

from reposcore.adapters.base import ScoreSource, ScoreSourceError
from reposcore.adapters.csv_source import CsvScoreSource
from reposcore.adapters.json_source import JsonScoreSource
from reposcore.models.schemas import RepositoryScores

# Supported input formats by file suffix
SOURCES: list[type[ScoreSource]] = [JsonScoreSource, CsvScoreSource]


def get_source(path: Path) -> ScoreSource:
    """Get the source that reads the given file.

    Raises:
        ScoreSourceError: If no source handles the file suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    for source_class in SOURCES:
        if suffix in source_class.suffixes:
            return source_class(path)
    supported = ", ".join(s for source_class in SOURCES for s in source_class.suffixes)
    raise ScoreSourceError(path, f"unsupported file type '{path.suffix}'. Supported: {supported}")


def load_source(path: Path) -> RepositoryScores:
    """Load one repository's scores, picking the reader by file suffix."""
    return get_source(path).load()


__all__ = ["CsvScoreSource", "JsonScoreSource", "ScoreSource", "ScoreSourceError", "get_source", "load_source"]
