"""Abstract base class for score input sources."""

from abc import ABC, abstractmethod
from pathlib import Path

from reposcore.models.schemas import RepositoryScores


class ScoreSource(ABC):
    """Base class for score input sources.

    Each source reads finished score records for one repository from a file
    and normalizes them into :class:`RepositoryScores`.
    """

    suffixes: tuple[str, ...] = ()

    def __init__(self, path: Path):
        self.path = Path(path)

    @abstractmethod
    def load(self) -> RepositoryScores:
        """Read the file.

        Returns:
            RepositoryScores with the repository name, its score table and,
            when the format carries one, its state summary.

        Raises:
            ScoreSourceError: If the file cannot be read or is malformed.
        """
        ...

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ScoreSourceError(self.path, str(e)) from e


class ScoreSourceError(Exception):
    """Raised when a score input cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load scores from {path}: {reason}")
