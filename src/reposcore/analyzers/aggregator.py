"""Running cross-repository score totals."""

import logging

from reposcore.models.schemas import ScoreTable

logger = logging.getLogger(__name__)


class RepositoryAggregator:
    """Accumulates per-repository score tables into one aggregate table.

    One aggregator lives for one run: create it before the first repository,
    ingest every repository in processing order, read it when the combined
    dashboard is rendered.

    Ingestion is a read-modify-write of the aggregate and is not thread-safe.
    Callers that score repositories in parallel must serialize ``ingest``.

    Usage:
        aggregator = RepositoryAggregator()
        for name, table in tables:
            aggregator.ingest(name, table)
        combined = aggregator.total_table
    """

    def __init__(self) -> None:
        self._repositories: list[str] = []
        self._tables: list[tuple[str, ScoreTable]] = []
        self._total: ScoreTable = {}

    def ingest(self, repo_name: str, table: ScoreTable) -> None:
        """Record a repository and merge its scores into the aggregate.

        Args:
            repo_name: Repository name, kept in ingestion order.
            table: The repository's score table. It is not modified.
        """
        self._repositories.append(repo_name)
        self._tables.append((repo_name, dict(table)))

        for user, record in table.items():
            current = self._total.get(user)
            if current is None:
                self._total[user] = record.model_copy()
            else:
                self._total[user] = current + record

        logger.debug(f"Ingested {repo_name}: {len(table)} users, {len(self._total)} in aggregate")

    @property
    def repositories(self) -> list[str]:
        """Names of ingested repositories, in ingestion order."""
        return list(self._repositories)

    @property
    def tables(self) -> list[tuple[str, ScoreTable]]:
        """Per-repository tables, in ingestion order."""
        return [(name, dict(table)) for name, table in self._tables]

    @property
    def total_table(self) -> ScoreTable:
        """Merged scores of every repository ingested so far."""
        return dict(self._total)

    def __len__(self) -> int:
        return len(self._repositories)
