"""Tests for cross-repository aggregation."""

from __future__ import annotations

from reposcore.analyzers.aggregator import RepositoryAggregator
from reposcore.models.schemas import ScoreRecord


def test_ingest_records_repositories_in_order(sample_table) -> None:
    aggregator = RepositoryAggregator()
    aggregator.ingest("repoB", sample_table)
    aggregator.ingest("repoA", {})
    assert aggregator.repositories == ["repoB", "repoA"]
    assert [name for name, _ in aggregator.tables] == ["repoB", "repoA"]
    assert len(aggregator) == 2


def test_first_occurrence_is_copied(sample_table) -> None:
    aggregator = RepositoryAggregator()
    aggregator.ingest("repoA", sample_table)
    assert aggregator.total_table == sample_table
    assert aggregator.total_table["alice"] is not sample_table["alice"]


def test_ingesting_same_repository_twice_doubles_fields(sample_table) -> None:
    aggregator = RepositoryAggregator()
    aggregator.ingest("repoA", sample_table)
    aggregator.ingest("repoA", sample_table)

    for user, record in sample_table.items():
        merged = aggregator.total_table[user]
        assert merged.pr_fb == record.pr_fb * 2
        assert merged.pr_doc == record.pr_doc * 2
        assert merged.pr_typo == record.pr_typo * 2
        assert merged.is_fb == record.is_fb * 2
        assert merged.is_doc == record.is_doc * 2
        assert merged.total == record.total * 2


def test_merge_sums_supplied_totals() -> None:
    aggregator = RepositoryAggregator()
    aggregator.ingest("repoA", {"alice": ScoreRecord(pr_fb=1, total=99)})
    aggregator.ingest("repoB", {"alice": ScoreRecord(pr_fb=1, total=1), "bob": ScoreRecord(total=2)})

    assert aggregator.total_table["alice"].total == 100
    assert aggregator.total_table["alice"].pr_fb == 2
    assert aggregator.total_table["bob"].total == 2


def test_ingest_does_not_modify_input(sample_table) -> None:
    before = dict(sample_table)
    aggregator = RepositoryAggregator()
    aggregator.ingest("repoA", sample_table)
    aggregator.ingest("repoB", sample_table)
    assert sample_table == before


def test_separate_aggregators_are_isolated(sample_table) -> None:
    first = RepositoryAggregator()
    first.ingest("repoA", sample_table)
    second = RepositoryAggregator()
    assert second.total_table == {}
    assert second.repositories == []
