"""Tests for the CSV, text table and state summary renderers."""

from __future__ import annotations

import csv
import io

import pytest

from reposcore.adapters.csv_source import CsvScoreSource
from reposcore.models.schemas import RepoStateSummary, ScoreRecord
from reposcore.reports.renderers import render_csv, render_state_summary, render_text_table
from reposcore.reports.rows import build_rows

CSV_HEADER = "User,f/b_PR,doc_PR,typo,f/b_issue,doc_issue,PR_rate,IS_rate,total"


def _data_lines(content: str) -> list[str]:
    return [line for line in content.splitlines() if not line.startswith("#")]


def test_csv_header_and_comments(sample_table, context) -> None:
    artifact = render_csv(build_rows(sample_table), context)
    lines = artifact.content.splitlines()

    assert artifact.path == context.folder / "repoA.csv"
    assert lines[0] == "# Generated: 2024-05-01 09:30"
    assert lines[1] == "# Score weights: PR_fb*3, PR_doc*2, PR_typo*1, IS_fb*2, IS_doc*1"
    assert lines[2] == CSV_HEADER


def test_csv_rows_sorted_by_total(sample_table, context) -> None:
    artifact = render_csv(build_rows(sample_table), context)
    rows = list(csv.DictReader(io.StringIO("\n".join(_data_lines(artifact.content)))))

    assert [row["User"] for row in rows] == ["alice", "bob", "carol"]
    assert rows[0] == {
        "User": "alice",
        "f/b_PR": "3",
        "doc_PR": "1",
        "typo": "0",
        "f/b_issue": "2",
        "doc_issue": "1",
        "PR_rate": "36.4",
        "IS_rate": "37.5",
        "total": "16",
    }


def test_csv_rates_with_empty_pool(context) -> None:
    table = {"alice": ScoreRecord.from_counts(is_fb=1)}
    artifact = render_csv(build_rows(table), context)
    assert _data_lines(artifact.content)[1] == "alice,0,0,0,1,0,0.0,100.0,2"


def test_csv_round_trip_reproduces_rates(sample_table, context) -> None:
    artifact = render_csv(build_rows(sample_table), context)
    context.folder.mkdir(parents=True)
    artifact.path.write_text(artifact.content, encoding="utf-8")

    loaded = CsvScoreSource(artifact.path).load()
    assert loaded.scores == sample_table

    original = list(csv.DictReader(io.StringIO("\n".join(_data_lines(artifact.content)))))
    recomputed = build_rows(loaded.scores)
    for expected, row in zip(original, recomputed):
        assert expected["User"] == row.user
        assert float(expected["PR_rate"]) == pytest.approx(row.pr_rate, abs=0.05)
        assert float(expected["IS_rate"]) == pytest.approx(row.is_rate, abs=0.05)


def test_csv_round_trip_keeps_hash_user_ids(context) -> None:
    table = {
        "#hash": ScoreRecord.from_counts(pr_fb=5),
        "bob": ScoreRecord.from_counts(is_doc=1),
    }
    artifact = render_csv(build_rows(table), context)
    context.folder.mkdir(parents=True)
    artifact.path.write_text(artifact.content, encoding="utf-8")

    assert CsvScoreSource(artifact.path).load().scores == table


def test_empty_table_csv_has_header_only(context) -> None:
    artifact = render_csv(build_rows({}), context)
    assert _data_lines(artifact.content) == [CSV_HEADER]


def _table_cells(line: str) -> list[str]:
    """Raw cell text of a ``| a | b |`` table line, padding included."""
    return line.strip()[1:-1].split("|")


def _table_lines(content: str) -> list[str]:
    return [line for line in content.splitlines() if line.startswith("|")]


def test_text_table_layout(sample_table, context) -> None:
    artifact = render_text_table(build_rows(sample_table), context)
    lines = artifact.content.splitlines()

    assert artifact.path == context.folder / "repoA1.txt"
    assert lines[0] == "# Generated: 2024-05-01 09:30"
    assert lines[1].startswith("# Score weights: ")

    header, *data = _table_lines(artifact.content)
    assert [cell.strip() for cell in _table_cells(header)] == [
        "UserId", "f/b_PR", "doc_PR", "typo", "f/b_issue", "doc_issue", "PR_rate", "IS_rate", "total",
    ]
    assert [_table_cells(line)[0].strip() for line in data] == ["alice", "bob", "carol"]
    assert [cell.strip() for cell in _table_cells(data[0])] == [
        "alice", "3", "1", "0", "2", "1", "36.4", "37.5", "16",
    ]


def test_text_table_alignment(sample_table, context) -> None:
    header, *data = _table_lines(render_text_table(build_rows(sample_table), context).content)
    carol = _table_cells(data[2])

    # user left-aligned, numbers right-aligned, columns at least label-wide
    assert carol[0].startswith(" carol ")
    assert carol[1] == "      0 "
    assert carol[8].endswith(" 3 ")
    assert all(len(cell) >= len(label.strip()) + 2 for cell, label in zip(carol, _table_cells(header)))


def test_empty_table_text_has_header_only(context) -> None:
    content = render_text_table(build_rows({}), context).content
    lines = _table_lines(content)

    assert len(lines) == 1
    assert "UserId" in lines[0]
    assert content.splitlines()[0].startswith("# Generated: ")


def test_state_summary_order(context) -> None:
    summary = RepoStateSummary(merged_pr=3, unmerged_pr=1, open_issue=2, closed_issue=5)
    artifact = render_state_summary(summary, context)

    assert artifact.path == context.folder / "repoA_state.txt"
    assert artifact.content.splitlines() == [
        "Merged PR: 3",
        "Unmerged PR: 1",
        "Open Issue: 2",
        "Closed Issue: 5",
    ]
