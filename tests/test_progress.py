"""Tests for console reporting."""

from __future__ import annotations

from reposync.core.types import RepoStatus, RunOutcome, RunSummary
from reposync.operations.base import OperationResult, OperationStatus
from reposync.utils.progress import print_closing, print_pull_summary, print_summary


def build_summary(*statuses: RepoStatus) -> RunSummary:
    summary = RunSummary()
    summary.extend(list(statuses))
    return summary


class TestPrintSummary:
    """Tests for print_summary."""

    def test_lines_are_printed_in_order(self, capsys) -> None:
        summary = build_summary(
            RepoStatus.cloned("new"),
            RepoStatus.up_to_date("a"),
            RepoStatus.up_to_date("b"),
            RepoStatus.behind("c", 4),
            RepoStatus.no_upstream("d"),
            RepoStatus.not_git("e"),
        )

        print_summary(summary)

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert lines == [
            "=== Summary ===",
            "✓ Cloned: 1",
            "✓ Up to date: 2",
            "⚠ Updates available: 1",
            "⚠ No upstream: 1",
            "Not git repos: 1",
            "Repositories with updates:",
            "  • c (4 commits behind)",
        ]

    def test_cloned_line_omitted_when_nothing_cloned(self, capsys) -> None:
        print_summary(build_summary(RepoStatus.up_to_date("a")))

        out = capsys.readouterr().out
        assert "Cloned" not in out
        assert "Repositories with updates" not in out

    def test_unknown_count_renders_question_mark(self, capsys) -> None:
        print_summary(build_summary(RepoStatus.behind("lib", None)))

        assert "  • lib (? commits behind)" in capsys.readouterr().out

    def test_fetch_failures_are_listed(self, capsys) -> None:
        print_summary(build_summary(RepoStatus.probe_failed("offline", "Failed to fetch")))

        out = capsys.readouterr().out
        assert "✗ Fetch failed: 1" in out
        assert "  - offline: Failed to fetch" in out


class TestClosing:
    """Tests for the closing lines."""

    def test_pull_summary_counts(self, capsys) -> None:
        results = [
            OperationResult(OperationStatus.SUCCESS, "Pulled latest changes", "a"),
            OperationResult(OperationStatus.FAILED, "Failed to pull changes", "b"),
            OperationResult(OperationStatus.SUCCESS, "Pulled latest changes", "c"),
        ]

        print_pull_summary(results)

        out = capsys.readouterr().out
        assert "Updated 2, failed 1" in out
        assert "  - b: Failed to pull changes" in out

    def test_closing_messages(self, capsys) -> None:
        print_closing(RunOutcome.CANCELLED)
        print_closing(RunOutcome.UP_TO_DATE)

        assert capsys.readouterr().out.splitlines() == [
            "Sync cancelled.",
            "All repositories are up to date!",
        ]
