"""Console reporting for a sync run."""

from typing import List

from ..core.types import RepoState, RunOutcome, RunSummary
from ..operations.base import OperationResult

CLOSING_MESSAGES = {
    RunOutcome.CHECKED: "Check complete. Use --sync to pull updates.",
    RunOutcome.UP_TO_DATE: "All repositories are up to date!",
    RunOutcome.CANCELLED: "Sync cancelled.",
    RunOutcome.SYNCED: "=== Sync complete! ===",
}


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"=== {title} ===\n")


def print_summary(summary: RunSummary) -> None:
    """Print the status counts and the list of repositories with updates.

    Args:
        summary: Statuses collected during the scan
    """
    print("=== Summary ===")
    cloned = summary.count(RepoState.CLONED)
    if cloned > 0:
        print(f"✓ Cloned: {cloned}")
    print(f"✓ Up to date: {summary.count(RepoState.UP_TO_DATE)}")
    print(f"⚠ Updates available: {summary.count(RepoState.BEHIND)}")
    print(f"⚠ No upstream: {summary.count(RepoState.NO_UPSTREAM)}")
    print(f"Not git repos: {summary.count(RepoState.NOT_GIT)}")

    failed = summary.get(RepoState.PROBE_FAILED)
    if failed:
        print(f"✗ Fetch failed: {len(failed)}")
        for status in failed:
            print(f"  - {status.path}: {status.reason}")
    print()

    if summary.has_updates:
        print("Repositories with updates:")
        for status in summary.behind:
            print(f"  • {status.path} ({status.commits_label} commits behind)")
        print()


def print_pull_summary(results: List[OperationResult]) -> None:
    """Print how many pulls succeeded and failed.

    Args:
        results: Results of the pull step
    """
    updated = sum(1 for r in results if r.success)
    failed = sum(1 for r in results if r.failed)
    print(f"Updated {updated}, failed {failed}")
    for result in results:
        if result.failed:
            print(f"  - {result.repo_name}: {result.message}")


def print_closing(outcome: RunOutcome) -> None:
    """Print the closing status line for a run.

    Args:
        outcome: How the run ended
    """
    print(CLOSING_MESSAGES[outcome])
