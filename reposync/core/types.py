"""Core types for repository synchronization."""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class RunMode(Enum):
    """How the run decides whether to pull repositories that are behind."""
    CHECK = "check"
    SYNC = "sync"
    INTERACTIVE = "interactive"


class RunOutcome(Enum):
    """How a run ended."""
    CHECKED = "checked"
    UP_TO_DATE = "up-to-date"
    CANCELLED = "cancelled"
    SYNCED = "synced"


class RepoState(Enum):
    """Classification of a single directory during a run."""
    CLONED = "cloned"
    UP_TO_DATE = "up-to-date"
    BEHIND = "behind"
    NO_UPSTREAM = "no-upstream"
    NOT_GIT = "not-git"
    PROBE_FAILED = "probe-failed"


@dataclass(frozen=True)
class ManifestEntry:
    """A repository declared in the manifest."""
    path: str
    url: str


@dataclass(frozen=True)
class RepoStatus:
    """Status of one directory, produced once per run.

    ``commit_count`` is only set for BEHIND (None there means the count
    could not be determined); ``reason`` is only set for PROBE_FAILED.
    """
    state: RepoState
    path: str
    commit_count: Optional[int] = None
    reason: Optional[str] = None

    @classmethod
    def cloned(cls, path: str) -> 'RepoStatus':
        return cls(RepoState.CLONED, path)

    @classmethod
    def up_to_date(cls, path: str) -> 'RepoStatus':
        return cls(RepoState.UP_TO_DATE, path)

    @classmethod
    def behind(cls, path: str, commit_count: Optional[int]) -> 'RepoStatus':
        return cls(RepoState.BEHIND, path, commit_count=commit_count)

    @classmethod
    def no_upstream(cls, path: str) -> 'RepoStatus':
        return cls(RepoState.NO_UPSTREAM, path)

    @classmethod
    def not_git(cls, path: str) -> 'RepoStatus':
        return cls(RepoState.NOT_GIT, path)

    @classmethod
    def probe_failed(cls, path: str, reason: str) -> 'RepoStatus':
        return cls(RepoState.PROBE_FAILED, path, reason=reason)

    @property
    def is_behind(self) -> bool:
        """Check if the repository has updates available."""
        return self.state == RepoState.BEHIND

    @property
    def commits_label(self) -> str:
        """Commit count for display, '?' when unknown."""
        return "?" if self.commit_count is None else str(self.commit_count)


@dataclass
class RunSummary:
    """All statuses from one run, grouped by state in insertion order."""
    entries: Dict[RepoState, List[RepoStatus]] = field(
        default_factory=lambda: OrderedDict((state, []) for state in RepoState)
    )

    def add(self, status: RepoStatus) -> None:
        """Record a status under its state."""
        self.entries[status.state].append(status)

    def extend(self, statuses: List[RepoStatus]) -> None:
        """Record several statuses."""
        for status in statuses:
            self.add(status)

    def get(self, state: RepoState) -> List[RepoStatus]:
        """Get the statuses recorded for a state."""
        return list(self.entries[state])

    def count(self, state: RepoState) -> int:
        """Number of statuses recorded for a state."""
        return len(self.entries[state])

    @property
    def behind(self) -> List[RepoStatus]:
        """Repositories with updates available."""
        return self.get(RepoState.BEHIND)

    @property
    def has_updates(self) -> bool:
        """Check if any repository is behind its upstream."""
        return self.count(RepoState.BEHIND) > 0

    @property
    def total(self) -> int:
        """Total number of recorded directories."""
        return sum(len(statuses) for statuses in self.entries.values())

    def paths(self) -> List[str]:
        """Paths of all recorded directories."""
        return [s.path for statuses in self.entries.values() for s in statuses]
