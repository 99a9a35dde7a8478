"""Repository manager for orchestrating a sync run."""

import os
import logging
from typing import Callable, List, Optional

from .manifest import read_manifest
from .types import ManifestEntry, RepoStatus, RunMode, RunOutcome, RunSummary
from ..operations.base import OperationResult, OperationStatus
from ..operations.clone_missing import CloneMissingOperation
from ..operations.pull import PullOperation
from ..operations.status import StatusOperation
from ..utils.git import GitClient
from ..utils.progress import print_closing, print_header, print_pull_summary, print_summary
from ..utils.prompt import ask_confirmation

logger = logging.getLogger('reposync')

CONFIRM_QUESTION = "Pull updates for all repositories?"


class RepoManager:
    """Drive cloning, scanning and pulling over one base directory.

    Everything runs sequentially; each repository is addressed by an
    explicit path so the process working directory never changes.
    """

    def __init__(
        self,
        git: GitClient,
        base_dir: str,
        manifest_name: str = '.gitmodules',
        confirm: Optional[Callable[[str], bool]] = None
    ):
        """Initialize repository manager.

        Args:
            git: Git client used for all version-control commands
            base_dir: Directory whose subdirectories are checked
            manifest_name: Manifest filename inside the base directory
            confirm: Callable asking the operator a yes/no question
        """
        self.git = git
        self.base_dir = base_dir
        self.manifest_name = manifest_name
        self.confirm = confirm or ask_confirmation

    @property
    def manifest_path(self) -> str:
        """Full path of the manifest file."""
        return os.path.join(self.base_dir, self.manifest_name)

    def load_manifest(self) -> Optional[List[ManifestEntry]]:
        """Read the manifest.

        Returns:
            Manifest entries, or None if there is no manifest file
        """
        if not os.path.isfile(self.manifest_path):
            return None
        return read_manifest(self.manifest_path)

    def clone_missing(self, entries: List[ManifestEntry]) -> List[RepoStatus]:
        """Clone every manifest entry whose directory is absent.

        Failures are logged and skipped; no retry.

        Args:
            entries: Manifest entries in document order

        Returns:
            Statuses for the repositories cloned in this run
        """
        operation = CloneMissingOperation(self.base_dir, self.git)
        cloned = []
        for entry in entries:
            try:
                result = operation.execute(entry)
            except Exception as e:
                logger.error(f"✗ Unexpected error cloning {entry.path}: {e}")
                continue
            if result.success:
                cloned.append(RepoStatus.cloned(entry.path))
        return cloned

    def list_directories(self) -> List[str]:
        """List immediate subdirectories of the base directory.

        Hidden directories are skipped. Names are sorted so output is
        stable across filesystems.

        Returns:
            Directory names
        """
        names = []
        for name in os.listdir(self.base_dir):
            if name.startswith('.'):
                continue
            if os.path.isdir(os.path.join(self.base_dir, name)):
                names.append(name)
        return sorted(names)

    def scan(self, cloned: Optional[List[RepoStatus]] = None) -> RunSummary:
        """Classify every subdirectory of the base directory.

        Directories cloned in this run are recorded as cloned and not probed.

        Args:
            cloned: Statuses returned by the clone phase

        Returns:
            RunSummary with one entry per examined directory
        """
        summary = RunSummary()
        cloned = cloned or []
        summary.extend(cloned)
        cloned_paths = {os.path.normpath(status.path) for status in cloned}

        operation = StatusOperation(self.base_dir, self.git)
        for name in self.list_directories():
            if name in cloned_paths:
                continue
            try:
                status = operation.execute(name)
            except Exception as e:
                logger.error(f"✗ Unexpected error checking {name}: {e}\n")
                status = RepoStatus.probe_failed(name, f"Unexpected error: {e}")
            summary.add(status)

        return summary

    def pull(self, statuses: List[RepoStatus]) -> List[OperationResult]:
        """Fast-forward every given repository.

        A failed pull never stops the remaining ones.

        Args:
            statuses: Repositories reported as behind

        Returns:
            One result per repository, in order
        """
        operation = PullOperation(self.base_dir, self.git)
        results = []
        for status in statuses:
            try:
                result = operation.execute(status)
            except Exception as e:
                logger.error(f"✗ Unexpected error updating {status.path}: {e}\n")
                result = OperationResult(
                    status=OperationStatus.FAILED,
                    message=f"Unexpected error: {str(e)}",
                    repo_name=status.path
                )
            results.append(result)
        return results

    def run(self, mode: RunMode = RunMode.INTERACTIVE) -> RunOutcome:
        """Execute a full run: clone, scan, report, then pull per mode.

        Args:
            mode: Pull policy for the run

        Returns:
            How the run ended

        Raises:
            ManifestUnreadableError: If the manifest exists but cannot be read
        """
        print_header("Repository Sync Tool")

        cloned: List[RepoStatus] = []
        entries = self.load_manifest()
        if entries is not None:
            logger.info(f"Checking for missing repositories from {self.manifest_name}...\n")
            cloned = self.clone_missing(entries)
            if cloned:
                logger.info(f"✓ Cloned {len(cloned)} missing repository/repositories\n")
            else:
                logger.info(f"✓ All repositories from {self.manifest_name} are present\n")

        logger.info("Scanning repositories...\n")
        summary = self.scan(cloned)
        print_summary(summary)

        if mode == RunMode.CHECK:
            print_closing(RunOutcome.CHECKED)
            return RunOutcome.CHECKED

        if not summary.has_updates:
            print_closing(RunOutcome.UP_TO_DATE)
            return RunOutcome.UP_TO_DATE

        if mode == RunMode.INTERACTIVE and not self.confirm(CONFIRM_QUESTION):
            print_closing(RunOutcome.CANCELLED)
            return RunOutcome.CANCELLED

        print_header("Syncing repositories")
        results = self.pull(summary.behind)
        print_pull_summary(results)
        print_closing(RunOutcome.SYNCED)
        return RunOutcome.SYNCED
