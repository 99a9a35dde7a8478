"""Status operation: classify a directory against its upstream branch."""

import logging

from .base import Operation
from ..core.types import RepoStatus

logger = logging.getLogger('reposync')

HEAD_REF = "HEAD"
UPSTREAM_REF = "@{u}"


class StatusOperation(Operation):
    """Report repository synchronization status.

    The checks run in a fixed order: git metadata, fetch, upstream
    resolution, then the behind count. Only remote-tracking refs are
    updated (by the fetch); the working tree is never touched.
    """

    name = "status"
    description = "Report repository synchronization status"

    def execute(self, repo_name: str) -> RepoStatus:
        """Classify one subdirectory of the base directory.

        Args:
            repo_name: Directory name relative to the base directory

        Returns:
            RepoStatus for the directory
        """
        repo_path = self.get_repo_path(repo_name)

        if not self.git.has_git_metadata(repo_path):
            return RepoStatus.not_git(repo_name)

        logger.info(f"Checking {repo_name}...")
        if not self.git.fetch_remote(repo_path):
            logger.warning("✗ Failed to fetch\n")
            return RepoStatus.probe_failed(repo_name, "Failed to fetch")

        local = self.git.resolve_revision(repo_path, HEAD_REF)
        remote = self.git.resolve_revision(repo_path, UPSTREAM_REF)

        if remote is None:
            logger.info("⚠ No upstream branch configured\n")
            return RepoStatus.no_upstream(repo_name)

        if local == remote:
            logger.info("✓ Up to date\n")
            return RepoStatus.up_to_date(repo_name)

        behind = self.git.count_ahead_commits(repo_path, HEAD_REF, UPSTREAM_REF)
        status = RepoStatus.behind(repo_name, behind)
        logger.info(f"⚠ {status.commits_label} commit(s) behind\n")
        return status
