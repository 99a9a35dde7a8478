"""Git operations and utilities."""

import os
import subprocess
import logging
from typing import List, Optional

logger = logging.getLogger('reposync')

GIT_ERRORS = (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError)


def repo_exists(repo_path: str) -> bool:
    """Check if a repository directory exists locally.

    Args:
        repo_path: Path to check

    Returns:
        True if the path exists and is a directory
    """
    return os.path.exists(repo_path) and os.path.isdir(repo_path)


def has_git_metadata(repo_path: str) -> bool:
    """Check if a directory carries git metadata.

    A ``.git`` directory, or the ``.git`` file used by submodule and
    worktree checkouts, both count.

    Args:
        repo_path: Directory to check

    Returns:
        True if ``repo_path/.git`` exists
    """
    return os.path.exists(os.path.join(repo_path, '.git'))


class GitClient:
    """Thin wrapper over the ``git`` executable.

    Every command runs with an explicit working directory; failures are
    logged and reported through the return value, never raised.
    """

    def __init__(self, remote: str = 'origin', fetch_timeout: int = 30, executable: str = 'git'):
        """Initialize git client.

        Args:
            remote: Remote to fetch from
            fetch_timeout: Timeout in seconds for fetch
            executable: Git executable to invoke
        """
        self.remote = remote
        self.fetch_timeout = fetch_timeout
        self.executable = executable

    def _run(self, args: List[str], cwd: Optional[str] = None,
             timeout: Optional[int] = None) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.executable] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout
        )

    def clone(self, clone_url: str, repo_path: str) -> bool:
        """Clone a repository.

        Args:
            clone_url: URL to clone from
            repo_path: Local path to clone to

        Returns:
            True if successful, False otherwise
        """
        try:
            self._run(["clone", clone_url, repo_path])
            return True
        except GIT_ERRORS as e:
            logger.debug(f"git clone {clone_url} failed: {_describe(e)}")
            return False

    def fetch_remote(self, repo_path: str) -> bool:
        """Fetch remote-tracking refs without touching the working tree.

        Args:
            repo_path: Path to the repository

        Returns:
            True if successful, False otherwise
        """
        try:
            self._run(["fetch", self.remote, "--quiet"], cwd=repo_path, timeout=self.fetch_timeout)
            return True
        except GIT_ERRORS as e:
            logger.debug(f"git fetch in {repo_path} failed: {_describe(e)}")
            return False

    def resolve_revision(self, repo_path: str, ref: str) -> Optional[str]:
        """Resolve a ref to a commit id.

        Args:
            repo_path: Path to the repository
            ref: Ref to resolve (e.g. 'HEAD', '@{u}')

        Returns:
            Commit id, or None if the ref cannot be resolved
        """
        try:
            result = self._run(["rev-parse", ref], cwd=repo_path)
        except GIT_ERRORS:
            return None
        revision = result.stdout.strip()
        return revision or None

    def count_ahead_commits(self, repo_path: str, from_ref: str, to_ref: str) -> Optional[int]:
        """Count commits reachable from ``to_ref`` but not from ``from_ref``.

        Args:
            repo_path: Path to the repository
            from_ref: Base ref
            to_ref: Ref whose extra commits are counted

        Returns:
            Commit count, or None if it cannot be determined
        """
        try:
            result = self._run(["rev-list", "--count", f"{from_ref}..{to_ref}"], cwd=repo_path)
            return int(result.stdout.strip())
        except (ValueError,) + GIT_ERRORS as e:
            logger.debug(f"Failed to count commits in {repo_path}: {_describe(e)}")
            return None

    def pull_fast_forward_only(self, repo_path: str) -> bool:
        """Pull, refusing anything but a fast-forward.

        Args:
            repo_path: Path to the repository

        Returns:
            True if successful, False otherwise
        """
        try:
            self._run(["pull", "--ff-only"], cwd=repo_path)
            return True
        except GIT_ERRORS as e:
            logger.debug(f"git pull in {repo_path} failed: {_describe(e)}")
            return False

    def has_git_metadata(self, repo_path: str) -> bool:
        """Check if a directory is a git checkout."""
        return has_git_metadata(repo_path)


def _describe(error: Exception) -> str:
    stderr = getattr(error, 'stderr', None)
    if stderr:
        return stderr.strip()
    return str(error)
