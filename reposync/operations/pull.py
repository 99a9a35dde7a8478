"""Pull operation: fast-forward repositories that are behind."""

import logging

from .base import Operation, OperationResult, OperationStatus
from ..core.types import RepoStatus

logger = logging.getLogger('reposync')


class PullOperation(Operation):
    """Fast-forward-only pull for a repository reported as behind."""

    name = "pull"
    description = "Pull updates for repositories that are behind"

    def execute(self, status: RepoStatus) -> OperationResult:
        """Execute pull operation on a repository.

        Args:
            status: Status of the repository (expected to be BEHIND)

        Returns:
            OperationResult indicating success/failure/skip
        """
        repo_name = status.path

        if not status.is_behind:
            return OperationResult(
                status=OperationStatus.SKIPPED,
                message="Repository is not behind",
                repo_name=repo_name
            )

        logger.info(f"Pulling {repo_name}...")
        if self.git.pull_fast_forward_only(self.get_repo_path(repo_name)):
            logger.info(f"✓ Successfully updated {repo_name}\n")
            return OperationResult(
                status=OperationStatus.SUCCESS,
                message="Pulled latest changes",
                repo_name=repo_name
            )

        logger.error(f"✗ Failed to update {repo_name}\n")
        return OperationResult(
            status=OperationStatus.FAILED,
            message="Failed to pull changes",
            repo_name=repo_name
        )
