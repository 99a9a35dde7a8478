"""Clone-missing operation: clone manifest repositories that don't exist locally."""

import logging

from .base import Operation, OperationResult, OperationStatus
from ..core.types import ManifestEntry
from ..utils.git import repo_exists

logger = logging.getLogger('reposync')


class CloneMissingOperation(Operation):
    """Clone a manifest entry if its directory is absent."""

    name = "clone-missing"
    description = "Clone manifest repositories that don't exist locally"

    def execute(self, entry: ManifestEntry) -> OperationResult:
        """Execute clone operation for a manifest entry.

        Args:
            entry: Manifest entry to check

        Returns:
            OperationResult indicating success/failure/skip
        """
        repo_path = self.get_repo_path(entry.path)

        if repo_exists(repo_path):
            return OperationResult(
                status=OperationStatus.SKIPPED,
                message="Repository already exists locally",
                repo_name=entry.path
            )

        logger.info(f"⚠ Repository missing: {entry.path}")
        logger.info(f"Cloning from {entry.url}...")

        if self.git.clone(entry.url, repo_path):
            logger.info(f"✓ Successfully cloned {entry.path}\n")
            return OperationResult(
                status=OperationStatus.SUCCESS,
                message="Cloned successfully",
                repo_name=entry.path
            )

        logger.warning(f"✗ Failed to clone {entry.path}\n")
        return OperationResult(
            status=OperationStatus.FAILED,
            message="Failed to clone",
            repo_name=entry.path
        )
