"""Base classes for repository operations."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
from enum import Enum

from ..utils.git import GitClient


class OperationStatus(Enum):
    """Status of an operation execution."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class OperationResult:
    """Result of a single operation execution."""
    status: OperationStatus
    message: str
    repo_name: str

    @property
    def success(self) -> bool:
        """Check if operation was successful."""
        return self.status == OperationStatus.SUCCESS

    @property
    def skipped(self) -> bool:
        """Check if operation was skipped."""
        return self.status == OperationStatus.SKIPPED

    @property
    def failed(self) -> bool:
        """Check if operation failed."""
        return self.status == OperationStatus.FAILED


class Operation(ABC):
    """Abstract base class for repository operations."""

    # Class attributes to be overridden by subclasses
    name: str = "base"
    description: str = "Base operation"

    def __init__(self, base_dir: str, git: GitClient):
        """Initialize operation.

        Args:
            base_dir: Base directory for repositories
            git: Git client used for all version-control commands
        """
        self.base_dir = base_dir
        self.git = git

    @abstractmethod
    def execute(self, target: Any) -> Any:
        """Execute the operation on one repository.

        Args:
            target: Operation-specific description of the repository

        Returns:
            Operation-specific result
        """
        pass

    def get_repo_path(self, repo_name: str) -> str:
        """Get local path for a repository.

        Args:
            repo_name: Path of the repository relative to the base directory

        Returns:
            Local repository path
        """
        return os.path.join(self.base_dir, repo_name)
