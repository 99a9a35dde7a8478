"""Exceptions raised by reposync."""


class RepoSyncError(Exception):
    """Base class for reposync errors."""


class ManifestUnreadableError(RepoSyncError):
    """The manifest file exists but could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read manifest {path}: {reason}")


class ConfigError(RepoSyncError, ValueError):
    """Invalid configuration value."""
