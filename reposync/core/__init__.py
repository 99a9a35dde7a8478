"""Core package for reposync."""

from .types import (
    RunMode,
    RunOutcome,
    RepoState,
    ManifestEntry,
    RepoStatus,
    RunSummary,
)
from .errors import RepoSyncError, ManifestUnreadableError, ConfigError
from .manifest import parse_manifest, read_manifest
from .logger import setup_logging

__all__ = [
    # Types
    'RunMode',
    'RunOutcome',
    'RepoState',
    'ManifestEntry',
    'RepoStatus',
    'RunSummary',
    # Errors
    'RepoSyncError',
    'ManifestUnreadableError',
    'ConfigError',
    # Manifest
    'parse_manifest',
    'read_manifest',
    'setup_logging',
]
