"""Configuration management for reposync."""

import os
from typing import Optional
from dataclasses import dataclass

from .core.errors import ConfigError

DEFAULT_MANIFEST = '.gitmodules'
DEFAULT_REMOTE = 'origin'
DEFAULT_FETCH_TIMEOUT = 30


@dataclass
class Config:
    """Configuration for reposync.

    Merges environment variables with explicit arguments.
    Explicit arguments take precedence over environment variables.
    """

    base_dir: str
    manifest_name: str = DEFAULT_MANIFEST
    remote: str = DEFAULT_REMOTE
    fetch_timeout: int = DEFAULT_FETCH_TIMEOUT
    log_dir: Optional[str] = None

    @classmethod
    def from_env_and_args(
        cls,
        base_dir: Optional[str] = None,
        manifest_name: Optional[str] = None,
        remote: Optional[str] = None,
        fetch_timeout: Optional[int] = None,
        log_dir: Optional[str] = None
    ) -> 'Config':
        """Create config from environment variables and arguments.

        Args:
            base_dir: Base directory (overrides REPOS_BASE_DIR)
            manifest_name: Manifest filename (overrides REPOSYNC_MANIFEST)
            remote: Remote to fetch from (overrides REPOSYNC_REMOTE)
            fetch_timeout: Fetch timeout in seconds (overrides REPOSYNC_FETCH_TIMEOUT)
            log_dir: Directory for log files (overrides REPOSYNC_LOG_DIR)

        Returns:
            Config instance

        Raises:
            ConfigError: If a value is invalid
        """
        final_base_dir = base_dir or os.getenv('REPOS_BASE_DIR') or os.getcwd()
        final_manifest = manifest_name or os.getenv('REPOSYNC_MANIFEST') or DEFAULT_MANIFEST
        final_remote = remote or os.getenv('REPOSYNC_REMOTE') or DEFAULT_REMOTE
        final_log_dir = log_dir or os.getenv('REPOSYNC_LOG_DIR') or None

        if fetch_timeout is None:
            raw_timeout = os.getenv('REPOSYNC_FETCH_TIMEOUT')
            if raw_timeout:
                try:
                    fetch_timeout = int(raw_timeout)
                except ValueError:
                    raise ConfigError(
                        f"REPOSYNC_FETCH_TIMEOUT must be an integer, got '{raw_timeout}'"
                    )
            else:
                fetch_timeout = DEFAULT_FETCH_TIMEOUT

        if fetch_timeout <= 0:
            raise ConfigError(f"Fetch timeout must be positive, got {fetch_timeout}")

        if not os.path.isdir(final_base_dir):
            raise ConfigError(
                f"Base directory '{final_base_dir}' does not exist or is not a directory"
            )

        return cls(
            base_dir=os.path.abspath(final_base_dir),
            manifest_name=final_manifest,
            remote=final_remote,
            fetch_timeout=fetch_timeout,
            log_dir=final_log_dir
        )
