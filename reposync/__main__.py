"""Main entry point for reposync CLI."""

from dotenv import load_dotenv

import sys
import argparse
import logging
from typing import List, Optional

from .config import Config
from .core.errors import ConfigError, ManifestUnreadableError
from .core.logger import setup_logging
from .core.repo_manager import RepoManager
from .core.types import RunMode
from .utils.git import GitClient


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='reposync',
        description='Clone missing repositories and check/sync every git checkout in a directory',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check status, then ask before pulling
  reposync

  # Report status only
  reposync --check-only

  # Pull every repository that is behind without asking
  reposync --sync

Environment (also read from .env):
  REPOS_BASE_DIR          Directory to scan (default: current directory)
  REPOSYNC_MANIFEST       Manifest filename (default: .gitmodules)
  REPOSYNC_REMOTE         Remote to fetch (default: origin)
  REPOSYNC_FETCH_TIMEOUT  Fetch timeout in seconds (default: 30)
  REPOSYNC_LOG_DIR        Write a log file to this directory
        """
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '--check-only',
        dest='mode',
        action='store_const',
        const=RunMode.CHECK,
        help='Report status and exit without pulling'
    )
    mode_group.add_argument(
        '--sync',
        dest='mode',
        action='store_const',
        const=RunMode.SYNC,
        help='Pull every repository that is behind without asking'
    )
    parser.set_defaults(mode=RunMode.INTERACTIVE)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()

    parser = create_parser()
    args, unknown = parser.parse_known_args(argv)

    try:
        config = Config.from_env_and_args()
    except ConfigError as e:
        setup_logging(mode=args.mode.value)
        logging.getLogger('reposync').error(f"Configuration error: {e}")
        return 1

    logger = setup_logging(mode=args.mode.value, log_dir=config.log_dir)
    if unknown:
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    try:
        git = GitClient(remote=config.remote, fetch_timeout=config.fetch_timeout)
        manager = RepoManager(
            git=git,
            base_dir=config.base_dir,
            manifest_name=config.manifest_name
        )
        manager.run(args.mode)
        return 0

    except ManifestUnreadableError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("\nOperation cancelled by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
