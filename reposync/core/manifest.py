"""Manifest (.gitmodules) parsing."""

import os
import re
import logging
from typing import List, Optional

from .errors import ManifestUnreadableError
from .types import ManifestEntry

logger = logging.getLogger('reposync')

PATH_PATTERN = re.compile(r'^\s*path\s*=\s*(.+)$')
URL_PATTERN = re.compile(r'^\s*url\s*=\s*(.+)$')


def parse_manifest(text: str) -> List[ManifestEntry]:
    """Parse manifest text into entries.

    A ``path = ...`` line and a ``url = ...`` line form an entry as soon as
    both have been seen; the pending values are then cleared, so every
    complete pair yields its own entry. All other lines are ignored.

    Args:
        text: Manifest file contents

    Returns:
        Entries in document order
    """
    entries = []
    current_path: Optional[str] = None
    current_url: Optional[str] = None

    for line in text.splitlines():
        match = PATH_PATTERN.match(line)
        if match:
            current_path = match.group(1).rstrip()

        match = URL_PATTERN.match(line)
        if match:
            current_url = match.group(1).rstrip()

        if current_path and current_url:
            entries.append(ManifestEntry(path=current_path, url=current_url))
            current_path = None
            current_url = None

    return entries


def read_manifest(manifest_path: str) -> List[ManifestEntry]:
    """Read and parse a manifest file.

    Args:
        manifest_path: Path to the manifest file

    Returns:
        Parsed entries, empty if the file does not exist

    Raises:
        ManifestUnreadableError: If the file exists but cannot be read
    """
    if not os.path.isfile(manifest_path):
        logger.debug(f"No manifest at {manifest_path}")
        return []

    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestUnreadableError(manifest_path, str(e)) from e

    return parse_manifest(text)
