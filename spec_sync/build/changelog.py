"""
Changelog Module - Extracts the entries added since a recorded version
"""

import re
import logging
from typing import Iterable, List, Optional

from spec_sync.build.version_manager import strip_dist

logger = logging.getLogger(__name__)

# * Mon Jan 01 2024 Jane Doe <jane@example.com> - 1.0-1
HEADER_RE = re.compile(r'^\*\s+\w{3}\s+\w{3}\s+\d{1,2}\s+\d{4}\s+')


def is_header(line: str) -> bool:
    return bool(HEADER_RE.match(line))


def header_version(line: str) -> Optional[str]:
    """Trailing token of a changelog header, or None for non-headers"""
    if not is_header(line):
        return None
    tokens = line.split()
    return tokens[-1] if tokens else None


def extract_delta(changelog_lines: Iterable[str], old_version_release: Optional[str]) -> List[str]:
    """
    Bullet lines added to a changelog since old_version_release.

    Lines are scanned newest-first. Bullets are collected until a header
    whose version matches the old one; that header and everything below it
    is already recorded. When the old version never appears, nothing is
    returned so a rewritten or truncated history does not flood the
    commit message.

    Args:
        changelog_lines: Output of the changelog query, newest first
        old_version_release: On-disk version-release, None for new packages

    Returns:
        Bullet lines, verbatim, newest first
    """
    if not old_version_release:
        return []

    target = strip_dist(old_version_release)
    collected = []
    for raw in changelog_lines:
        line = raw.rstrip('\n')
        version = header_version(line)
        if version is not None:
            if strip_dist(version) == target:
                logger.debug(f"CHANGELOG_BOUNDARY version={version} entries={len(collected)}")
                return collected
            continue
        if line.startswith('-'):
            collected.append(line)

    logger.info(f"ℹ️ Version {old_version_release} not found in changelog, delta is empty")
    return []
