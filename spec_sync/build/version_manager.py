"""
Version Manager Module - Handles release normalization and version comparison
"""

import re
import logging
import subprocess
from enum import Enum

from spec_sync import config
from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.exceptions import ComparisonError

logger = logging.getLogger(__name__)

_DIST_RE = re.compile(config.DIST_SUFFIX_PATTERN)
# .el9, .el9_3, .fc40 and the placeholder itself
_ANY_DIST_RE = re.compile(r"(?:" + re.escape(config.DIST_PLACEHOLDER) + r"|\.(?:el|fc)\d+(?:_\d+)*)")


class VersionOrder(Enum):
    OLDER_OR_EQUAL = "older_or_equal"
    NEWER = "newer"


def erase_dist(release: str) -> str:
    """
    Replace the distribution suffix with the placeholder.

    '1.el9' -> '1.DIST', '3.fc40.1' -> '3.DIST.1'. Idempotent: the
    placeholder does not match the suffix pattern.
    """
    return _DIST_RE.sub(config.DIST_PLACEHOLDER, release)


def strip_dist(version_release: str) -> str:
    """
    Remove any distribution marker and leading epoch for changelog matching.

    '1.0-1.DIST' -> '1.0-1', '2:1.0-1.el9' -> '1.0-1'
    """
    value = version_release.strip()
    if ':' in value:
        value = value.split(':', 1)[1]
    return _ANY_DIST_RE.sub('', value)


class VersionManager:
    """Orders version strings with rpmdev-vercmp (RPM segment semantics)"""

    # rpmdev-vercmp exit statuses
    EQUAL = 0
    LEFT_NEWER = 11
    RIGHT_NEWER = 12

    def __init__(self, shell_executor: ShellExecutor = None):
        self.shell_executor = shell_executor or ShellExecutor()

    def _vercmp(self, left: str, right: str) -> int:
        """
        Compare two version strings using rpmdev-vercmp.
        Returns negative if left < right, zero if equal, positive if left > right.
        """
        try:
            result = self.shell_executor.run_command(
                ['rpmdev-vercmp', left, right],
                check=False,
                timeout=config.COMMAND_TIMEOUTS['vercmp'],
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ComparisonError(left, right, str(e)) from e

        if result.returncode == self.EQUAL:
            return 0
        if result.returncode == self.LEFT_NEWER:
            return 1
        if result.returncode == self.RIGHT_NEWER:
            return -1

        reason = (result.stderr or result.stdout or '').strip() or f"exit status {result.returncode}"
        raise ComparisonError(left, right, reason)

    def compare(self, left: str, right: str) -> VersionOrder:
        """
        Order left relative to right.

        Returns:
            VersionOrder.NEWER if left is strictly newer than right,
            otherwise VersionOrder.OLDER_OR_EQUAL

        Raises:
            ComparisonError: if the comparison tool cannot decide
        """
        if self._vercmp(left, right) > 0:
            return VersionOrder.NEWER
        return VersionOrder.OLDER_OR_EQUAL
