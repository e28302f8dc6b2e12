"""
Spec Query Module - Reads version and changelog from spec files via rpm tooling
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from spec_sync import config
from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.exceptions import SpecQueryError

logger = logging.getLogger(__name__)


class SpecQuery:
    """Wraps rpmspec/rpm queries against a single spec file"""

    def __init__(self, shell_executor: ShellExecutor = None,
                 dist_placeholder: str = config.DIST_PLACEHOLDER):
        self.shell_executor = shell_executor or ShellExecutor()
        self.dist_placeholder = dist_placeholder

    def _query(self, cmd: List[str], spec_path: Path) -> str:
        try:
            result = self.shell_executor.run_command(
                cmd,
                cwd=spec_path.parent,
                check=False,
                timeout=config.COMMAND_TIMEOUTS['default'],
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise SpecQueryError(f"{cmd[0]} failed for {spec_path.name}: {e}") from e

        if result.returncode != 0:
            raise SpecQueryError(
                f"{cmd[0]} failed for {spec_path.name}: {(result.stderr or '').strip()[:200]}"
            )
        return result.stdout or ''

    def version_release(self, spec_path) -> str:
        """
        Version-release of a spec with %dist defined as the placeholder.

        Returns:
            First output line, trimmed (e.g. '1.0-1.DIST')
        """
        spec_path = Path(spec_path)
        output = self._query(
            ['rpmspec', '-q', '--srpm',
             '--define', f'dist {self.dist_placeholder}',
             '--qf', '%{version}-%{release}\\n',
             str(spec_path)],
            spec_path,
        )
        lines = output.splitlines()
        if not lines or not lines[0].strip():
            raise SpecQueryError(f"rpmspec returned no version for {spec_path.name}")
        return lines[0].strip()

    def changelog(self, spec_path) -> List[str]:
        """Changelog lines, newest entry first"""
        spec_path = Path(spec_path)
        output = self._query(
            ['rpm', '-q', '--changelog', '--specfile', str(spec_path)],
            spec_path,
        )
        return output.splitlines()
