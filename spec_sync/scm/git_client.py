"""
Git Client Module - Handles Git operations on the output tree
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from spec_sync import config
from spec_sync.common.shell_executor import ShellExecutor

logger = logging.getLogger(__name__)


class GitClient:
    """Handles Git operations scoped to the output directory"""

    def __init__(self, repo_dir, shell_executor: ShellExecutor = None, debug_mode: bool = False):
        self.repo_dir = Path(repo_dir)
        self.shell_executor = shell_executor or ShellExecutor(debug_mode=debug_mode)

    def _git(self, *args, check=True):
        cmd = ["git", "-C", str(self.repo_dir)] + list(args)
        return self.shell_executor.run_command(
            cmd,
            cwd=self.repo_dir,
            check=check,
            timeout=config.COMMAND_TIMEOUTS['git'],
        )

    def is_repository(self) -> bool:
        """True if the output directory lies inside a git work tree"""
        try:
            result = self._git("rev-parse", "--is-inside-work-tree", check=False)
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"❌ Error running git: {e}")
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def current_revision(self) -> Optional[str]:
        """HEAD commit id, or None before the first commit"""
        result = self._git("rev-parse", "--verify", "--quiet", "HEAD", check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def has_staged_changes(self, paths: List[str]) -> bool:
        """
        True if the index differs from HEAD below paths

        Raises:
            subprocess.CalledProcessError: if git cannot compare the index
        """
        result = self._git("diff", "--cached", "--quiet", "--", *paths, check=False)
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise subprocess.CalledProcessError(result.returncode, "git diff --cached", result.stdout, result.stderr)

    def add(self, paths: List[str]):
        """
        Stage paths, including deletions below them

        Args:
            paths: Paths relative to the output directory
        """
        self._git("add", "-A", "--", *paths)
        logger.debug(f"✅ Added files: {' '.join(paths)}")

    def commit(self, message: str, paths: List[str]) -> bool:
        """
        Commit staged changes below paths only

        Args:
            message: Commit message
            paths: Paths relative to the output directory

        Returns:
            True if a commit was created, False if there was nothing to commit

        Raises:
            subprocess.CalledProcessError: if git fails for another reason
        """
        if not self.has_staged_changes(paths):
            logger.info(f"ℹ️ Nothing to commit under {' '.join(paths)}")
            return False

        result = self._git("commit", "-q", "-m", message, "--", *paths, check=False)
        if result.returncode == 0:
            logger.info(f"✅ Committed changes: {message.splitlines()[0]}")
            return True

        output = (result.stdout or "") + (result.stderr or "")
        logger.error(f"❌ Failed to commit: {output.strip()[:200]}")
        raise subprocess.CalledProcessError(result.returncode, "git commit", result.stdout, result.stderr)
