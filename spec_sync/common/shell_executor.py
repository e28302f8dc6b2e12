"""
Shell Executor Module - Runs external tools with logging and timeouts
"""

import os
import subprocess
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Handles external command execution with logging and timeout"""

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode

    def run_command(self, cmd, cwd=None, capture=True, check=True, shell=False,
                    log_cmd=False, timeout=1800, extra_env=None):
        """
        Run command with logging, timeout, and optional extra environment variables

        Args:
            cmd: Argument list, or a string when shell=True
            cwd: Working directory (default: current directory)
            capture: Capture stdout/stderr as text
            check: Raise CalledProcessError on non-zero exit
            shell: Run through /bin/sh (needed for pipelines)
            log_cmd: Log the command and its output at INFO
            timeout: Seconds before the command is killed
            extra_env: Variables added to the inherited environment

        Returns:
            subprocess.CompletedProcess
        """
        display = cmd if isinstance(cmd, str) else " ".join(str(c) for c in cmd)
        if self.debug_mode:
            print(f"🔧 [SHELL DEBUG] RUNNING COMMAND: {display}", flush=True)
        elif log_cmd:
            logger.info(f"RUNNING COMMAND: {display}")
        else:
            logger.debug(f"RUNNING COMMAND: {display}")

        if cwd is None:
            cwd = Path.cwd()

        env = os.environ.copy()
        env['LC_ALL'] = 'C'
        if extra_env:
            env.update(extra_env)

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                shell=shell,
                capture_output=capture,
                text=True,
                check=check,
                env=env,
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            logger.error(f"⚠️ Command timed out after {timeout} seconds: {display}")
            raise
        except subprocess.CalledProcessError as e:
            if self.debug_mode:
                print(f"❌ [SHELL DEBUG] COMMAND FAILED: {display}", flush=True)
                if e.stderr:
                    print(f"❌ [SHELL DEBUG] EXCEPTION STDERR:\n{e.stderr}", flush=True)
            elif log_cmd:
                logger.error(f"Command failed: {display}")
            raise

        if self.debug_mode:
            if result.stdout:
                print(f"🔧 [SHELL DEBUG] STDOUT:\n{result.stdout}", flush=True)
            if result.stderr:
                print(f"🔧 [SHELL DEBUG] STDERR:\n{result.stderr}", flush=True)
            print(f"🔧 [SHELL DEBUG] EXIT CODE: {result.returncode}", flush=True)
        elif log_cmd:
            if result.stdout:
                logger.info(f"STDOUT: {result.stdout[:500]}")
            if result.stderr:
                logger.info(f"STDERR: {result.stderr[:500]}")
            logger.info(f"EXIT CODE: {result.returncode}")

        return result
