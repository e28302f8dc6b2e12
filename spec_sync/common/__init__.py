"""
Common helpers shared by all spec mirror modules
"""

from .config_loader import ConfigLoader, RunConfig
from .environment import validate_run_config, check_required_tools
from .logging_utils import setup_logging
from .shell_executor import ShellExecutor

__all__ = [
    'ConfigLoader',
    'RunConfig',
    'validate_run_config',
    'check_required_tools',
    'setup_logging',
    'ShellExecutor',
]
