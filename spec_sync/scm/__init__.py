"""
Version control modules package
"""

from .commit_composer import CommitComposer, compose_message
from .git_client import GitClient

__all__ = [
    'CommitComposer',
    'compose_message',
    'GitClient',
]
