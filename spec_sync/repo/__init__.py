"""
Output tree management modules package
"""

from .directory_sync import DirectorySync
from .version_tracker import VersionTracker, classify

__all__ = [
    'DirectorySync',
    'VersionTracker',
    'classify',
]
