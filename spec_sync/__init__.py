"""
Koji spec mirror modules
"""

from .exceptions import (
    SpecSyncError,
    ConfigError,
    RemoteQueryError,
    ExtractionError,
    SpecQueryError,
    ComparisonError,
)
from .models import BuildRecord, ChangeKind, ChangeRecord, SyncResult

# Common modules
from .common.config_loader import ConfigLoader, RunConfig
from .common.logging_utils import setup_logging
from .common.shell_executor import ShellExecutor

# Remote client
from .koji_client import KojiClient

# Build modules
from .build.build_selector import BuildSelector
from .build.source_extractor import SourceExtractor
from .build.spec_query import SpecQuery
from .build.version_manager import VersionManager, VersionOrder

# Output tree modules
from .repo.directory_sync import DirectorySync
from .repo.version_tracker import VersionTracker

# SCM modules
from .scm.commit_composer import CommitComposer
from .scm.git_client import GitClient

# Orchestrator modules
from .orchestrator.run_tracker import RunTracker
from .orchestrator.spec_mirror import SpecMirror

__version__ = "0.1.0"

__all__ = [
    # Errors and data model
    'SpecSyncError',
    'ConfigError',
    'RemoteQueryError',
    'ExtractionError',
    'SpecQueryError',
    'ComparisonError',
    'BuildRecord',
    'ChangeKind',
    'ChangeRecord',
    'SyncResult',

    # Common
    'ConfigLoader',
    'RunConfig',
    'setup_logging',
    'ShellExecutor',

    # Remote
    'KojiClient',

    # Build
    'BuildSelector',
    'SourceExtractor',
    'SpecQuery',
    'VersionManager',
    'VersionOrder',

    # Output tree
    'DirectorySync',
    'VersionTracker',

    # SCM
    'CommitComposer',
    'GitClient',

    # Orchestrator
    'RunTracker',
    'SpecMirror',
]
