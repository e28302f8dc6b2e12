"""
Build module for selecting, fetching and reading source builds
"""

from .build_selector import BuildSelector, make_build_record
from .changelog import extract_delta
from .source_extractor import SourceExtractor, scratch_directory
from .spec_query import SpecQuery
from .version_manager import VersionManager, VersionOrder, erase_dist, strip_dist

__all__ = [
    'BuildSelector',
    'make_build_record',
    'extract_delta',
    'SourceExtractor',
    'scratch_directory',
    'SpecQuery',
    'VersionManager',
    'VersionOrder',
    'erase_dist',
    'strip_dist',
]
