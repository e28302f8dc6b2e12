"""
Orchestrator package for the spec mirror pipeline
"""

from .run_tracker import RunTracker
from .spec_mirror import SpecMirror

__all__ = ['RunTracker', 'SpecMirror']
