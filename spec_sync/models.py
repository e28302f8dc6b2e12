"""
Data model shared by the pipeline stages
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ChangeKind(Enum):
    NEW = "new"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class BuildRecord:
    """One source build as reported by the tag query"""
    name: str
    version: str
    release: str
    generic_release: str
    nvr: str

    @property
    def generic_version_release(self) -> str:
        """Version-release with the distribution suffix erased (1.0-1.DIST)"""
        return f"{self.version}-{self.generic_release}"

    @property
    def version_release(self) -> str:
        """Version-release exactly as built (1.0-1.el9)"""
        return f"{self.version}-{self.release}"


@dataclass(frozen=True)
class ChangeRecord:
    """A selected build that differs from what is recorded on disk"""
    name: str
    kind: ChangeKind
    new_build: BuildRecord
    old_version_release: Optional[str] = None
    changelog_delta: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SyncResult:
    """Outcome of reconciling one package directory"""
    package: str
    copied: Tuple[str, ...] = field(default_factory=tuple)
    removed: Tuple[str, ...] = field(default_factory=tuple)
    skipped: Tuple[str, ...] = field(default_factory=tuple)
