"""
Version Tracker Module - Compares selected builds with the specs on disk
"""

import logging
from pathlib import Path
from typing import Optional

from spec_sync.models import BuildRecord, ChangeKind, ChangeRecord

logger = logging.getLogger(__name__)


def classify(on_disk: Optional[str], build: BuildRecord) -> ChangeKind:
    """
    Classify a build against the on-disk version-release.

    Exact string equality decides "unchanged"; no version ordering is
    applied, so an older build in the tag still counts as an update.
    """
    if on_disk is None:
        return ChangeKind.NEW
    if on_disk == build.generic_version_release:
        return ChangeKind.UNCHANGED
    return ChangeKind.UPDATED


class VersionTracker:
    """Reads recorded spec versions from the output tree and detects changes"""

    def __init__(self, output_dir, spec_query):
        """
        Args:
            output_dir: Root of the package tree (one subdirectory per package)
            spec_query: Object with version_release(spec_path) -> str
        """
        self.output_dir = Path(output_dir)
        self.spec_query = spec_query

    def package_dir(self, name: str) -> Path:
        return self.output_dir / name

    def find_spec(self, name: str) -> Optional[Path]:
        """
        The recorded spec of a package, or None when nothing is recorded.

        Prefers <name>.spec when the directory holds several specs.
        """
        pkg_dir = self.package_dir(name)
        if not pkg_dir.is_dir():
            return None
        specs = sorted(p for p in pkg_dir.glob("*.spec") if p.is_file())
        if not specs:
            return None
        if len(specs) > 1:
            preferred = pkg_dir / f"{name}.spec"
            if preferred in specs:
                return preferred
            logger.warning(f"⚠️ {name}: {len(specs)} spec files on disk, using {specs[0].name}")
        return specs[0]

    def recorded_version(self, name: str) -> Optional[str]:
        """
        Version-release of the on-disk spec, or None for unknown packages.

        Raises:
            SpecQueryError: if the recorded spec cannot be queried
        """
        spec_path = self.find_spec(name)
        if spec_path is None:
            return None
        return self.spec_query.version_release(spec_path)

    def detect(self, build: BuildRecord) -> Optional[ChangeRecord]:
        """
        Compare one selected build with disk.

        Returns:
            ChangeRecord for new or updated packages, None if unchanged
        """
        on_disk = self.recorded_version(build.name)
        kind = classify(on_disk, build)

        if kind == ChangeKind.UNCHANGED:
            logger.debug(f"UNCHANGED pkg={build.name} ver={on_disk}")
            return None
        if kind == ChangeKind.NEW:
            logger.info(f"🆕 New package found: {build.name}")
        else:
            logger.info(f"🔄 Update found: {build.name} {on_disk} is now {build.generic_version_release}")

        return ChangeRecord(
            name=build.name,
            kind=kind,
            new_build=build,
            old_version_release=on_disk,
        )
