"""
Build Selector Module - Picks the newest source build per package across tags
"""

import fnmatch
import logging
from typing import Dict, Iterable, List, Optional

from spec_sync.build.version_manager import VersionManager, VersionOrder, erase_dist
from spec_sync.models import BuildRecord

logger = logging.getLogger(__name__)


def make_build_record(entry: Dict) -> BuildRecord:
    """
    Normalize one tag query entry into a BuildRecord.

    The release keeps its raw value; generic_release and nvr carry the
    distribution placeholder. A missing nvr is synthesized from
    name, version and generic_release.
    """
    name = entry['name']
    version = entry['version']
    release = entry['release']
    generic_release = erase_dist(release)

    nvr = entry.get('nvr')
    if nvr:
        nvr = erase_dist(nvr)
    else:
        nvr = f"{name}-{version}-{generic_release}"

    return BuildRecord(
        name=name,
        version=version,
        release=release,
        generic_release=generic_release,
        nvr=nvr,
    )


class BuildSelector:
    """Queries tags and keeps the newest build of every package"""

    def __init__(self, koji_client, version_manager: VersionManager,
                 packages: Optional[Iterable[str]] = None,
                 exclude: Optional[Iterable[str]] = None):
        """
        Args:
            koji_client: Object with list_tagged_builds(tag) -> list of dicts
            version_manager: Comparator used for deduplication
            packages: Allow-list of package names (empty: everything)
            exclude: Shell-style patterns of package names to skip
        """
        self.koji_client = koji_client
        self.version_manager = version_manager
        self.packages = set(packages or [])
        self.exclude = list(exclude or [])

    def is_wanted(self, name: str) -> bool:
        """True unless the name is outside the allow-list or excluded"""
        if self.packages and name not in self.packages:
            return False
        for pattern in self.exclude:
            if fnmatch.fnmatchcase(name, pattern):
                logger.debug(f"EXCLUDED pkg={name} pattern={pattern}")
                return False
        return True

    def pick(self, current: Optional[BuildRecord], candidate: BuildRecord) -> BuildRecord:
        """
        Return whichever of two records for the same package to keep.

        The current record wins unless the candidate is strictly newer, so
        on equal versions the first record seen is kept.
        """
        if current is None:
            return candidate
        if self.version_manager.compare(candidate.nvr, current.nvr) == VersionOrder.NEWER:
            logger.debug(f"REPLACED pkg={candidate.name} old={current.nvr} new={candidate.nvr}")
            return candidate
        return current

    def select(self, tags: List[str]) -> Dict[str, BuildRecord]:
        """
        Build the selection set for the given tags.

        Args:
            tags: Koji tags, queried in order

        Returns:
            Mapping of package name to its newest BuildRecord

        Raises:
            RemoteQueryError: if any tag query fails
            ComparisonError: if two builds cannot be ordered
        """
        selection: Dict[str, BuildRecord] = {}
        for tag in tags:
            for entry in self.koji_client.list_tagged_builds(tag):
                if not self.is_wanted(entry['name']):
                    continue
                record = make_build_record(entry)
                selection[record.name] = self.pick(selection.get(record.name), record)

        for name in sorted(selection):
            logger.info(f"SELECTED pkg={name} nvr={selection[name].nvr}")
        logger.info(f"📦 Selected {len(selection)} packages from {len(tags)} tag(s)")
        return selection
