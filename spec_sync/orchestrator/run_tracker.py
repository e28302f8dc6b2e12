"""
Run Tracker Module - Tracks per-package outcomes and statistics
"""

import time
import logging
from typing import Dict

logger = logging.getLogger(__name__)


class RunTracker:
    """Tracks mirror progress, statistics, and package outcomes"""

    def __init__(self):
        self.new_packages = []
        self.updated_packages = []
        self.failed_packages = {}
        self.committed_packages = []
        self.revisions = None

        self.stats = {
            "selected": 0,
            "unchanged": 0,
        }

        self.start_time = time.time()

    def record_selection(self, selected: int, changed: int):
        """Record how many builds were selected and how many differ from disk"""
        self.stats["selected"] = selected
        self.stats["unchanged"] = selected - changed

    def record_synced(self, pkg_name: str, version: str, is_new: bool):
        """Record a package whose directory was reconciled"""
        entry = f"{pkg_name} ({version})"
        if is_new:
            self.new_packages.append(entry)
        else:
            self.updated_packages.append(entry)

    def record_commit(self, pkg_name: str):
        self.committed_packages.append(pkg_name)

    def record_revisions(self, before, after):
        """Record the output tree HEAD before and after the sync step"""
        self.revisions = (before, after)
        logger.info(f"HEAD_BEFORE={before or '-'} HEAD_AFTER={after or '-'}")

    def head_moved(self) -> bool:
        """True if HEAD changed; falls back to the commit counter when HEAD was not recorded"""
        if self.revisions is None:
            return bool(self.committed_packages)
        before, after = self.revisions
        return after is not None and after != before

    def record_failed_package(self, pkg_name: str, reason: str):
        """Record a package whose processing failed"""
        self.failed_packages[pkg_name] = reason
        logger.info(f"PACKAGE_FAILED=1 pkg={pkg_name}")

    def get_elapsed_time(self) -> float:
        return time.time() - self.start_time

    def get_summary(self) -> Dict:
        """Get run summary statistics"""
        return {
            "elapsed": self.get_elapsed_time(),
            **self.stats,
            "new": len(self.new_packages),
            "updated": len(self.updated_packages),
            "failed": len(self.failed_packages),
            "commits": len(self.committed_packages),
        }

    def print_summary(self):
        summary = self.get_summary()

        print("\n" + "=" * 60)
        print("📊 MIRROR SUMMARY")
        print("=" * 60)
        print(f"Duration:   {summary['elapsed']:.1f}s")
        print(f"Selected:   {summary['selected']}")
        print(f"Unchanged:  {summary['unchanged']}")
        print(f"New:        {summary['new']}")
        print(f"Updated:    {summary['updated']}")
        print(f"Failed:     {summary['failed']}")
        print("=" * 60)

        if self.new_packages:
            print("\n🆕 New packages:")
            for pkg in self.new_packages:
                print(f"  - {pkg}")
        if self.updated_packages:
            print("\n🔄 Updated packages:")
            for pkg in self.updated_packages:
                print(f"  - {pkg}")
        if self.failed_packages:
            print("\n❌ Failed packages:")
            for pkg, reason in sorted(self.failed_packages.items()):
                print(f"  - {pkg}: {reason}")

        if self.revisions is not None:
            before, after = self.revisions
            print(f"\nHEAD: {before or '(none)'} -> {after or '(none)'}")

        if self.head_moved():
            print(f"\nCommits made: {summary['commits']}")
        else:
            print("\nNo commits made")
