"""
Directory Sync Module - Makes a package directory match an extracted source package

The package directory converges to exactly the eligible files of the new
build: everything eligible is copied over, everything else is removed.
Upstream tarballs and other archives are never eligible.
"""

import shutil
import logging
from pathlib import Path
from typing import List, Optional

from spec_sync import config
from spec_sync.models import SyncResult

logger = logging.getLogger(__name__)


class DirectorySync:
    """Copy-then-prune reconciliation of one package directory"""

    def __init__(self, excluded_suffixes=config.EXCLUDED_SUFFIXES,
                 max_file_size: int = config.MAX_FILE_SIZE):
        self.excluded_suffixes = tuple(excluded_suffixes)
        self.max_file_size = max_file_size

    def is_eligible(self, path: Path, archive: Optional[Path] = None) -> bool:
        """True for small non-archive files other than the downloaded package"""
        if archive is not None and path.name == archive.name:
            return False
        if path.name.lower().endswith(self.excluded_suffixes):
            return False
        if path.stat().st_size > self.max_file_size:
            logger.info(f"ℹ️ Skipping {path.name}: larger than {self.max_file_size} bytes")
            return False
        return True

    def eligible_files(self, source_dir: Path, archive: Optional[Path] = None) -> List[Path]:
        """Eligible files of an extraction, sorted by name"""
        files = sorted(p for p in Path(source_dir).iterdir() if p.is_file())
        return [p for p in files if self.is_eligible(p, archive)]

    def sync(self, source_dir, target_dir, archive: Optional[Path] = None,
             package: str = None) -> SyncResult:
        """
        Reconcile target_dir with the eligible files of source_dir.

        Args:
            source_dir: Scratch directory holding the extracted package
            target_dir: Package subdirectory of the output tree
            archive: Downloaded archive inside source_dir (never copied)
            package: Package name for logging

        Returns:
            SyncResult listing copied, removed and skipped basenames
        """
        source_dir = Path(source_dir)
        target_dir = Path(target_dir)
        package = package or target_dir.name

        all_files = sorted(p.name for p in source_dir.iterdir() if p.is_file())
        eligible = self.eligible_files(source_dir, archive)
        eligible_names = {p.name for p in eligible}
        skipped = [name for name in all_files if name not in eligible_names]

        target_dir.mkdir(parents=True, exist_ok=True)

        copied = []
        for src in eligible:
            shutil.copy2(src, target_dir / src.name)
            copied.append(src.name)

        removed = []
        for existing in sorted(target_dir.iterdir()):
            if existing.is_file() and existing.name not in eligible_names:
                existing.unlink()
                removed.append(existing.name)

        logger.info(
            f"SYNC_RESULT pkg={package} copied={len(copied)} removed={len(removed)} skipped={len(skipped)}"
        )
        return SyncResult(
            package=package,
            copied=tuple(copied),
            removed=tuple(removed),
            skipped=tuple(skipped),
        )
