"""
Spec Mirror Module - Main orchestrator for mirroring tagged builds into git

Pipeline per run:
    BuildSelector -> VersionTracker -> for each changed package, in name order:
        SourceExtractor -> changelog delta -> DirectorySync -> CommitComposer
"""

import logging
import subprocess
from dataclasses import replace
from typing import Dict, List, Optional

from spec_sync.build.build_selector import BuildSelector
from spec_sync.build.changelog import extract_delta
from spec_sync.build.source_extractor import SourceExtractor
from spec_sync.build.spec_query import SpecQuery
from spec_sync.build.version_manager import VersionManager
from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.exceptions import (
    ComparisonError,
    ExtractionError,
    RemoteQueryError,
    SpecQueryError,
)
from spec_sync.koji_client import KojiClient
from spec_sync.models import BuildRecord, ChangeKind, ChangeRecord
from spec_sync.orchestrator.run_tracker import RunTracker
from spec_sync.repo.directory_sync import DirectorySync
from spec_sync.repo.version_tracker import VersionTracker
from spec_sync.scm.commit_composer import CommitComposer
from spec_sync.scm.git_client import GitClient

logger = logging.getLogger(__name__)

# Errors that abandon one package but not the run
PACKAGE_ERRORS = (RemoteQueryError, ExtractionError, SpecQueryError)


class SpecMirror:
    """Main orchestrator that coordinates selection, detection, sync and commits"""

    def __init__(self, tags: List[str], build_selector: BuildSelector,
                 version_tracker: VersionTracker, source_extractor: SourceExtractor,
                 spec_query: SpecQuery, directory_sync: DirectorySync,
                 commit_composer: CommitComposer, dry_run: bool = False,
                 tracker: Optional[RunTracker] = None, git_client: GitClient = None):
        self.tags = list(tags)
        self.build_selector = build_selector
        self.version_tracker = version_tracker
        self.source_extractor = source_extractor
        self.spec_query = spec_query
        self.directory_sync = directory_sync
        self.commit_composer = commit_composer
        self.dry_run = dry_run
        self.tracker = tracker or RunTracker()
        # Without a git client the summary falls back to the commit counter
        self.git_client = git_client

    @classmethod
    def from_config(cls, run_config, git_client: GitClient = None) -> "SpecMirror":
        """Wire the real collaborators for a resolved RunConfig"""
        shell_executor = ShellExecutor(debug_mode=run_config.debug)
        koji_client = KojiClient(
            run_config.hub,
            run_config.download_base,
            timeout=run_config.http_timeout,
            fetch_retries=run_config.fetch_retries,
            retry_delay=run_config.retry_delay,
        )
        version_manager = VersionManager(shell_executor)
        spec_query = SpecQuery(shell_executor)
        git_client = git_client or GitClient(run_config.output_dir, shell_executor)

        return cls(
            tags=run_config.tags,
            build_selector=BuildSelector(
                koji_client,
                version_manager,
                packages=run_config.packages,
                exclude=run_config.exclude,
            ),
            version_tracker=VersionTracker(run_config.output_dir, spec_query),
            source_extractor=SourceExtractor(koji_client, shell_executor),
            spec_query=spec_query,
            directory_sync=DirectorySync(max_file_size=run_config.max_file_size),
            commit_composer=CommitComposer(git_client, enabled=run_config.commit),
            dry_run=run_config.dry_run,
            git_client=git_client,
        )

    def detect_changes(self, selection: Dict[str, BuildRecord]) -> List[ChangeRecord]:
        """Changes in package name order; unreadable on-disk specs fail that package only"""
        changes = []
        for name in sorted(selection):
            try:
                change = self.version_tracker.detect(selection[name])
            except SpecQueryError as e:
                logger.error(f"❌ {name}: cannot read recorded spec: {e}")
                self.tracker.record_failed_package(name, str(e))
                continue
            if change is not None:
                changes.append(change)
        return changes

    def process_package(self, change: ChangeRecord) -> ChangeRecord:
        """
        Fetch, unpack, reconcile and commit one changed package.

        Returns:
            The change with its changelog delta filled in

        Raises:
            RemoteQueryError, ExtractionError, SpecQueryError: package-level failures
        """
        build = change.new_build
        target_dir = self.version_tracker.package_dir(build.name)

        with self.source_extractor.extract(build) as extraction:
            delta = ()
            if change.kind == ChangeKind.UPDATED:
                changelog = self.spec_query.changelog(extraction.spec_path)
                delta = tuple(extract_delta(changelog, change.old_version_release))
            change = replace(change, changelog_delta=delta)

            self.directory_sync.sync(
                extraction.directory,
                target_dir,
                archive=extraction.archive,
                package=build.name,
            )

        self.tracker.record_synced(build.name, build.version_release, change.kind == ChangeKind.NEW)

        if self.commit_composer.commit(change):
            self.tracker.record_commit(build.name)
        return change

    def print_plan(self, changes: List[ChangeRecord]):
        print("\n📋 Planned changes:")
        if not changes:
            print("  (none)")
        for change in changes:
            build = change.new_build
            if change.kind == ChangeKind.NEW:
                print(f"  NEW     {build.name} {build.version_release}")
            else:
                print(f"  UPDATE  {build.name} {change.old_version_release} -> {build.version_release}")

    def current_revision(self) -> Optional[str]:
        """HEAD of the output tree, or None without a git client or before the first commit"""
        if self.git_client is None:
            return None
        return self.git_client.current_revision()

    def run(self) -> int:
        """
        Execute one mirror run.

        Returns:
            0 when the run completes (even with failed packages), 1 when a
            run-fatal error stops it
        """
        try:
            print("\n" + "=" * 60)
            print("STEP 1: BUILD SELECTION")
            print("=" * 60)
            selection = self.build_selector.select(self.tags)

            print("\n" + "=" * 60)
            print("STEP 2: CHANGE DETECTION")
            print("=" * 60)
            changes = self.detect_changes(selection)
            self.tracker.record_selection(len(selection), len(changes))
            logger.info(f"📊 {len(changes)} of {len(selection)} packages changed")

            if self.dry_run:
                self.print_plan(changes)
                self.tracker.print_summary()
                return 0

            print("\n" + "=" * 60)
            print("STEP 3: SYNC AND COMMIT")
            print("=" * 60)
            head_before = self.current_revision()
            for change in changes:
                try:
                    self.process_package(change)
                except PACKAGE_ERRORS as e:
                    logger.error(f"❌ {change.name}: {e}")
                    self.tracker.record_failed_package(change.name, str(e))
            if self.git_client is not None:
                self.tracker.record_revisions(head_before, self.current_revision())

            self.tracker.print_summary()
            return 0

        except (RemoteQueryError, ComparisonError) as e:
            logger.error(f"❌ Mirror run aborted: {e}")
            return 1
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"❌ Mirror run aborted, command failed: {e}")
            return 1
