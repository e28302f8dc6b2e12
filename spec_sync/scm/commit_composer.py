"""
Commit Composer Module - Builds commit messages and commits one package at a time
"""

import logging

from spec_sync.models import ChangeKind, ChangeRecord

logger = logging.getLogger(__name__)


def compose_message(change: ChangeRecord) -> str:
    """
    Commit message for a changed package.

    New packages get a one-line description. Updates list the changelog
    delta, verbatim, after a blank line when there is one.
    """
    build = change.new_build
    if change.kind == ChangeKind.NEW:
        return f"New package {build.name}, version {build.version_release}"

    message = f"Update {build.name} to {build.version_release}"
    if change.changelog_delta:
        message += "\n\n" + "\n".join(change.changelog_delta)
    return message


class CommitComposer:
    """Commits each package directory separately"""

    def __init__(self, git_client, enabled: bool = True):
        """
        Args:
            git_client: Object with add(paths) and commit(message, paths)
            enabled: False leaves reconciled files uncommitted on disk
        """
        self.git_client = git_client
        self.enabled = enabled

    def commit(self, change: ChangeRecord) -> bool:
        """
        Commit the package directory of a change.

        Returns:
            True if a commit was created
        """
        if not self.enabled:
            logger.info(f"ℹ️ Commit disabled, leaving {change.name} uncommitted")
            return False

        paths = [change.name]
        self.git_client.add(paths)
        return self.git_client.commit(compose_message(change), paths)
