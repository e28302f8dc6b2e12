"""Git client against a real repository."""

import shutil
import subprocess

import pytest

from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.scm.git_client import GitClient

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def repo(tmp_path):
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    for key, value in (("user.name", "Mirror Bot"), ("user.email", "mirror@example.org"),
                       ("commit.gpgsign", "false")):
        subprocess.run(["git", "-C", str(tmp_path), "config", key, value], check=True)
    return tmp_path


def write(repo, relpath, text):
    path = repo / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestGitRepository:
    def test_first_commit_moves_head(self, repo):
        git = GitClient(repo, ShellExecutor())
        assert git.current_revision() is None

        write(repo, "foo/foo.spec", "Version: 1\n")
        git.add(["foo"])

        assert git.commit("New package foo, version 1-1.el9", ["foo"])
        assert len(git.current_revision()) == 40

    def test_unchanged_package_with_untracked_neighbour(self, repo):
        git = GitClient(repo, ShellExecutor())
        write(repo, "foo/foo.spec", "Version: 1\n")
        git.add(["foo"])
        git.commit("New package foo, version 1-1.el9", ["foo"])
        head = git.current_revision()

        write(repo, "bar/bar.spec", "Version: 2\n")
        git.add(["foo"])

        assert git.commit("Update foo to 1-1.el9_2", ["foo"]) is False
        assert git.current_revision() == head

    def test_deletion_is_committed(self, repo):
        git = GitClient(repo, ShellExecutor())
        write(repo, "foo/foo.spec", "Version: 1\n")
        write(repo, "foo/old.patch", "+old\n")
        git.add(["foo"])
        git.commit("New package foo, version 1-1.el9", ["foo"])

        (repo / "foo" / "old.patch").unlink()
        git.add(["foo"])

        assert git.commit("Update foo to 1-2.el9", ["foo"])
        listed = subprocess.run(["git", "-C", str(repo), "ls-files"], check=True,
                                capture_output=True, text=True).stdout.split()
        assert listed == ["foo/foo.spec"]
