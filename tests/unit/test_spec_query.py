"""Unit tests for rpmspec/rpm spec queries."""

import pytest

from spec_sync.build.spec_query import SpecQuery
from spec_sync.exceptions import SpecQueryError
from tests.fakes import FakeShellExecutor


class TestSpecQuery:
    def test_version_release_first_line(self, tmp_path):
        spec = tmp_path / "foo.spec"
        spec.write_text("x")
        shell = FakeShellExecutor(lambda cmd, cwd: (0, "  1.0-1.DIST \n1.0-1.DIST\n", ""))

        assert SpecQuery(shell).version_release(spec) == "1.0-1.DIST"

        cmd, cwd = shell.commands[0]
        assert cmd[:3] == ["rpmspec", "-q", "--srpm"]
        assert "dist .DIST" in cmd
        assert cmd[-1] == str(spec)
        assert cwd == tmp_path

    def test_version_release_empty_output(self, tmp_path):
        spec = tmp_path / "foo.spec"
        shell = FakeShellExecutor(lambda cmd, cwd: (0, "", ""))

        with pytest.raises(SpecQueryError, match="no version"):
            SpecQuery(shell).version_release(spec)

    def test_query_failure(self, tmp_path):
        spec = tmp_path / "foo.spec"
        shell = FakeShellExecutor(lambda cmd, cwd: (1, "", "error: bad %if condition"))

        with pytest.raises(SpecQueryError, match="bad %if"):
            SpecQuery(shell).version_release(spec)

    def test_changelog_lines(self, tmp_path):
        spec = tmp_path / "foo.spec"
        output = "* Mon Jan 01 2024 A <a@b> - 1.0-2\n- fix\n\n* Sun Dec 31 2023 A <a@b> - 1.0-1\n- init\n"
        shell = FakeShellExecutor(lambda cmd, cwd: (0, output, ""))

        lines = SpecQuery(shell).changelog(spec)

        assert lines[0].startswith("* Mon Jan 01 2024")
        assert lines[1] == "- fix"
        assert shell.commands[0][0] == ["rpm", "-q", "--changelog", "--specfile", str(spec)]
