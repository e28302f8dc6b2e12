"""Command line entry point: argument handling and pre-flight failures."""

import pytest

from spec_sync import main as cli
from spec_sync.scm.git_client import GitClient

ENV_VARS = ["KOJI_HUB", "KOJI_TOPURL", "SPEC_SYNC_TAGS", "SPEC_SYNC_OUTPUT_DIR",
            "SPEC_SYNC_DEBUG", "SPEC_SYNC_CONFIG"]


class StubMirror:
    def __init__(self, run_config, result=0):
        self.run_config = run_config
        self.result = result

    def run(self):
        return self.result


@pytest.fixture(autouse=True)
def quiet_environment(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(cli, "check_required_tools", lambda: [])


@pytest.fixture
def captured(monkeypatch):
    """Replaces the mirror with a stub and records the config it receives"""
    seen = {}

    def from_config(run_config, git_client=None):
        seen["config"] = run_config
        seen["git"] = git_client
        return StubMirror(run_config)

    monkeypatch.setattr(cli.SpecMirror, "from_config", staticmethod(from_config))
    monkeypatch.setattr(GitClient, "is_repository", lambda self: True)
    return seen


class TestParser:
    def test_repeatable_flags(self):
        args = cli.build_parser().parse_args(
            ["-t", "a", "--tag", "b", "-x", "kernel*", "-n", "foo", "bar"]
        )

        assert args.tags == ["a", "b"]
        assert args.exclude == ["kernel*"]
        assert args.commit is False
        assert args.packages == ["foo", "bar"]

    def test_unset_switches_are_none(self):
        args = cli.build_parser().parse_args([])

        assert args.commit is None
        assert args.dry_run is None
        assert args.debug is None


class TestMain:
    def test_missing_tag(self, tmp_path, captured):
        assert cli.main(["-H", "https://koji.example.org/kojihub", "-o", str(tmp_path)]) == 1
        assert "config" not in captured

    def test_missing_hub(self, tmp_path, captured):
        assert cli.main(["-t", "c9s", "-o", str(tmp_path)]) == 1
        assert "config" not in captured

    def test_not_a_git_repository(self, tmp_path, captured, monkeypatch):
        monkeypatch.setattr(GitClient, "is_repository", lambda self: False)

        argv = ["-H", "https://koji.example.org/kojihub", "-t", "c9s", "-o", str(tmp_path)]
        assert cli.main(argv) == 1
        assert "config" not in captured

    def test_missing_output_dir(self, tmp_path, captured):
        argv = ["-H", "https://h/kojihub", "-t", "c9s", "-o", str(tmp_path / "absent")]
        assert cli.main(argv) == 1

    def test_bad_config_file(self, tmp_path, captured):
        config_file = tmp_path / "mirror.yaml"
        config_file.write_text("colour: blue\n", encoding="utf-8")

        assert cli.main(["-c", str(config_file), "-t", "c9s"]) == 1

    def test_runs_mirror(self, tmp_path, captured):
        argv = [
            "-H", "https://koji.example.org/kojihub",
            "-t", "c9s", "-t", "c9s-extras",
            "-o", str(tmp_path),
            "--no-commit", "--dry-run",
            "foo",
        ]

        assert cli.main(argv) == 0

        run_config = captured["config"]
        assert run_config.tags == ["c9s", "c9s-extras"]
        assert run_config.output_dir == tmp_path
        assert run_config.commit is False
        assert run_config.dry_run is True
        assert run_config.packages == ["foo"]
        assert run_config.download_base == "https://koji.example.org/kojifiles"
        assert captured["git"].repo_dir == tmp_path

    def test_environment_fills_gaps(self, tmp_path, captured, monkeypatch):
        monkeypatch.setenv("KOJI_HUB", "https://env.example.org/kojihub")
        monkeypatch.setenv("SPEC_SYNC_TAGS", "f40")

        assert cli.main(["-o", str(tmp_path)]) == 0
        assert captured["config"].hub == "https://env.example.org/kojihub"
        assert captured["config"].tags == ["f40"]
        assert captured["config"].commit is True
