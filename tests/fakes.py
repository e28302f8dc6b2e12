"""Fakes standing in for the hub, rpm tooling and git."""

import re
import subprocess
from pathlib import Path
from typing import Dict, List

from spec_sync.build.version_manager import VersionOrder
from spec_sync.exceptions import RemoteQueryError


def version_key(value: str):
    return tuple(int(part) for part in re.findall(r"\d+", value))


class FakeComparator:
    """Orders strings by their numeric segments."""

    def __init__(self):
        self.calls = []

    def compare(self, left: str, right: str) -> VersionOrder:
        self.calls.append((left, right))
        if version_key(left) > version_key(right):
            return VersionOrder.NEWER
        return VersionOrder.OLDER_OR_EQUAL


class FakeKoji:
    """Serves tag listings and writes a placeholder archive on fetch."""

    def __init__(self, tags: Dict[str, List[dict]] = None, broken: set = None):
        self.tags = tags or {}
        self.broken = broken or set()
        self.fetched = []

    def list_tagged_builds(self, tag):
        if tag not in self.tags:
            raise RemoteQueryError(f"listTaggedRPMS fault 1000: No such tag: {tag}")
        return list(self.tags[tag])

    def fetch_archive(self, name, version, release, dest_dir):
        self.fetched.append(f"{name}-{version}-{release}")
        if name in self.broken:
            raise RemoteQueryError(f"Fetching {name} failed: HTTP 404")
        archive = Path(dest_dir) / f"{name}-{version}-{release}.src.rpm"
        archive.write_bytes(b"\xed\xab\xee\xdb fake rpm")
        return archive


class FakeShellExecutor:
    """Records commands and answers them through a handler."""

    def __init__(self, handler=None):
        self.handler = handler
        self.commands = []

    def run_command(self, cmd, cwd=None, check=True, shell=False, **kwargs):
        self.commands.append((cmd, cwd))
        returncode, stdout, stderr = (0, "", "")
        if self.handler is not None:
            returncode, stdout, stderr = self.handler(cmd, cwd)
        result = subprocess.CompletedProcess(cmd, returncode, stdout, stderr)
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, stdout, stderr)
        return result


class Unpacker:
    """Shell handler that 'extracts' prepared files for rpm2cpio commands."""

    def __init__(self, contents: Dict[str, Dict[str, str]]):
        # archive basename -> {filename: text}
        self.contents = contents

    def __call__(self, cmd, cwd):
        if isinstance(cmd, str) and cmd.startswith("rpm2cpio"):
            for archive, files in self.contents.items():
                if archive in cmd:
                    for filename, text in files.items():
                        (Path(cwd) / filename).write_text(text, encoding="utf-8")
                    return 0, "", ""
            return 1, "", "cpio: premature end of archive"
        return 0, "", ""


class FakeSpecQuery:
    """Reads Version/Release tags and %changelog straight from spec text."""

    def version_release(self, spec_path):
        text = Path(spec_path).read_text(encoding="utf-8")
        version = re.search(r"^Version:\s*(\S+)", text, re.M).group(1)
        release = re.search(r"^Release:\s*(\S+)", text, re.M).group(1)
        return f"{version}-{release.replace('%{?dist}', '.DIST')}"

    def changelog(self, spec_path):
        text = Path(spec_path).read_text(encoding="utf-8")
        if "%changelog" not in text:
            return []
        return text.split("%changelog", 1)[1].strip("\n").splitlines()


class FakeGit:
    def __init__(self):
        self.added = []
        self.commits = []

    def add(self, paths):
        self.added.append(list(paths))

    def commit(self, message, paths):
        self.commits.append((message, list(paths)))
        return True

    def current_revision(self):
        if not self.commits:
            return None
        return f"{len(self.commits):040x}"


def make_spec(version: str, release: str = "1%{?dist}", changelog: List[str] = ()) -> str:
    lines = [
        "Name: placeholder",
        f"Version: {version}",
        f"Release: {release}",
        "Summary: test package",
        "License: MIT",
        "",
        "%description",
        "Test package.",
        "",
    ]
    if changelog:
        lines.append("%changelog")
        lines.extend(changelog)
    return "\n".join(lines) + "\n"
