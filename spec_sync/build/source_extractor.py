"""
Source Extractor Module - Downloads and unpacks source packages
"""

import shlex
import shutil
import logging
import tempfile
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from spec_sync import config
from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.exceptions import ExtractionError
from spec_sync.models import BuildRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extraction:
    """Contents of one unpacked source package"""
    directory: Path
    archive: Path
    spec_path: Path


@contextmanager
def scratch_directory(prefix: str = "spec_sync_"):
    """Temporary working directory removed on every exit path"""
    path = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug(f"Cleaned directory: {path}")


def find_spec(directory: Path, name: str) -> Path:
    """
    Locate the spec file among extracted files.

    Prefers <name>.spec when several are present.

    Raises:
        ExtractionError: if no spec file exists
    """
    specs = sorted(p for p in directory.glob("*.spec") if p.is_file())
    if not specs:
        raise ExtractionError(name, "no spec file found in source package")
    if len(specs) > 1:
        preferred = directory / f"{name}.spec"
        if preferred in specs:
            return preferred
        logger.warning(f"⚠️ {name}: {len(specs)} spec files found, using {specs[0].name}")
    return specs[0]


class SourceExtractor:
    """Fetches a build's source package and unpacks it with rpm2cpio/cpio"""

    def __init__(self, koji_client, shell_executor: ShellExecutor = None):
        self.koji_client = koji_client
        self.shell_executor = shell_executor or ShellExecutor()

    def unpack(self, archive: Path, directory: Path, name: str):
        """Extract archive contents into directory"""
        cmd = f"rpm2cpio {shlex.quote(str(archive))} | cpio -idmu --quiet"
        try:
            result = self.shell_executor.run_command(
                cmd,
                cwd=directory,
                shell=True,
                check=False,
                timeout=config.COMMAND_TIMEOUTS['extract'],
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ExtractionError(name, f"extraction failed: {e}") from e

        if result.returncode != 0:
            raise ExtractionError(name, f"extraction failed: {(result.stderr or '').strip()[:200]}")

    @contextmanager
    def extract(self, build: BuildRecord):
        """
        Fetch and unpack a build inside a scratch directory.

        The directory and everything in it is removed when the context
        exits, whether processing succeeded or not.

        Args:
            build: Selected build (its raw release locates the archive)

        Yields:
            Extraction

        Raises:
            RemoteQueryError: if the download fails
            ExtractionError: if unpacking fails or no spec is present
        """
        with scratch_directory(prefix=f"spec_sync_{build.name}_") as directory:
            archive = self.koji_client.fetch_archive(
                build.name, build.version, build.release, directory
            )
            self.unpack(archive, directory, build.name)
            spec_path = find_spec(directory, build.name)
            logger.info(f"EXTRACTED pkg={build.name} spec={spec_path.name}")
            yield Extraction(directory=directory, archive=archive, spec_path=spec_path)
