"""
Environment validation module
"""

import logging
import shutil

from spec_sync.exceptions import ConfigError

logger = logging.getLogger(__name__)

REQUIRED_TOOLS = [
    "git",
    "rpmspec",
    "rpm",
    "rpm2cpio",
    "cpio",
    "rpmdev-vercmp",
]


def validate_run_config(run_config, git_client):
    """
    Pre-flight validation of the run configuration.

    Args:
        run_config: RunConfig to validate
        git_client: GitClient bound to the output directory

    Raises:
        ConfigError: when no tag or hub is configured, or the output
            directory is not a git work tree
    """
    if not run_config.tags:
        raise ConfigError("At least one tag is required (--tag)")
    if not run_config.hub:
        raise ConfigError("Koji hub URL is required (--hub)")
    if not run_config.output_dir.is_dir():
        raise ConfigError(f"Output directory does not exist: {run_config.output_dir}")
    if not git_client.is_repository():
        raise ConfigError(f"Output directory is not a git repository: {run_config.output_dir}")

    logger.info("✅ Configuration validation passed:")
    logger.info(f"   Hub: {run_config.hub}")
    logger.info(f"   Tags: {', '.join(run_config.tags)}")
    logger.info(f"   Output: {run_config.output_dir}")
    logger.info(f"   Commit: {'ENABLED' if run_config.commit else 'DISABLED'}")
    return True


def check_required_tools():
    """Warn about external tools missing from PATH"""
    missing = [tool for tool in REQUIRED_TOOLS if shutil.which(tool) is None]
    for tool in missing:
        logger.warning(f"⚠️ Required tool not found in PATH: {tool}")
    return missing
