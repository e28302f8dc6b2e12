#!/usr/bin/env python3
"""
Main Entry Point for the Koji spec mirror
"""

import sys
import logging
import argparse

from spec_sync.common.config_loader import ConfigLoader
from spec_sync.common.environment import check_required_tools, validate_run_config
from spec_sync.common.logging_utils import setup_logging
from spec_sync.common.shell_executor import ShellExecutor
from spec_sync.exceptions import ConfigError
from spec_sync.orchestrator.spec_mirror import SpecMirror
from spec_sync.scm.git_client import GitClient

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="koji-spec-sync",
        description="Mirror spec files of the newest builds in Koji tags into a git tree.",
    )
    parser.add_argument("packages", nargs="*", metavar="PACKAGE",
                        help="Only mirror these packages (default: all)")
    parser.add_argument("-H", "--hub", help="Koji hub XML-RPC URL (env: KOJI_HUB)")
    parser.add_argument("--topurl", help="Base URL for package downloads (env: KOJI_TOPURL)")
    parser.add_argument("-t", "--tag", dest="tags", action="append", default=[],
                        help="Koji tag to mirror; repeat for several tags")
    parser.add_argument("-o", "--output-dir", help="Git work tree receiving package directories")
    parser.add_argument("-x", "--exclude", action="append", default=[],
                        help="Skip packages matching this shell pattern; repeatable")
    parser.add_argument("-n", "--no-commit", dest="commit", action="store_false", default=None,
                        help="Update files but do not commit")
    parser.add_argument("--dry-run", action="store_true", default=None,
                        help="Only report which packages would change")
    parser.add_argument("-c", "--config", help="YAML config file (env: SPEC_SYNC_CONFIG)")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("-d", "--debug", action="store_true", default=None,
                        help="Verbose logging and command echo")
    return parser


def main(argv=None):
    """Command line entry point, returns the process exit status"""
    args = build_parser().parse_args(argv)

    cli_overrides = {
        'hub': args.hub,
        'topurl': args.topurl,
        'tags': args.tags,
        'output_dir': args.output_dir,
        'exclude': args.exclude,
        'packages': args.packages,
        'commit': args.commit,
        'dry_run': args.dry_run,
        'debug': args.debug,
        'log_file': args.log_file,
    }

    try:
        run_config = ConfigLoader.load(cli_overrides, config_file=args.config)
    except ConfigError as e:
        setup_logging(bool(args.debug))
        logger.error(f"❌ {e}")
        return 1

    setup_logging(run_config.debug, run_config.log_file)

    git_client = GitClient(run_config.output_dir, ShellExecutor(debug_mode=run_config.debug))
    try:
        validate_run_config(run_config, git_client)
    except ConfigError as e:
        logger.error(f"❌ {e}")
        return 1

    check_required_tools()

    mirror = SpecMirror.from_config(run_config, git_client=git_client)
    return mirror.run()


if __name__ == "__main__":
    sys.exit(main())
