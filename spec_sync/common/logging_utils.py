"""
Logging utilities for the spec mirror
"""

import logging


def setup_logging(debug_mode=False, log_file=None):
    """Setup logging configuration"""
    level = logging.DEBUG if debug_mode else logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%H:%M:%S',
        handlers=handlers,
        force=True,
    )

    # requests/urllib3 chatter drowns out the per-package notices
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logging.getLogger("spec_sync")

