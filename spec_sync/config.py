"""
Configuration defaults for the Koji spec mirror
=================================================================================
PURPOSE: Centralized defaults for the spec mirror. These values control
         where package specs are written, which extracted files are kept,
         and how long remote and external tool calls may take.

USAGE: Read by spec_sync.common.config_loader. A YAML config file,
       environment variables and command line flags override these defaults.

ORGANIZATION:
1. Output configuration
2. Remote service configuration
3. File selection policy
4. External tool timeouts
"""

# ==============================================================================
# 1. OUTPUT CONFIGURATION
# ==============================================================================

# DEFAULT_OUTPUT_DIR: Git work tree holding one subdirectory per package
DEFAULT_OUTPUT_DIR = "."

# DIST_PLACEHOLDER: Replaces the distribution suffix of release strings
# ".el9" and ".fc40" both become ".DIST" so rebuilds for different
# distributions of the same source compare equal
DIST_PLACEHOLDER = ".DIST"

# DIST_SUFFIX_PATTERN: Distribution suffix erased from release strings
DIST_SUFFIX_PATTERN = r"\.(?:el|fc)\d+"

# ==============================================================================
# 2. REMOTE SERVICE CONFIGURATION
# ==============================================================================

# HUB_SUFFIX / TOPURL_SUFFIX: Used to derive the download base from the hub
# URL when no topurl is configured (https://host/kojihub -> https://host/kojifiles)
HUB_SUFFIX = "/kojihub"
TOPURL_SUFFIX = "/kojifiles"

# HTTP_TIMEOUT: Seconds to wait for the hub or the file server
HTTP_TIMEOUT = 60

# FETCH_RETRIES: Attempts for a source package download before giving up
FETCH_RETRIES = 3

# RETRY_DELAY: Initial delay between download attempts (doubles each retry)
RETRY_DELAY = 2.0

# ==============================================================================
# 3. FILE SELECTION POLICY
# ==============================================================================
# Only specs, patches and small auxiliary sources are tracked. Upstream
# tarballs and other packaging archives never enter the output tree.

EXCLUDED_SUFFIXES = (
    ".tar",
    ".tar.gz",
    ".tgz",
    ".tar.bz2",
    ".tbz2",
    ".tar.xz",
    ".txz",
    ".tar.zst",
    ".tar.lz",
    ".tar.lzma",
    ".zip",
    ".7z",
    ".rpm",
    ".crate",
    ".gem",
    ".whl",
    ".jar",
)

# MAX_FILE_SIZE: Files larger than this are skipped even without an
# archive suffix (1 MiB)
MAX_FILE_SIZE = 1024 * 1024

# ==============================================================================
# 4. EXTERNAL TOOL TIMEOUTS (seconds)
# ==============================================================================

COMMAND_TIMEOUTS = {
    "default": 300,
    "extract": 600,  # rpm2cpio | cpio on large source packages
    "vercmp": 30,
    "git": 120,
}
