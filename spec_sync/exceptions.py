"""
Exceptions raised by the spec mirror
"""


class SpecSyncError(Exception):
    """Base class for all spec mirror errors"""


class ConfigError(SpecSyncError):
    """Missing tag or hub, unreadable config file, or output dir outside git"""


class RemoteQueryError(SpecSyncError):
    """The tag query or a source package download failed"""


class ExtractionError(SpecSyncError):
    """
    A source package could not be unpacked or carries no spec file.

    Attributes:
        package: Name of the package being processed
    """

    def __init__(self, package: str, message: str):
        self.package = package
        super().__init__(f"{package}: {message}")


class SpecQueryError(SpecSyncError):
    """rpmspec/rpm could not read the version or changelog of a spec file"""


class ComparisonError(SpecSyncError):
    """
    The version comparison tool could not order two version strings.

    Attributes:
        left: First version string
        right: Second version string
    """

    def __init__(self, left: str, right: str, reason: str):
        self.left = left
        self.right = right
        super().__init__(f"Cannot compare '{left}' with '{right}': {reason}")
