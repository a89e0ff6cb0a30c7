"""Installer error types."""


class InstallerError(Exception):
    """Base class for installer failures."""


class MetadataUnreadableError(InstallerError):
    """Artifact metadata is missing, unreadable or has no usable version."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CopyFailedError(InstallerError):
    """Copying the bundled artifact into place failed."""


class PermissionDeniedError(CopyFailedError):
    """The target location is not writable (or the source not readable)."""


class SelectionFailedError(InstallerError):
    """The system refused to make the screensaver the active one."""
