"""Install or update the bundled screensaver when it is newer."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ..config import InstallerSettings
from ..errors import CopyFailedError, PermissionDeniedError
from ..utils.fs import path_exists, remove_path
from ..versions import compare
from ..versions.models import InstallAction, InstallReport
from ..versions.resolver import VersionResolver
from .locations import HostBundleLocations, ScreensaverLocations

logger = logging.getLogger(__name__)


def _copy_failure(action: str, path: Path, error: OSError) -> CopyFailedError:
    if isinstance(error, PermissionError):
        return PermissionDeniedError(f"Permission denied while {action} {path}: {error}")
    return CopyFailedError(f"Failed {action} {path}: {error}")


def remove_stale_staging(target: Path) -> None:
    """Remove staging directories left behind by an interrupted install."""
    prefix = f".{target.name}."
    for entry in target.parent.iterdir():
        if entry.name.startswith(prefix) and entry.name.endswith(".tmp") and entry.is_dir():
            logger.warning("Removing leftover staging directory %s", entry)
            remove_path(entry)


def replace_atomically(source: Path, target: Path) -> None:
    """Copy source over target so target is either the old or the new artifact.

    The copy is staged in a temporary directory next to target, then swapped in
    with renames on the same filesystem. The previous artifact is moved back if
    the final rename fails.
    """
    parent = target.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
        remove_stale_staging(target)
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}.", suffix=".tmp", dir=parent))
    except OSError as e:
        raise _copy_failure("preparing", parent, e) from e

    staged = staging / target.name
    backup = staging / f"{target.name}.previous"
    keep_staging = False
    try:
        try:
            if source.is_dir():
                shutil.copytree(source, staged, symlinks=True)
            else:
                shutil.copy2(source, staged)
        except OSError as e:
            raise _copy_failure("copying", source, e) from e

        had_previous = path_exists(target)
        try:
            if had_previous:
                os.rename(target, backup)
            os.rename(staged, target)
        except OSError as e:
            if had_previous and path_exists(backup) and not path_exists(target):
                try:
                    os.rename(backup, target)
                except OSError as restore_error:
                    keep_staging = True
                    logger.critical("Could not restore previous screensaver from %s: %s", backup, restore_error)
            raise _copy_failure("replacing", target, e) from e
    finally:
        if not keep_staging:
            remove_path(staging)


class ScreensaverInstaller:
    """Keeps the user's installed screensaver in step with the bundled one.

    Construct one at host startup and call install_screensaver_if_needed().
    None of the public methods raise; failures are logged and reported as
    None / False.
    """

    def __init__(self, locations: ScreensaverLocations, resolver: Optional[VersionResolver] = None):
        self.locations = locations
        self.resolver = resolver or VersionResolver(locations)

    @classmethod
    def from_settings(cls, settings: InstallerSettings) -> "ScreensaverInstaller":
        return cls(HostBundleLocations(settings))

    def is_installed(self) -> bool:
        """Whether anything exists at the install path."""
        return path_exists(self.locations.installed_artifact_path())

    def get_installed_version(self) -> Optional[str]:
        return self.resolver.installed_version()

    def get_bundled_version(self) -> Optional[str]:
        return self.resolver.bundled_version()

    def should_update(self) -> bool:
        """Whether the bundled version is newer than the installed one."""
        return compare.should_update(self.get_installed_version(), self.get_bundled_version())

    def install_screensaver(self) -> bool:
        """Copy the bundled screensaver into place, replacing any existing one."""
        source = self.locations.bundled_artifact_path()
        target = self.locations.installed_artifact_path()
        try:
            replace_atomically(source, target)
        except CopyFailedError as e:
            logger.error("Screensaver install failed: %s", e)
            return False
        logger.info("Installed screensaver to %s", target)
        return True

    def install_screensaver_if_needed(self) -> InstallReport:
        """Install on first run, update when the bundle is newer, else do nothing."""
        bundled = self.get_bundled_version()
        installed_exists = self.is_installed()
        installed = self.get_installed_version() if installed_exists else None

        action = compare.decide(installed_exists, installed, bundled)
        if action is InstallAction.noop:
            logger.debug("Screensaver up to date (installed=%s, bundled=%s)", installed, bundled)
            return InstallReport(action=action, bundled_version=bundled, installed_version=installed)

        logger.info("Screensaver %s: %s -> %s", action.value, installed or "none", bundled)
        succeeded = self.install_screensaver()
        if succeeded:
            installed = self.get_installed_version()
        return InstallReport(
            action=action,
            succeeded=succeeded,
            bundled_version=bundled,
            installed_version=installed,
        )
