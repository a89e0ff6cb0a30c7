"""Where the bundled and installed screensaver live.

The host application owns these paths (its resource bundle and the per-user
screen savers directory); the installer only asks for them, so tests can point
it at temporary directories.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import InstallerSettings


class ScreensaverLocations(ABC):
    """Paths of the install source and target."""

    @abstractmethod
    def bundled_artifact_path(self) -> Path:
        """Path to the read-only copy shipped inside the host app."""
        ...

    @abstractmethod
    def installed_artifact_path(self) -> Path:
        """Path the artifact is installed to for the current user."""
        ...


class StaticLocations(ScreensaverLocations):
    def __init__(self, bundled_path: Path, installed_path: Path):
        self.bundled_path = Path(bundled_path)
        self.installed_path = Path(installed_path)

    def bundled_artifact_path(self) -> Path:
        return self.bundled_path

    def installed_artifact_path(self) -> Path:
        return self.installed_path


class HostBundleLocations(ScreensaverLocations):
    """Resolves both paths from InstallerSettings."""

    def __init__(self, settings: InstallerSettings):
        if settings.resources_dir is None:
            raise ValueError("InstallerSettings.resources_dir is required to locate the bundled screensaver")
        self.settings = settings

    def bundled_artifact_path(self) -> Path:
        return self.settings.resources_dir / self.settings.artifact_name

    def installed_artifact_path(self) -> Path:
        return self.settings.install_dir / self.settings.artifact_name
