"""Bundled screensaver installer for the infinidream host app."""

__version__ = "0.1.0"

from .config import InstallerSettings
from .installer import ScreensaverInstaller, StaticLocations, HostBundleLocations
from .versions import InstallAction, InstallReport

__all__ = [
    "InstallerSettings",
    "ScreensaverInstaller",
    "StaticLocations",
    "HostBundleLocations",
    "InstallAction",
    "InstallReport",
]
