"""Screensaver install/update."""

from .installer import ScreensaverInstaller
from .locations import ScreensaverLocations, StaticLocations, HostBundleLocations

__all__ = ["ScreensaverInstaller", "ScreensaverLocations", "StaticLocations", "HostBundleLocations"]
