"""Active screensaver queries and selection."""

from .helper import ScreensaverHelper
from .preferences import ActiveScreensaver, PreferencesBackend, DefaultsBackend

__all__ = ["ScreensaverHelper", "ActiveScreensaver", "PreferencesBackend", "DefaultsBackend"]
