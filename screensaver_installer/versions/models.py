"""Data models for screensaver bundle versions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class BundleInfo(BaseModel):
    """Parsed Info.plist of a screensaver bundle - only the keys we read."""

    model_config = ConfigDict(extra="ignore")

    CFBundleIdentifier: Optional[str] = None
    CFBundleName: Optional[str] = None
    CFBundleShortVersionString: Optional[str] = None
    CFBundleVersion: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _ignore_non_string(cls, value):
        # A key with a non-string value counts as missing, not as unreadable metadata.
        return value if isinstance(value, str) else None

    @property
    def display_version(self) -> Optional[str]:
        """Marketing version, falling back to the build number."""
        for candidate in (self.CFBundleShortVersionString, self.CFBundleVersion):
            if candidate and candidate.strip():
                return candidate.strip()
        return None


class InstallAction(str, Enum):
    """What install_screensaver_if_needed decided to do."""

    noop = "noop"
    install = "install"
    update = "update"


class InstallReport(BaseModel):
    action: InstallAction
    succeeded: bool = True
    bundled_version: Optional[str] = None
    installed_version: Optional[str] = None

    @property
    def wrote(self) -> bool:
        return self.action is not InstallAction.noop and self.succeeded
