"""Shared fixtures: fake screensaver bundles in temporary directories."""

import plistlib
from pathlib import Path
from typing import Optional

import pytest

from screensaver_installer.installer import ScreensaverInstaller, StaticLocations


def make_bundle(path: Path, version: Optional[str], payload: str = "saver", **extra) -> Path:
    """Create a minimal .saver bundle with an Info.plist and an executable."""
    contents = path / "Contents"
    (contents / "MacOS").mkdir(parents=True, exist_ok=True)
    info = {"CFBundleIdentifier": "com.infinidream.saver", "CFBundleName": "infinidream", **extra}
    if version is not None:
        info["CFBundleShortVersionString"] = version
    with open(contents / "Info.plist", 'wb') as f:
        plistlib.dump(info, f)
    (contents / "MacOS" / "infinidream").write_text(payload, encoding="utf-8")
    return path


@pytest.fixture
def bundled_path(tmp_path) -> Path:
    return tmp_path / "App.app" / "Contents" / "Resources" / "infinidream.saver"


@pytest.fixture
def installed_path(tmp_path) -> Path:
    return tmp_path / "home" / "Library" / "Screen Savers" / "infinidream.saver"


@pytest.fixture
def installer(bundled_path, installed_path) -> ScreensaverInstaller:
    return ScreensaverInstaller(StaticLocations(bundled_path, installed_path))


def payload_of(bundle: Path) -> str:
    return (bundle / "Contents" / "MacOS" / "infinidream").read_text(encoding="utf-8")


# plistlib cannot parse the <date>, and raises AttributeError rather than ValueError.
BAD_DATE_PLIST = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>CFBundleShortVersionString</key>
    <string>1.0</string>
    <key>BuildDate</key>
    <date>garbage</date>
</dict>
</plist>
"""


def write_bad_date_plist(bundle: Path) -> None:
    (bundle / "Contents" / "Info.plist").write_bytes(BAD_DATE_PLIST)
