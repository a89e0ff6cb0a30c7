"""Dotted-numeric version ordering and the install decision policy."""

import re
from itertools import zip_longest
from typing import Optional, Tuple

from .models import InstallAction

_DOTTED = re.compile(r"^\d+(\.\d+)*$")


def parse_version(version: Optional[str]) -> Optional[Tuple[int, ...]]:
    """Split "1.2.0" into (1, 2, 0). Anything not dotted-numeric is None."""
    if version is None:
        return None
    version = version.strip()
    if not _DOTTED.match(version):
        return None
    return tuple(int(part) for part in version.split("."))


def compare_versions(a: Tuple[int, ...], b: Tuple[int, ...]) -> int:
    """Return -1, 0 or 1. The shorter tuple is padded with zeros."""
    for left, right in zip_longest(a, b, fillvalue=0):
        if left != right:
            return -1 if left < right else 1
    return 0


def should_update(installed: Optional[str], bundled: Optional[str]) -> bool:
    """True iff both versions are usable and bundled is strictly newer."""
    installed_parts = parse_version(installed)
    bundled_parts = parse_version(bundled)
    if installed_parts is None or bundled_parts is None:
        return False
    return compare_versions(bundled_parts, installed_parts) > 0


def decide(installed_exists: bool, installed: Optional[str], bundled: Optional[str]) -> InstallAction:
    """Pick noop / install / update for the startup check."""
    if parse_version(bundled) is None:
        return InstallAction.noop
    if not installed_exists:
        return InstallAction.install
    if should_update(installed, bundled):
        return InstallAction.update
    return InstallAction.noop
