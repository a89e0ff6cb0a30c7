"""Version metadata, comparison and install decisions."""

from .compare import parse_version, compare_versions, should_update, decide
from .models import BundleInfo, InstallAction, InstallReport
from .resolver import VersionResolver

__all__ = [
    "parse_version",
    "compare_versions",
    "should_update",
    "decide",
    "BundleInfo",
    "InstallAction",
    "InstallReport",
    "VersionResolver",
]
