"""Read screensaver versions from bundle metadata."""

import logging
import plistlib
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..errors import MetadataUnreadableError
from ..utils.fs import path_exists
from .compare import parse_version
from .models import BundleInfo

logger = logging.getLogger(__name__)

INFO_PLIST_CANDIDATES = (Path("Contents") / "Info.plist", Path("Info.plist"))


def read_bundle_info(bundle_path: Path) -> BundleInfo:
    """Load and validate the Info.plist of a bundle directory."""
    try:
        if not bundle_path.is_dir():
            raise MetadataUnreadableError(bundle_path, "not a bundle directory")
        plist_path = next((bundle_path / c for c in INFO_PLIST_CANDIDATES if (bundle_path / c).is_file()), None)
    except OSError as e:
        raise MetadataUnreadableError(bundle_path, f"cannot inspect bundle: {e}") from e
    if plist_path is None:
        raise MetadataUnreadableError(bundle_path, "no Info.plist")

    try:
        with open(plist_path, 'rb') as f:
            data = plistlib.load(f)
    except Exception as e:
        # plistlib raises more than ValueError on bad values (e.g. AttributeError on a bad <date>)
        raise MetadataUnreadableError(plist_path, f"cannot parse plist: {e}") from e

    if not isinstance(data, dict):
        raise MetadataUnreadableError(plist_path, "plist root is not a dictionary")

    try:
        return BundleInfo(**{k: v for k, v in data.items() if isinstance(k, str)})
    except ValidationError as e:
        raise MetadataUnreadableError(plist_path, f"unexpected metadata: {e}") from e


def read_bundle_version(bundle_path: Path) -> str:
    """Return the dotted-numeric version of a bundle or raise."""
    version = read_bundle_info(bundle_path).display_version
    if version is None:
        raise MetadataUnreadableError(bundle_path, "no version in Info.plist")
    if parse_version(version) is None:
        raise MetadataUnreadableError(bundle_path, f"malformed version {version!r}")
    return version


class VersionResolver:
    """Resolves installed and bundled versions; failures come back as None."""

    def __init__(self, locations):
        self.locations = locations

    def installed_version(self) -> Optional[str]:
        path = self.locations.installed_artifact_path()
        if not path_exists(path):
            return None
        try:
            return read_bundle_version(path)
        except MetadataUnreadableError as e:
            logger.warning("Installed screensaver metadata unreadable: %s", e)
            return None

    def bundled_version(self) -> Optional[str]:
        try:
            return read_bundle_version(self.locations.bundled_artifact_path())
        except MetadataUnreadableError as e:
            logger.error("Bundled screensaver has no usable version, install suppressed: %s", e)
            return None
