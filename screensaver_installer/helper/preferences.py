"""Access to the per-host screensaver preferences."""

import asyncio
import logging
import plistlib
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from ..errors import SelectionFailedError

logger = logging.getLogger(__name__)

SCREENSAVER_DOMAIN = "com.apple.screensaver"


class ActiveScreensaver(BaseModel):
    identifier: str
    name: str
    path: Optional[Path] = None


class PreferencesBackend(ABC):
    """Reads and writes the active screensaver module."""

    @abstractmethod
    def read_active(self) -> Optional[ActiveScreensaver]:
        """Currently selected screensaver, or None if unset/unknown."""
        ...

    @abstractmethod
    async def write_active(self, module_name: str, path: Path) -> None:
        """Select a screensaver module. Raises SelectionFailedError."""
        ...


def parse_module_dict(data: dict) -> Optional[ActiveScreensaver]:
    """Build an ActiveScreensaver from an exported com.apple.screensaver plist."""
    module = data.get("moduleDict")
    if not isinstance(module, dict) or not module.get("moduleName"):
        return None
    name = str(module["moduleName"])
    path = module.get("path")
    try:
        return ActiveScreensaver(
            identifier=name.lower(),
            name=name,
            path=Path(path) if isinstance(path, str) and path else None,
        )
    except ValidationError as e:
        logger.warning("Ignoring unexpected moduleDict %r: %s", module, e)
        return None


class DefaultsBackend(PreferencesBackend):
    """Uses the macOS `defaults` tool on the current host's preferences."""

    def __init__(self, defaults_cmd: str = "defaults"):
        self.defaults_cmd = defaults_cmd

    def read_active(self) -> Optional[ActiveScreensaver]:
        cmd = [self.defaults_cmd, "-currentHost", "export", SCREENSAVER_DOMAIN, "-"]
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            logger.debug("Cannot run %s: %s", self.defaults_cmd, e)
            return None
        if result.returncode != 0:
            logger.debug("defaults export failed: %s", result.stderr.decode(errors="replace").strip())
            return None

        try:
            data = plistlib.loads(result.stdout)
        except Exception as e:
            logger.warning("Unreadable screensaver preferences: %s", e)
            return None
        if not isinstance(data, dict):
            return None
        return parse_module_dict(data)

    async def write_active(self, module_name: str, path: Path) -> None:
        cmd = [
            self.defaults_cmd, "-currentHost", "write", SCREENSAVER_DOMAIN, "moduleDict",
            "-dict", "moduleName", module_name, "path", str(path), "type", "0",
        ]
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
            )
            _, stderr = await proc.communicate()
        except OSError as e:
            raise SelectionFailedError(f"Cannot run {self.defaults_cmd}: {e}") from e
        if proc.returncode != 0:
            raise SelectionFailedError(
                f"defaults write exited with {proc.returncode}: {stderr.decode(errors='replace').strip()}"
            )
