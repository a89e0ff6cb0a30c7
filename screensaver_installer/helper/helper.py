"""Queries and selection of the active screensaver."""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional

from ..config import InstallerSettings
from ..errors import SelectionFailedError
from .preferences import DefaultsBackend, PreferencesBackend

logger = logging.getLogger(__name__)


class ScreensaverHelper:
    def __init__(self, module_name: str, installed_path: Path, backend: Optional[PreferencesBackend] = None):
        self.module_name = module_name
        self.installed_path = installed_path
        self.backend = backend or DefaultsBackend()

    @classmethod
    def from_settings(cls, settings: InstallerSettings,
                      backend: Optional[PreferencesBackend] = None) -> "ScreensaverHelper":
        return cls(settings.module_name, settings.install_dir / settings.artifact_name, backend)

    def is_infinidream_active(self) -> bool:
        """Check if our screensaver is the currently active one."""
        active = self.backend.read_active()
        if active is None:
            return False
        return active.identifier == self.module_name.lower()

    def has_active_screensaver(self) -> bool:
        """Check if any screensaver at all is selected."""
        return self.backend.read_active() is not None

    def get_active_screensaver_name(self) -> Optional[str]:
        active = self.backend.read_active()
        return active.name if active else None

    async def select(self) -> None:
        """Make our screensaver the active one. Raises SelectionFailedError."""
        await self.backend.write_active(self.module_name, self.installed_path)
        logger.info("Selected %s as the active screensaver", self.module_name)

    async def set_infinidream_as_active(self) -> bool:
        try:
            await self.select()
        except SelectionFailedError as e:
            logger.error("Could not select screensaver: %s", e)
            return False
        return True

    def set_infinidream_as_active_with(
        self, completion: Callable[[bool, Optional[Exception]], None]
    ) -> "asyncio.Task[None]":
        """Schedule selection on the running loop and report through completion."""

        async def run():
            try:
                await self.select()
            except SelectionFailedError as e:
                logger.error("Could not select screensaver: %s", e)
                completion(False, e)
            else:
                completion(True, None)

        return asyncio.get_running_loop().create_task(run())
