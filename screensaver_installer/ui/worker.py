"""Run the startup install check off the UI thread."""

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from ..installer import ScreensaverInstaller

logger = logging.getLogger(__name__)


class InstallThread(QThread):
    """Thread for the startup screensaver install/update check."""
    install_finished = pyqtSignal(dict)  # InstallReport as a dict
    install_failed = pyqtSignal(str)

    def __init__(self, installer: ScreensaverInstaller, parent=None):
        super().__init__(parent)
        self.installer = installer

    def run(self):
        try:
            report = self.installer.install_screensaver_if_needed()
        except Exception as e:
            logger.exception("Screensaver install check crashed")
            self.install_failed.emit(str(e))
            return

        if report.succeeded:
            self.install_finished.emit(report.model_dump(mode="json"))
        else:
            self.install_failed.emit(
                f"Could not {report.action.value} screensaver {report.bundled_version}"
            )
