"""Logging setup."""

import logging
from pathlib import Path
from typing import List, Optional

DEFAULT_LOG_DIR = Path.home() / ".cache" / "infinidream"

_handlers: List[logging.Handler] = []


def setup_logging(log_dir: Optional[Path] = None, level: int = logging.INFO) -> Path:
    """Attach the installer's file and console handlers to the root logger.

    Calling it again swaps the previous handlers out instead of stacking them.
    Returns the log file path.
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "installer.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    for handler in (file_handler, console_handler):
        root.addHandler(handler)
        _handlers.append(handler)

    return log_file
