"""Filesystem helpers."""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """Like Path.exists(), but a dangling symlink counts and errors mean no."""
    try:
        return path.exists() or path.is_symlink()
    except OSError:
        return False


def remove_path(path: Path) -> None:
    """Best-effort removal of a file or directory tree."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)
