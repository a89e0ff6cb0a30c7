"""Common utilities."""

from .fs import path_exists
from .logger import setup_logging

__all__ = ["path_exists", "setup_logging"]
