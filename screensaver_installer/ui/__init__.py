"""Qt integration for the host application."""

from .worker import InstallThread

__all__ = ["InstallThread"]
