"""Installer settings supplied by the host application."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def default_install_dir() -> Path:
    """Per-user screen savers directory."""
    return Path.home() / "Library" / "Screen Savers"


class InstallerSettings(BaseModel):
    """Where the bundled screensaver lives and where it gets installed."""

    artifact_name: str = Field(default="infinidream.saver", min_length=1)
    module_name: str = Field(default="infinidream", min_length=1)
    install_dir: Path = Field(default_factory=default_install_dir)
    resources_dir: Optional[Path] = None

    @field_validator("artifact_name")
    @classmethod
    def _check_artifact_name(cls, value: str) -> str:
        value = value.strip()
        if "/" in value or not value.endswith(".saver") or value == ".saver":
            raise ValueError("artifact_name must be a bare '<name>.saver' file name")
        return value

    @field_validator("install_dir", "resources_dir")
    @classmethod
    def _expand_user(cls, value: Optional[Path]) -> Optional[Path]:
        return value.expanduser() if value is not None else None
