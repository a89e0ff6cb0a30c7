"""Tests for active screensaver queries and selection."""

import plistlib
import subprocess
from pathlib import Path
from typing import Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from screensaver_installer.config import InstallerSettings
from screensaver_installer.errors import SelectionFailedError
from screensaver_installer.helper import ActiveScreensaver, DefaultsBackend, PreferencesBackend, ScreensaverHelper

from conftest import BAD_DATE_PLIST


class FakeBackend(PreferencesBackend):
    def __init__(self, active: Optional[ActiveScreensaver] = None, fail: bool = False):
        self.active = active
        self.fail = fail
        self.writes = []

    def read_active(self):
        return self.active

    async def write_active(self, module_name, path):
        if self.fail:
            raise SelectionFailedError("nope")
        self.writes.append((module_name, path))
        self.active = ActiveScreensaver(identifier=module_name.lower(), name=module_name, path=path)


@pytest.fixture
def helper_for():
    def build(backend):
        return ScreensaverHelper("infinidream", Path("/Users/me/Library/Screen Savers/infinidream.saver"), backend)
    return build


def test_no_active_screensaver(helper_for):
    helper = helper_for(FakeBackend())
    assert helper.is_infinidream_active() is False
    assert helper.has_active_screensaver() is False
    assert helper.get_active_screensaver_name() is None


def test_other_screensaver_active(helper_for):
    helper = helper_for(FakeBackend(ActiveScreensaver(identifier="flurry", name="Flurry")))
    assert helper.is_infinidream_active() is False
    assert helper.has_active_screensaver() is True
    assert helper.get_active_screensaver_name() == "Flurry"


@pytest.mark.asyncio
async def test_set_as_active(helper_for):
    backend = FakeBackend()
    helper = helper_for(backend)
    assert await helper.set_infinidream_as_active() is True
    assert backend.writes == [("infinidream", helper.installed_path)]
    assert helper.is_infinidream_active() is True


@pytest.mark.asyncio
async def test_set_as_active_failure(helper_for):
    helper = helper_for(FakeBackend(fail=True))
    assert await helper.set_infinidream_as_active() is False


@pytest.mark.asyncio
async def test_completion_callback(helper_for):
    results = []
    ok_task = helper_for(FakeBackend()).set_infinidream_as_active_with(lambda ok, err: results.append((ok, err)))
    await ok_task
    failing_task = helper_for(FakeBackend(fail=True)).set_infinidream_as_active_with(
        lambda ok, err: results.append((ok, err))
    )
    await failing_task
    assert results[0] == (True, None)
    assert results[1][0] is False
    assert isinstance(results[1][1], SelectionFailedError)


def test_from_settings(tmp_path):
    settings = InstallerSettings(install_dir=tmp_path, module_name="infinidream")
    helper = ScreensaverHelper.from_settings(settings, FakeBackend())
    assert helper.installed_path == tmp_path / "infinidream.saver"


def _completed(stdout: bytes, returncode: int = 0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=b"")


def test_defaults_backend_reads_module_dict():
    exported = plistlib.dumps({
        "moduleDict": {"moduleName": "infinidream", "path": "/Users/me/Library/Screen Savers/infinidream.saver",
                       "type": 0},
        "idleTime": 300,
    })
    with patch("screensaver_installer.helper.preferences.subprocess.run", return_value=_completed(exported)) as run:
        active = DefaultsBackend().read_active()

    assert run.call_args[0][0][:4] == ["defaults", "-currentHost", "export", "com.apple.screensaver"]
    assert active.identifier == "infinidream"
    assert active.name == "infinidream"
    assert active.path == Path("/Users/me/Library/Screen Savers/infinidream.saver")


@pytest.mark.parametrize("result", [
    _completed(b"", returncode=1),
    _completed(b"not a plist"),
    _completed(plistlib.dumps({"idleTime": 300})),
])
def test_defaults_backend_unknown_state(result):
    with patch("screensaver_installer.helper.preferences.subprocess.run", return_value=result):
        assert DefaultsBackend().read_active() is None


def test_defaults_backend_bad_plist_value():
    with patch("screensaver_installer.helper.preferences.subprocess.run",
               return_value=_completed(BAD_DATE_PLIST)):
        assert DefaultsBackend().read_active() is None


def test_defaults_backend_missing_tool():
    with patch("screensaver_installer.helper.preferences.subprocess.run", side_effect=FileNotFoundError()):
        assert DefaultsBackend().read_active() is None


@pytest.mark.asyncio
async def test_defaults_backend_write():
    proc = MagicMock(returncode=0)
    proc.communicate = AsyncMock(return_value=(b"", b""))
    with patch("screensaver_installer.helper.preferences.asyncio.create_subprocess_exec",
               AsyncMock(return_value=proc)) as spawn:
        await DefaultsBackend().write_active("infinidream", Path("/S/infinidream.saver"))

    args = spawn.call_args[0]
    assert args[:5] == ("defaults", "-currentHost", "write", "com.apple.screensaver", "moduleDict")
    assert "/S/infinidream.saver" in args


@pytest.mark.asyncio
async def test_defaults_backend_write_failure():
    proc = MagicMock(returncode=1)
    proc.communicate = AsyncMock(return_value=(b"", b"Could not write domain"))
    with patch("screensaver_installer.helper.preferences.asyncio.create_subprocess_exec",
               AsyncMock(return_value=proc)):
        with pytest.raises(SelectionFailedError, match="Could not write domain"):
            await DefaultsBackend().write_active("infinidream", Path("/S/infinidream.saver"))
