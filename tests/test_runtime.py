"""Unit tests for launchpad.runtime."""

import os
from unittest.mock import patch

import pytest

from launchpad.config import LauncherConfig
from launchpad.errors import RuntimeNotFoundError, SpawnError
from launchpad.runtime import resolve_runtime_binary


def _make_executable(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n")
    os.chmod(path, 0o755)
    return path


def _install_electron(project, relative="electron"):
    package_dir = project / "node_modules" / "electron"
    package_dir.mkdir(parents=True)
    (package_dir / "path.txt").write_text(relative)
    return _make_executable(package_dir / "dist" / relative)


class TestResolveRuntimeBinary:
    def test_prefers_configured_path(self, tmp_path):
        configured = _make_executable(tmp_path / "custom" / "electron")
        _install_electron(tmp_path)

        config = LauncherConfig(electron_path=str(configured))
        assert resolve_runtime_binary(str(tmp_path), config) == str(configured)

    def test_uses_path_txt_from_node_modules(self, tmp_path):
        binary = _install_electron(tmp_path, "Electron.app/Contents/MacOS/Electron")

        assert resolve_runtime_binary(str(tmp_path), LauncherConfig()) == str(binary)

    def test_skips_configured_path_that_is_missing(self, tmp_path):
        binary = _install_electron(tmp_path)
        config = LauncherConfig(electron_path=str(tmp_path / "missing"))

        assert resolve_runtime_binary(str(tmp_path), config) == str(binary)

    @patch("launchpad.runtime.shutil.which", return_value="/usr/local/bin/electron")
    def test_falls_back_to_path(self, mock_which, tmp_path):
        assert resolve_runtime_binary(str(tmp_path), LauncherConfig()) == "/usr/local/bin/electron"
        mock_which.assert_called_once_with("electron")

    @patch("launchpad.runtime.shutil.which", return_value=None)
    def test_raises_when_nothing_found(self, _which, tmp_path):
        with pytest.raises(RuntimeNotFoundError) as exc_info:
            resolve_runtime_binary(str(tmp_path), LauncherConfig())

        assert isinstance(exc_info.value, SpawnError)
        assert "LAUNCHPAD_ELECTRON_PATH" in str(exc_info.value)

    @patch("launchpad.runtime.shutil.which", return_value="/opt/bin/electron")
    def test_bare_configured_name_is_looked_up_on_path(self, mock_which, tmp_path):
        config = LauncherConfig(electron_path="electron-nightly")

        assert resolve_runtime_binary(str(tmp_path), config) == "/opt/bin/electron"
        mock_which.assert_called_once_with("electron-nightly")

    def test_skipped_configured_path_logs_warning(self, tmp_path, caplog):
        _install_electron(tmp_path)
        config = LauncherConfig(electron_path=str(tmp_path / "missing"))

        with caplog.at_level("WARNING", logger="launchpad.runtime"):
            resolve_runtime_binary(str(tmp_path), config)

        assert any(
            record.levelname == "WARNING" and "missing" in record.getMessage()
            for record in caplog.records
        )

    @patch("launchpad.runtime.shutil.which", return_value=None)
    def test_error_names_configured_path(self, _which, tmp_path):
        config = LauncherConfig(electron_path=str(tmp_path / "missing"))

        with pytest.raises(RuntimeNotFoundError) as exc_info:
            resolve_runtime_binary(str(tmp_path), config)

        message = str(exc_info.value)
        assert str(tmp_path / "missing") in message
        assert "set LAUNCHPAD_ELECTRON_PATH" not in message
