"""Error types raised while launching an application."""

from __future__ import annotations


class LaunchError(Exception):
    """Base exception for launchpad."""


class ConfigError(LaunchError):
    """Raised when the launcher configuration file is invalid."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class DirectoryNotFoundError(LaunchError):
    """Raised when no startable project directory could be located."""

    def __init__(self) -> None:
        super().__init__("Failed to locate startable Electron application")


class ManifestError(LaunchError):
    """Raised when package.json cannot be read or parsed."""

    def __init__(self, message: str, *, path: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class MissingVersionError(LaunchError):
    """Raised when package.json has no usable version field."""

    def __init__(self, manifest_path: str):
        super().__init__(f"Please set your application's 'version' in '{manifest_path}'.")
        self.manifest_path = manifest_path


class RebuildError(LaunchError):
    """Raised when native dependencies fail to rebuild."""


class SpawnError(LaunchError):
    """Raised when the runtime binary cannot be started."""


class RuntimeNotFoundError(SpawnError):
    """Raised when no Electron binary can be found for a project."""
