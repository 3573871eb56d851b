"""Locate the Electron runtime binary for a project."""

import logging
import os
import shutil

from launchpad.config import LauncherConfig
from launchpad.errors import RuntimeNotFoundError

log = logging.getLogger(__name__)


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def _from_node_modules(directory: str) -> str | None:
    """Return the binary recorded by the electron npm package, if installed."""
    package_dir = os.path.join(directory, "node_modules", "electron")
    try:
        with open(os.path.join(package_dir, "path.txt"), encoding="utf-8") as f:
            relative = f.read().strip()
    except OSError:
        return None
    if not relative:
        return None
    return os.path.join(package_dir, "dist", relative)


def resolve_runtime_binary(directory: str, config: LauncherConfig) -> str:
    """Return the path of the Electron executable used to start ``directory``."""
    if config.electron_path:
        configured = _resolve_executable(config.electron_path)
        if configured:
            log.debug("runtime binary %s (configured)", configured)
            return configured
        log.warning(
            "configured electron_path %r is not an executable, trying node_modules and PATH",
            config.electron_path,
        )

    installed = _from_node_modules(directory)
    if installed:
        if os.path.isfile(installed) and os.access(installed, os.X_OK):
            log.debug("runtime binary %s", installed)
            return installed
        log.debug("runtime candidate %s is not executable", installed)

    on_path = shutil.which("electron")
    if on_path:
        log.debug("runtime binary %s (from PATH)", on_path)
        return on_path
    if config.electron_path:
        raise RuntimeNotFoundError(
            f"Configured electron_path '{config.electron_path}' is not an executable "
            f"and no other Electron binary was found for '{directory}'."
        )
    raise RuntimeNotFoundError(
        f"Electron binary not found for '{directory}'. Install electron as a "
        "dependency or set LAUNCHPAD_ELECTRON_PATH."
    )
