"""Locate the directory of a startable Electron project."""

import logging
import os
from collections.abc import Iterator
from typing import Any

from launchpad.errors import ManifestError
from launchpad.manifest import load_manifest

log = logging.getLogger(__name__)

ELECTRON_PACKAGES = ("electron", "electron-nightly", "electron-prebuilt-compile")


def _is_startable(manifest: dict[str, Any]) -> bool:
    """Return whether a manifest depends on Electron or configures Forge."""
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section)
        if isinstance(deps, dict) and any(name in deps for name in ELECTRON_PACKAGES):
            return True
    config = manifest.get("config")
    return isinstance(config, dict) and "forge" in config


def _iter_parents(start: str) -> Iterator[str]:
    """Yield ``start`` and each of its parent directories up to the root."""
    current = os.path.abspath(start)
    while True:
        yield current
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def resolve_project_directory(hint: str | None) -> str | None:
    """Walk upward from ``hint`` (or the cwd) to the nearest startable project."""
    start = hint if hint else os.getcwd()
    for candidate in _iter_parents(start):
        if not os.path.isfile(os.path.join(candidate, "package.json")):
            continue
        try:
            manifest = load_manifest(candidate)
        except ManifestError as e:
            log.debug("skipping %s: %s", candidate, e)
            continue
        if _is_startable(manifest):
            log.debug("resolved project directory %s", candidate)
            return candidate
        log.debug("%s has package.json but no Electron dependency", candidate)
    log.debug("no startable project found from %s", start)
    return None
