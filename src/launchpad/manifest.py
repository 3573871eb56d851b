"""Read a project's package.json."""

import json
import logging
import os
from typing import Any

from launchpad.errors import ManifestError

log = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def manifest_path(directory: str) -> str:
    """Return the absolute path of the manifest inside ``directory``."""
    return os.path.join(os.path.abspath(directory), MANIFEST_NAME)


def load_manifest(directory: str) -> dict[str, Any]:
    """Load and return the JSON object stored in ``directory``/package.json."""
    path = manifest_path(directory)
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError("no package.json found", path=path) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"unable to read package.json: {e}", path=path) from e
    if not isinstance(payload, dict):
        raise ManifestError("package.json must contain a JSON object", path=path)
    log.debug("loaded %s (%d keys)", path, len(payload))
    return payload


def has_version(manifest: dict[str, Any]) -> bool:
    """Return whether the manifest sets a version at all."""
    return bool(manifest.get("version"))
