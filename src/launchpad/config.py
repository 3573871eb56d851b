"""Configuration management for launchpad."""

import json
import logging
import os
import shlex
from pathlib import Path

from pydantic import BaseModel, ValidationError

from launchpad.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".launchpad"
CONFIG_FILE = CONFIG_DIR / "config.json"

ELECTRON_PATH_ENV = "LAUNCHPAD_ELECTRON_PATH"
REBUILD_COMMAND_ENV = "LAUNCHPAD_REBUILD_COMMAND"


class LauncherConfig(BaseModel):
    """Runtime configuration for launchpad."""

    electron_path: str | None = None
    rebuild_command: list[str] | None = None


def _read_config_file(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s", path)
        return {}
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"unable to read config: {e}", path=str(path)) from e
    if not isinstance(payload, dict):
        raise ConfigError("config must be a JSON object", path=str(path))
    return payload


def load_config(path: Path | None = None) -> LauncherConfig:
    """Load config from disk, then apply environment variable overrides."""
    config_path = CONFIG_FILE if path is None else path
    data = _read_config_file(config_path)

    electron_path = os.environ.get(ELECTRON_PATH_ENV, "").strip()
    if electron_path:
        data["electron_path"] = electron_path
    rebuild_command = os.environ.get(REBUILD_COMMAND_ENV, "").strip()
    if rebuild_command:
        data["rebuild_command"] = shlex.split(rebuild_command)

    try:
        config = LauncherConfig(**data)
    except ValidationError as e:
        raise ConfigError(str(e), path=str(config_path)) from e
    log.debug("config=%s", config.model_dump())
    return config
