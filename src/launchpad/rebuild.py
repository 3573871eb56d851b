"""Rebuild native dependencies before the runtime starts."""

import logging
import shlex
import subprocess

from launchpad.config import LauncherConfig
from launchpad.errors import RebuildError

log = logging.getLogger(__name__)


def rebuild_native_modules(directory: str, config: LauncherConfig) -> None:
    """Run the configured rebuild command inside ``directory``."""
    command = config.rebuild_command
    if not command:
        log.debug("no rebuild command configured, skipping rebuild")
        return

    command_text = shlex.join(command)
    log.debug("rebuilding native modules in %s: %s", directory, command_text)
    try:
        result = subprocess.run(command, cwd=directory, check=False)
    except OSError as e:
        raise RebuildError(f"Unable to start rebuild command '{command_text}': {e}") from e
    if result.returncode != 0:
        raise RebuildError(
            f"Rebuild command '{command_text}' failed with exit code {result.returncode}"
        )
