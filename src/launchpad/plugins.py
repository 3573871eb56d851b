"""Plugin hooks consulted before the runtime is started.

A plugin is any object. Two optional attributes are recognised:

``start_logic()``
    Return a process-like handle to take over startup, or ``None``/``False``
    to let the launcher spawn the runtime itself.

``hooks``
    A mapping of lifecycle hook name to a zero-argument callable.
"""

import logging
from collections.abc import Iterable
from typing import Any, Protocol

log = logging.getLogger(__name__)

PRE_START_HOOK = "pre_start"


class PluginInterface(Protocol):
    def override_start(self) -> Any: ...

    def trigger_hook(self, name: str) -> bool: ...


class PluginRunner:
    """Dispatch launcher hooks to an ordered list of plugins."""

    def __init__(self, plugins: Iterable[Any] = ()) -> None:
        self._plugins = list(plugins)

    @property
    def plugins(self) -> list[Any]:
        return list(self._plugins)

    def override_start(self) -> Any:
        """Return the first handle supplied by a plugin's start_logic, else False."""
        for plugin in self._plugins:
            start_logic = getattr(plugin, "start_logic", None)
            if start_logic is None:
                continue
            result = start_logic()
            if result is not None and result is not False:
                log.debug("plugin %r overrides start", plugin)
                return result
        return False

    def trigger_hook(self, name: str) -> bool:
        """Call hook ``name`` on every plugin that defines it."""
        ran = False
        for plugin in self._plugins:
            hooks = getattr(plugin, "hooks", None) or {}
            hook = hooks.get(name)
            if hook is None:
                continue
            log.debug("running %s hook of %r", name, plugin)
            hook()
            ran = True
        return ran


def get_plugin_interface(directory: str) -> PluginInterface:
    """Return the plugin interface for a project.

    Plugin discovery is left to the embedding tool, which passes its own
    factory to :class:`launchpad.launcher.Launcher`.
    """
    log.debug("no plugins registered for %s", directory)
    return PluginRunner()
