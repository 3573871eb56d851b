"""Model package for launchpad."""

from launchpad.models.launch_request import LaunchArg, LaunchRequest
from launchpad.models.plugin_decision import Intercepted, PluginDecision, Proceed, decide
from launchpad.models.resolved_project import ResolvedProject
from launchpad.models.spawn_spec import SpawnSpec

__all__ = [
    "Intercepted",
    "LaunchArg",
    "LaunchRequest",
    "PluginDecision",
    "Proceed",
    "ResolvedProject",
    "SpawnSpec",
    "decide",
]
