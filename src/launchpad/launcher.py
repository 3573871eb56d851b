"""Launch orchestration: resolve, validate, consult plugins, spawn.

A launch runs these steps strictly in order:

1. resolve the project directory
2. load package.json and require a version
3. ask plugins whether they take over startup
4. rebuild native modules
5. assemble arguments and environment, then spawn the runtime detached
6. forward terminal input to the child when interactive

Every collaborator is injectable so an embedding tool (or a test) can
swap out discovery, rebuild or process creation.
"""

import logging
import os
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from launchpad.config import LauncherConfig, load_config
from launchpad.errors import DirectoryNotFoundError, MissingVersionError
from launchpad.manifest import has_version, load_manifest, manifest_path
from launchpad.models import (
    Intercepted,
    LaunchArg,
    LaunchRequest,
    PluginDecision,
    ResolvedProject,
    SpawnSpec,
    decide,
)
from launchpad.plugins import PRE_START_HOOK, PluginInterface, get_plugin_interface
from launchpad.process import forward_stdin, spawn_process
from launchpad.rebuild import rebuild_native_modules
from launchpad.resolve_dir import resolve_project_directory
from launchpad.runtime import resolve_runtime_binary

log = logging.getLogger(__name__)

INSPECT_FLAG = "--inspect"
ENABLE_LOGGING_ENV = "ELECTRON_ENABLE_LOGGING"
RUN_AS_NODE_ENV = "ELECTRON_RUN_AS_NODE"


def build_args(request: LaunchRequest) -> tuple[LaunchArg, ...]:
    """Return ``(app_path, ["--inspect"], *args)`` with argument types kept."""
    args: list[LaunchArg] = [request.app_path or "."]
    if request.inspect:
        args.append(INSPECT_FLAG)
    args.extend(request.args)
    return tuple(args)


def build_env(
    base: Mapping[str, str], *, enable_logging: bool, run_as_node: bool | None
) -> dict[str, str]:
    """Overlay the Electron switches onto a copy of ``base``."""
    env = dict(base)
    env.pop(ENABLE_LOGGING_ENV, None)
    env.pop(RUN_AS_NODE_ENV, None)
    if enable_logging:
        env[ENABLE_LOGGING_ENV] = "true"
    if run_as_node is True:
        env[RUN_AS_NODE_ENV] = "true"
    return env


class Launcher:
    """Start an Electron application on behalf of a developer tool."""

    def __init__(
        self,
        *,
        config: LauncherConfig | None = None,
        resolve_dir: Callable[[str | None], str | None] = resolve_project_directory,
        load_manifest: Callable[[str], Mapping[str, Any]] = load_manifest,
        get_plugin_interface: Callable[[str], PluginInterface] = get_plugin_interface,
        rebuild: Callable[[str], Any] | None = None,
        resolve_runtime: Callable[[str], str] | None = None,
        spawn: Callable[[SpawnSpec], Any] = spawn_process,
        forward_stdin: Callable[[Any], Any] = forward_stdin,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config if config is not None else LauncherConfig()
        self._resolve_dir = resolve_dir
        self._load_manifest = load_manifest
        self._get_plugin_interface = get_plugin_interface
        self._rebuild = (
            rebuild if rebuild is not None else partial(rebuild_native_modules, config=self._config)
        )
        self._resolve_runtime = (
            resolve_runtime
            if resolve_runtime is not None
            else partial(resolve_runtime_binary, config=self._config)
        )
        self._spawn = spawn
        self._forward_stdin = forward_stdin
        self._environ = environ

    def resolve_project(self, request: LaunchRequest) -> ResolvedProject:
        """Locate the project and require a version in its manifest."""
        directory = self._resolve_dir(request.dir or os.getcwd())
        if not directory:
            raise DirectoryNotFoundError()
        log.debug("project directory %s", directory)

        manifest = self._load_manifest(directory)
        if not has_version(manifest):
            raise MissingVersionError(manifest_path(directory))
        return ResolvedProject(directory=directory, manifest=manifest)

    def consult_plugins(self, directory: str) -> PluginDecision:
        """Ask plugins to take over startup, else fire the pre-start hook."""
        plugins = self._get_plugin_interface(directory)
        decision = decide(plugins.override_start())
        if isinstance(decision, Intercepted):
            return decision
        plugins.trigger_hook(PRE_START_HOOK)
        return decision

    def build_spawn_spec(self, directory: str, request: LaunchRequest) -> SpawnSpec:
        environ = self._environ if self._environ is not None else os.environ
        return SpawnSpec(
            binary=self._resolve_runtime(directory),
            args=build_args(request),
            env=build_env(
                environ,
                enable_logging=request.enable_logging,
                run_as_node=request.run_as_node,
            ),
            cwd=directory,
            detached=True,
            interactive=request.interactive,
        )

    def start(self, request: LaunchRequest) -> Any:
        """Launch the application and return the live process handle."""
        project = self.resolve_project(request)

        decision = self.consult_plugins(project.directory)
        if isinstance(decision, Intercepted):
            log.debug("startup overridden by plugin")
            return decision.handle

        self._rebuild(project.directory)

        spec = self.build_spawn_spec(project.directory, request)
        child = self._spawn(spec)
        if request.interactive:
            self._forward_stdin(child)
        return child


def start(request: LaunchRequest, config: LauncherConfig | None = None) -> Any:
    """Launch with the default collaborators and the user's config."""
    resolved_config = config if config is not None else load_config()
    return Launcher(config=resolved_config).start(request)
