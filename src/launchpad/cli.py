"""Command-line interface for launchpad."""

import argparse
import logging
import sys
from typing import Any

from launchpad import __version__
from launchpad.config import load_config
from launchpad.launcher import Launcher
from launchpad.models import LaunchRequest

log = logging.getLogger("launchpad")


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the start command."""
    parser = argparse.ArgumentParser(
        prog="launchpad",
        description="Start an Electron application in development mode",
        epilog="Arguments after -- are passed through to the application.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "dir",
        nargs="?",
        help="Directory to start from (defaults to the current directory)",
    )
    parser.add_argument(
        "-p",
        "--app-path",
        default=".",
        help="Path to the application entry point, relative to the project directory",
    )
    parser.add_argument(
        "-l",
        "--enable-logging",
        action="store_true",
        help="Set ELECTRON_ENABLE_LOGGING for the application",
    )
    parser.add_argument(
        "-i",
        "--inspect-electron",
        action="store_true",
        help="Start the main process with --inspect",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Do not forward terminal input to the application",
    )
    node_group = parser.add_mutually_exclusive_group()
    node_group.add_argument(
        "--run-as-node",
        action="store_true",
        help="Run the Electron binary as a plain Node.js process",
    )
    node_group.add_argument(
        "--no-run-as-node",
        action="store_true",
        help="Clear ELECTRON_RUN_AS_NODE even if it is set in the environment",
    )
    return parser


def _split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first ``--`` into launcher and application args."""
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def _wait_for_exit(handle: Any) -> int:
    """Block until the launched process exits and return its exit code."""
    wait = getattr(handle, "wait", None)
    if not callable(wait):
        return 0
    try:
        code = wait()
    except KeyboardInterrupt:
        terminate = getattr(handle, "terminate", None)
        if callable(terminate):
            terminate()
        code = wait()
    if not isinstance(code, int):
        return 0
    # Popen reports death-by-signal as a negative code.
    return code if code >= 0 else 128 - code


def main(argv: list[str] | None = None) -> int:
    """Parse args, start the application and wait for it to exit."""
    own_args, app_args = _split_passthrough(list(sys.argv[1:] if argv is None else argv))
    args = build_parser().parse_args(own_args)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    run_as_node: bool | None = None
    if args.run_as_node:
        run_as_node = True
    if args.no_run_as_node:
        run_as_node = False

    request = LaunchRequest(
        dir=args.dir,
        app_path=args.app_path,
        args=tuple(app_args),
        interactive=not args.non_interactive,
        enable_logging=args.enable_logging,
        run_as_node=run_as_node,
        inspect=args.inspect_electron,
    )
    log.debug("request=%s", request)

    try:
        launcher = Launcher(config=load_config())
        handle = launcher.start(request)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _wait_for_exit(handle)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
