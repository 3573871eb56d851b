"""Launch an Electron application as a child process."""

__version__ = "0.1.0"

from launchpad.launcher import Launcher, start
from launchpad.models import LaunchRequest

__all__ = [
    "LaunchRequest",
    "Launcher",
    "__version__",
    "start",
]
