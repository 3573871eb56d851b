"""Outcome of asking plugins whether they take over startup."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Proceed:
    """No plugin overrides startup; spawn the runtime normally."""


@dataclass(frozen=True)
class Intercepted:
    """A plugin replaced startup and supplied its own process handle."""

    handle: Any


PluginDecision = Proceed | Intercepted


def decide(override_result: Any) -> PluginDecision:
    """Interpret the value returned by a plugin override hook.

    Only ``None`` and ``False`` mean "no override"; any other value,
    including falsy handles such as ``0``, is the replacement handle.
    """
    if override_result is None or override_result is False:
        return Proceed()
    return Intercepted(override_result)
