"""A project directory whose manifest passed validation."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolvedProject:
    directory: str
    manifest: Mapping[str, Any]
