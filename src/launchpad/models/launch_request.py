"""Caller-supplied launch options."""

import os

from pydantic import BaseModel, ConfigDict, field_validator

LaunchArg = str | int | float


class LaunchRequest(BaseModel):
    """Options for a single launch of the runtime binary."""

    model_config = ConfigDict(frozen=True)

    dir: str | None = None
    app_path: str = "."
    args: tuple[LaunchArg, ...] = ()
    interactive: bool = True
    enable_logging: bool = False
    run_as_node: bool | None = None
    inspect: bool = False

    @field_validator("dir", "app_path", mode="before")
    @classmethod
    def _fspath(cls, value):
        # Accept pathlib.Path and other os.PathLike hints.
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value
