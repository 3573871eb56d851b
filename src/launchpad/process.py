"""Start the runtime child process and forward terminal input to it."""

import logging
import subprocess
import sys
import threading
from typing import Any, BinaryIO

from launchpad.errors import SpawnError
from launchpad.models import SpawnSpec

log = logging.getLogger(__name__)

STDIN_CHUNK_SIZE = 1024


def spawn_process(spec: SpawnSpec) -> subprocess.Popen:
    """Start the runtime binary described by ``spec``."""
    argv = spec.argv()
    log.debug("spawning %s in %s", argv, spec.cwd)
    try:
        return subprocess.Popen(
            argv,
            cwd=spec.cwd,
            env=spec.env,
            start_new_session=spec.detached,
            stdin=subprocess.PIPE if spec.interactive else subprocess.DEVNULL,
        )
    except OSError as e:
        raise SpawnError(f"Unable to start {spec.binary}: {e}") from e


def _read_chunk(source: BinaryIO) -> bytes:
    read1 = getattr(source, "read1", None)
    if read1 is not None:
        return read1(STDIN_CHUNK_SIZE)
    return source.read(STDIN_CHUNK_SIZE)


def _pump(source: BinaryIO, child: Any) -> None:
    """Copy ``source`` into the child's stdin until EOF or the child exits."""
    sink = getattr(child, "stdin", None)
    poll = getattr(child, "poll", None)
    if sink is None or poll is None:
        log.debug("child has no stdin pipe or poll(), nothing to forward")
        return
    while poll() is None:
        try:
            data = _read_chunk(source)
        except (OSError, ValueError):
            break
        if not data:
            break
        try:
            sink.write(data)
            sink.flush()
        except (OSError, ValueError):
            break
    try:
        sink.close()
    except OSError:
        pass
    log.debug("stdin forwarding finished")


def forward_stdin(child: Any, source: BinaryIO | None = None) -> threading.Thread | None:
    """Forward the parent's stdin to ``child`` from a daemon thread.

    Returns ``None`` without starting a thread when the parent has no stdin.
    """
    stream = source
    if stream is None:
        stream = getattr(sys.stdin, "buffer", None)
    if stream is None:
        log.debug("parent has no stdin, not forwarding")
        return None
    thread = threading.Thread(
        target=_pump,
        args=(stream, child),
        daemon=True,
        name="launchpad-stdin",
    )
    thread.start()
    return thread
