"""Unit tests for launchpad.process."""

import io
import os
import subprocess
import sys
from unittest.mock import patch

import pytest

from launchpad.errors import SpawnError
from launchpad.models import SpawnSpec
from launchpad.process import forward_stdin, spawn_process


def _make_spec(**overrides):
    fields = dict(
        binary="fake_electron_path",
        args=(".", "--inspect", 42),
        env={"PATH": "/usr/bin"},
        cwd="/projects/app",
        detached=True,
        interactive=False,
    )
    fields.update(overrides)
    return SpawnSpec(**fields)


class _RecordingSink:
    def __init__(self, fail=False):
        self.writes: list[bytes] = []
        self.closed = False
        self._fail = fail

    def write(self, data: bytes) -> int:
        if self._fail:
            raise BrokenPipeError("child went away")
        self.writes.append(data)
        return len(data)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


class _FakeChild:
    def __init__(self, sink=None, exited=False):
        self.stdin = sink
        self._exited = exited

    def poll(self):
        return 0 if self._exited else None


class TestSpawnProcess:
    @patch("launchpad.process.subprocess.Popen")
    def test_coerces_args_and_passes_options(self, mock_popen):
        result = spawn_process(_make_spec())

        assert result is mock_popen.return_value
        mock_popen.assert_called_once_with(
            ["fake_electron_path", ".", "--inspect", "42"],
            cwd="/projects/app",
            env={"PATH": "/usr/bin"},
            start_new_session=True,
            stdin=subprocess.DEVNULL,
        )

    @patch("launchpad.process.subprocess.Popen")
    def test_interactive_spawn_pipes_stdin(self, mock_popen):
        spawn_process(_make_spec(interactive=True))

        assert mock_popen.call_args.kwargs["stdin"] == subprocess.PIPE

    @patch("launchpad.process.subprocess.Popen", side_effect=FileNotFoundError("no such file"))
    def test_oserror_becomes_spawn_error(self, _popen):
        with pytest.raises(SpawnError) as exc_info:
            spawn_process(_make_spec())
        assert "fake_electron_path" in str(exc_info.value)

    def test_runs_a_real_binary(self, tmp_path):
        spec = _make_spec(
            binary=sys.executable,
            args=("-c", "import sys; sys.exit(int(sys.argv[1]))", 3),
            env=dict(os.environ),
            cwd=str(tmp_path),
        )
        child = spawn_process(spec)
        assert child.wait(timeout=30) == 3


class TestForwardStdin:
    def test_copies_input_then_closes_child_stdin(self):
        sink = _RecordingSink()
        thread = forward_stdin(_FakeChild(sink), source=io.BytesIO(b"rs\nhello\n"))
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert thread.daemon
        assert b"".join(sink.writes) == b"rs\nhello\n"
        assert sink.closed

    def test_stops_when_child_has_exited(self):
        sink = _RecordingSink()
        thread = forward_stdin(_FakeChild(sink, exited=True), source=io.BytesIO(b"ignored"))
        thread.join(timeout=5)

        assert sink.writes == []
        assert sink.closed

    def test_stops_on_broken_pipe(self):
        sink = _RecordingSink(fail=True)
        thread = forward_stdin(_FakeChild(sink), source=io.BytesIO(b"data"))
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert sink.closed

    def test_child_without_stdin_is_a_noop(self):
        thread = forward_stdin(_FakeChild(None), source=io.BytesIO(b"data"))
        thread.join(timeout=5)

        assert not thread.is_alive()

    def test_handle_without_poll_is_left_alone(self):
        class _NoPollChild:
            def __init__(self, sink):
                self.stdin = sink

        sink = _RecordingSink()
        thread = forward_stdin(_NoPollChild(sink), source=io.BytesIO(b"data"))
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert sink.writes == []

    def test_no_parent_stdin_skips_forwarding(self, monkeypatch):
        monkeypatch.setattr("launchpad.process.sys.stdin", None)
        sink = _RecordingSink()

        assert forward_stdin(_FakeChild(sink)) is None
        assert sink.writes == []
