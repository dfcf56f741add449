"""Tests for the process runner (infra/process_runner.py).

``shutil.which`` and ``subprocess.run`` are mocked — no child process
is ever started.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from shadnex.core.commands import Command
from shadnex.exceptions import CommandFailedError, ToolNotFoundError
from shadnex.infra.process_runner import ProcessRunner

INSTALL = Command("pnpm", ("install",))


def _completed(returncode: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


@patch("shadnex.infra.process_runner.shutil.which", return_value="/usr/bin/pnpm")
@patch("shadnex.infra.process_runner.subprocess.run")
class TestRun:
    def test_success_inherits_streams(self, mock_run: MagicMock, _which: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        ProcessRunner().run(INSTALL, cwd=Path("/tmp/my-app"))

        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/pnpm", "install"]
        assert kwargs["cwd"] == Path("/tmp/my-app")
        assert kwargs["stdout"] is None
        assert kwargs["stderr"] is None
        assert "stdin" not in kwargs
        assert "shell" not in kwargs

    def test_silent_discards_output(self, mock_run: MagicMock, _which: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        ProcessRunner().run(INSTALL, silent=True)

        kwargs = mock_run.call_args.kwargs
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL
        assert "stdin" not in kwargs

    def test_non_zero_exit_raises_with_code(self, mock_run: MagicMock, _which: MagicMock) -> None:
        mock_run.return_value = _completed(3)
        with pytest.raises(CommandFailedError) as exc_info:
            ProcessRunner().run(INSTALL)
        assert exc_info.value.exit_code == 3
        assert exc_info.value.command == "pnpm install"
        assert "exit code 3" in str(exc_info.value)

    def test_start_failure_maps_to_tool_not_found(self, mock_run: MagicMock, _which: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError("gone")
        with pytest.raises(ToolNotFoundError):
            ProcessRunner().run(INSTALL)


@patch("shadnex.infra.process_runner.subprocess.run")
@patch("shadnex.infra.process_runner.shutil.which", return_value=None)
def test_missing_executable(_which: MagicMock, mock_run: MagicMock) -> None:
    with pytest.raises(ToolNotFoundError) as exc_info:
        ProcessRunner().run(Command("bunx", ("--bun", "shadcn@latest", "init")))
    assert "bunx" in str(exc_info.value)
    assert exc_info.value.hint is not None
    mock_run.assert_not_called()
