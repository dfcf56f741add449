"""Synchronous external-command execution.

This module is the **only** place in the codebase that spawns child
processes.  The child inherits the terminal's streams so interactive
tools (``shadcn init`` in particular) can prompt the user directly.

Rules
-----
* No shell — the argv is passed as a list.
* Blocking: :meth:`ProcessRunner.run` returns only once the child exits.
* ``FileNotFoundError`` / non-zero exits are mapped to typed errors.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from shadnex.core.commands import Command
from shadnex.exceptions import CommandFailedError, ToolNotFoundError


class ProcessRunner:
    """Concrete :class:`~shadnex.core.protocols.CommandRunner` backed by :mod:`subprocess`.

    Satisfies the protocol structurally — no explicit inheritance.
    """

    @staticmethod
    def _resolve_executable(command: Command) -> str:
        """Locate the executable on ``PATH``.

        Resolving through :func:`shutil.which` also picks up ``npx.cmd``
        style shims on Windows.
        """
        resolved = shutil.which(command.executable)
        if resolved is None:
            raise ToolNotFoundError(
                f"'{command.executable}' was not found on PATH.",
                command=command.display(),
                hint="Run 'shadnex doctor' to check your Node.js toolchain.",
            )
        return resolved

    def run(
        self,
        command: Command,
        *,
        cwd: Path | None = None,
        silent: bool = False,
    ) -> None:
        """Run *command* to completion.

        Parameters
        ----------
        command:
            The invocation to execute.
        cwd:
            Working directory for the child; the current one when ``None``.
        silent:
            Discard the child's stdout/stderr.  Stdin stays attached.

        Raises
        ------
        ToolNotFoundError
            When the executable cannot be located.
        CommandFailedError
            When the child exits with a non-zero status.
        """
        executable = self._resolve_executable(command)
        output = subprocess.DEVNULL if silent else None

        try:
            completed = subprocess.run(
                [executable, *command.args],
                cwd=cwd,
                stdout=output,
                stderr=output,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(
                f"Could not start '{command.executable}': {exc}",
                command=command.display(),
            ) from exc

        if completed.returncode != 0:
            raise CommandFailedError(
                f"Command failed with exit code {completed.returncode}: {command.display()}",
                exit_code=completed.returncode,
                command=command.display(),
            )
