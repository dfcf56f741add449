"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the CLI and infrastructure adapters must
satisfy.  Core code depends ONLY on these protocols — never on
``questionary`` or ``subprocess`` directly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol, TypeVar

from shadnex.core.commands import Command

T = TypeVar("T")


class Prompter(Protocol):
    """Contract for an interactive question/answer backend.

    Every question method returns ``None`` when the user aborts the
    prompt (Ctrl+C, Esc).  Interpreting ``None`` is the caller's job.
    """

    def select(
        self,
        message: str,
        choices: Sequence[tuple[str, T]],
        *,
        default: T,
    ) -> T | None:
        """Ask a single-choice question.

        *choices* is a sequence of ``(title, value)`` pairs; the selected
        value is returned.
        """
        ...  # pragma: no cover

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str | None:
        """Ask a free-text question.

        *validate* returns ``True`` to accept, or an error message that
        is shown inline while the prompt repeats.
        """
        ...  # pragma: no cover

    def confirm(self, message: str, *, default: bool) -> bool | None:
        ...  # pragma: no cover

    def notice(self, message: str) -> None:
        """Show a non-interactive informational message."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for synchronous external-command execution."""

    def run(
        self,
        command: Command,
        *,
        cwd: Path | None = None,
        silent: bool = False,
    ) -> None:
        """Run *command* to completion.

        Raises
        ------
        ToolNotFoundError
            When the executable cannot be located.
        CommandFailedError
            When the command exits with a non-zero status.
        """
        ...  # pragma: no cover
