"""Shared pytest fixtures and configuration for the shadnex test suite.

Guidelines
----------
* No network access and no real ``npx`` / ``pnpm`` / ``yarn`` / ``bun``.
* Prompts are driven through :class:`ScriptedPrompter`.
* Child processes are replaced by :class:`RecordingRunner`.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import os
import signal
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from shadnex.core.commands import Command


# ---------------------------------------------------------------------------
# Prompter fake
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Answers questions from a fixed script, in order.

    ``text`` questions with a validator mimic a real prompt: a rejected
    answer is recorded in :attr:`validation_errors` and the next scripted
    answer is consumed, as if the prompt had been redisplayed.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []
        self.defaults: dict[str, Any] = {}
        self.choices: dict[str, list[Any]] = {}
        self.notices: list[str] = []
        self.validation_errors: list[str] = []

    def _next(self, message: str) -> Any:
        self.questions.append(message)
        if not self._answers:
            raise AssertionError(f"Unexpected question: {message!r}")
        return self._answers.pop(0)

    def select(self, message: str, choices: Sequence[tuple[str, Any]], *, default: Any) -> Any:
        self.defaults[message] = default
        self.choices[message] = [value for _, value in choices]
        return self._next(message)

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str | None:
        self.defaults[message] = default
        while True:
            answer = self._next(message)
            if answer is None or validate is None:
                return answer
            verdict = validate(answer)
            if verdict is True:
                return answer
            self.validation_errors.append(str(verdict))

    def confirm(self, message: str, *, default: bool) -> bool | None:
        self.defaults[message] = default
        return self._next(message)

    def notice(self, message: str) -> None:
        self.notices.append(message)

    @property
    def remaining(self) -> int:
        return len(self._answers)


# ---------------------------------------------------------------------------
# Runner fake
# ---------------------------------------------------------------------------

@dataclass
class RecordedCall:
    command: Command
    cwd: Path | None
    silent: bool


@dataclass
class RecordingRunner:
    """Records every command instead of running it.

    *failures* maps an executable-plus-args prefix to the exception the
    matching command raises.
    """

    failures: dict[tuple[str, ...], Exception] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def run(self, command: Command, *, cwd: Path | None = None, silent: bool = False) -> None:
        self.calls.append(RecordedCall(command, cwd, silent))
        argv = tuple(command.argv)
        for prefix, exc in self.failures.items():
            if argv[: len(prefix)] == prefix:
                raise exc

    @property
    def argvs(self) -> list[list[str]]:
        return [call.command.argv for call in self.calls]


@dataclass
class SignallingRunner(RecordingRunner):
    """Records commands and delivers *signum* to this process while the
    command matching *prefix* is "running", like a Ctrl+C at the terminal.
    """

    prefix: tuple[str, ...] = ()
    signum: int = signal.SIGINT

    def run(self, command: Command, *, cwd: Path | None = None, silent: bool = False) -> None:
        super().run(command, cwd=cwd, silent=silent)
        if tuple(command.argv[: len(self.prefix)]) == self.prefix:
            os.kill(os.getpid(), self.signum)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()
