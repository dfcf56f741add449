"""questionary-backed implementation of the :class:`Prompter` protocol.

This module renders the interactive questions and nothing else: the
order of questions, their defaults and the cancellation contract all
live in :mod:`shadnex.core.sequencer`.

``questionary``'s ``.ask()`` swallows Ctrl+C / Esc and returns ``None``,
which is exactly the "aborted" signal the sequencer expects.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from shadnex.cli.console import console
from shadnex.exceptions import MissingDependencyError

T = TypeVar("T")


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`~shadnex.core.protocols.Prompter` for a real terminal."""

    def __init__(self) -> None:
        self._questionary: Any = _import_questionary()

    def select(
        self,
        message: str,
        choices: Sequence[tuple[str, T]],
        *,
        default: T,
    ) -> T | None:
        q = self._questionary
        return q.select(
            message,
            choices=[q.Choice(title=title, value=value) for title, value in choices],
            default=default,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str | None:
        kwargs: dict[str, Any] = {"default": default}
        if validate is not None:
            kwargs["validate"] = validate
        return self._questionary.text(message, **kwargs).ask()

    def confirm(self, message: str, *, default: bool) -> bool | None:
        return self._questionary.confirm(message, default=default).ask()

    def notice(self, message: str) -> None:
        console.notice(message)
