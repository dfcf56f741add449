"""Scoped interrupt handling for the session phases.

Handlers are installed for the duration of a ``with`` block and the
previous handlers are always restored on exit, so no phase leaves global
signal state behind.

* :func:`cancel_on_interrupt` — SIGINT / SIGTERM abort the run as a
  user cancellation (exit status 0).
* :func:`interrupts_to_child` — the parent swallows SIGINT so that an
  interactive child (``shadcn init``) handles Ctrl+C itself.  A caught
  handler is reset to the default on exec, so the child starts with
  normal interrupt handling.  SIGTERM still cancels the run.
"""

from __future__ import annotations

import signal
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from types import FrameType
from typing import Union

from shadnex.exceptions import SetupCancelled

_Handler = Union[Callable[[int, Union[FrameType, None]], object], int, signal.Handlers]


@contextmanager
def interrupt_scope(handler: _Handler, *signums: int) -> Iterator[None]:
    """Install *handler* for *signums* (default: SIGINT) inside the block."""
    targets = signums or (signal.SIGINT,)
    previous = {signum: signal.signal(signum, handler) for signum in targets}
    try:
        yield
    finally:
        for signum, old in previous.items():
            # ``None`` means the old handler was not installed from Python.
            signal.signal(signum, old if old is not None else signal.SIG_DFL)


def _raise_cancelled(_signum: int, _frame: FrameType | None) -> None:
    raise SetupCancelled()


def cancel_on_interrupt() -> AbstractContextManager[None]:
    return interrupt_scope(_raise_cancelled, signal.SIGINT, signal.SIGTERM)


def _swallow(_signum: int, _frame: FrameType | None) -> None:
    """Keep the parent alive; the child receives the same SIGINT."""


@contextmanager
def interrupts_to_child() -> Iterator[None]:
    # Not SIG_IGN: an ignored disposition is inherited across exec.
    with interrupt_scope(_raise_cancelled, signal.SIGTERM):
        with interrupt_scope(_swallow, signal.SIGINT):
            yield
