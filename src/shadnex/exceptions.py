"""Custom exception hierarchy for shadnex.

Every error that reaches the CLI error boundary must inherit from
:class:`ShadnexError`.  Raw ``subprocess`` / ``OSError`` failures must
not escape the infrastructure layer unwrapped — they are re-raised as a
typed subclass defined here.

User cancellation is deliberately *not* an error: :class:`SetupCancelled`
sits outside the hierarchy so it can never be reported as a failure.

Hierarchy
---------
SetupCancelled
ShadnexError
├── InvalidProjectNameError
├── InvalidConfigError
├── LicenseError
├── MissingDependencyError
└── ExternalCommandError
    ├── ToolNotFoundError
    └── CommandFailedError
        └── DependencyInstallError
"""

from __future__ import annotations


class SetupCancelled(Exception):
    """Raised when the user aborts a prompt or interrupts the run.

    The CLI boundary converts this into a friendly message and a zero
    exit status.
    """


class ShadnexError(Exception):
    """Base exception for all shadnex errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class InvalidProjectNameError(ShadnexError):
    """Raised when a project name supplied on the command line is blank."""


class InvalidConfigError(ShadnexError):
    """Raised when a :class:`ProjectConfig` breaks one of its invariants."""


# --- Local files -----------------------------------------------------------

class LicenseError(ShadnexError):
    """Raised when a license template is unknown or cannot be loaded."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(ShadnexError):
    """Raised when an optional Python UI dependency is not importable."""


# --- External commands -----------------------------------------------------

class ExternalCommandError(ShadnexError):
    """Base class for failures of a spawned external tool."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: str | None = command
        """Display form of the command that failed, when known."""


class ToolNotFoundError(ExternalCommandError):
    """Raised when the executable of a command is not on ``PATH``."""


class CommandFailedError(ExternalCommandError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int,
        command: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, command=command, hint=hint)
        self.exit_code: int = exit_code


class DependencyInstallError(CommandFailedError):
    """Raised when installing project dependencies fails."""
