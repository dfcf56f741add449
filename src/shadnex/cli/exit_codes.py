"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the project was created (Shadcn init may have been skipped)."""

CANCELLED: int = SUCCESS
"""User aborted a prompt or pressed Ctrl+C.  Cancelling is not a failure."""

GENERAL_ERROR: int = 1
"""A known ShadnexError was caught (e.g. scaffold or install failure)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
