"""Allow ``python -m shadnex`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m shadnex`` behaves identically to the ``shadnex`` console
script.
"""

from __future__ import annotations

from shadnex.cli.app import cli

if __name__ == "__main__":
    cli()
