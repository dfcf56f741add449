"""CLI application entry point and command routing for shadnex.

This module is the **sole error boundary** for the entire application.
It catches :class:`~shadnex.exceptions.SetupCancelled`,
:class:`~shadnex.exceptions.ShadnexError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — question order lives in the core
  sequencer, command composition in the core composer, phase handling
  in :mod:`shadnex.cli.session`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path

from shadnex.cli import exit_codes
from shadnex.cli.console import console, escape
from shadnex.core.models import PackageManager
from shadnex.exceptions import SetupCancelled, ShadnexError
from shadnex.version import __version__

CANCELLED_MESSAGE = "Setup cancelled by user."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``shadnex [name]``   — interactive project creation
    * ``shadnex doctor``   — toolchain diagnostics
    * ``shadnex --version``
    """
    parser = argparse.ArgumentParser(
        prog="shadnex",
        description="Create a Next.js app with Shadcn UI, interactively.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Project name (asked interactively when omitted), or 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "-p",
        "--package-manager",
        choices=[pm.value for pm in PackageManager],
        default=None,
        help="Package manager to use (asked interactively when omitted).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the commands that would run without executing them.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _default_holder() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return ""


def _handle_create(
    project_name: str | None,
    package_manager: PackageManager | None,
    *,
    dry_run: bool,
) -> int:
    """Collect a configuration interactively, then run the session.

    Flow:
    1. Build the questionary prompter and run the setup sequencer.
    2. Hand the finished config to :class:`ScaffoldSession`.
    """
    from shadnex.cli.prompts import QuestionaryPrompter
    from shadnex.cli.session import ScaffoldSession
    from shadnex.core.sequencer import SetupSequencer
    from shadnex.infra.licenses import available_licenses
    from shadnex.infra.process_runner import ProcessRunner

    console.print(f"\n[bold cyan]shadnex[/bold cyan] [dim]v{__version__}[/dim]  Next.js + Shadcn UI\n")

    sequencer = SetupSequencer(
        QuestionaryPrompter(),
        licenses=available_licenses(),
        default_holder=_default_holder(),
    )
    config = sequencer.collect(project_name=project_name, package_manager=package_manager)

    session = ScaffoldSession(config, ProcessRunner(), parent_dir=Path.cwd(), dry_run=dry_run)
    return session.run()


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from shadnex.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the shadnex CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    target: str | None = args.target
    if target is not None and target.lower() == "doctor":
        return _handle_doctor()

    package_manager = PackageManager(args.package_manager) if args.package_manager else None
    return _handle_create(target, package_manager, dry_run=args.dry_run)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except (SetupCancelled, KeyboardInterrupt):
        console.print(f"\n\n[yellow]{CANCELLED_MESSAGE}[/yellow]")
        sys.exit(exit_codes.CANCELLED)
    except ShadnexError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
