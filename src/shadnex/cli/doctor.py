"""``shadnex doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the Node.js toolchain needed by the external generators is
available.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys

from shadnex.cli import exit_codes
from shadnex.cli.console import console, rich_available
from shadnex.infra.toolchain_detector import ToolStatus, detect_package_managers, detect_tool
from shadnex.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_row(status: ToolStatus, *, required: bool) -> tuple[str, str, str]:
    if status.found:
        return status.name, str(status.path) if status.path else "found", OK
    return status.name, "not found", FAIL if required else WARN


def _node_check() -> tuple[str, str, str]:
    """Node.js is required by every package manager."""
    return _tool_row(detect_tool("node"), required=True)


def _package_manager_checks() -> list[tuple[str, str, str]]:
    """One row per package manager; a missing one only warns."""
    return [_tool_row(status, required=False) for status in detect_package_managers().values()]


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


def _shadnex_version_check() -> tuple[str, str, str]:
    return "shadnex", __version__, OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nshadnex doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _missing_tool_guidance() -> list[ToolStatus]:
    statuses = [detect_tool("node"), *detect_package_managers().values()]
    return [status for status in statuses if not status.found and status.install_commands]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _shadnex_version_check(),
        _python_version_check(),
        _node_check(),
        *_package_manager_checks(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        from rich.table import Table

        table = Table(
            title="shadnex doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    for status in _missing_tool_guidance():
        console.print(f"[yellow]{status.name} is not installed.[/yellow] Install with one of:")
        for cmd in status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
