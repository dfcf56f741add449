"""Final success summary shown after a completed session.

Rendered as a Rich :class:`~rich.panel.Panel` when Rich is available,
otherwise as a plain box-drawing frame on stderr.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from shadnex.cli.console import console, escape, rich_available, strip_markup
from shadnex.core.commands import ui_add_command
from shadnex.core.models import ProjectConfig

SHADCN_DOCS_URL = "https://ui.shadcn.com"
NEXTJS_DOCS_URL = "https://nextjs.org/docs"


def summary_lines(config: ProjectConfig) -> list[str]:
    """Summary body as Rich-markup lines."""
    pm = config.package_manager.value
    return [
        "[bold green]Success![/bold green] Your Next.js app is ready.",
        "",
        "[bold]Quick start[/bold]:",
        f"   [cyan]cd {escape(config.project_name)}[/cyan]",
        f"   [cyan]{pm} run dev[/cyan]",
        "",
        "[bold]Resources[/bold]:",
        f"   Shadcn UI: [underline]{SHADCN_DOCS_URL}[/underline]",
        f"   Next.js Docs: [underline]{NEXTJS_DOCS_URL}[/underline]",
        "",
        "[bold]Add components[/bold]:",
        f"   [cyan]{ui_add_command(config.package_manager)}[/cyan]",
    ]


def render_box(lines: Sequence[str]) -> str:
    """Frame plain-text *lines* in a rounded box."""
    width = max((len(line) for line in lines), default=0)
    border = "─" * (width + 2)
    body = [f"│ {line.ljust(width)} │" for line in lines]
    return "\n".join([f"╭{border}╮", *body, f"╰{border}╯"])


def print_summary(config: ProjectConfig) -> None:
    lines = summary_lines(config)
    if rich_available():
        from rich.panel import Panel

        console.print()
        console.print(Panel("\n".join(lines), border_style="green", expand=False))
        console.print()
        return

    plain = [str(strip_markup(line)) for line in lines]
    print("\n" + render_box(plain) + "\n", file=sys.stderr)
