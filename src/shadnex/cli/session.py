"""Session orchestrator — runs the external-command pipeline for one config.

Phases, in order:

1. **Scaffold** — ``create-next-app``.  Failure is fatal.
2. **Post-scaffold** — inside the new project directory: ``LICENSE``
   (warning on failure), dependency install (fatal), dev dependencies
   (fatal) and ``.prettierrc`` (warning on failure).
3. **UI-library init** — ``shadcn init`` when requested.  Failure,
   including Ctrl+C inside the child, is recovered from: the user is
   told how to run it later and the exit status is unaffected.
4. **Summary** — boxed quick-start instructions.

Phases 1–2 run under :func:`~shadnex.cli.signals.cancel_on_interrupt`;
phase 3 under :func:`~shadnex.cli.signals.interrupts_to_child`.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from shadnex.cli import exit_codes
from shadnex.cli.console import console, escape
from shadnex.cli.signals import cancel_on_interrupt, interrupts_to_child
from shadnex.cli.summary import print_summary
from shadnex.core.commands import (
    PRETTIER_TAILWIND_PLUGIN,
    Command,
    add_dev_command,
    dev_dependencies,
    install_command,
    scaffold_args,
    scaffold_command,
    ui_init_command,
)
from shadnex.core.models import ProjectConfig
from shadnex.core.protocols import CommandRunner
from shadnex.exceptions import (
    CommandFailedError,
    DependencyInstallError,
    ExternalCommandError,
    LicenseError,
)
from shadnex.infra.licenses import write_license

PRETTIER_CONFIG_FILENAME = ".prettierrc"

LicenseWriter = Callable[..., Path]


class ScaffoldSession:
    """Drive the external tools for a fully assembled :class:`ProjectConfig`.

    Parameters
    ----------
    config:
        The read-only session configuration.
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    parent_dir:
        Directory in which the project directory is created.
    dry_run:
        Print the commands instead of running them; write no files.
    license_writer:
        Callable with the :func:`~shadnex.infra.licenses.write_license`
        signature.
    """

    def __init__(
        self,
        config: ProjectConfig,
        runner: CommandRunner,
        *,
        parent_dir: Path,
        dry_run: bool = False,
        license_writer: LicenseWriter = write_license,
    ) -> None:
        self.config = config
        self.parent_dir = parent_dir
        self.project_dir = parent_dir / config.project_name
        self._runner = runner
        self._dry_run = dry_run
        self._license_writer = license_writer

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Run every phase and return the process exit code.

        Raises
        ------
        SetupCancelled
            On SIGINT / SIGTERM during phases 1–2.
        ExternalCommandError
            When the scaffold or a dependency install fails.
        """
        with cancel_on_interrupt():
            self.scaffold()
            self.post_scaffold()

        if self.config.shadcn:
            with interrupts_to_child():
                self.init_ui_library()

        self.print_summary()
        return exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def scaffold(self) -> None:
        console.print("\n[bold]Creating Next.js application...[/bold]\n")
        command = scaffold_command(self.config.package_manager, scaffold_args(self.config))
        self._execute(command, cwd=self.parent_dir)
        console.print("\n[bold green]Next.js application created successfully![/bold green]\n")

    def post_scaffold(self) -> None:
        if self.config.wants_license:
            self._write_license()

        pm = self.config.package_manager
        console.print(f"\n[bold]Installing dependencies with {pm.value}...[/bold]\n")
        self._install(install_command(pm))

        packages = dev_dependencies(self.config)
        if packages:
            console.print(f"\n[bold]Adding dev dependencies:[/bold] {', '.join(packages)}\n")
            self._install(add_dev_command(pm, packages, silent=True), silent=True)
            self._write_prettier_config()

    def init_ui_library(self) -> None:
        console.print("\n[bold]Initializing Shadcn UI...[/bold]\n")
        command = ui_init_command(self.config.package_manager)
        try:
            self._execute(command, cwd=self.project_dir)
        except ExternalCommandError:
            console.print("\n\n")
            console.print("[yellow]Shadcn setup was cancelled or failed.[/yellow]")
            console.print("\n[green]Your Next.js app has been set up successfully![/green]")
            console.print("   You can set up Shadcn UI later by running:")
            console.print(f"   [cyan]cd {escape(self.config.project_name)}[/cyan]")
            console.print(f"   [cyan]{command.display()}[/cyan]")

    def print_summary(self) -> None:
        print_summary(self.config)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _execute(self, command: Command, *, cwd: Path, silent: bool = False) -> None:
        if self._dry_run:
            console.print(f"[dim]$ {command.display()}[/dim]")
            return
        self._runner.run(command, cwd=cwd, silent=silent)

    def _install(self, command: Command, *, silent: bool = False) -> None:
        try:
            self._execute(command, cwd=self.project_dir, silent=silent)
        except CommandFailedError as exc:
            raise DependencyInstallError(
                f"Failed to install dependencies (exit code {exc.exit_code}).",
                exit_code=exc.exit_code,
                command=exc.command,
                hint=(
                    f"The project was created in {self.project_dir}. "
                    f"Fix the problem above, then run '{command.display()}' there."
                ),
            ) from exc

    def _write_license(self) -> None:
        config = self.config
        if self._dry_run:
            console.print(f"[dim]Would write LICENSE ({config.license})[/dim]")
            return
        try:
            path = self._license_writer(
                self.project_dir,
                config.license,
                holder=config.license_holder or config.project_name,
            )
        except (LicenseError, OSError) as exc:
            console.warn(f"Could not write LICENSE file: {escape(str(exc))}")
            return
        console.print(f"[green]Wrote {path.name} ({config.license}).[/green]")

    def _write_prettier_config(self) -> None:
        if self._dry_run:
            console.print(f"[dim]Would write {PRETTIER_CONFIG_FILENAME}[/dim]")
            return
        settings: dict[str, object] = {}
        if self.config.tailwind:
            settings["plugins"] = [PRETTIER_TAILWIND_PLUGIN]
        try:
            (self.project_dir / PRETTIER_CONFIG_FILENAME).write_text(
                json.dumps(settings, indent=2) + "\n", encoding="utf-8",
            )
        except OSError as exc:
            console.warn(f"Could not write {PRETTIER_CONFIG_FILENAME}: {exc}")
