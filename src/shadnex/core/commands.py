"""Command composer — pure mapping from configuration to external commands.

Each package manager has its own idiom for running a package without
installing it, installing dependencies and adding dev dependencies.
Those idioms live in a single lookup table,
:data:`PACKAGE_MANAGER_COMMANDS`, so the four-way symmetry stays
auditable and a fifth manager is one more table row.

Guarantees
----------
* No I/O, no process spawning, no ``print()``.
* The inner ``create-next-app`` argument list is identical for every
  package manager; only the outer wrapping differs.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from shadnex.core.models import PackageManager, ProjectConfig

SKIP_PROMPTS_FLAG: str = "--yes"
"""Tells ``create-next-app`` not to ask anything the flags do not cover."""

SILENT_FLAG: str = "--silent"

PRETTIER_PACKAGE: str = "prettier"
PRETTIER_TAILWIND_PLUGIN: str = "prettier-plugin-tailwindcss"


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """One external-command invocation: an executable plus its arguments."""

    executable: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    def display(self) -> str:
        """Shell-quoted rendering, suitable for copy-pasting."""
        return shlex.join(self.argv)


@dataclass(frozen=True, slots=True)
class PackageManagerCommands:
    """Command templates for a single package manager.

    Every field is a full argv prefix; composers append their own
    arguments after it.
    """

    create_next_app: tuple[str, ...]
    install: tuple[str, ...]
    add_dev: tuple[str, ...]
    shadcn: tuple[str, ...]


PACKAGE_MANAGER_COMMANDS: MappingProxyType[PackageManager, PackageManagerCommands] = (
    MappingProxyType(
        {
            PackageManager.NPM: PackageManagerCommands(
                create_next_app=("npx", "create-next-app@latest"),
                install=("npm", "install"),
                add_dev=("npm", "install", "--save-dev"),
                shadcn=("npx", "shadcn@latest"),
            ),
            PackageManager.PNPM: PackageManagerCommands(
                create_next_app=("pnpm", "dlx", "create-next-app@latest"),
                install=("pnpm", "install"),
                add_dev=("pnpm", "add", "-D"),
                shadcn=("pnpm", "dlx", "shadcn@latest"),
            ),
            PackageManager.YARN: PackageManagerCommands(
                create_next_app=("yarn", "create", "next-app"),
                install=("yarn", "install"),
                add_dev=("yarn", "add", "--dev"),
                shadcn=("yarn", "shadcn@latest"),
            ),
            PackageManager.BUN: PackageManagerCommands(
                create_next_app=("bun", "create", "next-app"),
                install=("bun", "install"),
                add_dev=("bun", "add", "--dev"),
                shadcn=("bunx", "--bun", "shadcn@latest"),
            ),
        }
    )
)


def _from_prefix(prefix: tuple[str, ...], *args: str) -> Command:
    return Command(executable=prefix[0], args=(*prefix[1:], *args))


# ---------------------------------------------------------------------------
# Scaffold
# ---------------------------------------------------------------------------

def scaffold_args(config: ProjectConfig) -> list[str]:
    """Build the inner ``create-next-app`` argument list.

    The order is fixed: project name, ``--yes``, then the optional flags
    in the order TypeScript, ESLint, Tailwind, ``src/``, App Router,
    Turbopack, import alias.  The generator may be order-sensitive, so
    callers must not reorder the result.
    """
    args = [config.project_name, SKIP_PROMPTS_FLAG]
    optional_flags = (
        (config.typescript, "--ts"),
        (config.eslint, "--eslint"),
        (config.tailwind, "--tailwind"),
        (config.src_dir, "--src-dir"),
        (config.app_router, "--app"),
        (config.turbopack, "--turbopack"),
    )
    args.extend(flag for enabled, flag in optional_flags if enabled)
    if config.import_alias:
        args.extend(("--import-alias", config.effective_alias))
    return args


def scaffold_command(package_manager: PackageManager, args: Iterable[str]) -> Command:
    """Wrap *args* in the package manager's ``create-next-app`` idiom."""
    templates = PACKAGE_MANAGER_COMMANDS[package_manager]
    return _from_prefix(templates.create_next_app, *args)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def install_command(package_manager: PackageManager) -> Command:
    return _from_prefix(PACKAGE_MANAGER_COMMANDS[package_manager].install)


def add_dev_command(
    package_manager: PackageManager,
    packages: Iterable[str],
    *,
    silent: bool = False,
) -> Command:
    """Compose the invocation adding *packages* as dev-only dependencies.

    Raises
    ------
    ValueError
        If *packages* is empty.
    """
    names = tuple(packages)
    if not names:
        raise ValueError("At least one package name is required.")
    extra = (SILENT_FLAG, *names) if silent else names
    return _from_prefix(PACKAGE_MANAGER_COMMANDS[package_manager].add_dev, *extra)


def dev_dependencies(config: ProjectConfig) -> tuple[str, ...]:
    """Dev packages implied by the configuration (may be empty)."""
    if not config.prettier:
        return ()
    if config.tailwind:
        return (PRETTIER_PACKAGE, PRETTIER_TAILWIND_PLUGIN)
    return (PRETTIER_PACKAGE,)


# ---------------------------------------------------------------------------
# Shadcn UI
# ---------------------------------------------------------------------------

def ui_init_command(package_manager: PackageManager) -> Command:
    return _from_prefix(PACKAGE_MANAGER_COMMANDS[package_manager].shadcn, "init")


def ui_add_command(package_manager: PackageManager) -> str:
    """Copy-pasteable command adding a sample component (never executed)."""
    return _from_prefix(
        PACKAGE_MANAGER_COMMANDS[package_manager].shadcn, "add", "button",
    ).display()
