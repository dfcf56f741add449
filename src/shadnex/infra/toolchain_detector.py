"""Infrastructure: Node.js toolchain detection and install guidance.

Locates ``node`` and the supported package managers on the system PATH
and provides installation guidance for whatever is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from shadnex.core.models import PackageManager


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for a single executable.

    Attributes
    ----------
    name : str
        Executable name that was probed.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool.  Empty when it
        is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*; never raises."""
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(name=name, found=True, path=Path(result).resolve(), install_commands=())
    return ToolStatus(name=name, found=False, path=None, install_commands=install_commands_for(name))


def detect_package_managers() -> dict[PackageManager, ToolStatus]:
    """Probe every supported package manager, in declaration order."""
    return {pm: detect_tool(pm.value) for pm in PackageManager}


# ---------------------------------------------------------------------------
# Install guidance
# ---------------------------------------------------------------------------

_MANAGER_INSTALL_COMMANDS: dict[str, tuple[str, ...]] = {
    "npm": ("npm ships with Node.js, install Node.js first",),
    "pnpm": ("npm install -g pnpm", "corepack enable pnpm"),
    "yarn": ("npm install -g yarn", "corepack enable yarn"),
    "bun": ("npm install -g bun", "curl -fsSL https://bun.sh/install | bash"),
}


def install_commands_for(name: str) -> tuple[str, ...]:
    """Return install suggestions for *name* on the current OS."""
    if name == "node":
        return _node_install_commands()
    return _MANAGER_INSTALL_COMMANDS.get(name, ())


def _node_install_commands() -> tuple[str, ...]:
    system = platform.system().lower()
    if system == "windows":
        return ("winget install OpenJS.NodeJS.LTS", "choco install nodejs-lts")
    if system == "linux":
        return ("sudo apt install nodejs npm", "sudo dnf install nodejs", "sudo pacman -S nodejs npm")
    if system == "darwin":
        return ("brew install node",)
    return ("Download Node.js from https://nodejs.org/",)
