"""Domain models for shadnex.

:class:`ProjectConfig` is a **frozen** dataclass: the prompt sequencer
assembles it exactly once, after which every phase of the session only
reads it.  The models carry zero I/O and no dependencies on external
packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from shadnex.exceptions import InvalidConfigError

DEFAULT_IMPORT_ALIAS: str = "@/*"
"""Alias passed to ``--import-alias`` when none was configured."""

NO_LICENSE: str = "none"
"""Sentinel ``license`` value meaning no ``LICENSE`` file is written."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


class SetupMode(str, Enum):
    """Top-level choice of how much per-feature customization to do."""

    DEFAULTS = "defaults"
    REUSE = "reuse"
    CUSTOMIZE = "customize"


# ---------------------------------------------------------------------------
# Recommended feature values
# ---------------------------------------------------------------------------

RECOMMENDED_FEATURES: MappingProxyType[str, bool] = MappingProxyType(
    {
        "typescript": True,
        "eslint": True,
        "tailwind": True,
        "src_dir": False,
        "app_router": True,
        "turbopack": True,
        "import_alias": False,
        "shadcn": True,
    }
)
"""Feature values applied by :attr:`SetupMode.DEFAULTS`."""


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Every choice made during one scaffolding session."""

    project_name: str
    """Directory / package name, already trimmed."""

    package_manager: PackageManager

    typescript: bool = True
    eslint: bool = True
    tailwind: bool = True
    src_dir: bool = False
    app_router: bool = True
    turbopack: bool = True
    import_alias: bool = False

    alias: str | None = None
    """Custom import alias; only set when :attr:`import_alias` is true."""

    shadcn: bool = False
    """Run the Shadcn UI initializer after scaffolding."""

    prettier: bool = False
    license: str = NO_LICENSE
    """SPDX identifier of a bundled license, or ``"none"``."""

    license_holder: str | None = None

    def __post_init__(self) -> None:
        if not self.project_name or self.project_name != self.project_name.strip():
            raise InvalidConfigError(
                f"Project name must be non-empty and trimmed, got {self.project_name!r}.",
            )
        if self.alias is not None and not self.import_alias:
            raise InvalidConfigError("An import alias is only allowed with import_alias enabled.")
        if self.shadcn and not self.tailwind:
            raise InvalidConfigError(
                "Shadcn UI requires Tailwind CSS.",
                hint="Enable Tailwind CSS or skip the Shadcn UI install.",
            )

    @property
    def effective_alias(self) -> str:
        """The alias to pass to the generator, falling back to ``@/*``."""
        return self.alias or DEFAULT_IMPORT_ALIAS

    @property
    def wants_license(self) -> bool:
        return self.license != NO_LICENSE
