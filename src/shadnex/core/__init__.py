"""Core / service layer — pure configuration and command composition.

Rules
-----
* No ``print()`` calls.
* No filesystem, process or terminal I/O.
* No imports from ``cli`` or ``infra``.
* All interaction goes through the protocols in :mod:`shadnex.core.protocols`.
"""

from shadnex.core.commands import Command, PackageManagerCommands
from shadnex.core.models import PackageManager, ProjectConfig, SetupMode
from shadnex.core.protocols import CommandRunner, Prompter
from shadnex.core.sequencer import SetupSequencer

__all__: list[str] = [
    "Command",
    "CommandRunner",
    "PackageManager",
    "PackageManagerCommands",
    "ProjectConfig",
    "Prompter",
    "SetupMode",
    "SetupSequencer",
]
