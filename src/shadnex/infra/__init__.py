"""Infrastructure layer — external system integration.

This layer wraps all interaction with child processes, the operating
system and bundled data files.  Every raw ``subprocess`` / ``OSError``
failure must be caught here and re-raised as a
:class:`~shadnex.exceptions.ShadnexError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from shadnex.infra.licenses import available_licenses, render_license, write_license
from shadnex.infra.process_runner import ProcessRunner
from shadnex.infra.toolchain_detector import ToolStatus, detect_package_managers, detect_tool

__all__: list[str] = [
    "ProcessRunner",
    "ToolStatus",
    "available_licenses",
    "detect_package_managers",
    "detect_tool",
    "render_license",
    "write_license",
]
