"""Infrastructure: bundled license templates.

License texts ship as package data under ``license_texts/`` — one
``<SPDX-ID>.txt`` file per license, with ``$year`` and ``$holder``
placeholders filled in by :func:`render_license`.
"""

from __future__ import annotations

import datetime
from importlib import resources
from pathlib import Path
from string import Template
from typing import TYPE_CHECKING

from shadnex.exceptions import LicenseError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

LICENSE_FILENAME: str = "LICENSE"

_TEMPLATE_PACKAGE = "shadnex.infra"
_TEMPLATE_DIR = "license_texts"
_TEMPLATE_SUFFIX = ".txt"


def _templates_root() -> Traversable:
    return resources.files(_TEMPLATE_PACKAGE) / _TEMPLATE_DIR


def available_licenses() -> tuple[str, ...]:
    """SPDX identifiers of every bundled license, sorted."""
    return tuple(
        sorted(
            entry.name.removesuffix(_TEMPLATE_SUFFIX)
            for entry in _templates_root().iterdir()
            if entry.name.endswith(_TEMPLATE_SUFFIX)
        )
    )


def render_license(license_id: str, *, holder: str, year: int | None = None) -> str:
    """Return the full license text for *license_id*.

    Raises
    ------
    LicenseError
        If *license_id* is not bundled.
    """
    template_file = _templates_root() / f"{license_id}{_TEMPLATE_SUFFIX}"
    if not template_file.is_file():
        raise LicenseError(
            f"Could not get text for license: {license_id}",
            hint=f"Available licenses: {', '.join(available_licenses())}",
        )
    text = template_file.read_text(encoding="utf-8")
    if year is None:
        year = datetime.date.today().year
    return Template(text).safe_substitute(year=year, holder=holder).strip() + "\n"


def write_license(
    directory: Path,
    license_id: str,
    *,
    holder: str,
    year: int | None = None,
) -> Path:
    """Render *license_id* into ``directory/LICENSE`` and return the path.

    Raises
    ------
    LicenseError
        If the license is unknown.
    OSError
        If the file cannot be written.
    """
    target = directory / LICENSE_FILENAME
    target.write_text(render_license(license_id, holder=holder, year=year), encoding="utf-8")
    return target
