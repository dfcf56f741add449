"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from shadnex.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, highlight=False)


def rich_available() -> bool:
	try:
		_load_rich_console_class()
	except MissingDependencyError:
		return False
	return True


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*(strip_markup(obj) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)

	def warn(self, message: str) -> None:
		"""Report a non-fatal problem; execution continues."""
		self.print(f"[yellow]Warning:[/yellow] {message}")

	def notice(self, message: str) -> None:
		self.print(f"[yellow]{message}[/yellow]")


def escape(text: str) -> str:
	"""Escape *text* for interpolation into Rich markup."""
	if not rich_available():
		return text
	from rich.markup import escape as rich_escape

	return rich_escape(text)


def strip_markup(obj: object) -> object:
	"""Drop Rich ``[style]`` tags for plain-text output."""
	if not isinstance(obj, str):
		return obj
	return re.sub(r"\[/?[a-z ]+\]", "", obj)


console = _ConsoleProxy()
