"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from mbtext.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects)

	def emit(self, text: str) -> None:
		"""Write one line of result data to the stream exactly as given."""
		stream = self._stream()
		stream.write(text + "\n")
		stream.flush()


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and tables."""

output = _ConsoleProxy(stderr=False)
"""Operation results."""
