"""Logging configuration for the ``mbtext`` command.

Library modules only create loggers; handlers are installed here, once,
when the CLI starts.  The level comes from ``-v/--verbose`` or the
``MBTEXT_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from mbtext.exceptions import MissingDependencyError

LOG_LEVEL_ENV: str = "MBTEXT_LOG_LEVEL"

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(
    verbose: bool,
    env: Mapping[str, str] | None = None,
) -> int:
    """Return the log level selected by *verbose* and the environment.

    ``--verbose`` wins over the environment.  Unknown values fall back
    to ``WARNING``.
    """
    if verbose:
        return logging.DEBUG
    environ: Mapping[str, str] = env if env is not None else os.environ
    raw = environ.get(LOG_LEVEL_ENV, "")
    return _LEVEL_MAP.get(raw.strip().casefold(), logging.WARNING)


def configure_logging(
    verbose: bool = False,
    env: Mapping[str, str] | None = None,
) -> int:
    """Install a Rich handler on the ``mbtext`` logger.

    Returns the level that was applied.

    Raises
    ------
    MissingDependencyError
        If Rich is not installed.
    """
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    level = resolve_level(verbose, env)
    package_logger = logging.getLogger("mbtext")
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    return level
