"""Allow ``python -m mbtext`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mbtext`` behaves identically to the ``mbtext``
console script.
"""

from __future__ import annotations

from mbtext.cli.app import cli

if __name__ == "__main__":
    cli()
