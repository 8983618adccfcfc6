"""Shared utilities — presentation helpers built on the core primitives.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from mbtext.utils.formatting import display, truncate

__all__: list[str] = ["display", "truncate"]
