"""Shared pytest fixtures and configuration for the mbtext test suite.

Guidelines
----------
* Core tests are pure function calls — no I/O, no mocking unless a
  code path must be forced.
* Non-ASCII literals are written as ``"...".encode()`` so the intended
  characters stay readable.
* Tests must not depend on OS state or terminal capabilities.
"""

from __future__ import annotations

import pytest

# 1-, 2-, 3- and 4-byte characters in one buffer.
MIXED: bytes = "aé✓😀".encode()


@pytest.fixture
def mixed() -> bytes:
    return MIXED


@pytest.fixture
def force_general_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ASCII gate report ``False`` so the decoding path runs."""
    for module in ("ops", "case", "transform"):
        monkeypatch.setattr(f"mbtext.core.{module}.all_ascii", lambda *_: False)
    monkeypatch.setattr("mbtext.core.index.is_ascii", lambda _: False)
