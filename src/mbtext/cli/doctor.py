"""``mbtext doctor`` — environment diagnostics command.

Gathers runtime information relevant to UTF-8 handling and renders a
Rich table summarising whether the environment is usable.

This module lives in the CLI layer.  No business logic resides here;
it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
import unicodedata
from importlib import metadata

from mbtext.cli import exit_codes
from mbtext.cli.console import console
from mbtext.core.casemap import table_sizes
from mbtext.core.codec import decode_at, encode
from mbtext.version import __version__

# (code point, canonical encoding) pairs covering every lead-byte class.
_CODEC_PROBES: tuple[tuple[int, bytes], ...] = (
    (0x41, b"\x41"),
    (0xE9, b"\xc3\xa9"),
    (0x2713, b"\xe2\x9c\x93"),
    (0x1F600, b"\xf0\x9f\x98\x80"),
    (0x200000, b"\xf8\x88\x80\x80\x80"),
    (0x4000000, b"\xfc\x84\x80\x80\x80\x80"),
)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _unicode_database_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Unicode database row."""
    return "Unicode", unicodedata.unidata_version, "[green]OK[/green]"


def _case_table_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the case-mapping table row."""
    upper_count, lower_count = table_sizes()
    value = f"{upper_count} upper / {lower_count} lower"
    if upper_count == 0 or lower_count == 0:
        return "Case table", value, "[red]FAIL[/red]"
    return "Case table", value, "[green]OK[/green]"


def _codec_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the decode/encode self-test row."""
    for codepoint, raw in _CODEC_PROBES:
        decoded = decode_at(raw, 0)
        if (decoded.codepoint, decoded.length) != (codepoint, len(raw)):
            return "Codec", f"decode U+{codepoint:04X}", "[red]FAIL[/red]"
        if encode(codepoint) != raw:
            return "Codec", f"encode U+{codepoint:04X}", "[red]FAIL[/red]"
    return "Codec", "1-6 byte forms", "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row."""
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _mbtext_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the mbtext version row."""
    return "mbtext", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nmbtext doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks() -> list[tuple[str, str, str]]:
    """Run every diagnostic collector, in display order."""
    return [
        _mbtext_version_check(),
        _python_version_check(),
        _unicode_database_check(),
        _case_table_check(),
        _codec_check(),
        _rich_check(),
        _os_check(),
    ]


def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="mbtext doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
