"""CLI application entry point and command routing for mbtext.

This module is the **sole error boundary** for the command line.  It
catches :class:`~mbtext.exceptions.MbTextError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* Every command delegates its string logic to ``core``.
* Results go to stdout through :data:`~mbtext.cli.console.output`;
  diagnostics and errors go to stderr.
* Command-line text is encoded with ``surrogateescape`` so that bytes
  which are not valid UTF-8 reach the decoder and fail there.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable

from mbtext.cli import exit_codes
from mbtext.cli.console import console, output
from mbtext.cli.logging_setup import LOG_LEVEL_ENV, configure_logging
from mbtext.core import case, ops, transform
from mbtext.exceptions import MbTextError
from mbtext.utils.formatting import display
from mbtext.version import __version__

logger = logging.getLogger(__name__)

_TRANSFORMS: dict[str, tuple[Callable[[bytes], bytes], str]] = {
    "upper": (case.strtoupper, "Uppercase every code point."),
    "lower": (case.strtolower, "Lowercase every code point."),
    "ucfirst": (case.ucfirst, "Uppercase the first code point."),
    "ucwords": (case.ucwords, "Uppercase the first code point of each word."),
    "strrev": (transform.strrev, "Reverse the code points."),
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per
    operation."""
    parser = argparse.ArgumentParser(
        prog="mbtext",
        description="UTF-8 aware string operations on the command line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=f"Enable debug logging (overrides ${LOG_LEVEL_ENV}).",
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    strlen_cmd = commands.add_parser("strlen", help="Count code points.")
    strlen_cmd.add_argument("text")

    substr_cmd = commands.add_parser("substr", help="Slice by code point.")
    substr_cmd.add_argument("text")
    substr_cmd.add_argument("start", type=int)
    substr_cmd.add_argument("length", type=int, nargs="?", default=None)

    for name, summary in (
        ("strpos", "Find the first occurrence of NEEDLE."),
        ("strrpos", "Find the last occurrence of NEEDLE."),
    ):
        search_cmd = commands.add_parser(name, help=summary)
        search_cmd.add_argument("text")
        search_cmd.add_argument("needle")
        search_cmd.add_argument("--offset", type=int, default=0)

    split_cmd = commands.add_parser("split", help="Split into code-point chunks.")
    split_cmd.add_argument("text")
    split_cmd.add_argument("--size", type=int, default=1)

    for name, (_, summary) in _TRANSFORMS.items():
        transform_cmd = commands.add_parser(name, help=summary)
        transform_cmd.add_argument("text")

    inspect_cmd = commands.add_parser(
        "inspect", help="Show every code point with its bytes.",
    )
    inspect_cmd.add_argument("text")

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _to_buffer(text: str) -> bytes:
    """Encode command-line text, preserving undecodable argv bytes."""
    return text.encode("utf-8", "surrogateescape")


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_strlen(args: argparse.Namespace) -> int:
    output.emit(str(ops.strlen(_to_buffer(args.text))))
    return exit_codes.SUCCESS


def _handle_substr(args: argparse.Namespace) -> int:
    result = ops.substr(_to_buffer(args.text), args.start, args.length)
    output.emit(display(result))
    return exit_codes.SUCCESS


def _handle_search(args: argparse.Namespace) -> int:
    """Dispatch ``strpos`` and ``strrpos``; a miss exits with an error code."""
    search = ops.strpos if args.command == "strpos" else ops.strrpos
    position = search(_to_buffer(args.text), _to_buffer(args.needle), args.offset)
    if position is None:
        console.print("[yellow]not found[/yellow]")
        return exit_codes.GENERAL_ERROR
    output.emit(str(position))
    return exit_codes.SUCCESS


def _handle_split(args: argparse.Namespace) -> int:
    for chunk in ops.str_split(_to_buffer(args.text), args.size):
        output.emit(display(chunk))
    return exit_codes.SUCCESS


def _handle_transform(args: argparse.Namespace) -> int:
    operation, _ = _TRANSFORMS[args.command]
    output.emit(display(operation(_to_buffer(args.text))))
    return exit_codes.SUCCESS


def _handle_inspect(args: argparse.Namespace) -> int:
    from mbtext.cli.inspect_view import render_inspection

    render_inspection(_to_buffer(args.text))
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from mbtext.cli.doctor import run_doctor

    return run_doctor()


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "strlen": _handle_strlen,
    "substr": _handle_substr,
    "strpos": _handle_search,
    "strrpos": _handle_search,
    "split": _handle_split,
    "inspect": _handle_inspect,
    "doctor": _handle_doctor,
    **{name: _handle_transform for name in _TRANSFORMS},
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mbtext CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose or LOG_LEVEL_ENV in os.environ:
        configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Dispatching command %r", args.command)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MbTextError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
