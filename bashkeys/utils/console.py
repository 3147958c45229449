"""Centralised console management module"""

from io import StringIO
from typing import Optional

from rich.console import Console


class PipeAwareConsole(Console):
    """Console that reports a closed output pipe to its caller.

    rich handles BrokenPipeError itself by exiting with status 1; here the
    error propagates so the entry point decides how to exit.
    """

    def on_broken_pipe(self) -> None:
        raise BrokenPipeError("output pipe closed")


_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_console() -> Console:
    """Get the shared stdout Console instance"""
    global _console

    if _console is None:
        _console = PipeAwareConsole(highlight=False)

    return _console


def get_error_console() -> Console:
    """Get the shared stderr Console instance"""
    global _error_console

    if _error_console is None:
        _error_console = Console(stderr=True, highlight=False)

    return _error_console


def get_buffer_console(width: int = 120) -> tuple[Console, StringIO]:
    """Get a plain-text Console that captures output to a buffer"""
    buffer = StringIO()

    console = Console(
        file=buffer,
        force_terminal=False,
        color_system=None,
        highlight=False,
        width=width,
    )

    return console, buffer


def reset_console() -> None:
    """Reset the shared Console instances (for testing purposes)"""
    global _console, _error_console
    _console = None
    _error_console = None
