"""Simple status messages (no panels)."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from bashkeys.utils.console import get_console, get_error_console


class StatusMessage:
    """Simple status messages without panels.

    Successes go to stdout; errors go to stderr.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.console = console or get_console()
        self.error_console = error_console or get_error_console()

    def success(self, message: str) -> None:
        """Print success message."""
        self.console.print(Text(message, style="green"), soft_wrap=True)

    def error(self, message: str, usage: Optional[str] = None) -> None:
        """Print error message, optionally preceded by a usage line."""
        if usage:
            self.error_console.print(Text(usage.rstrip("\n")), soft_wrap=True)
        self.error_console.print(Text(message, style="red"), soft_wrap=True)
