"""Shortcut table display component."""

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.text import Text

from bashkeys.core.models import Category, Shortcut
from bashkeys.core.selection import CategorySelection
from bashkeys.core.shortcuts import entries_for
from bashkeys.utils.config import DisplayConfig, get_config
from bashkeys.utils.console import get_console


def category_header(category: Category) -> str:
    return f"=== {category.title} Shortcuts ==="


class ShortcutTable:
    """Reusable shortcut table component.

    Each category renders as a header line, one indented row per shortcut
    with the key column padded to a fixed minimum width, and a blank line.
    Rows are printed with soft wrapping so every entry stays on one line
    with no trailing padding, whatever the console width.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        display: Optional[DisplayConfig] = None,
    ):
        self.console = console or get_console()
        self.display_config = display or get_config().display

    def display(self, category: Category, shortcuts: Sequence[Shortcut]) -> None:
        """Display one category as a titled table.

        Args:
            category: Category used for the header line
            shortcuts: Entries in display order
        """
        self.console.print(
            Text(category_header(category), style=self.display_config.header_style),
            soft_wrap=True,
        )

        for shortcut in shortcuts:
            self.console.print(self._build_row(shortcut), soft_wrap=True)

        self.console.print()

    def display_selection(self, selection: Iterable[Category]) -> None:
        """Display every category of a selection in canonical order."""
        for category in selection:
            self.display(category, entries_for(category))

    def _build_row(self, shortcut: Shortcut) -> Text:
        """Build one row: indent, padded keys, a space, the description."""
        config = self.display_config
        padding = max(config.key_width - len(shortcut.keys), 0)

        row = Text(" " * config.indent)
        row.append(shortcut.keys, style=config.key_style or None)
        row.append(" " * padding + " ")
        row.append(shortcut.description, style=config.description_style or None)
        return row


def render_selection(
    selection: CategorySelection,
    console: Optional[Console] = None,
    display: Optional[DisplayConfig] = None,
) -> None:
    """Render a selection to the console (stdout by default)."""
    ShortcutTable(console, display).display_selection(selection)
