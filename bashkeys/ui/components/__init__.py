"""Reusable UI components for shortcut display."""

from .messages import StatusMessage
from .tables import ShortcutTable, category_header, render_selection

__all__ = [
    "ShortcutTable",
    "StatusMessage",
    "category_header",
    "render_selection",
]
