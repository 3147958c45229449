"""Shortcut models, embedded reference data and category selection."""

from .models import Category, Shortcut
from .selection import CategorySelection
from .shortcuts import SHORTCUTS, all_entries, entries_for

__all__ = [
    "Category",
    "Shortcut",
    "CategorySelection",
    "SHORTCUTS",
    "all_entries",
    "entries_for",
]
