"""Shortcut domain models"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Shortcut categories.

    Declaration order is the canonical display order.
    """

    MOVEMENT = ("m", "movement", "Show movement related shortcuts")
    EDIT = ("e", "edit", "Show edit related shortcuts")
    RECALL = ("r", "recall", "Show command recall (history) related shortcuts")
    PROCESS = ("p", "process", "Show process related shortcuts")

    def __init__(self, letter: str, option: str, help_text: str):
        self.letter = letter
        self.option = option
        self.help_text = help_text

    @property
    def title(self) -> str:
        # Always RECALL, including the no-flag listing; earlier bk releases
        # headed that listing HISTORY.
        return self.name

    @property
    def short_flag(self) -> str:
        return f"-{self.letter}"

    @property
    def long_flag(self) -> str:
        return f"--{self.option}"


@dataclass(frozen=True)
class Shortcut:
    """A key combination and what it does."""

    category: Category
    keys: str
    description: str

    def __post_init__(self):
        if not self.keys or not self.keys.strip():
            raise ValueError("Shortcut keys cannot be empty")
        if not self.description or not self.description.strip():
            raise ValueError("Shortcut description cannot be empty")
