"""Embedded Bash (readline) shortcut reference data.

Entries are kept in curated reference order, not sorted.
"""

from types import MappingProxyType
from typing import Mapping

from bashkeys.core.models import Category, Shortcut


def _entries(category: Category, *pairs: tuple[str, str]) -> tuple[Shortcut, ...]:
    return tuple(Shortcut(category, keys, description) for keys, description in pairs)


_MOVEMENT = _entries(
    Category.MOVEMENT,
    ("Ctrl+a", "Go to the beginning of the line (Home)"),
    ("Ctrl+e", "Go to the End of the line (End)"),
    ("Ctrl+f", "Forward one character (Right arrow)"),
    ("Ctrl+b", "Backward one character (Left arrow)"),
    ("Alt+f", "Forward (right) one word (Alt-Right arrow)"),
    ("Alt+b", "Back (left) one word (Alt-Left arrow)"),
    ("Ctrl+xx", "Toggle between the start of line and current cursor position"),
)

_EDIT = _entries(
    Category.EDIT,
    ("Ctrl+l", "Clear the Screen, similar to the clear command"),
    ("Alt+Del", "Delete the Word before the cursor"),
    ("Alt+d", "Delete the Word after the cursor"),
    ("Ctrl+d", "Delete character under the cursor"),
    ("Ctrl+h", "Delete character before the cursor (Backspace)"),
    ("Ctrl+w", "Cut the Word before the cursor to the clipboard"),
    ("Ctrl+k", "Cut the Line after the cursor to the clipboard"),
    ("Ctrl+u", "Cut/delete the Line before the cursor to the clipboard"),
    ("Alt+t", "Swap current word with previous"),
    ("Ctrl+t", "Swap the last two characters before the cursor (typo)"),
    ("Esc+t", "Swap the last two words before the cursor"),
    ("Ctrl+y", "Paste the last thing to be cut (yank)"),
    (
        "Alt+u",
        "UPPER capitalize every character from the cursor to the end of the current word",
    ),
    (
        "Alt+l",
        "Lower the case of every character from the cursor to the end of the current word",
    ),
    (
        "Alt+c",
        "Capitalize the character under the cursor and move to the end of the word",
    ),
    (
        "Alt+r",
        "Cancel the changes and put back the line as it was in the history (revert)",
    ),
    ("Ctrl+_", "Undo"),
    ("Tab", "Tab completion for file/directory names"),
)

_RECALL = _entries(
    Category.RECALL,
    (
        "Ctrl+r",
        "Recall the last command including the specified character(s). "
        "Search the command history as you type",
    ),
    ("Ctrl+p", "Previous command in history (walk back)"),
    ("Ctrl+n", "Next command in history (walk forward)"),
    ("Ctrl+s", "Go back to the next most recent command"),
    ("Ctrl+o", "Execute the command found via Ctrl+r or Ctrl+s"),
    ("Ctrl+g", "Escape from history searching mode"),
    ("!!", "Repeat last command"),
    ("!n", "Repeat from the last command: args n e.g. !:2 for the second argument"),
    (
        "!n:m",
        "Repeat from the last command: args from n to m. e.g. !:2-3 for the second and third",
    ),
    ("!n:$", "Repeat from the last command: args n to the last argument"),
    ("!n:p", "Print last command starting with n"),
    ("!string", "Print the last command beginning with string"),
    ("!:q", "Quote the last command with proper Bash escaping applied"),
    ("!$", "Last argument of previous command"),
    ("Alt+.", "Last argument of previous command"),
    ("!*", "All arguments of previous command"),
    ("^abc^def", "Run previous command, replacing abc with def"),
)

_PROCESS = _entries(
    Category.PROCESS,
    ("Ctrl+c", "Interrupt/Kill whatever you are running (SIGINT)"),
    ("Ctrl+l", "Clear the screen"),
    (
        "Ctrl+s",
        "Stop output to the screen (for long running verbose commands). "
        "Then use PgUp/PgDn for navigation",
    ),
    (
        "Ctrl+q",
        "Allow output to the screen (if previously stopped using command above)",
    ),
    (
        "Ctrl+d",
        "Send an EOF marker, unless disabled by an option, "
        "this will close the current shell (EXIT)",
    ),
    (
        "Ctrl+z",
        "Send the signal SIGTSTP to the current task, which suspends it. "
        "To return to it later enter 'fg process name' (foreground)",
    ),
)

SHORTCUTS: Mapping[Category, tuple[Shortcut, ...]] = MappingProxyType(
    {
        Category.MOVEMENT: _MOVEMENT,
        Category.EDIT: _EDIT,
        Category.RECALL: _RECALL,
        Category.PROCESS: _PROCESS,
    }
)


def entries_for(category: Category) -> tuple[Shortcut, ...]:
    """Return the shortcuts for a category in display order."""
    return SHORTCUTS[category]


def all_entries() -> tuple[Shortcut, ...]:
    """Return every shortcut, grouped by category in canonical order."""
    return tuple(entry for category in Category for entry in SHORTCUTS[category])
