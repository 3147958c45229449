"""bash-keys: a command-line reference for Bash keyboard shortcuts."""

__version__ = "0.1.0"
