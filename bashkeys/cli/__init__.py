"""Command-line entry point, argument parsing and uninstall."""
