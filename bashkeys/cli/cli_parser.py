"""Argument parser configuration for the bk CLI"""

import argparse
from typing import NoReturn, Optional, Sequence

from bashkeys.core.models import Category
from bashkeys.core.selection import CategorySelection
from bashkeys.utils.config import AppConfig, get_config
from bashkeys.utils.errors import InvalidArgumentError

DESCRIPTION = """\
A CLI for referencing Bash keyboard shortcuts.

Flags can be chained Unix-style: bk -me shows movement and edit shortcuts.
Run without flags to show all shortcuts organized by category."""

EPILOG = """\
examples:
  bk           Show all shortcuts
  bk -m        Show movement shortcuts only
  bk -me       Show movement and edit shortcuts (chained)
  bk -e -r     Show edit and recall shortcuts (separate)
  bk --version Show version information"""


class ShortcutArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input.

    --help and --version still print and exit through argparse.
    """

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(
            message,
            details={"usage": self.format_usage(), "prog": self.prog},
        )


## Argument Adding Utilities


def add_category_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one store_true flag per category, e.g. -m/--movement."""

    category_group = parser.add_argument_group(
        "categories", "Select which categories to show (default: all)"
    )

    for category in Category:
        category_group.add_argument(
            category.short_flag,
            category.long_flag,
            dest=category.option,
            action="store_true",
            help=category.help_text,
        )


## Main Parser Setup


def setup_argument_parser(config: Optional[AppConfig] = None) -> argparse.ArgumentParser:
    """Setup the main argument parser for the bk CLI."""

    config = config or get_config()

    parser = ShortcutArgumentParser(
        prog=config.prog,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    add_category_arguments(parser)

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {config.version}",
        help="Show version information and exit",
    )
    parser.add_argument(
        "--uninstall",
        action="store_true",
        help="Remove the installed bk command",
    )

    return parser


def parse_arguments(
    argv: Optional[Sequence[str]] = None, config: Optional[AppConfig] = None
) -> argparse.Namespace:
    """Parse argv (sys.argv[1:] when None).

    Raises:
        InvalidArgumentError: unknown flag, unknown letter in a chained flag,
            or a positional argument.
        SystemExit: after printing --help or --version.
    """
    parser = setup_argument_parser(config)
    return parser.parse_args(argv)


def resolve_selection(args: argparse.Namespace) -> CategorySelection:
    """Map parsed flags onto a CategorySelection."""
    return CategorySelection.from_flags(
        **{category.option: getattr(args, category.option, False) for category in Category}
    )
