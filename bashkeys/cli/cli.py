"""Main CLI entry point."""

import os
import sys
from typing import Optional, Sequence

from bashkeys.cli.cli_parser import parse_arguments, resolve_selection
from bashkeys.cli.uninstall import uninstall
from bashkeys.ui.components import StatusMessage, render_selection
from bashkeys.utils.config import get_config
from bashkeys.utils.errors import (
    BashKeysError,
    ErrorHandler,
    InvalidArgumentError,
    format_error_message,
)
from bashkeys.utils.logging import get_logger, init_logging, log_call

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _discard_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no real descriptor (e.g. replaced by a test harness)
        pass


@log_call
def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and perform the requested action.

    Returns:
        Exit code

    Raises:
        InvalidArgumentError: on unrecognized flags
        UninstallError: if --uninstall fails
    """
    config = get_config()

    try:
        args = parse_arguments(argv, config)
    except SystemExit as e:
        # --help and --version exit through argparse after printing
        return e.code if isinstance(e.code, int) else EXIT_OK

    if args.uninstall:
        removed = uninstall(config.prog)
        StatusMessage().success(f"{config.prog} has been uninstalled ({removed})")
        return EXIT_OK

    selection = resolve_selection(args)
    logger.debug(f"Rendering {selection!r}")
    render_selection(selection, display=config.display)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code
    """
    config = get_config()
    init_logging(config.logging.log_level)
    messages = StatusMessage()

    try:
        return run(argv)

    except InvalidArgumentError as e:
        ErrorHandler.handle(e, "Invalid arguments")
        messages.error(f"{config.prog}: error: {e.message}", usage=e.details.get("usage"))
        return EXIT_USAGE

    except BashKeysError as e:
        ErrorHandler.handle(e, config.prog)
        messages.error(f"Error: {format_error_message(e)}")
        return EXIT_FAILURE

    except BrokenPipeError:
        _discard_stdout()
        return EXIT_OK

    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    except Exception as e:
        ErrorHandler.handle(e, "Fatal error", log_traceback=True)
        messages.error(f"Fatal error: {format_error_message(e)}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
