"""Removal of the installed bk launcher."""

import shutil
import sys
from pathlib import Path
from typing import Optional

from bashkeys.utils.errors import UninstallError
from bashkeys.utils.logging import get_logger, log_call

logger = get_logger(__name__)


def find_launcher(prog: str = "bk", argv0: Optional[str] = None) -> Path:
    """Locate the installed launcher script.

    The path the program was started from wins when it is a file named
    ``prog``; otherwise ``prog`` is looked up on PATH. Symlinks are not
    followed: the link on PATH is what gets removed, not its target.

    Raises:
        UninstallError: if no launcher can be found.
    """
    argv0 = sys.argv[0] if argv0 is None else argv0

    if argv0:
        started_from = Path(argv0)
        if started_from.name == prog and started_from.is_file():
            return started_from.absolute()

    found = shutil.which(prog)
    if found:
        return Path(found).absolute()

    raise UninstallError(
        f"Could not find an installed '{prog}' command to remove",
        details={"prog": prog},
    )


@log_call
def uninstall(prog: str = "bk", launcher: Optional[Path] = None) -> Path:
    """Remove the launcher and return the path that was removed.

    Raises:
        UninstallError: if the launcher is missing or cannot be removed.
    """
    target = launcher or find_launcher(prog)

    try:
        target.unlink()
    except FileNotFoundError as e:
        raise UninstallError(
            f"'{target}' does not exist", details={"path": str(target)}
        ) from e
    except OSError as e:
        raise UninstallError(
            f"Failed to remove '{target}': {e.strerror or e}",
            details={"path": str(target), "errno": e.errno},
        ) from e

    logger.info(f"Removed launcher {target}")
    return target
