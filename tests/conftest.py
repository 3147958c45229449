"""
Shared test fixtures and configuration for pytest
"""
import pytest

from bashkeys.utils.config import reset_config
from bashkeys.utils.console import get_buffer_console, reset_console


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """Plain output at the default 80 columns, as when bk is piped"""
    for name in ("COLUMNS", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    reset_console()
    reset_config()
    yield
    reset_console()
    reset_config()


@pytest.fixture
def buffer_console():
    """Console writing plain text into a StringIO buffer"""
    return get_buffer_console(width=80)


@pytest.fixture
def launcher(tmp_path):
    """A fake installed bk launcher script"""
    path = tmp_path / "bin" / "bk"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nexec python -m bashkeys \"$@\"\n")
    path.chmod(0o755)
    return path
