"""
Tests for locating and removing the installed launcher
"""
from pathlib import Path
from unittest.mock import patch

import pytest

from bashkeys.cli.uninstall import find_launcher, uninstall
from bashkeys.utils.errors import ErrorCategory, UninstallError


class TestFindLauncher:
    """Tests for launcher resolution"""

    def test_prefers_argv0_named_bk(self, launcher):
        with patch("bashkeys.cli.uninstall.shutil.which") as which:
            assert find_launcher("bk", argv0=str(launcher)) == launcher
        which.assert_not_called()

    def test_falls_back_to_path_lookup(self, launcher):
        with patch("bashkeys.cli.uninstall.shutil.which", return_value=str(launcher)):
            assert find_launcher("bk", argv0="/usr/lib/python3/bashkeys/__main__.py") == (
                launcher
            )

    def test_argv0_named_bk_but_missing(self, tmp_path):
        missing = tmp_path / "bk"
        with patch("bashkeys.cli.uninstall.shutil.which", return_value=None):
            with pytest.raises(UninstallError):
                find_launcher("bk", argv0=str(missing))

    def test_not_found(self):
        with patch("bashkeys.cli.uninstall.shutil.which", return_value=None):
            with pytest.raises(UninstallError) as exc_info:
                find_launcher("bk", argv0="")
        assert exc_info.value.category is ErrorCategory.FILE_SYSTEM
        assert exc_info.value.details == {"prog": "bk"}


class TestUninstall:
    """Tests for launcher removal"""

    def test_removes_file(self, launcher):
        removed = uninstall("bk", launcher=launcher)
        assert removed == launcher
        assert not launcher.exists()

    def test_already_removed(self, launcher):
        launcher.unlink()
        with pytest.raises(UninstallError) as exc_info:
            uninstall("bk", launcher=launcher)
        assert "does not exist" in exc_info.value.message

    def test_permission_error_keeps_cause(self, launcher):
        with patch.object(Path, "unlink", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(UninstallError) as exc_info:
                uninstall("bk", launcher=launcher)

        assert "Permission denied" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.details["errno"] == 13
        assert launcher.exists()

    def test_resolves_launcher_when_not_given(self, launcher):
        with patch("bashkeys.cli.uninstall.find_launcher", return_value=launcher) as find:
            uninstall("bk")
        find.assert_called_once_with("bk")
        assert not launcher.exists()


class TestSymlinkedLauncher:
    """Tests for launchers installed as symlinks (e.g. pipx)"""

    @pytest.fixture
    def linked_launcher(self, tmp_path, launcher):
        link = tmp_path / "local" / "bin" / "bk"
        link.parent.mkdir(parents=True)
        link.symlink_to(launcher)
        return link

    def test_find_keeps_symlink_from_argv0(self, linked_launcher):
        assert find_launcher("bk", argv0=str(linked_launcher)) == linked_launcher

    def test_find_keeps_symlink_from_path(self, linked_launcher):
        with patch(
            "bashkeys.cli.uninstall.shutil.which", return_value=str(linked_launcher)
        ):
            assert find_launcher("bk", argv0="") == linked_launcher

    def test_uninstall_removes_link_not_target(self, linked_launcher, launcher):
        removed = uninstall("bk", launcher=find_launcher("bk", argv0=str(linked_launcher)))

        assert removed == linked_launcher
        assert not linked_launcher.is_symlink()
        assert launcher.exists()
