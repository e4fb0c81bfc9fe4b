import os
from pathlib import Path

import pytest

from menuprobe.utils.test import get_testenv, write_definition
from tests.utils.cmdline import proc


class TestCmdline:
    @pytest.fixture(autouse=True)
    def _menus(self, tmp_path: Path) -> None:
        self.home = tmp_path / "home"
        self.system = tmp_path / "system"
        write_definition(
            self.system / "applications" / "mines.desktop",
            {"Type": "Application", "Name": "Mines", "Categories": "Game;"},
        )
        write_definition(
            self.system / "applications" / "hidden.desktop",
            {
                "Type": "Application",
                "Name": "Hidden",
                "Categories": "Game;",
                "NoDisplay": "true",
            },
        )
        write_definition(
            self.home / "desktop-directories" / "Games.directory", {"Name": "Games"}
        )
        write_definition(
            self.system / "desktop-directories" / "Games.directory", {"Name": "Games"}
        )

        self.env = get_testenv()
        tests_path = Path(__file__).parent.parent
        self.env["PYTHONPATH"] += os.pathsep + str(tests_path.parent)
        self.env["MENUPROBE_SETTINGS_MODULE"] = "tests.test_cmdline.settings"
        self.env["XDG_DATA_HOME"] = str(self.home)
        self.env["XDG_DATA_DIRS"] = str(self.system)

    def _execute(self, *args: str) -> tuple[int, str, str]:
        return proc(*args, env=self.env)

    def test_project_settings(self):
        ret, out, _ = self._execute("cat", "Games")
        assert ret == 0
        assert out == "Games is used in Mines\n"

    def test_override_settings_using_set_arg(self):
        ret, out, _ = self._execute(
            "cat", "Game", "-s", 'CATEGORY_RENAMES={"Utility": "Accessories"}'
        )
        assert ret == 0
        assert out == "Game is used in Mines\n"

    def test_check_warns_about_duplicate_submenu(self):
        ret, out, err = self._execute("check", "-L", "INFO")
        assert ret == 0
        assert out == "Check finished\n"
        home = self.home / "desktop-directories"
        system = self.system / "desktop-directories"
        assert (
            f"WARNING: Duplicate submenu 'Games' is defined in {home}/Games.directory "
            f"and also in {system}/Games.directory"
        ) in err

    def test_project_log_level(self):
        ret, _, err = self._execute("check")
        assert ret == 0
        assert "WARNING: Duplicate submenu 'Games'" in err

        ret, _, err = self._execute("check", "--nolog")
        assert ret == 0
        assert "WARNING" not in err

    def test_debug_overrides_project_log_level(self):
        ret, _, err = self._execute("-d", "app", "Mines")
        assert ret == 0
        assert "DEBUG: Hidden entry" in err
        assert "DEBUG: Scanning" in err

    def test_app(self):
        ret, out, _ = self._execute("app", "Mines")
        path = self.system / "applications" / "mines.desktop"
        assert ret == 0
        assert out == f"Mines is defined in {path}\n"

    def test_hidden_app_is_found_by_filename_only(self):
        ret, out, _ = self._execute("app", "Hidden")
        assert ret == 0
        assert out == "Can't find a .desktop file for 'Hidden'\n"

        ret, out, _ = self._execute("app", "hidden.desktop")
        path = self.system / "applications" / "hidden.desktop"
        assert ret == 0
        assert out == f"Hidden is defined in {path}\n"

    def test_usage_errors_exit_with_2(self):
        assert self._execute()[0] == 2
        assert self._execute("frobnicate")[0] == 2
        assert self._execute("cat")[0] == 2
        assert self._execute("app", "Mines", "Games")[0] == 2

    def test_help(self):
        ret, out, _ = self._execute("cat", "-h")
        assert ret == 0
        assert "menuprobe cat [options] <category>" in out
        assert "Global Options" in out
