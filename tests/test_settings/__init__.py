# pylint: disable=unsubscriptable-object,unsupported-membership-test,use-implicit-booleaness-not-comparison
# (too many false positives)

from unittest import mock

import pytest

from menuprobe.settings import (
    SETTINGS_PRIORITIES,
    BaseSettings,
    Settings,
    SettingsAttribute,
    get_settings_priority,
)

from . import default_settings


class TestSettingsGlobalFuncs:
    def test_get_settings_priority(self):
        for prio_str, prio_num in SETTINGS_PRIORITIES.items():
            assert get_settings_priority(prio_str) == prio_num
        assert get_settings_priority(99) == 99


class TestSettingsAttribute:
    def setup_method(self):
        self.attribute = SettingsAttribute("value", 10)

    def test_set_greater_priority(self):
        self.attribute.set("value2", 20)
        assert self.attribute.value == "value2"
        assert self.attribute.priority == 20

    def test_set_equal_priority(self):
        self.attribute.set("value2", 10)
        assert self.attribute.value == "value2"
        assert self.attribute.priority == 10

    def test_set_less_priority(self):
        self.attribute.set("value2", 0)
        assert self.attribute.value == "value"
        assert self.attribute.priority == 10

    def test_overwrite_basesettings(self):
        original_dict = {"one": 10, "two": 20}
        original_settings = BaseSettings(original_dict, 0)
        attribute = SettingsAttribute(original_settings, 0)

        new_dict = {"three": 11, "four": 21}
        attribute.set(new_dict, 10)
        assert isinstance(attribute.value, BaseSettings)
        assert set(attribute.value) == set(new_dict)
        assert set(original_settings) == set(original_dict)

    def test_repr(self):
        assert repr(self.attribute) == "<SettingsAttribute value='value' priority=10>"


class TestBaseSettings:
    def setup_method(self):
        self.settings = BaseSettings()

    def test_set_new_attribute(self):
        self.settings.set("TEST_OPTION", "value", 0)
        assert "TEST_OPTION" in self.settings.attributes

        attr = self.settings.attributes["TEST_OPTION"]
        assert isinstance(attr, SettingsAttribute)
        assert attr.value == "value"
        assert attr.priority == 0

    def test_set_settingsattribute(self):
        myattr = SettingsAttribute(0, 30)  # Note priority 30
        self.settings.set("TEST_ATTR", myattr, 10)
        assert self.settings.get("TEST_ATTR") == 0
        assert self.settings.getpriority("TEST_ATTR") == 30

    def test_setitem(self):
        settings = BaseSettings()
        settings.set("key", "a", "default")
        settings["key"] = "b"
        assert settings["key"] == "b"
        assert settings.getpriority("key") == 20
        settings["key2"] = "x"
        assert settings["key2"] == "x"
        assert settings.getpriority("key2") == 20

    def test_setdict_alias(self):
        with mock.patch.object(self.settings, "set") as mock_set:
            self.settings.setdict({"TEST_1": "value1", "TEST_2": "value2"}, 10)
            assert mock_set.call_count == 2
            calls = [
                mock.call("TEST_1", "value1", 10),
                mock.call("TEST_2", "value2", 10),
            ]
            mock_set.assert_has_calls(calls, any_order=True)

    def test_setmodule_only_load_uppercase_vars(self):
        class ModuleMock:
            UPPERCASE_VAR = "value"
            MIXEDcase_VAR = "othervalue"
            lowercase_var = "anothervalue"

        self.settings.setmodule(ModuleMock(), 10)
        assert "UPPERCASE_VAR" in self.settings.attributes
        assert "MIXEDcase_VAR" not in self.settings.attributes
        assert "lowercase_var" not in self.settings.attributes
        assert len(self.settings.attributes) == 1

    def test_setmodule_by_path(self):
        self.settings.setmodule(default_settings, 10)
        ctrl_attributes = self.settings.attributes.copy()

        self.settings.attributes = {}
        self.settings.setmodule("tests.test_settings.default_settings", 10)

        assert set(self.settings.attributes) == set(ctrl_attributes)
        for key, ctrl_attr in ctrl_attributes.items():
            attr = self.settings.attributes[key]
            assert attr.value == ctrl_attr.value
            assert attr.priority == ctrl_attr.priority

    def test_update(self):
        settings = BaseSettings({"key_lowprio": 0}, priority=0)
        settings.set("key_highprio", 10, priority=50)
        custom_settings = BaseSettings(
            {"key_lowprio": 1, "key_highprio": 11}, priority=30
        )
        custom_dict = {"key_lowprio": 2, "key_highprio": 12, "newkey_two": None}

        settings.update(custom_dict, priority=20)
        assert settings["key_lowprio"] == 2
        assert settings.getpriority("key_lowprio") == 20
        assert settings["key_highprio"] == 10
        assert "newkey_two" in settings

        settings.update(custom_settings)
        assert settings["key_lowprio"] == 1
        assert settings.getpriority("key_lowprio") == 30
        assert settings["key_highprio"] == 10

    def test_update_jsonstring(self):
        settings = BaseSettings({"number": 0, "dict": BaseSettings({"key": "val"})})
        settings.update('{"number": 1, "newnumber": 2}')
        assert settings["number"] == 1
        assert settings["newnumber"] == 2
        settings.set("dict", '{"key": "newval", "newkey": "newval2"}')
        assert settings["dict"]["key"] == "newval"
        assert settings["dict"]["newkey"] == "newval2"

    def test_getbool(self):
        settings = BaseSettings(
            {
                "LOG_ENABLED": "1",
                "LOG_FILE_APPEND": "false",
                "FLAG_TRUE": True,
                "FLAG_NAME": "Text Editor",
            }
        )
        assert settings.getbool("LOG_ENABLED")
        assert not settings.getbool("LOG_FILE_APPEND")
        assert settings.getbool("FLAG_TRUE")
        assert not settings.getbool("FLAG_MISSING")
        assert settings.getbool("FLAG_MISSING", True)
        with pytest.raises(ValueError, match="Supported values"):
            settings.getbool("FLAG_NAME")

    def test_getlist(self):
        settings = BaseSettings(
            {
                "CATEGORY_RESERVED": "Applet,Shell",
                "RESERVED_LIST": ["TrayIcon"],
                "RESERVED_EMPTY": "",
            }
        )
        assert settings.getlist("CATEGORY_RESERVED") == ["Applet", "Shell"]
        assert settings.getlist("RESERVED_LIST") == ["TrayIcon"]
        assert settings.getlist("RESERVED_EMPTY") == []
        assert settings.getlist("RESERVED_MISSING") == []
        assert settings.getlist("RESERVED_MISSING", ["Shell"]) == ["Shell"]

        reserved = settings.getlist("RESERVED_LIST")
        reserved.append("Shell")
        assert settings["RESERVED_LIST"] == ["TrayIcon"]

    def test_getdict(self):
        settings = BaseSettings(
            {
                "CATEGORY_RENAMES": {"Utility": "Accessories"},
                "RENAMES_JSON": '{"Game": "Games"}',
            }
        )
        assert settings.getdict("CATEGORY_RENAMES") == {"Utility": "Accessories"}
        assert settings.getdict("RENAMES_JSON") == {"Game": "Games"}
        assert settings.getdict("RENAMES_MISSING") == {}
        assert settings.getdict("RENAMES_MISSING", {"System": "Tools"}) == {
            "System": "Tools"
        }

    def test_get(self):
        settings = BaseSettings({"CATEGORY_DEFAULT": "Other", "DATA_HOME": None})
        assert settings["CATEGORY_DEFAULT"] == "Other"
        assert settings.get("CATEGORY_DEFAULT") == "Other"
        assert settings["MISSING"] is None
        assert settings.get("MISSING", "default") == "default"
        assert settings.get("DATA_HOME", "~/.local/share") == "~/.local/share"

    def test_getpriority(self):
        settings = BaseSettings({"key": "value"}, priority=99)
        assert settings.getpriority("key") == 99
        assert settings.getpriority("nonexistentkey") is None

    def test_maxpriority(self):
        assert self.settings.maxpriority() == get_settings_priority("default")
        self.settings.set("A", 0, 10)
        self.settings.set("B", 0, 30)
        assert self.settings.maxpriority() == 30


class TestSettings:
    def setup_method(self):
        self.settings = Settings()

    def test_initial_defaults(self):
        assert self.settings["CATEGORY_DEFAULT"] == "Other"
        assert self.settings["APPLICATIONS_DIR"] == "applications"
        assert self.settings["DIRECTORIES_DIR"] == "desktop-directories"
        assert self.settings.getlist("CATEGORY_RESERVED") == [
            "Sceensaver",
            "TrayIcon",
            "Applet",
            "Shell",
        ]

    def test_initial_values(self):
        settings = Settings({"TEST_OPTION": "value"}, 10)
        assert settings["TEST_OPTION"] == "value"
        assert settings.getpriority("TEST_OPTION") == 10

    def test_default_dicts_are_promoted(self):
        renames = self.settings["CATEGORY_RENAMES"]
        assert isinstance(renames, BaseSettings)
        assert self.settings.getdict("CATEGORY_RENAMES") == {
            "Utility": "Accessories",
            "System": "System Tools",
        }

    def test_dict_setting_from_cmdline(self):
        self.settings.set("CATEGORY_RENAMES", '{"Game": "Games"}', "cmdline")
        assert self.settings.getdict("CATEGORY_RENAMES") == {"Game": "Games"}

    def test_lower_priority_does_not_override(self):
        self.settings.set("LOG_LEVEL", "DEBUG", "cmdline")
        self.settings.setdict({"LOG_LEVEL": "WARNING"}, "command")
        assert self.settings["LOG_LEVEL"] == "DEBUG"
