"""This module contains the default values for all settings used by menuprobe.

menuprobe developers, if you add a setting here remember to:

* add it in alphabetical order, with the exception that enabling flags and
  other high-level settings for a group should come first in their group
* group similar settings without leaving blank lines
* document it in the README
"""

__all__ = [
    "APPLICATIONS_DIR",
    "APPLICATION_SUFFIX",
    "CATEGORY_DEFAULT",
    "CATEGORY_RENAMES",
    "CATEGORY_RESERVED",
    "CHECK_IGNORE_KEYS",
    "DATA_DIRS",
    "DATA_HOME",
    "DIRECTORIES_DIR",
    "DIRECTORY_SUFFIX",
    "LOG_DATEFORMAT",
    "LOG_ENABLED",
    "LOG_ENCODING",
    "LOG_FILE",
    "LOG_FILE_APPEND",
    "LOG_FORMAT",
    "LOG_LEVEL",
]

APPLICATIONS_DIR = "applications"
APPLICATION_SUFFIX = ".desktop"

CATEGORY_DEFAULT = "Other"
# Renamed by the panel before they reach a menu, e.g. entries declaring
# "Utility" show up under "Accessories".
CATEGORY_RENAMES = {
    "Utility": "Accessories",
    "System": "System Tools",
}
# "Sceensaver" is spelled the way the menu code spells it
CATEGORY_RESERVED = ["Sceensaver", "TrayIcon", "Applet", "Shell"]

# Keys skipped when an overridden .desktop file is compared with the one that
# overrides it
CHECK_IGNORE_KEYS = r"^(Comment|_Path|_File|Categories|GenericName\[|Name\[)"

# None means read XDG_DATA_HOME / XDG_DATA_DIRS from the environment
DATA_DIRS = None
DATA_HOME = None

DIRECTORIES_DIR = "desktop-directories"
DIRECTORY_SUFFIX = ".directory"

LOG_ENABLED = True
LOG_DATEFORMAT = "%Y-%m-%d %H:%M:%S"
LOG_ENCODING = "utf-8"
LOG_FILE = None
LOG_FILE_APPEND = True
LOG_FORMAT = "%(levelname)s: %(message)s"
LOG_LEVEL = "INFO"
