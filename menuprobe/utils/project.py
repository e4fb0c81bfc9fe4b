import os
import warnings
from importlib import import_module

from menuprobe.settings import Settings

ENVVAR = "MENUPROBE_SETTINGS_MODULE"


def settings_module_available() -> bool:
    settings_module = os.environ.get(ENVVAR)
    if not settings_module:
        return False
    try:
        import_module(settings_module)
    except ImportError as exc:
        warnings.warn(f"Cannot import menuprobe settings module {settings_module}: {exc}")
        return False
    return True


def get_settings() -> Settings:
    settings = Settings()
    if settings_module_available():
        settings.setmodule(os.environ[ENVVAR], priority="project")
    return settings
