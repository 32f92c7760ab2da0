"""Configuration for evalconsole.

Usage:
    from evalconsole.config import get_settings

    if get_settings().audit.enabled:
        ...
"""

from functools import lru_cache

from evalconsole.config.settings import Settings, load_toml_config, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load TOML files once and build the process-wide Settings.

    Call ``reload_settings()`` after changing files or environment.
    """
    set_toml_config(load_toml_config())
    return Settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
