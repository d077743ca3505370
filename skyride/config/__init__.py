"""Configuration loading for SkyRide.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from skyride.config import get_settings

    settings = get_settings()
    min_age = settings.registration.min_age
"""

from functools import lru_cache
from pathlib import Path

from skyride.config.loader import load_config
from skyride.config.settings import Settings, set_toml_config


def load_settings(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> Settings:
    """Build Settings from the TOML layers plus SKYRIDE_* variables."""
    set_toml_config(load_config(config_dir, environment))
    return Settings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    return load_settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "load_settings", "reload_settings", "Settings"]
