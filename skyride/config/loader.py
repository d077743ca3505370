"""Locate and merge SkyRide's TOML configuration layers.

``config/default.toml`` is required. ``config/{SKYRIDE_ENV}.toml``, when
present, is merged over it table by table, so an environment file only needs
the keys it changes (e.g. ``[registration] min_age = 21``). ``SKYRIDE_*``
environment variables are applied afterwards by Settings.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from skyride.observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_VAR = "SKYRIDE_CONFIG_DIR"
ENVIRONMENT_VAR = "SKYRIDE_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LAYER = "default.toml"


def find_config_dir(start: Path | None = None) -> Path:
    """Return SKYRIDE_CONFIG_DIR, or the nearest ``config/`` holding default.toml.

    The search starts at ``start`` (the working directory by default) and
    walks up through its parents.
    """
    configured = os.environ.get(CONFIG_DIR_VAR)
    if configured:
        path = Path(configured)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_VAR} does not exist: {configured}")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / "config"
        if (candidate / DEFAULT_LAYER).is_file():
            return candidate
    return here / "config"


def config_layers(config_dir: Path, environment: str | None = None) -> list[Path]:
    """TOML files to merge, lowest precedence first."""
    default = config_dir / DEFAULT_LAYER
    if not default.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default}. "
            f"Create it or point {CONFIG_DIR_VAR} at a directory holding it."
        )

    environment = environment or os.environ.get(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    layers = [default]
    overlay = config_dir / f"{environment}.toml"
    if overlay != default and overlay.is_file():
        layers.append(overlay)
    return layers


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Merge every configuration layer into one dictionary.

    Raises:
        FileNotFoundError: If there is no default.toml
        tomllib.TOMLDecodeError: If a layer is not valid TOML
    """
    layers = config_layers(config_dir or find_config_dir(), environment)

    config: dict[str, Any] = {}
    for layer in layers:
        with layer.open("rb") as f:
            config = deep_merge(config, tomllib.load(f))

    logger.debug("config_loaded", layers=[layer.name for layer in layers])
    return config
