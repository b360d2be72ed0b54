import os
from importlib import resources
from pathlib import Path
from typing import Any, Optional

import tomli as toml

from cgobind import logging as cgobind_logging

logger = cgobind_logging.get_logger(__name__)

CONFIG_ENV_VAR = "CGOBIND_CONFIG"
CONFIG_FILE_NAME = "cgobind.toml"
_DEFAULT_CONFIG_NAME = "cgobind.default.toml"


def _merge_configs(config: dict, default_config: dict) -> dict:
    """Overlay ``config`` on ``default_config``, table by table.

    A key that is a table on one side and a scalar on the other is a
    configuration error.
    """
    merged = dict(default_config)
    for key, value in config.items():
        base = merged.get(key)
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(base, dict):
            merged[key] = _merge_configs(value, base)
        elif isinstance(value, dict) or isinstance(base, dict):
            raise TypeError(f"Config key '{key}' is {type(value).__name__} "
                            f"but the default is {type(base).__name__}")
        else:
            merged[key] = value
    return merged


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return toml.load(f)


def load_default_config() -> dict[str, Any]:
    """Load the configuration bundled in ``cgobind/_resources``."""
    resource = resources.files("cgobind").joinpath("_resources", _DEFAULT_CONFIG_NAME)
    if not resource.is_file():
        raise FileNotFoundError(f"Could not load _resources/{_DEFAULT_CONFIG_NAME}")
    with resource.open("rb") as f:
        return toml.load(f)


def _find_user_config(config_file: Optional[str]) -> Optional[Path]:
    if config_file:
        path = Path(config_file).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"Could not find config file {path}")
        return path

    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        path = Path(from_env).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR}={from_env} does not point to a readable file")
        return path

    path = Path.cwd() / CONFIG_FILE_NAME
    return path if path.is_file() else None


def try_load_config(config_file: Optional[str] = None) -> dict[str, Any]:
    """Return the user configuration merged over the bundled defaults.

    The user file is the first of: ``config_file``, ``$CGOBIND_CONFIG``,
    ``./cgobind.toml``. Without one, the defaults are returned as is.
    """
    default_config = load_default_config()
    path = _find_user_config(config_file)
    if path is None:
        logger.debug("No %s found; using the bundled defaults", CONFIG_FILE_NAME)
        return default_config
    logger.debug("Loading configuration from %s", path)
    return _merge_configs(_read_toml(path), default_config)
