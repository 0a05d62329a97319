"""Environment helpers backed by python-dotenv."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def load_env_file(path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """Load a ``.env`` file into ``os.environ``.

    Args:
        path: Explicit file to load. When omitted the nearest ``.env`` found by
            walking up from the working directory is used.
        override: Whether values in the file replace existing variables.

    Returns:
        True if a file was found and loaded.
    """
    env_path = str(path) if path is not None else find_dotenv(usecwd=True)
    if not env_path or not Path(env_path).is_file():
        logger.debug("No .env file found")
        return False

    loaded = load_dotenv(env_path, override=override)
    logger.debug(f"Loaded environment from {env_path}")
    return loaded


def get_env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {value!r}")
        return default
