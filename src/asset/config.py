"""
Environment configuration.

Values come from the process environment, optionally seeded from a `.env`
file found from the current working directory upwards. Variables already set
in the process win over the file.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union
import logging
import os

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigError(KeyError):
    """A required environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Env variable not found: {self.name}"


def load_env(path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """
    Load a `.env` file into os.environ.

    Args:
        path: explicit file; when None, search upwards from the cwd
        override: let file values replace variables already set

    Returns:
        True if a file was found and loaded
    """
    env_file = Path(path) if path is not None else find_dotenv(usecwd=True)
    if not env_file or not Path(env_file).is_file():
        logger.debug("No .env file found, using process environment only")
        return False

    loaded = load_dotenv(env_file, override=override)
    logger.debug("Loaded environment from %s", env_file)
    return loaded


@lru_cache(maxsize=1)
def _load_default_env() -> bool:
    return load_env()


def get_var(name: str, default=_MISSING) -> str:
    """
    Value of an environment variable.

    The default `.env` file is loaded on first use, once per process.

    Raises:
        ConfigError: variable not set and no default given
    """
    _load_default_env()

    value = os.environ.get(name)
    if value is not None:
        return value
    if default is not _MISSING:
        return default

    logger.warning("Env variable not found: %s", name)
    raise ConfigError(name)
