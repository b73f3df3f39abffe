"""Unified configuration manager with hierarchy: .env → environment → defaults.

This module provides a centralized way to access configuration values
that supports:
1. Infrastructure-as-code via .env at the git root (loaded once)
2. Plain process environment (CI, containers)
3. Sensible hardcoded defaults (the engine works out of the box)

Usage:
    from toolmeta.lib.config_manager import config

    base_url = config.get("SITE_BASE_URL")
    width = config.get("OG_IMAGE_WIDTH")  # coerced to int
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from toolmeta.lib.defaults import DEFAULTS, get_default

logger = logging.getLogger(__name__)


def _find_git_root(start_path: Optional[Path] = None) -> Path:
    """Walk up directory tree to find .git/ folder."""
    current = start_path or Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    raise FileNotFoundError("No .git directory found in any parent directory")


def _coerce_type(value: str, default: Any) -> Any:
    """Coerce string value to match the type of the default.

    Args:
        value: String value from the environment
        default: Default value (determines target type)

    Returns:
        Value coerced to appropriate type
    """
    if default is None:
        return value

    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes", "on")
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    if isinstance(default, float):
        try:
            return float(value)
        except ValueError:
            return default
    return value


class ConfigManager:
    """Manages configuration with .env → environment → defaults hierarchy.

    The manager loads .env lazily on first access so importing the engine
    never touches the filesystem.
    """

    def __init__(self, load_env: bool = True):
        self._env_loaded = not load_env

    def _load_env(self) -> None:
        """Load .env file from git root."""
        if self._env_loaded:
            return

        try:
            git_root = _find_git_root()
            env_path = git_root / ".env"
            if env_path.exists():
                # Process environment takes precedence over .env
                load_dotenv(dotenv_path=env_path, override=False)
                logger.debug(f"Loaded .env from {env_path}")
            else:
                logger.debug(f"No .env file found at {env_path}")
        except FileNotFoundError:
            logger.debug("Could not find git root, .env not loaded")

        self._env_loaded = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value (.env / environment → defaults).

        Args:
            key: Configuration key
            default: Override default (uses DEFAULTS if not provided)

        Returns:
            Configuration value
        """
        self._load_env()

        env_value = os.getenv(key)
        if env_value is not None:
            default_val = default if default is not None else get_default(key)
            return _coerce_type(env_value, default_val)

        if default is not None:
            return default
        return get_default(key)

    def get_all(self) -> dict[str, Any]:
        """Get all configuration values.

        Returns:
            Dictionary of all config keys and their resolved values
        """
        return {key: self.get(key) for key in DEFAULTS}


# Singleton instance
config = ConfigManager()


def get_config(key: str, default: Any = None) -> Any:
    """Get config value from the shared manager."""
    return config.get(key, default)
