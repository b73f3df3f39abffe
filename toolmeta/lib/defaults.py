"""Default configuration values for the metadata engine.

All hardcoded defaults live here. The engine is fully functional with these
defaults; an environment variable or `.env` entry of the same name overrides
any of them.

Config hierarchy: .env / environment → these defaults
"""

from typing import Any

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULTS: dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Site identity
    # -------------------------------------------------------------------------
    "SITE_BASE_URL": "https://textcaseconverter.net",
    "SITE_NAME": "Text Case Converter",
    "TWITTER_SITE": "@textcaseconverter",

    # -------------------------------------------------------------------------
    # Social images
    # -------------------------------------------------------------------------
    "DEFAULT_OG_IMAGE": "/images/og-default.jpg",
    "OG_IMAGE_WIDTH": 1200,
    "OG_IMAGE_HEIGHT": 630,

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------
    "TOOLMETA_REGISTRY_PATH": "",  # Empty = bundled data/tool_registry.json

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    "LOG_LEVEL": "INFO",
}


# =============================================================================
# Config Categories (for the `toolmeta config` listing)
# =============================================================================

CONFIG_CATEGORIES = {
    "site": [
        "SITE_BASE_URL",
        "SITE_NAME",
        "TWITTER_SITE",
    ],
    "images": [
        "DEFAULT_OG_IMAGE",
        "OG_IMAGE_WIDTH",
        "OG_IMAGE_HEIGHT",
    ],
    "registry": [
        "TOOLMETA_REGISTRY_PATH",
    ],
    "logging": [
        "LOG_LEVEL",
    ],
}


def get_default(key: str) -> Any:
    """Get the default value for a config key.

    Args:
        key: Configuration key name

    Returns:
        Default value, or None if key not found
    """
    return DEFAULTS.get(key)
