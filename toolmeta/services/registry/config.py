"""Configuration for the tool metadata registry."""

from dataclasses import dataclass, field
from pathlib import Path

from toolmeta.lib.config_manager import config


# Bundled registry shipped with the package
BUNDLED_REGISTRY_PATH = Path(__file__).parent / "data" / "tool_registry.json"

# Category page slugs; every tool's category must be one of these
TOOL_CATEGORIES: tuple[str, ...] = (
    "convert-case-tools",
    "text-modification-formatting",
    "code-data-translation",
    "image-tools",
    "random-generators",
    "analysis-counter-tools",
    "social-media-text-generators",
    "misc-tools",
)

# Recommended text lengths (inclusive) for search snippets
META_LIMITS: dict[str, tuple[int, int]] = {
    "title": (30, 60),
    "short_description": (40, 140),
    "long_description": (80, 160),
}


def category_page_path(category: str) -> str:
    """Bare path of the listing page for a category."""
    return f"/category/{category}"


def get_registry_path() -> Path:
    """Registry file from TOOLMETA_REGISTRY_PATH, or the bundled one."""
    configured = config.get("TOOLMETA_REGISTRY_PATH")
    return Path(configured) if configured else BUNDLED_REGISTRY_PATH


@dataclass
class RegistryConfig:
    """Configuration for loading a registry.

    Attributes:
        registry_path: JSON file holding the entries
        categories: Known category enumeration
    """

    registry_path: Path = field(default_factory=get_registry_path)
    categories: tuple[str, ...] = TOOL_CATEGORIES
