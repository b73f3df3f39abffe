"""Shared pytest fixtures for service tests."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from toolmeta.services.locales import DEFAULT_LOCALE_TABLE, LocaleTable
from toolmeta.services.metadata import SiteConfig
from toolmeta.services.registry import RegistryHandle, build_registry


# =============================================================================
# Registry data
# =============================================================================

CLEAN_ENTRIES: list[dict[str, Any]] = [
    {
        "id": "home",
        "path": "/",
        "kind": "page",
        "localized_content": {
            "en": {"title": "Example Tools", "short_description": "Free text tools."},
        },
    },
    {
        "id": "convert-case-tools",
        "path": "/category/convert-case-tools",
        "kind": "category",
        "category": "convert-case-tools",
        "localized_content": {
            "en": {"title": "Convert Case Tools", "short_description": "Change text case."},
            "de": {"title": "Groß-/Kleinschreibung", "short_description": "Schreibweise ändern."},
        },
        "schema": {
            "type": "CollectionPage",
            "application_category": "UtilityApplication",
            "number_of_items": 2,
            "url": "/category/convert-case-tools",
        },
    },
    {
        "id": "uppercase",
        "path": "/tools/uppercase",
        "kind": "tool",
        "category": "convert-case-tools",
        "localized_content": {
            "en": {
                "title": "Uppercase Converter",
                "short_description": "Convert text to uppercase.",
                "long_description": "Convert any text to UPPERCASE letters instantly in your browser.",
                "keywords": ["uppercase", "all caps"],
            },
            "de": {
                "title": "Großbuchstaben",
                "short_description": "Text in Großbuchstaben umwandeln.",
                "long_description": "Wandeln Sie beliebigen Text sofort in GROSSBUCHSTABEN um.",
                "keywords": ["großbuchstaben"],
            },
        },
        "schema": {
            "type": "WebApplication",
            "application_category": "UtilityApplication",
            "features": ["Instant conversion"],
            "aggregate_rating": {"rating_value": "4.8", "review_count": "1250"},
            "potential_action": {"target": "/tools/uppercase", "object": "Text Input", "result": "Uppercase Text"},
        },
        "related_tools": ["lowercase"],
    },
    {
        "id": "lowercase",
        "path": "/tools/lowercase",
        "kind": "tool",
        "category": "convert-case-tools",
        "localized_content": {
            "en": {"title": "Lowercase Converter", "short_description": "Convert text to lowercase."},
        },
    },
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def locale_table() -> LocaleTable:
    """The site locale table (en default, ru, de)."""
    return DEFAULT_LOCALE_TABLE


@pytest.fixture
def clean_entries() -> list[dict[str, Any]]:
    """Registry entries that validate with zero issues (safe to mutate)."""
    return copy.deepcopy(CLEAN_ENTRIES)


@pytest.fixture
def clean_registry(clean_entries) -> RegistryHandle:
    """RegistryHandle built from clean_entries."""
    return build_registry(clean_entries)


@pytest.fixture
def registry_file(tmp_path, clean_entries) -> Path:
    """clean_entries written as a registry JSON file."""
    path = tmp_path / "tool_registry.json"
    path.write_text(
        json.dumps({"version": "test", "entries": clean_entries}, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def site() -> SiteConfig:
    """Site configuration independent of the environment."""
    return SiteConfig(
        base_url="https://example.com",
        site_name="Example Tools",
        default_og_image="/images/og-default.jpg",
        og_image_width=1200,
        og_image_height=630,
        twitter_site="@example",
    )
