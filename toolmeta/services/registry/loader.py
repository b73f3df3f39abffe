"""Load the tool registry from JSON and hold the process-wide instance.

The registry file looks like:

    {
      "version": "v3",
      "entries": [
        {
          "id": "uppercase",
          "path": "/tools/uppercase",
          "kind": "tool",
          "category": "convert-case-tools",
          "localized_content": {
            "en": {"title": "...", "short_description": "..."},
            "de": {"title": "..."}
          },
          "schema": {"type": "WebApplication", "application_category": "UtilityApplication"}
        }
      ]
    }

The shared instance is built once behind a lock; reloading builds a new
handle and swaps the reference, so readers never see a half-built table.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from toolmeta.services.locales import DEFAULT_LOCALE_TABLE, LocaleTable

from .config import RegistryConfig
from .handle import RegistryHandle
from .models import ToolMetadataEntry

logger = logging.getLogger(__name__)


class RegistryLoadError(RuntimeError):
    """Raised when a registry file cannot be read or parsed."""


def build_registry(
    entries: Iterable[ToolMetadataEntry | dict[str, Any]],
    locales: Optional[LocaleTable] = None,
    categories: Optional[Iterable[str]] = None,
) -> RegistryHandle:
    """Build an immutable registry from models or plain dicts.

    Args:
        entries: Entries in definition order
        locales: Locale table (defaults to the site table)
        categories: Known categories (defaults to TOOL_CATEGORIES)

    Raises:
        RegistryLoadError: If a dict entry fails model validation
    """
    models: list[ToolMetadataEntry] = []
    for position, raw in enumerate(entries):
        if isinstance(raw, ToolMetadataEntry):
            models.append(raw)
            continue
        try:
            models.append(ToolMetadataEntry.model_validate(raw))
        except ValidationError as e:
            entry_id = raw.get("id", "?") if isinstance(raw, dict) else "?"
            raise RegistryLoadError(f"Invalid registry entry #{position} ({entry_id}): {e}") from e

    kwargs: dict[str, Any] = {"locales": locales or DEFAULT_LOCALE_TABLE}
    if categories is not None:
        kwargs["categories"] = tuple(categories)
    return RegistryHandle(entries=tuple(models), **kwargs)


def load_registry(
    path: Optional[Path] = None,
    locales: Optional[LocaleTable] = None,
    categories: Optional[Iterable[str]] = None,
) -> RegistryHandle:
    """Load a registry JSON file.

    Args:
        path: Registry file (defaults to RegistryConfig().registry_path)
        locales: Locale table to attach
        categories: Known categories (defaults to RegistryConfig().categories)

    Returns:
        Loaded RegistryHandle

    Raises:
        RegistryLoadError: If the file is missing, unreadable, not JSON, or malformed
    """
    registry_config = RegistryConfig()
    path = Path(path) if path else registry_config.registry_path

    if not path.exists():
        raise RegistryLoadError(f"Registry file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RegistryLoadError(f"Registry file is not valid JSON: {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryLoadError(f"Registry file could not be read: {path}: {e}") from e

    raw_entries = data.get("entries") if isinstance(data, dict) else data
    if not isinstance(raw_entries, list):
        raise RegistryLoadError(f"Registry file has no 'entries' list: {path}")

    handle = build_registry(
        raw_entries,
        locales=locales,
        categories=categories if categories is not None else registry_config.categories,
    )
    logger.info(f"Loaded {len(handle)} registry entries from {path}")
    return handle


# Shared instance
_default_registry: Optional[RegistryHandle] = None
_registry_lock = threading.Lock()


def get_registry() -> RegistryHandle:
    """Get or load the process-wide registry."""
    global _default_registry
    if _default_registry is None:
        with _registry_lock:
            if _default_registry is None:
                _default_registry = load_registry()
    return _default_registry


def reload_registry(path: Optional[Path] = None) -> RegistryHandle:
    """Load a fresh registry and swap it in for subsequent readers."""
    global _default_registry
    handle = load_registry(path)
    with _registry_lock:
        _default_registry = handle
    return handle
