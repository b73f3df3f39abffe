"""Read-side queries over the registry.

Localized content is resolved field by field along an explicit fallback
chain: the requested locale, then the default locale. A field is taken from
the first locale in the chain that provides a non-empty value; optional
fields stay None when no locale does.
"""

import logging
from typing import Optional

from .handle import RegistryHandle
from .loader import get_registry
from .models import LocalizedToolView, MetadataEntrySummary

logger = logging.getLogger(__name__)

# Fields resolved through the fallback chain, in resolution order
REQUIRED_FIELDS = ("title", "short_description")
OPTIONAL_FIELDS = ("long_description", "keywords", "alternate_title", "og_image")


def fallback_chain(locale: Optional[str], handle: Optional[RegistryHandle] = None) -> list[str]:
    """Ordered locales tried when resolving a field.

    Unknown locales are dropped, so the chain always ends at the default
    locale and never has more than two members.

    Examples:
        >>> fallback_chain("de")
        ['de', 'en']
        >>> fallback_chain("en")
        ['en']
        >>> fallback_chain("xx")
        ['en']
    """
    if handle is None:
        handle = get_registry()
    default_code = handle.locales.default.code
    chain = []
    if locale in handle.locales and locale != default_code:
        chain.append(locale)
    chain.append(default_code)
    return chain


def has_tool(tool_id: str, handle: Optional[RegistryHandle] = None) -> bool:
    """Check whether the registry defines `tool_id`."""
    if handle is None:
        handle = get_registry()
    return tool_id in handle


def get_tool_metadata_localized(
    tool_id: str,
    locale: Optional[str],
    handle: Optional[RegistryHandle] = None,
) -> Optional[LocalizedToolView]:
    """Resolve an entry's prose for `locale`.

    Args:
        tool_id: Registry key
        locale: Requested locale code (unknown codes act as the default)
        handle: Registry to read (defaults to the shared registry)

    Returns:
        LocalizedToolView, or None when `tool_id` is not registered
    """
    if handle is None:
        handle = get_registry()
    entry = handle.get(tool_id)
    if entry is None:
        logger.debug(f"Registry miss for tool id {tool_id!r}")
        return None

    chain = fallback_chain(locale, handle)
    resolved: dict[str, object] = {}
    sources: dict[str, str] = {}

    for field_name in REQUIRED_FIELDS + OPTIONAL_FIELDS:
        for code in chain:
            content = entry.localized_content.get(code)
            value = getattr(content, field_name, None) if content else None
            if value:
                # Views own their lists; registry tuples stay untouched
                resolved[field_name] = list(value) if isinstance(value, tuple) else value
                sources[field_name] = code
                break

    for field_name in REQUIRED_FIELDS:
        # Only reachable on a registry the validator rejects
        resolved.setdefault(field_name, "")

    return LocalizedToolView(
        id=entry.id,
        locale=chain[0],
        path=entry.path,
        kind=entry.kind,
        category=entry.category,
        schema=entry.schema_,
        related_tools=list(entry.related_tools),
        field_sources=sources,
        **resolved,
    )


def get_all_metadata_entries(handle: Optional[RegistryHandle] = None) -> list[MetadataEntrySummary]:
    """Flat inventory of every entry, ordered by id then definition order."""
    if handle is None:
        handle = get_registry()
    summaries = [
        MetadataEntrySummary(
            id=entry.id,
            category=entry.category,
            path=entry.path,
            kind=entry.kind,
            available_locales=[code for code in handle.locales.codes if code in entry.localized_content]
            + sorted(code for code in entry.localized_content if code not in handle.locales),
        )
        for entry in handle
    ]
    return sorted(summaries, key=lambda summary: summary.id)
