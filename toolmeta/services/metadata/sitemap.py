"""Sitemap entries and XML for every registry entry in every locale."""

import xml.etree.ElementTree as ET
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from toolmeta.services.locales import normalize_pathname
from toolmeta.services.registry import EntryKind, RegistryHandle, ToolMetadataEntry, get_registry

from .config import get_base_url, normalize_base_url
from .models import AlternateLink
from .urls import build_absolute_url, generate_canonical_url, generate_hreflang_links

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

HOME_PRIORITY = 0.8
PRIORITY_BY_KIND = {
    EntryKind.CATEGORY: 0.7,
    EntryKind.TOOL: 0.6,
    EntryKind.PAGE: 0.5,
}
CHANGE_FREQUENCY_BY_KIND = {
    EntryKind.CATEGORY: "weekly",
    EntryKind.TOOL: "weekly",
    EntryKind.PAGE: "monthly",
}


class SitemapEntry(BaseModel):
    """One `<url>` element."""

    url: str
    change_frequency: str
    priority: float
    last_modified: Optional[str] = None
    alternates: list[AlternateLink] = Field(default_factory=list)


def _priority(entry: ToolMetadataEntry) -> float:
    if normalize_pathname(entry.path) == "/":
        return HOME_PRIORITY
    return PRIORITY_BY_KIND[EntryKind(entry.kind)]


def build_sitemap(
    handle: Optional[RegistryHandle] = None,
    base_url: Optional[str] = None,
    last_modified: Optional[str] = None,
) -> list[SitemapEntry]:
    """One entry per (registry entry, locale).

    Entries are ordered by id, then locale table order. Duplicate ids
    contribute only their first definition.

    Args:
        handle: Registry to read (defaults to the shared registry)
        base_url: Absolute origin (defaults to SITE_BASE_URL)
        last_modified: W3C date applied to every entry, omitted when None
    """
    if handle is None:
        handle = get_registry()
    base_url = get_base_url() if base_url is None else normalize_base_url(base_url)

    entries: list[SitemapEntry] = []
    for tool_id in handle.ids:
        entry = handle.get(tool_id)
        alternates = generate_hreflang_links(entry.path, base_url, handle.locales)
        for locale in handle.locales:
            entries.append(
                SitemapEntry(
                    url=build_absolute_url(base_url, generate_canonical_url(entry.path, locale.code, handle.locales)),
                    change_frequency=CHANGE_FREQUENCY_BY_KIND[EntryKind(entry.kind)],
                    priority=_priority(entry),
                    last_modified=last_modified,
                    alternates=alternates,
                )
            )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    """Serialize entries as a sitemaps.org `urlset` with xhtml:link alternates."""
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS, "xmlns:xhtml": XHTML_NS})
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        if entry.last_modified:
            ET.SubElement(url, "lastmod").text = entry.last_modified
        ET.SubElement(url, "changefreq").text = entry.change_frequency
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
        for link in entry.alternates:
            ET.SubElement(url, "xhtml:link", {"rel": "alternate", "hreflang": link.hreflang, "href": link.href})

    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(urlset, encoding="unicode") + "\n"
