"""Page metadata generation: canonical URLs, hreflang, Open Graph, JSON-LD, sitemap.

Example:
    >>> from toolmeta.services.metadata import generate_tool_metadata
    >>> meta = generate_tool_metadata("uppercase", pathname="/de/tools/uppercase")
    >>> meta.alternates.languages["x-default"]
    'https://textcaseconverter.net/tools/uppercase'
"""

from .models import (
    AlternateLink,
    Alternates,
    OgImage,
    OpenGraph,
    ResolvedMetadata,
    TwitterCard,
)
from .config import SiteConfig, get_base_url, normalize_base_url
from .urls import (
    X_DEFAULT,
    build_absolute_url,
    generate_canonical_url,
    generate_hreflang_links,
    hreflang_map,
)
from .jsonld import JSONLD_RULES, JsonLdContext, build_json_ld
from .generator import (
    NOT_FOUND_DESCRIPTION,
    NOT_FOUND_TITLE,
    generate_tool_metadata,
)
from .sitemap import SitemapEntry, build_sitemap, render_sitemap_xml

__all__ = [
    # Models
    "AlternateLink",
    "Alternates",
    "OgImage",
    "OpenGraph",
    "ResolvedMetadata",
    "TwitterCard",
    # Configuration
    "SiteConfig",
    "get_base_url",
    "normalize_base_url",
    # URLs
    "X_DEFAULT",
    "build_absolute_url",
    "generate_canonical_url",
    "generate_hreflang_links",
    "hreflang_map",
    # JSON-LD
    "JSONLD_RULES",
    "JsonLdContext",
    "build_json_ld",
    # Generator
    "NOT_FOUND_DESCRIPTION",
    "NOT_FOUND_TITLE",
    "generate_tool_metadata",
    # Sitemap
    "SitemapEntry",
    "build_sitemap",
    "render_sitemap_xml",
]
