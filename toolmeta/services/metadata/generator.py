"""Compose locale, registry and site configuration into page metadata.

generate_tool_metadata() is total for expected input: unknown ids, unknown
locales and degenerate paths all produce a complete ResolvedMetadata.

Example:
    >>> from toolmeta.services.metadata import generate_tool_metadata
    >>> meta = generate_tool_metadata("uppercase", locale="de", pathname="/de/tools/uppercase")
    >>> meta.canonical_url
    'https://textcaseconverter.net/de/tools/uppercase'
"""

import logging
from typing import Any, Mapping, Optional

from toolmeta.services.locales import Locale, get_locale_from_pathname
from toolmeta.services.registry import (
    LocalizedToolView,
    RegistryHandle,
    get_registry,
    get_tool_metadata_localized,
)

from .config import SiteConfig
from .jsonld import JsonLdContext, build_json_ld
from .models import Alternates, OgImage, OpenGraph, ResolvedMetadata, TwitterCard
from .urls import build_absolute_url, generate_canonical_url, generate_hreflang_links, hreflang_map

logger = logging.getLogger(__name__)

NOT_FOUND_TITLE = "Tool Not Found"
NOT_FOUND_DESCRIPTION = "The requested tool could not be found."
NOT_FOUND_PATH = "/not-found"

ROBOTS_INDEX = "index, follow"
ROBOTS_NOINDEX = "noindex, follow"

# Fields a caller may override after fallback resolution
OVERRIDABLE_FIELDS = (
    "title",
    "short_description",
    "long_description",
    "keywords",
    "alternate_title",
    "og_image",
)


def _apply_overrides(view: LocalizedToolView, overrides: Optional[Mapping[str, Any]]) -> LocalizedToolView:
    if not overrides:
        return view
    update = {}
    for key, value in overrides.items():
        if key not in OVERRIDABLE_FIELDS:
            logger.warning(f"Ignoring unknown metadata override {key!r} for {view.id}")
            continue
        if value is not None:
            update[key] = value
    if not update:
        return view
    return LocalizedToolView.model_validate({**dict(view), **update})


def _og_locale(locale: Locale) -> str:
    return locale.og_locale or locale.html_lang_code.replace("-", "_")


def _images(image: Optional[str], alt: str, site: SiteConfig) -> list[OgImage]:
    if image:
        return [OgImage(url=build_absolute_url(site.base_url, image), alt=alt)]
    return [
        OgImage(
            url=build_absolute_url(site.base_url, site.default_og_image),
            width=site.og_image_width,
            height=site.og_image_height,
            alt=alt,
        )
    ]


def generate_tool_metadata(
    tool_id: str,
    locale: Optional[str] = None,
    pathname: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    handle: Optional[RegistryHandle] = None,
    site: Optional[SiteConfig] = None,
) -> ResolvedMetadata:
    """Build complete metadata for a registry entry.

    Args:
        tool_id: Registry key
        locale: Locale code; detected from `pathname` when omitted, unknown
            codes resolve to the default locale
        pathname: Request path; defaults to the entry's own path
        overrides: Localized fields applied after fallback resolution
        handle: Registry to read (defaults to the shared registry)
        site: Site configuration (defaults to values from config)

    Returns:
        ResolvedMetadata. Unknown ids get the not-found title and
        description, `noindex` robots and no JSON-LD.

    Raises:
        pydantic.ValidationError: If an override has the wrong type
            (e.g. a string for `keywords`)
    """
    if handle is None:
        handle = get_registry()
    if site is None:
        site = SiteConfig()
    table = handle.locales

    if locale is None:
        locale = get_locale_from_pathname(pathname, table) if pathname else table.default.code
    active = table.resolve(locale)

    view = get_tool_metadata_localized(tool_id, active.code, handle)
    if view is None:
        logger.info(f"No registry entry for {tool_id!r}; emitting not-found metadata")
    else:
        view = _apply_overrides(view, overrides)

    if pathname is None:
        pathname = view.path if view is not None else NOT_FOUND_PATH

    canonical_url = build_absolute_url(site.base_url, generate_canonical_url(pathname, active.code, table))
    links = generate_hreflang_links(pathname, site.base_url, table)

    if view is None:
        title = NOT_FOUND_TITLE
        description = NOT_FOUND_DESCRIPTION
        social_title = title
        keywords: list[str] = []
        image = None
        robots = ROBOTS_NOINDEX
    else:
        title = view.title
        description = view.long_description or view.short_description
        social_title = view.alternate_title or view.title
        keywords = list(view.keywords or [])
        image = view.og_image
        robots = ROBOTS_INDEX

    images = _images(image, social_title, site)

    json_ld = None
    if view is not None and view.schema_ is not None:
        json_ld = build_json_ld(
            JsonLdContext(
                schema=view.schema_,
                view=view,
                description=description,
                canonical_url=canonical_url,
                base_url=site.base_url,
                site_name=site.site_name,
                html_lang=active.html_lang_code,
            )
        )

    return ResolvedMetadata(
        title=title,
        description=description,
        keywords=keywords,
        locale=active.code,
        html_lang=active.html_lang_code,
        robots=robots,
        canonical_url=canonical_url,
        alternate_links=links,
        alternates=Alternates(canonical=canonical_url, languages=hreflang_map(links)),
        open_graph=OpenGraph(
            title=social_title,
            description=description,
            locale=_og_locale(active),
            alternate_locale=[_og_locale(other) for other in table if other.code != active.code],
            url=canonical_url,
            site_name=site.site_name,
            images=images,
        ),
        twitter=TwitterCard(
            title=social_title,
            description=description,
            images=[img.url for img in images],
            site=site.twitter_site or None,
        ),
        json_ld=json_ld,
    )
