"""Canonical URLs and hreflang alternates.

generate_canonical_url() is the only place a localized path is produced for
metadata; everything downstream (hreflang, Open Graph, sitemap) goes through
it. Absolute URLs are the normalized base URL followed by that path, so the
root of the default locale is `{base}/` and the root of any other locale is
`{base}/{code}`.
"""

from typing import Optional

from toolmeta.services.locales import (
    DEFAULT_LOCALE_TABLE,
    LocaleTable,
    get_locale_from_pathname,
    get_localized_pathname,
)

from .config import get_base_url, normalize_base_url
from .models import AlternateLink

X_DEFAULT = "x-default"


def generate_canonical_url(
    pathname: str,
    locale: Optional[str] = None,
    table: Optional[LocaleTable] = None,
) -> str:
    """Canonical path for `pathname` served in `locale`.

    When `locale` is None the locale is detected from `pathname` itself.

    Examples:
        >>> generate_canonical_url("/de/tools/uppercase/", "de")
        '/de/tools/uppercase'
        >>> generate_canonical_url("/de/tools/uppercase", "en")
        '/tools/uppercase'
    """
    table = table or DEFAULT_LOCALE_TABLE
    if locale is None:
        locale = get_locale_from_pathname(pathname, table)
    return get_localized_pathname(pathname, locale, table)


def build_absolute_url(base_url: str, path: str) -> str:
    """Join an origin and a path; absolute URLs pass through unchanged."""
    if path.startswith(("http://", "https://")):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return base_url.rstrip("/") + path


def generate_hreflang_links(
    pathname: str,
    base_url: Optional[str] = None,
    table: Optional[LocaleTable] = None,
) -> list[AlternateLink]:
    """One alternate per locale in table order, then `x-default`.

    Always returns len(table) + 1 links with distinct hreflang values; the
    x-default link points at the default locale's URL.
    """
    table = table or DEFAULT_LOCALE_TABLE
    base_url = get_base_url() if base_url is None else normalize_base_url(base_url)

    links = [
        AlternateLink(
            hreflang=locale.html_lang_code,
            href=build_absolute_url(base_url, generate_canonical_url(pathname, locale.code, table)),
        )
        for locale in table
    ]
    links.append(
        AlternateLink(
            hreflang=X_DEFAULT,
            href=build_absolute_url(base_url, generate_canonical_url(pathname, table.default.code, table)),
        )
    )
    return links


def hreflang_map(links: list[AlternateLink]) -> dict[str, str]:
    """hreflang -> href, in link order."""
    return {link.hreflang: link.href for link in links}
