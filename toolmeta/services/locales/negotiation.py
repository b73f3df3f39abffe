"""Pick a visitor's locale from Accept-Language and a preference cookie."""

import logging
import math
from typing import Optional

from .models import LocaleTable
from .table import DEFAULT_LOCALE_TABLE, LANGUAGE_MAPPINGS

logger = logging.getLogger(__name__)


def parse_accept_language(header: Optional[str]) -> list[tuple[str, float]]:
    """Parse an Accept-Language header into (tag, quality) pairs.

    Tags are lowercased and sorted by descending quality; ties keep header
    order. Malformed quality values (including `nan`) count as 1.0, values
    above 1 are clamped to 1.0, entries with q<=0 are dropped.

    Example:
        >>> parse_accept_language("de-AT,de;q=0.9,en;q=0.8")
        [('de-at', 1.0), ('de', 0.9), ('en', 0.8)]
    """
    if not header:
        return []

    languages: list[tuple[str, float]] = []
    for part in header.split(","):
        code, _, params = part.strip().partition(";")
        code = code.strip().lower()
        if not code or code == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0
            if math.isnan(quality):
                quality = 1.0
            quality = min(quality, 1.0)
        if quality <= 0:
            continue
        languages.append((code, quality))

    return sorted(languages, key=lambda item: item[1], reverse=True)


def negotiate_locale(
    accept_language: Optional[str],
    cookie_locale: Optional[str] = None,
    table: Optional[LocaleTable] = None,
    mappings: Optional[dict[str, str]] = None,
) -> str:
    """Choose the locale to redirect a visitor to.

    A valid `preferred-locale` cookie wins. Otherwise the first
    Accept-Language tag that maps (exactly, then by base language) onto a
    supported locale is used. Falls back to the default locale.
    """
    table = table or DEFAULT_LOCALE_TABLE
    mappings = LANGUAGE_MAPPINGS if mappings is None else mappings

    if cookie_locale and cookie_locale in table:
        return cookie_locale

    for code, _quality in parse_accept_language(accept_language):
        for candidate in (code, code.split("-")[0]):
            mapped = mappings.get(candidate, candidate)
            if mapped in table:
                return mapped

    logger.debug(f"No supported locale in Accept-Language {accept_language!r}")
    return table.default.code
