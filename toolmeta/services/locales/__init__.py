"""Locale table and path/locale codec.

Example:
    >>> from toolmeta.services.locales import get_locale_from_pathname, get_localized_pathname
    >>> get_locale_from_pathname("/ru/tools/md5-hash")
    'ru'
    >>> get_localized_pathname("/ru/tools/md5-hash", "en")
    '/tools/md5-hash'
"""

from .models import Locale, LocaleTable, LocaleTableError
from .table import DEFAULT_LOCALE_TABLE, LANGUAGE_MAPPINGS, RESERVED_SEGMENTS
from .codec import (
    get_locale_from_pathname,
    get_localized_pathname,
    normalize_pathname,
    split_locale,
    strip_locale_prefix,
)
from .negotiation import negotiate_locale, parse_accept_language

__all__ = [
    # Models
    "Locale",
    "LocaleTable",
    "LocaleTableError",
    # Table
    "DEFAULT_LOCALE_TABLE",
    "LANGUAGE_MAPPINGS",
    "RESERVED_SEGMENTS",
    # Codec
    "get_locale_from_pathname",
    "get_localized_pathname",
    "normalize_pathname",
    "split_locale",
    "strip_locale_prefix",
    # Negotiation
    "negotiate_locale",
    "parse_accept_language",
]
