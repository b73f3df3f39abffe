"""Translate between URL paths and (locale, bare path) pairs.

Trailing-slash policy (applied by every function here and by nothing else):

- Paths never end with `/`, except the bare root `/` itself.
- Repeated slashes collapse into one; a missing leading slash is added.
- The default locale's URLs carry no prefix: `/` and `/tools/uppercase`.
- Every other locale is prefixed with `/{code}`; its root is `/{code}`
  (no trailing slash): `/de` and `/de/tools/uppercase`.

All functions are total: any string (including `""`, `"//"` and garbage)
maps to a valid locale code and a valid path.

Example:
    >>> get_locale_from_pathname("/de/tools/uppercase")
    'de'
    >>> get_localized_pathname("/de/tools/uppercase", "ru")
    '/ru/tools/uppercase'
    >>> get_localized_pathname("/ru/", "en")
    '/'
"""

from typing import Optional

from .models import LocaleTable
from .table import DEFAULT_LOCALE_TABLE


def _segments(pathname: object) -> list[str]:
    if not isinstance(pathname, str):
        pathname = "" if pathname is None else str(pathname)
    return [segment for segment in pathname.split("/") if segment]


def _join(segments: list[str]) -> str:
    return "/" + "/".join(segments)


def normalize_pathname(pathname: str) -> str:
    """Apply the trailing-slash policy without touching locale prefixes.

    Examples:
        >>> normalize_pathname("tools//uppercase/")
        '/tools/uppercase'
        >>> normalize_pathname("")
        '/'
    """
    return _join(_segments(pathname))


def split_locale(pathname: str, table: Optional[LocaleTable] = None) -> tuple[str, str]:
    """Split a path into (active locale code, path without that prefix)."""
    table = table or DEFAULT_LOCALE_TABLE
    segments = _segments(pathname)
    if segments and segments[0] in table.prefixed_codes:
        return segments[0], _join(segments[1:])
    return table.default.code, _join(segments)


def get_locale_from_pathname(pathname: str, table: Optional[LocaleTable] = None) -> str:
    """Return the locale code a path is served in.

    The first segment selects a locale only when it exactly matches a
    non-default locale code; everything else is the default locale.
    """
    return split_locale(pathname, table)[0]


def strip_locale_prefix(pathname: str, table: Optional[LocaleTable] = None) -> str:
    """Remove every leading locale segment and normalize the rest.

    Leading segments are stripped repeatedly (`/de/ru/x` -> `/x`) so the
    result can never be mistaken for a localized path. The default locale's
    code is stripped too: `/en/x` is not a canonical form.
    """
    table = table or DEFAULT_LOCALE_TABLE
    segments = _segments(pathname)
    while segments and segments[0] in table:
        segments = segments[1:]
    return _join(segments)


def get_localized_pathname(
    pathname: str,
    target_locale: Optional[str],
    table: Optional[LocaleTable] = None,
) -> str:
    """Rewrite a path for `target_locale`.

    Unknown target locales are treated as the default locale. Idempotent:
    rewriting an already rewritten path for the same locale is a no-op.
    """
    table = table or DEFAULT_LOCALE_TABLE
    locale = table.resolve(target_locale)
    bare = strip_locale_prefix(pathname, table)

    if locale.is_default:
        return bare
    if bare == "/":
        return f"/{locale.code}"
    return f"/{locale.code}{bare}"
