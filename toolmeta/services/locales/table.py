"""The site's locale table and reserved path segments."""

from .models import Locale, LocaleTable


DEFAULT_LOCALE_TABLE = LocaleTable(
    (
        Locale(code="en", display_name="English", html_lang_code="en", og_locale="en_US", is_default=True),
        Locale(code="ru", display_name="Русский", html_lang_code="ru", og_locale="ru_RU"),
        Locale(code="de", display_name="Deutsch", html_lang_code="de", og_locale="de_DE"),
    )
)

# First path segments owned by non-locale routes. A locale code colliding with
# any of these makes locale detection ambiguous.
RESERVED_SEGMENTS = frozenset(
    {
        "tools",
        "category",
        "admin",
        "api",
        "changelog",
        "images",
        "about-us",
        "contact-us",
        "privacy-policy",
        "terms-of-service",
        "not-found",
    }
)

# Accept-Language tags mapped onto supported locales
LANGUAGE_MAPPINGS: dict[str, str] = {
    "en": "en",
    "en-us": "en",
    "en-gb": "en",
    "en-ca": "en",
    "en-au": "en",
    "ru": "ru",
    "ru-ru": "ru",
    "be": "ru",  # Belarusian
    "uk": "ru",  # Ukrainian
    "de": "de",
    "de-de": "de",
    "de-at": "de",
    "de-ch": "de",
}
