"""Pydantic models for the supported-locale table."""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


class LocaleTableError(ValueError):
    """Raised when a locale table is structurally unusable."""


class Locale(BaseModel):
    """A supported site locale."""

    code: str = Field(..., description="Short identifier used as URL prefix (e.g. 'de')")
    display_name: str = Field(..., description="Name shown in language switchers")
    html_lang_code: str = Field(..., description="BCP-47 tag for <html lang> and hreflang")
    og_locale: str = Field(default="", description="Open Graph locale (e.g. 'de_DE')")
    is_default: bool = Field(default=False, description="Default locale URLs carry no prefix")

    model_config = ConfigDict(frozen=True)


class LocaleTable:
    """Immutable, ordered collection of locales with exactly one default.

    Table order is significant: hreflang alternates and sitemap entries are
    emitted in this order.
    """

    def __init__(self, locales: list[Locale] | tuple[Locale, ...]):
        locales = tuple(locales)
        if not locales:
            raise LocaleTableError("Locale table must contain at least one locale")

        defaults = [loc for loc in locales if loc.is_default]
        if len(defaults) != 1:
            raise LocaleTableError(
                f"Locale table must mark exactly one default locale, found {len(defaults)}"
            )

        codes = [loc.code for loc in locales]
        duplicate_codes = sorted({code for code in codes if codes.count(code) > 1})
        if duplicate_codes:
            raise LocaleTableError(f"Duplicate locale codes: {', '.join(duplicate_codes)}")

        lang_codes = [loc.html_lang_code for loc in locales]
        duplicate_langs = sorted({lang for lang in lang_codes if lang_codes.count(lang) > 1})
        if duplicate_langs:
            raise LocaleTableError(f"Duplicate html lang codes: {', '.join(duplicate_langs)}")
        if "x-default" in lang_codes:
            raise LocaleTableError("'x-default' is reserved and cannot be an html lang code")

        self._locales = locales
        self._by_code = {loc.code: loc for loc in locales}
        self._default = defaults[0]

    def __iter__(self) -> Iterator[Locale]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._by_code

    def __repr__(self) -> str:
        return f"LocaleTable({', '.join(self.codes)}; default={self._default.code})"

    @property
    def default(self) -> Locale:
        return self._default

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(loc.code for loc in self._locales)

    @property
    def prefixed_codes(self) -> tuple[str, ...]:
        """Codes of every locale whose URLs carry a `/{code}` prefix."""
        return tuple(loc.code for loc in self._locales if not loc.is_default)

    def get(self, code: Optional[str]) -> Optional[Locale]:
        if not isinstance(code, str):
            return None
        return self._by_code.get(code)

    def resolve(self, code: Optional[str]) -> Locale:
        """Return the locale for `code`, or the default locale if unknown."""
        return self.get(code) or self._default
