"""Tests for the path/locale codec."""

import pytest

from toolmeta.services.locales import (
    Locale,
    LocaleTable,
    get_locale_from_pathname,
    get_localized_pathname,
    normalize_pathname,
    split_locale,
    strip_locale_prefix,
)

LOCALES = ["en", "ru", "de"]

PATHS = [
    "",
    "/",
    "//",
    "///",
    "/tools/uppercase",
    "/tools/uppercase/",
    "tools/uppercase",
    "//tools//uppercase//",
    "/de",
    "/de/",
    "/ru/tools/md5-hash",
    "/en/tools/md5-hash",
    "/de/ru/tools/x",
    "/deutsch/tools",
    "/DE/tools",
    "/unknown/segment/",
    "/tools/de",
    "/category/convert-case-tools/",
    "?q=1",
    "/ü/ß",
]


@pytest.mark.unit
class TestGetLocaleFromPathname:
    """Locale detection from the first path segment."""

    @pytest.mark.parametrize(
        "pathname,expected",
        [
            ("/de/tools/uppercase", "de"),
            ("/ru", "ru"),
            ("/ru/", "ru"),
            ("/tools/uppercase", "en"),
            ("/", "en"),
            ("", "en"),
            ("//", "en"),
            ("/en/tools/uppercase", "en"),
            ("/tools/de", "en"),
            ("/deutsch/tools", "en"),
            ("/DE/tools", "en"),
        ],
    )
    def test_detects_locale(self, pathname, expected):
        assert get_locale_from_pathname(pathname) == expected

    @pytest.mark.parametrize("pathname", PATHS)
    def test_total_for_degenerate_input(self, pathname, locale_table):
        assert get_locale_from_pathname(pathname) in locale_table

    def test_none_is_default(self):
        assert get_locale_from_pathname(None) == "en"


@pytest.mark.unit
class TestGetLocalizedPathname:
    """Rewriting paths for a target locale."""

    @pytest.mark.parametrize(
        "pathname,target,expected",
        [
            ("/", "en", "/"),
            ("/", "de", "/de"),
            ("/", "ru", "/ru"),
            ("/de", "de", "/de"),
            ("/de/", "en", "/"),
            ("/ru/", "de", "/de"),
            ("/tools/uppercase", "de", "/de/tools/uppercase"),
            ("/tools/uppercase/", "ru", "/ru/tools/uppercase"),
            ("/ru/tools/uppercase", "de", "/de/tools/uppercase"),
            ("/de/tools/uppercase", "en", "/tools/uppercase"),
            ("/en/tools/uppercase", "de", "/de/tools/uppercase"),
            ("//tools//uppercase//", "de", "/de/tools/uppercase"),
            ("", "de", "/de"),
        ],
    )
    def test_rewrites(self, pathname, target, expected):
        assert get_localized_pathname(pathname, target) == expected

    def test_unknown_target_is_default(self):
        assert get_localized_pathname("/de/tools/uppercase", "xx") == "/tools/uppercase"
        assert get_localized_pathname("/de/tools/uppercase", None) == "/tools/uppercase"

    def test_no_trailing_slash_or_double_slash(self):
        for pathname in PATHS:
            for locale in LOCALES:
                result = get_localized_pathname(pathname, locale)
                assert "//" not in result
                assert result == "/" or not result.endswith("/")

    def test_idempotent(self):
        for pathname in PATHS:
            for locale in LOCALES:
                once = get_localized_pathname(pathname, locale)
                assert get_localized_pathname(once, locale) == once

    def test_round_trip(self):
        for pathname in PATHS:
            for locale in LOCALES:
                localized = get_localized_pathname(pathname, locale)
                assert get_locale_from_pathname(localized) == locale

    def test_preserves_remainder(self):
        assert get_localized_pathname("/tools/a/b/c", "ru") == "/ru/tools/a/b/c"


@pytest.mark.unit
class TestHelpers:
    """normalize / strip / split helpers."""

    @pytest.mark.parametrize(
        "pathname,expected",
        [
            ("", "/"),
            ("/", "/"),
            ("//", "/"),
            ("tools//uppercase/", "/tools/uppercase"),
            ("/de/", "/de"),
        ],
    )
    def test_normalize_pathname(self, pathname, expected):
        assert normalize_pathname(pathname) == expected

    def test_strip_removes_every_leading_locale(self):
        assert strip_locale_prefix("/de/ru/tools/x") == "/tools/x"
        assert strip_locale_prefix("/en/tools/x") == "/tools/x"
        assert strip_locale_prefix("/tools/de") == "/tools/de"

    def test_split_locale(self):
        assert split_locale("/ru/tools/md5-hash") == ("ru", "/tools/md5-hash")
        assert split_locale("/tools/md5-hash/") == ("en", "/tools/md5-hash")
        assert split_locale("/de") == ("de", "/")


@pytest.mark.unit
class TestCustomTable:
    """The codec follows whatever table it is given."""

    @pytest.fixture
    def german_default(self):
        return LocaleTable([
            Locale(code="de", display_name="Deutsch", html_lang_code="de-DE", is_default=True),
            Locale(code="en", display_name="English", html_lang_code="en-US"),
        ])

    def test_default_locale_is_unprefixed(self, german_default):
        assert get_localized_pathname("/tools/x", "de", german_default) == "/tools/x"
        assert get_localized_pathname("/tools/x", "en", german_default) == "/en/tools/x"

    def test_detection(self, german_default):
        assert get_locale_from_pathname("/en/tools/x", german_default) == "en"
        assert get_locale_from_pathname("/ru/tools/x", german_default) == "de"
