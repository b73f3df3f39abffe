"""Tests for Accept-Language negotiation."""

import pytest

from toolmeta.services.locales import negotiate_locale, parse_accept_language


@pytest.mark.unit
class TestParseAcceptLanguage:
    """Header parsing."""

    def test_sorted_by_quality(self):
        assert parse_accept_language("en;q=0.8,de-AT,de;q=0.9") == [
            ("de-at", 1.0),
            ("de", 0.9),
            ("en", 0.8),
        ]

    def test_empty(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []

    def test_drops_wildcard_and_zero_quality(self):
        assert parse_accept_language("*, fr;q=0, ru") == [("ru", 1.0)]

    def test_malformed_quality_counts_as_one(self):
        assert parse_accept_language("ru;q=abc") == [("ru", 1.0)]

    def test_non_finite_quality(self):
        assert parse_accept_language("en;q=nan,de;q=0.5,ru") == [("en", 1.0), ("ru", 1.0), ("de", 0.5)]
        assert parse_accept_language("de;q=inf,ru;q=-inf") == [("de", 1.0)]

    def test_quality_clamped(self):
        assert parse_accept_language("de;q=0.5,ru;q=7") == [("ru", 1.0), ("de", 0.5)]


@pytest.mark.unit
class TestNegotiateLocale:
    """Locale choice for a visitor."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("de-AT,de;q=0.9,en;q=0.8", "de"),
            ("en-GB,en;q=0.9", "en"),
            ("uk,en;q=0.5", "ru"),
            ("be", "ru"),
            ("fr-CA,fr;q=0.9,de;q=0.5", "de"),
            ("pt-BR", "en"),
            ("de;q=0,ru", "ru"),
            ("de;q=0.9,ru;q=nan", "ru"),
            ("garbage;;;", "en"),
        ],
    )
    def test_header(self, header, expected):
        assert negotiate_locale(header) == expected

    def test_no_header_is_default(self):
        assert negotiate_locale(None) == "en"

    def test_cookie_wins(self):
        assert negotiate_locale("de", cookie_locale="ru") == "ru"

    def test_unknown_cookie_ignored(self):
        assert negotiate_locale("de", cookie_locale="fr") == "de"

    def test_custom_mappings(self):
        assert negotiate_locale("nl", mappings={"nl": "de"}) == "de"
