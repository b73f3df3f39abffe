"""Tests for the registry validator."""

import pytest

from toolmeta.services.locales import Locale, LocaleTable
from toolmeta.services.registry import (
    IssueCode,
    Severity,
    build_registry,
    has_errors,
    summarize_issues,
    validate_locale_table,
    validate_registry,
)


def _tool(tool_id, path=None, category="convert-case-tools", **content):
    localized = {"en": {"title": f"{tool_id} title", "short_description": f"{tool_id} description"}}
    localized.update(content)
    return {
        "id": tool_id,
        "path": path or f"/tools/{tool_id}",
        "kind": "tool",
        "category": category,
        "localized_content": localized,
    }


def _codes(issues):
    return {issue.code for issue in issues}


@pytest.mark.unit
class TestCleanRegistry:
    """A consistent registry yields nothing."""

    def test_zero_issues(self, clean_registry):
        assert validate_registry(clean_registry) == []

    def test_empty_registry(self):
        assert validate_registry(build_registry([])) == []


@pytest.mark.unit
class TestSeededViolations:
    """One issue (at least) per seeded violation."""

    def test_every_violation_reported(self, clean_entries):
        blank = _tool("blank")
        blank["localized_content"]["en"]["title"] = ""
        entries = clean_entries + [
            _tool("uppercase", path="/tools/uppercase-2"),  # duplicate id
            _tool("caps", path="/tools/lowercase"),  # duplicate path
            blank,  # missing default title
            _tool("typo", ed={"title": "Tippfehler"}),  # unknown locale key
            _tool("stray", category="nonsense"),  # unknown category
        ]

        issues = validate_registry(build_registry(entries))

        assert {
            IssueCode.DUPLICATE_ID,
            IssueCode.DUPLICATE_PATH,
            IssueCode.MISSING_REQUIRED_FIELD,
            IssueCode.UNKNOWN_LOCALE,
            IssueCode.UNKNOWN_CATEGORY,
        } <= _codes(issues)
        assert has_errors(issues)

    def test_duplicate_path_names_both_entries(self, clean_entries):
        issues = validate_registry(build_registry(clean_entries + [_tool("caps", path="/tools/lowercase/")]))
        duplicate = [i for i in issues if i.code == IssueCode.DUPLICATE_PATH]

        assert {i.tool_id for i in duplicate} == {"caps", "lowercase"}

    def test_issue_fields(self, clean_entries):
        issues = validate_registry(build_registry(clean_entries + [_tool("typo", ed={"title": "x"})]))
        issue = next(i for i in issues if i.code == IssueCode.UNKNOWN_LOCALE)

        assert issue.tool_id == "typo"
        assert issue.locale == "ed"
        assert issue.field == "localized_content"
        assert issue.severity == Severity.ERROR

    def test_checks_are_independent(self, clean_entries):
        entry = _tool("both", category="nonsense", ed={"title": "x"})
        codes = _codes(validate_registry(build_registry(clean_entries + [entry])))
        assert {IssueCode.UNKNOWN_CATEGORY, IssueCode.UNKNOWN_LOCALE} <= codes

    def test_missing_default_locale(self, clean_entries):
        entry = _tool("german-only")
        entry["localized_content"] = {"de": {"title": "Nur Deutsch", "short_description": "Nur Deutsch."}}
        issues = validate_registry(build_registry(clean_entries + [entry]))
        assert IssueCode.MISSING_DEFAULT_LOCALE in _codes(issues)

    def test_whitespace_title_is_empty(self, clean_entries):
        entry = _tool("spaces")
        entry["localized_content"]["en"]["short_description"] = "   "
        issues = validate_registry(build_registry(clean_entries + [entry]))
        assert any(i.code == IssueCode.MISSING_REQUIRED_FIELD and i.field == "short_description" for i in issues)

    @pytest.mark.parametrize(
        "path,code",
        [
            ("tools/x", IssueCode.INVALID_PATH),
            ("/tools/x/", IssueCode.INVALID_PATH),
            ("/tools//x", IssueCode.INVALID_PATH),
            ("/de/tools/x", IssueCode.LOCALE_PREFIXED_PATH),
            ("/en/tools/x", IssueCode.LOCALE_PREFIXED_PATH),
        ],
    )
    def test_path_shape(self, clean_entries, path, code):
        issues = validate_registry(build_registry(clean_entries + [_tool("x", path=path)]))
        assert code in _codes(issues)

    def test_relative_locale_path_reports_both(self, clean_entries):
        issues = validate_registry(build_registry(clean_entries + [_tool("x", path="de/tools/x")]))
        assert {IssueCode.INVALID_PATH, IssueCode.LOCALE_PREFIXED_PATH} <= _codes(issues)

    def test_invalid_id(self, clean_entries):
        issues = validate_registry(build_registry(clean_entries + [_tool("Upper Case", path="/tools/upper")]))
        assert IssueCode.INVALID_ID in _codes(issues)

    def test_tool_without_category(self, clean_entries):
        entry = _tool("orphan")
        entry["category"] = None
        issues = validate_registry(build_registry(clean_entries + [entry]))
        assert IssueCode.MISSING_CATEGORY in _codes(issues)

    def test_page_without_category_is_fine(self, clean_registry):
        assert clean_registry.get("home").category is None
        assert validate_registry(clean_registry) == []


@pytest.mark.unit
class TestWarnings:
    """Problems that degrade a locale but do not break rendering."""

    def test_missing_category_page(self, clean_entries):
        issues = validate_registry(build_registry(clean_entries + [_tool("png-to-jpg", category="image-tools")]))
        warning = next(i for i in issues if i.code == IssueCode.MISSING_CATEGORY_PAGE)

        assert warning.severity == Severity.WARNING
        assert "/category/image-tools" in warning.message
        assert not has_errors(issues)

    def test_missing_translation_fields(self, clean_entries):
        clean_entries[2]["localized_content"]["de"] = {"title": "Großbuchstaben"}
        issues = validate_registry(build_registry(clean_entries))

        fields = {(i.locale, i.field) for i in issues if i.code == IssueCode.MISSING_OPTIONAL_FIELD}
        assert fields == {("de", "short_description"), ("de", "long_description"), ("de", "keywords")}
        assert all(i.severity == Severity.WARNING for i in issues)

    def test_dangling_related_tool(self, clean_entries):
        clean_entries[3]["related_tools"] = ["missing-tool"]
        issues = validate_registry(build_registry(clean_entries))

        assert [i.code for i in issues] == [IssueCode.DANGLING_RELATED_TOOL]
        assert issues[0].severity == Severity.WARNING

    def test_length_checks_are_opt_in(self, clean_registry):
        assert validate_registry(clean_registry) == []

        issues = validate_registry(clean_registry, check_lengths=True)
        assert issues
        assert _codes(issues) == {IssueCode.LENGTH_OUT_OF_RANGE}
        assert not has_errors(issues)


@pytest.mark.unit
class TestLocaleTableValidation:
    """Locale codes must not be confused with route segments."""

    def test_site_table_is_clean(self, locale_table):
        assert validate_locale_table(locale_table) == []

    def test_reserved_segment(self):
        table = LocaleTable([
            Locale(code="en", display_name="English", html_lang_code="en", is_default=True),
            Locale(code="api", display_name="API", html_lang_code="ap"),
        ])
        issues = validate_locale_table(table)

        assert _codes(issues) == {IssueCode.RESERVED_LOCALE_CODE}
        assert issues[0].tool_id is None
        assert issues[0].locale == "api"

    def test_custom_reserved_segments(self, locale_table):
        issues = validate_locale_table(locale_table, reserved_segments={"de"})
        assert [i.locale for i in issues] == ["de"]

    def test_malformed_code(self):
        table = LocaleTable([
            Locale(code="EN_us", display_name="English", html_lang_code="en-US", is_default=True),
        ])
        assert _codes(validate_locale_table(table)) == {IssueCode.INVALID_LOCALE_CODE}

    def test_table_issues_in_registry_report(self, clean_entries):
        table = LocaleTable([
            Locale(code="en", display_name="English", html_lang_code="en", is_default=True),
            Locale(code="api", display_name="API", html_lang_code="ap"),
        ])
        issues = validate_registry(build_registry(clean_entries, locales=table))
        assert IssueCode.RESERVED_LOCALE_CODE in _codes(issues)


@pytest.mark.unit
class TestSummaries:
    """Severity helpers."""

    def test_summarize(self, clean_entries):
        entries = clean_entries + [_tool("stray", category="nonsense")]
        entries[3]["related_tools"] = ["missing-tool"]
        summary = summarize_issues(validate_registry(build_registry(entries)))
        assert summary == {"error": 1, "warning": 1}

    def test_has_errors_empty(self):
        assert not has_errors([])
