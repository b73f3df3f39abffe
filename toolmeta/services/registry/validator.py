"""Static consistency checks over the registry and the locale table.

Every check runs independently and appends to one issue list; nothing here
raises for bad registry data. Callers (CI, the inventory CLI) decide what a
non-empty error list means.

Example:
    >>> from toolmeta.services.registry import validate_registry, has_errors
    >>> issues = validate_registry()
    >>> has_errors(issues)
    False
"""

import logging
import re
from collections import defaultdict
from typing import Callable, Iterable, Optional

from toolmeta.services.locales import RESERVED_SEGMENTS, LocaleTable, normalize_pathname

from .config import META_LIMITS, category_page_path
from .handle import RegistryHandle
from .loader import get_registry
from .models import EntryKind, IssueCode, Severity, ToolMetadataEntry, ValidationIssue

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
LOCALE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-[a-z0-9]+)*$")

# Optional fields a translated locale is expected to carry when the default has them
TRANSLATABLE_OPTIONAL_FIELDS = ("long_description", "keywords")


def _issue(
    code: IssueCode,
    message: str,
    severity: Severity = Severity.ERROR,
    tool_id: Optional[str] = None,
    locale: Optional[str] = None,
    field: Optional[str] = None,
) -> ValidationIssue:
    return ValidationIssue(
        tool_id=tool_id,
        locale=locale,
        field=field,
        message=message,
        severity=severity,
        code=code,
    )


# =============================================================================
# Locale table
# =============================================================================


def validate_locale_table(
    table: LocaleTable,
    reserved_segments: Optional[Iterable[str]] = None,
) -> list[ValidationIssue]:
    """Check locale codes are usable as unambiguous first path segments."""
    reserved = frozenset(RESERVED_SEGMENTS if reserved_segments is None else reserved_segments)
    issues: list[ValidationIssue] = []

    for locale in table:
        if not LOCALE_CODE_PATTERN.match(locale.code):
            issues.append(_issue(
                IssueCode.INVALID_LOCALE_CODE,
                f"Locale code {locale.code!r} is not a lowercase language tag",
                locale=locale.code,
            ))
        if locale.code in reserved:
            issues.append(_issue(
                IssueCode.RESERVED_LOCALE_CODE,
                f"Locale code {locale.code!r} collides with the reserved path segment /{locale.code}",
                locale=locale.code,
            ))

    return issues


# =============================================================================
# Registry-wide checks
# =============================================================================


def _check_uniqueness(handle: RegistryHandle) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    by_id: dict[str, int] = defaultdict(int)
    for entry in handle:
        by_id[entry.id] += 1
    for tool_id, count in by_id.items():
        if count > 1:
            issues.append(_issue(
                IssueCode.DUPLICATE_ID,
                f"Tool id defined {count} times; only the first definition is served",
                tool_id=tool_id,
                field="id",
            ))

    by_path: dict[str, list[str]] = defaultdict(list)
    for entry in handle:
        by_path[normalize_pathname(entry.path)].append(entry.id)
    for path, ids in by_path.items():
        if len(ids) > 1:
            for tool_id in dict.fromkeys(ids):
                others = sorted({other for other in ids if other != tool_id}) or [tool_id]
                issues.append(_issue(
                    IssueCode.DUPLICATE_PATH,
                    f"Path {path} is also used by: {', '.join(others)}",
                    tool_id=tool_id,
                    field="path",
                ))

    return issues


# =============================================================================
# Per-entry checks
# =============================================================================


def _check_id(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    if SLUG_PATTERN.match(entry.id):
        return []
    return [_issue(
        IssueCode.INVALID_ID,
        f"Id {entry.id!r} is not a lowercase URL-safe slug",
        tool_id=entry.id,
        field="id",
    )]


def _check_default_locale(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    default_code = handle.locales.default.code
    content = entry.localized_content.get(default_code)
    if content is None:
        return [_issue(
            IssueCode.MISSING_DEFAULT_LOCALE,
            f"No content for default locale '{default_code}'",
            tool_id=entry.id,
            locale=default_code,
            field="localized_content",
        )]

    issues = []
    for field_name in ("title", "short_description"):
        if not getattr(content, field_name).strip():
            issues.append(_issue(
                IssueCode.MISSING_REQUIRED_FIELD,
                f"Default locale {field_name} is empty",
                tool_id=entry.id,
                locale=default_code,
                field=field_name,
            ))
    return issues


def _check_category(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    if entry.category is None:
        if entry.kind == EntryKind.TOOL:
            return [_issue(
                IssueCode.MISSING_CATEGORY,
                "Tool entries must declare a category",
                tool_id=entry.id,
                field="category",
            )]
        return []

    if entry.category not in handle.categories:
        return [_issue(
            IssueCode.UNKNOWN_CATEGORY,
            f"Unknown category {entry.category!r}",
            tool_id=entry.id,
            field="category",
        )]

    if entry.kind == EntryKind.TOOL:
        page_path = category_page_path(entry.category)
        if not any(normalize_pathname(other.path) == page_path for other in handle):
            return [_issue(
                IssueCode.MISSING_CATEGORY_PAGE,
                f"Category page {page_path} is not in the registry",
                severity=Severity.WARNING,
                tool_id=entry.id,
                field="category",
            )]
    return []


def _check_locale_keys(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    return [
        _issue(
            IssueCode.UNKNOWN_LOCALE,
            f"Content provided for unknown locale {code!r}",
            tool_id=entry.id,
            locale=code,
            field="localized_content",
        )
        for code in entry.localized_content
        if code not in handle.locales
    ]


def _check_path_shape(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    path = entry.path
    issues = []
    normalized = normalize_pathname(path)
    if not path.startswith("/"):
        issues.append(_issue(
            IssueCode.INVALID_PATH,
            f"Path {path!r} must start with '/'",
            tool_id=entry.id,
            field="path",
        ))
    elif normalized != path:
        issues.append(_issue(
            IssueCode.INVALID_PATH,
            f"Path {path!r} has repeated or trailing slashes; expected {normalized!r}",
            tool_id=entry.id,
            field="path",
        ))

    first_segment = normalized.split("/")[1]
    if first_segment in handle.locales:
        issues.append(_issue(
            IssueCode.LOCALE_PREFIXED_PATH,
            f"Path {path!r} starts with locale segment /{first_segment}; store bare paths",
            tool_id=entry.id,
            locale=first_segment,
            field="path",
        ))
    return issues


def _check_translations(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    default_code = handle.locales.default.code
    default_content = entry.localized_content.get(default_code)
    issues = []

    for code, content in entry.localized_content.items():
        if code == default_code or code not in handle.locales:
            continue

        for field_name in ("title", "short_description"):
            if not getattr(content, field_name).strip():
                issues.append(_issue(
                    IssueCode.MISSING_OPTIONAL_FIELD,
                    f"{field_name} missing; falls back to '{default_code}'",
                    severity=Severity.WARNING,
                    tool_id=entry.id,
                    locale=code,
                    field=field_name,
                ))

        if default_content is None:
            continue
        for field_name in TRANSLATABLE_OPTIONAL_FIELDS:
            if getattr(default_content, field_name) and not getattr(content, field_name):
                issues.append(_issue(
                    IssueCode.MISSING_OPTIONAL_FIELD,
                    f"{field_name} missing; falls back to '{default_code}'",
                    severity=Severity.WARNING,
                    tool_id=entry.id,
                    locale=code,
                    field=field_name,
                ))
    return issues


def _check_related_tools(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    return [
        _issue(
            IssueCode.DANGLING_RELATED_TOOL,
            f"Related tool {related!r} is not in the registry",
            severity=Severity.WARNING,
            tool_id=entry.id,
            field="related_tools",
        )
        for related in entry.related_tools
        if related not in handle
    ]


def _check_lengths(entry: ToolMetadataEntry, handle: RegistryHandle) -> list[ValidationIssue]:
    issues = []
    for code, content in entry.localized_content.items():
        for field_name, (minimum, maximum) in META_LIMITS.items():
            value = getattr(content, field_name, None)
            if not value:
                continue
            length = len(value.strip())
            if length < minimum or length > maximum:
                issues.append(_issue(
                    IssueCode.LENGTH_OUT_OF_RANGE,
                    f"{field_name} length {length} out of range [{minimum}, {maximum}]",
                    severity=Severity.WARNING,
                    tool_id=entry.id,
                    locale=code,
                    field=field_name,
                ))
    return issues


EntryCheck = Callable[[ToolMetadataEntry, RegistryHandle], list[ValidationIssue]]

ENTRY_CHECKS: tuple[EntryCheck, ...] = (
    _check_id,
    _check_default_locale,
    _check_category,
    _check_locale_keys,
    _check_path_shape,
    _check_translations,
    _check_related_tools,
)


def validate_registry(
    handle: Optional[RegistryHandle] = None,
    check_lengths: bool = False,
    reserved_segments: Optional[Iterable[str]] = None,
) -> list[ValidationIssue]:
    """Run every consistency check and collect all issues.

    Args:
        handle: Registry to check (defaults to the shared registry)
        check_lengths: Also warn about titles/descriptions outside META_LIMITS
        reserved_segments: Non-locale first path segments (defaults to RESERVED_SEGMENTS)

    Returns:
        Issues in check order; empty for a clean registry
    """
    if handle is None:
        handle = get_registry()

    checks = ENTRY_CHECKS + ((_check_lengths,) if check_lengths else ())

    issues = validate_locale_table(handle.locales, reserved_segments)
    issues.extend(_check_uniqueness(handle))
    for entry in handle:
        for check in checks:
            issues.extend(check(entry, handle))

    summary = summarize_issues(issues)
    logger.info(
        f"Validated {len(handle)} registry entries: "
        f"{summary['error']} errors, {summary['warning']} warnings"
    )
    return issues


def summarize_issues(issues: Iterable[ValidationIssue]) -> dict[str, int]:
    """Count issues by severity."""
    counts = {severity.value: 0 for severity in Severity}
    for issue in issues:
        counts[Severity(issue.severity).value] += 1
    return counts


def has_errors(issues: Iterable[ValidationIssue]) -> bool:
    """True if any issue would break routing or default rendering."""
    return any(issue.severity == Severity.ERROR for issue in issues)
