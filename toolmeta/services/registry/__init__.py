"""Tool metadata registry: models, loading, read queries and validation.

The registry is an immutable RegistryHandle. Every query takes an optional
handle, so tests and tools can pass their own registry instead of the shared
one.

Example:
    >>> from toolmeta.services.registry import get_tool_metadata_localized
    >>> view = get_tool_metadata_localized("uppercase", "de")
    >>> view.field_sources["title"]
    'de'

Custom registry:
    >>> from toolmeta.services.registry import build_registry, validate_registry
    >>> handle = build_registry([{"id": "demo", "path": "/tools/demo", ...}])
    >>> issues = validate_registry(handle)
"""

from .models import (
    EntryKind,
    IssueCode,
    LocalizedContent,
    LocalizedToolView,
    MetadataEntrySummary,
    SchemaDescriptor,
    Severity,
    ToolMetadataEntry,
    ValidationIssue,
)
from .config import META_LIMITS, TOOL_CATEGORIES, RegistryConfig, category_page_path
from .handle import RegistryHandle
from .loader import RegistryLoadError, build_registry, get_registry, load_registry, reload_registry
from .accessor import (
    fallback_chain,
    get_all_metadata_entries,
    get_tool_metadata_localized,
    has_tool,
)
from .validator import has_errors, summarize_issues, validate_locale_table, validate_registry

__all__ = [
    # Models
    "EntryKind",
    "IssueCode",
    "LocalizedContent",
    "LocalizedToolView",
    "MetadataEntrySummary",
    "SchemaDescriptor",
    "Severity",
    "ToolMetadataEntry",
    "ValidationIssue",
    # Configuration
    "META_LIMITS",
    "TOOL_CATEGORIES",
    "RegistryConfig",
    "category_page_path",
    # Loading
    "RegistryHandle",
    "RegistryLoadError",
    "build_registry",
    "get_registry",
    "load_registry",
    "reload_registry",
    # Accessor
    "fallback_chain",
    "get_all_metadata_entries",
    "get_tool_metadata_localized",
    "has_tool",
    # Validator
    "has_errors",
    "summarize_issues",
    "validate_locale_table",
    "validate_registry",
]
