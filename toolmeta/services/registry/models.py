"""Pydantic models for the tool metadata registry.

Models for:
- LocalizedContent: per-locale prose for one entry
- SchemaDescriptor: schema.org descriptor passed through to JSON-LD
- ToolMetadataEntry: one registry record (tool, category page or static page)
- LocalizedToolView: an entry resolved for one locale via the fallback chain
- MetadataEntrySummary: flat inventory projection of an entry

Registry records (LocalizedContent, SchemaDescriptor, ToolMetadataEntry) are
frozen and hold tuples and read-only mappings, so a loaded registry cannot be
changed through anything a query returns.
"""

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class EntryKind(str, Enum):
    """What kind of page a registry entry describes."""

    TOOL = "tool"
    CATEGORY = "category"
    PAGE = "page"


class LocalizedContent(BaseModel):
    """Prose for one entry in one locale.

    `title` and `short_description` default to empty so a malformed registry
    still loads; the validator reports them.
    """

    title: str = ""
    short_description: str = ""
    long_description: Optional[str] = None
    keywords: Optional[tuple[str, ...]] = None
    alternate_title: Optional[str] = None
    og_image: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class AggregateRating(BaseModel):
    rating_value: str
    review_count: str

    model_config = ConfigDict(frozen=True)


class PotentialAction(BaseModel):
    target: str
    object: Optional[str] = None
    result: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Offers(BaseModel):
    price: str = "0"
    price_currency: str = "USD"

    model_config = ConfigDict(frozen=True)


class MainEntity(BaseModel):
    type: str
    number_of_items: Optional[int] = None
    name: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SchemaDescriptor(BaseModel):
    """schema.org descriptor for an entry."""

    type: Literal["SoftwareApplication", "WebApplication", "CollectionPage", "WebPage"]
    application_category: str
    features: Optional[tuple[str, ...]] = None
    operating_system: Optional[str] = None
    browser_requirements: Optional[str] = None
    software_version: Optional[str] = None
    date_published: Optional[str] = None
    date_modified: Optional[str] = None
    aggregate_rating: Optional[AggregateRating] = None
    potential_action: Optional[PotentialAction] = None
    offers: Optional[Offers] = None
    software_requirements: Optional[str] = None
    memory_requirements: Optional[str] = None
    processor_requirements: Optional[str] = None
    number_of_items: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None
    main_entity: Optional[MainEntity] = None

    model_config = ConfigDict(frozen=True)


class ToolMetadataEntry(BaseModel):
    """A registry record keyed by `id`."""

    id: str = Field(..., description="URL-safe slug, primary key")
    path: str = Field(..., description="Canonical bare path, e.g. /tools/uppercase")
    kind: EntryKind = EntryKind.TOOL
    category: Optional[str] = Field(default=None, description="Category page slug")
    localized_content: Mapping[str, LocalizedContent] = Field(default_factory=dict, validate_default=True)
    schema_: Optional[SchemaDescriptor] = Field(default=None, alias="schema")
    related_tools: tuple[str, ...] = ()

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("localized_content")
    @classmethod
    def read_only_content(cls, value: Mapping[str, LocalizedContent]) -> Mapping[str, LocalizedContent]:
        return MappingProxyType(dict(value))

    @field_serializer("localized_content")
    def serialize_content(self, value: Mapping[str, LocalizedContent]) -> dict[str, LocalizedContent]:
        return dict(value)

    @property
    def available_locales(self) -> list[str]:
        return list(self.localized_content)


class LocalizedToolView(BaseModel):
    """An entry with its prose resolved for one requested locale.

    `field_sources` records which locale supplied each resolved field.
    Optional fields stay None when no locale in the chain provides them.
    """

    id: str
    locale: str
    path: str
    kind: EntryKind
    category: Optional[str] = None
    title: str
    short_description: str
    long_description: Optional[str] = None
    keywords: Optional[list[str]] = None
    alternate_title: Optional[str] = None
    og_image: Optional[str] = None
    schema_: Optional[SchemaDescriptor] = Field(default=None, alias="schema")
    related_tools: list[str] = Field(default_factory=list)
    field_sources: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class MetadataEntrySummary(BaseModel):
    """Flat projection used by the inventory report."""

    id: str
    category: Optional[str] = None
    path: str
    kind: EntryKind
    available_locales: list[str]


class Severity(str, Enum):
    """How bad a validation issue is."""

    ERROR = "error"  # Breaks routing or default rendering
    WARNING = "warning"  # Degrades a non-default locale or SEO quality


class IssueCode(str, Enum):
    """Machine-readable kind of a validation issue."""

    DUPLICATE_ID = "duplicate_id"
    DUPLICATE_PATH = "duplicate_path"
    INVALID_ID = "invalid_id"
    MISSING_DEFAULT_LOCALE = "missing_default_locale"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MISSING_CATEGORY = "missing_category"
    UNKNOWN_CATEGORY = "unknown_category"
    MISSING_CATEGORY_PAGE = "missing_category_page"
    UNKNOWN_LOCALE = "unknown_locale"
    INVALID_PATH = "invalid_path"
    LOCALE_PREFIXED_PATH = "locale_prefixed_path"
    MISSING_OPTIONAL_FIELD = "missing_optional_field"
    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    DANGLING_RELATED_TOOL = "dangling_related_tool"
    INVALID_LOCALE_CODE = "invalid_locale_code"
    RESERVED_LOCALE_CODE = "reserved_locale_code"


class ValidationIssue(BaseModel):
    """One registry or locale-table problem.

    `tool_id` is None for problems with the locale table itself.
    """

    tool_id: Optional[str] = None
    locale: Optional[str] = None
    field: Optional[str] = None
    message: str
    severity: Severity
    code: IssueCode
