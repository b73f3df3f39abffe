"""Pydantic models for resolved page metadata.

Field names are snake_case in Python and serialize to the camelCase keys the
page-rendering layer consumes (`canonicalUrl`, `openGraph`, `siteName`, ...):

    metadata.model_dump(by_alias=True, exclude_none=True)
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AlternateLink(CamelModel):
    """One hreflang alternate: a language tag and the absolute URL for it."""

    hreflang: str
    href: str


class Alternates(CamelModel):
    canonical: str
    languages: dict[str, str] = Field(default_factory=dict)


class OgImage(CamelModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None


class OpenGraph(CamelModel):
    title: str
    description: str
    type: str = "website"
    locale: str
    alternate_locale: list[str] = Field(default_factory=list)
    url: str
    site_name: str
    images: list[OgImage] = Field(default_factory=list)


class TwitterCard(CamelModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: list[str] = Field(default_factory=list)
    site: Optional[str] = None


class ResolvedMetadata(CamelModel):
    """Complete metadata for one page in one locale.

    Every URL is absolute. `json_ld` is None when the entry has no schema
    descriptor or the id is unknown.
    """

    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)
    locale: str
    html_lang: str
    robots: str = "index, follow"
    canonical_url: str
    alternate_links: list[AlternateLink] = Field(default_factory=list)
    alternates: Alternates
    open_graph: OpenGraph
    twitter: TwitterCard
    json_ld: Optional[dict[str, Any]] = None

    def to_json_dict(self) -> dict[str, Any]:
        """camelCase dict with unset optional keys omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
