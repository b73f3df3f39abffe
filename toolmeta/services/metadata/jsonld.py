"""JSON-LD assembly for entries that carry a schema descriptor.

The builder starts from the always-present `@context`/`@type` pair and then
applies JSONLD_RULES in order. Each rule maps the build context to a value or
None; None means the key is omitted, never emitted as null or empty.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from toolmeta.services.registry.models import LocalizedToolView, SchemaDescriptor

from .urls import build_absolute_url

SCHEMA_CONTEXT = "https://schema.org"


@dataclass(frozen=True)
class JsonLdContext:
    """Everything a rule may read."""

    schema: SchemaDescriptor
    view: LocalizedToolView
    description: str
    canonical_url: str
    base_url: str
    site_name: str
    html_lang: str


def _present(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict)):
        return bool(value)
    return value is not None and value != ""


def _schema_field(name: str) -> Callable[[JsonLdContext], Any]:
    def rule(ctx: JsonLdContext) -> Any:
        value = getattr(ctx.schema, name)
        return list(value) if isinstance(value, (list, tuple)) else value
    return rule


def _name(ctx: JsonLdContext) -> Optional[str]:
    return ctx.schema.name or ctx.view.title or None


def _url(ctx: JsonLdContext) -> Optional[str]:
    if ctx.schema.url:
        return build_absolute_url(ctx.base_url, ctx.schema.url)
    return ctx.canonical_url or None


def _aggregate_rating(ctx: JsonLdContext) -> Optional[dict[str, Any]]:
    rating = ctx.schema.aggregate_rating
    if rating is None:
        return None
    return {
        "@type": "AggregateRating",
        "ratingValue": rating.rating_value,
        "reviewCount": rating.review_count,
    }


def _potential_action(ctx: JsonLdContext) -> Optional[dict[str, Any]]:
    action = ctx.schema.potential_action
    if action is None:
        return None
    result: dict[str, Any] = {
        "@type": "UseAction",
        "target": {
            "@type": "EntryPoint",
            "urlTemplate": build_absolute_url(ctx.base_url, action.target),
        },
    }
    if action.object:
        result["object"] = {"@type": "Thing", "name": action.object}
    if action.result:
        result["result"] = {"@type": "Thing", "name": action.result}
    return result


def _offers(ctx: JsonLdContext) -> Optional[dict[str, Any]]:
    offers = ctx.schema.offers
    if offers is None:
        return None
    return {"@type": "Offer", "price": offers.price, "priceCurrency": offers.price_currency}


def _main_entity(ctx: JsonLdContext) -> Optional[dict[str, Any]]:
    entity = ctx.schema.main_entity
    if entity is None:
        return None
    result: dict[str, Any] = {"@type": entity.type}
    if entity.number_of_items is not None:
        result["numberOfItems"] = entity.number_of_items
    if entity.name:
        result["name"] = entity.name
    return result


def _publisher(ctx: JsonLdContext) -> Optional[dict[str, Any]]:
    if not ctx.site_name:
        return None
    return {"@type": "Organization", "name": ctx.site_name, "url": ctx.base_url}


JsonLdRule = tuple[str, Callable[[JsonLdContext], Any]]

# Output key order follows this list
JSONLD_RULES: tuple[JsonLdRule, ...] = (
    ("name", _name),
    ("description", lambda ctx: ctx.description or None),
    ("url", _url),
    ("inLanguage", lambda ctx: ctx.html_lang or None),
    ("applicationCategory", _schema_field("application_category")),
    ("featureList", _schema_field("features")),
    ("operatingSystem", _schema_field("operating_system")),
    ("browserRequirements", _schema_field("browser_requirements")),
    ("softwareVersion", _schema_field("software_version")),
    ("datePublished", _schema_field("date_published")),
    ("dateModified", _schema_field("date_modified")),
    ("aggregateRating", _aggregate_rating),
    ("potentialAction", _potential_action),
    ("offers", _offers),
    ("softwareRequirements", _schema_field("software_requirements")),
    ("memoryRequirements", _schema_field("memory_requirements")),
    ("processorRequirements", _schema_field("processor_requirements")),
    ("numberOfItems", _schema_field("number_of_items")),
    ("mainEntity", _main_entity),
    ("publisher", _publisher),
)


def build_json_ld(ctx: JsonLdContext, rules: tuple[JsonLdRule, ...] = JSONLD_RULES) -> dict[str, Any]:
    """Assemble the JSON-LD object for one localized entry."""
    document: dict[str, Any] = {"@context": SCHEMA_CONTEXT, "@type": ctx.schema.type}
    for key, rule in rules:
        value = rule(ctx)
        if _present(value):
            document[key] = value
    return document
