"""Site configuration for metadata generation."""

import logging
from dataclasses import dataclass, field
from urllib.parse import urlparse

from toolmeta.lib.config_manager import config
from toolmeta.lib.defaults import get_default

logger = logging.getLogger(__name__)

# Production origin used when SITE_BASE_URL is unset or unusable
DEFAULT_BASE_URL: str = get_default("SITE_BASE_URL")


def normalize_base_url(value: object) -> str:
    """Return `value` as an absolute http(s) origin without a trailing slash.

    Anything that is not an origin (relative, other scheme, carries a path,
    query or fragment) is replaced by DEFAULT_BASE_URL with a warning.

    Examples:
        >>> normalize_base_url("https://example.com/")
        'https://example.com'
        >>> normalize_base_url("example.com")
        'https://textcaseconverter.net'
    """
    candidate = str(value or "").strip().rstrip("/")
    parsed = urlparse(candidate)
    if (
        parsed.scheme in ("http", "https")
        and parsed.netloc
        and not parsed.path
        and not parsed.query
        and not parsed.fragment
    ):
        return candidate

    logger.warning(f"Ignoring SITE_BASE_URL {value!r}: not an absolute http(s) origin")
    return DEFAULT_BASE_URL


def get_base_url() -> str:
    """Base URL from SITE_BASE_URL, normalized."""
    return normalize_base_url(config.get("SITE_BASE_URL"))


@dataclass
class SiteConfig:
    """Site-wide values used by the metadata generator.

    Attributes:
        base_url: Absolute origin prepended to canonical and hreflang paths
        site_name: Open Graph siteName and JSON-LD publisher
        default_og_image: Social image used when an entry has none
        og_image_width: Default image width in pixels
        og_image_height: Default image height in pixels
        twitter_site: Twitter handle for the `site` card field
    """

    base_url: str = field(default_factory=get_base_url)
    site_name: str = field(default_factory=lambda: config.get("SITE_NAME"))
    default_og_image: str = field(default_factory=lambda: config.get("DEFAULT_OG_IMAGE"))
    og_image_width: int = field(default_factory=lambda: config.get("OG_IMAGE_WIDTH"))
    og_image_height: int = field(default_factory=lambda: config.get("OG_IMAGE_HEIGHT"))
    twitter_site: str = field(default_factory=lambda: config.get("TWITTER_SITE"))

    def __post_init__(self):
        self.base_url = normalize_base_url(self.base_url)
