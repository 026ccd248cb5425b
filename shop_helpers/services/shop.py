"""Shop name, language and URL helpers.

Everything here works from an explicit ``ShopContext`` (which shop is
current, the primary shop, the site root URL) and a ``ShopRepository``
supplied by the host application.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Tuple
from urllib.parse import urlparse

from .slugs import Slugifier, get_slug


logger = logging.getLogger(__name__)

SHOP_ROUTE_PREFIX = "/shop"


@dataclass(frozen=True)
class Shop:
    id: str
    name: str = ""
    language: str = ""
    slug: str = ""
    shop_type: str = "primary"
    domains: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ShopContext:
    shop_id: Optional[str]
    root_url: str
    primary_shop_id: Optional[str] = None
    settings: Dict[str, Any] = field(default_factory=dict)
    # None means the marketplace has no opinion; only False disables naked routes.
    marketplace_naked_routes: Optional[bool] = None


class ShopRepository(Protocol):
    def find_by_id(self, shop_id: str) -> Optional[Shop]:
        ...

    def find_by_domain(self, domain: str) -> Optional[Shop]:
        ...


def absolute_url(root_url: str, path: str = "") -> str:
    """Join ``path`` onto the site root with exactly one slash between them."""
    url = root_url if root_url.endswith("/") else f"{root_url}/"
    if path:
        url += path.lstrip("/")
    return url


def get_shop_settings(ctx: ShopContext) -> Dict[str, Any]:
    return ctx.settings


def get_shop_name(ctx: ShopContext, shops: ShopRepository) -> str:
    """Name of the current shop, or of the shop owning the root URL's domain."""
    if ctx.shop_id:
        shop = shops.find_by_id(ctx.shop_id)
        return (shop and shop.name) or ""

    domain = urlparse(ctx.root_url).hostname
    shop = shops.find_by_domain(domain) if domain else None
    return shop.name if shop else ""


def get_shop_lang(ctx: ShopContext, shops: ShopRepository) -> str:
    shop = shops.find_by_id(ctx.shop_id) if ctx.shop_id else None
    return shop.language if shop else ""


def get_primary_shop_lang(ctx: ShopContext, shops: ShopRepository) -> str:
    shop = shops.find_by_id(ctx.primary_shop_id) if ctx.primary_shop_id else None
    return shop.language if shop else ""


def get_shop_prefix(ctx: ShopContext, shops: ShopRepository, slugifier: Slugifier, leading: str = "/") -> str:
    """Route prefix for the current shop.

    The primary shop is served from the root unless the marketplace turns
    naked routes off; every other shop lives under ``/shop/<slug>``.
    """
    if not ctx.shop_id:
        return ""

    shop = shops.find_by_id(ctx.shop_id)
    if shop is None:
        logger.warning(f"Shop {ctx.shop_id} not found, using empty route prefix")
        return ""

    slug = leading + get_slug(shop.slug or get_shop_name(ctx, shops).lower(), slugifier)

    if shop.shop_type == "primary":
        if ctx.marketplace_naked_routes is False:
            return slug
        return ""

    # Always slash-separated, whatever leading the caller asked for.
    return f"{SHOP_ROUTE_PREFIX}/{slug.lstrip('/')}"


def get_absolute_url(ctx: ShopContext, shops: ShopRepository, slugifier: Slugifier, path: str) -> str:
    prefix = get_shop_prefix(ctx, shops, slugifier, leading="")
    if prefix:
        return absolute_url(ctx.root_url, f"{prefix}/{path}")
    return absolute_url(ctx.root_url, path)
