"""Shared fixtures: in-memory stand-ins for the host application's data."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from shop_helpers.services.shop import Shop, ShopContext


class FakeShopRepository:
    def __init__(self, *shops: Shop):
        self.shops = {shop.id: shop for shop in shops}

    def find_by_id(self, shop_id: str) -> Optional[Shop]:
        return self.shops.get(shop_id)

    def find_by_domain(self, domain: str) -> Optional[Shop]:
        for shop in self.shops.values():
            if domain in shop.domains:
                return shop
        return None


class FakeMediaStore:
    """Records queries and answers them from a list of media documents."""

    def __init__(self, records: List[Dict[str, Any]]):
        self.records = records
        self.queries: List[Tuple[Dict[str, Any], List[Tuple[str, int]]]] = []

    def find_one(self, selector, sort):
        self.queries.append((selector, sort))
        (field, value), = selector.items()
        key = field.split(".", 1)[1]
        matches = [r for r in self.records if r["metadata"].get(key) == value]
        matches.sort(key=lambda r: (r["metadata"].get("priority", 0), r["uploadedAt"]))
        return matches[0] if matches else None


@pytest.fixture
def shops():
    return FakeShopRepository(
        Shop(id="primary", name="Reaction Store", language="en", shop_type="primary", domains=("shop.example.com",)),
        Shop(id="merchant", name="Café Olé", language="fr", slug="", shop_type="merchant"),
        Shop(id="tokyo", name="東京ストア", language="ja", slug="tokyo-store", shop_type="merchant"),
    )


@pytest.fixture
def primary_ctx():
    return ShopContext(shop_id="primary", primary_shop_id="primary", root_url="https://shop.example.com")
