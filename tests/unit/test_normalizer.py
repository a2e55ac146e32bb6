"""Normalizer 테스트 - 어떤 형태의 입력에도 예외 없이 Listing 생성."""

from __future__ import annotations

import pytest

from vintage_finder.marketplace.normalizer import normalize_item, read_brand
from tests.fixtures import RAW_BROKEN, RAW_FULL


def test_full_item():
    listing = normalize_item(RAW_FULL)

    assert listing.id == "v1|123|0"
    assert listing.title == "Vintage Levi's 501 Jeans"
    assert listing.price == pytest.approx(49.99)
    assert listing.currency == "USD"
    assert listing.condition == "Pre-owned"
    assert listing.brand == "Levi's"
    assert listing.size == "Regular"
    assert listing.color == "Blue"
    assert listing.material == "Denim"
    assert listing.created_at == "2024-02-10T10:00:00.000Z"
    assert listing.image == "https://i.ebayimg.com/thumb.jpg"
    assert listing.shipping == "$7.50 shipping"
    assert listing.url == "https://www.ebay.com/itm/123"
    assert listing.vintage_confidence == 0


def test_broken_item_falls_back_to_defaults():
    listing = normalize_item(RAW_BROKEN)

    assert listing.id == ""
    assert listing.title == ""
    assert listing.price == 0
    assert listing.condition == "Unknown"
    assert listing.currency == "USD"
    assert listing.brand is None
    assert listing.shipping is None
    assert listing.image is None


@pytest.mark.parametrize("raw", [None, "string", 42, [], {"price": "12"}])
def test_non_dict_shapes_never_raise(raw):
    listing = normalize_item(raw)
    assert listing.price == 0
    assert listing.url == ""


@pytest.mark.parametrize(
    "value,expected",
    [("19.5", 19.5), (20, 20.0), ("-3", 0.0), ("inf", 0.0), ("abc", 0.0), (True, 0.0)],
)
def test_price_parsing(value, expected):
    assert normalize_item({"itemId": "x", "price": {"value": value}}).price == expected


def test_direct_brand_wins_over_aspect():
    item = {"brand": "  Wrangler ", "localizedAspects": [{"name": "Brand", "value": "Lee"}]}
    assert read_brand(item) == "Wrangler"


def test_blank_direct_brand_uses_aspect():
    item = {"brand": "   ", "localizedAspects": [{"name": "brand", "value": "Lee"}]}
    assert read_brand(item) == "Lee"


def test_numeric_shipping_cost():
    item = {"itemId": "x", "shippingOptions": [{"shippingCost": {"value": 5.0}}]}
    assert normalize_item(item).shipping == "$5 shipping"


def test_primary_image_preferred():
    item = {
        "itemId": "x",
        "image": {"imageUrl": "https://img/main.jpg"},
        "thumbnailImages": [{"imageUrl": "https://img/thumb.jpg"}],
    }
    assert normalize_item(item).image == "https://img/main.jpg"
