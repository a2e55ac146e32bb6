"""매물 테스트 자산 (엔진 독립)

- eBay item_summary 형태의 단순 dict만 보관
- pytest fixture 선언하지 않음
"""


def _item(item_id, title, price, condition, brand=None, created="2024-01-01T00:00:00.000Z", aspects=None):
    item = {
        "itemId": item_id,
        "title": title,
        "price": {"value": str(price), "currency": "USD"},
        "condition": condition,
        "itemCreationDate": created,
        "itemWebUrl": f"https://www.ebay.com/itm/{item_id}",
        "image": {"imageUrl": f"https://i.ebayimg.com/{item_id}.jpg"},
    }
    if brand is not None:
        item["brand"] = brand
    if aspects:
        item["localizedAspects"] = aspects
    return item


# keyword="leather jacket", maxPrice=120, condition=used, sortBy=price_low
LEATHER_JACKETS = [
    _item("lj-1", "Vintage 90s Leather Jacket Black Bomber", 85, "Pre-owned", brand="Wilsons Leather"),
    _item("lj-2", "Leather Jacket Brown Suede Trim", 110, "Used", brand="Schott"),
    _item("lj-3", "Genuine Leather Jacket Motorcycle", 150, "Pre-owned", brand="Harley-Davidson"),
    _item("lj-4", "Leather Jacket Women's Black", 40, "Used", brand="Unbranded"),
    _item("lj-5", "Leather Jacket New With Tags", 95, "New with tags", brand="Guess"),
    _item("lj-6", "Faux Leather Jacket Cropped", 25, "Pre-owned", brand="Shein"),
    _item("lj-7", "Vintage Leather Jacket 80s", 60, "Used"),
    _item("lj-8", "Leather Jacket", 60, "Used", brand="Coach"),
    _item("lj-9", "Jacket Leather Style Biker", 60, "Used", brand="Levi's"),
    _item("lj-10", "Leather Jacket Reproduction A2 Flight", 70, "Used", brand="Cockpit USA"),
]

# 기대 결과 (price_low): 같은 가격은 신뢰도 내림차순, 패스트패션은 맨 뒤
LEATHER_JACKETS_PRICE_LOW_IDS = ["lj-8", "lj-9", "lj-10", "lj-1", "lj-2", "lj-6"]


# keyword="vintage tee", Shein은 모든 정렬에서 맨 뒤
TEES = [
    _item(
        "tee-shein",
        "Shein oversized vintage-look tee",
        8,
        "New with tags",
        brand="Shein",
        created="2024-06-01T12:00:00Z",
    ),
    _item(
        "tee-hanes",
        "Vintage 90s Band Tee Single Stitch",
        45,
        "Pre-owned",
        brand="Hanes",
        created="2023-03-01T00:00:00Z",
    ),
    _item(
        "tee-harley",
        "Vintage Harley Davidson Tee",
        30,
        "Used",
        brand="Harley-Davidson",
        created="2022-09-15T08:30:00Z",
    ),
]


# 정규화 경계 케이스
RAW_FULL = {
    "itemId": "v1|123|0",
    "title": "Vintage Levi's 501 Jeans",
    "price": {"value": "49.99", "currency": "USD"},
    "condition": "Pre-owned",
    "itemCreationDate": "2024-02-10T10:00:00.000Z",
    "itemWebUrl": "https://www.ebay.com/itm/123",
    "thumbnailImages": [{"imageUrl": "https://i.ebayimg.com/thumb.jpg"}],
    "shippingOptions": [{"shippingCost": {"value": "7.50", "currency": "USD"}}],
    "localizedAspects": [
        {"name": "Brand", "value": "Levi's"},
        {"name": "Size Type", "value": "Regular"},
        {"name": "Color", "value": ["", "Blue"]},
        {"name": "Material", "value": "Denim"},
    ],
}

RAW_BROKEN = {
    "itemId": 12345,
    "title": None,
    "price": {"value": "NaN"},
    "condition": 3000,
    "localizedAspects": "not a list",
    "shippingOptions": [{"shippingCost": {"value": True}}],
    "image": "not a dict",
}


# 상세 조회 응답 (브랜드 보강)
ITEM_DETAILS = {
    "nb-1": {"itemId": "nb-1", "brand": "  Pendleton  "},
    "nb-2": {"itemId": "nb-2", "localizedAspects": [{"name": "BRAND", "value": "Carhartt"}]},
    "nb-3": {"itemId": "nb-3"},
}
