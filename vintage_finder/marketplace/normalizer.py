"""Raw item_summary -> Listing 변환 (절대 예외를 던지지 않음)

외부 응답의 모든 중첩 경로는 없거나 타입이 다를 수 있으므로
접근마다 기본값으로 떨어지도록 작성합니다. 이 모듈 밖에서는 Listing만 다룹니다.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

from vintage_finder.schemas import Listing


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _clean(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _parse_price(value: Any) -> float:
    """유한한 0 이상 숫자로 변환, 실패 시 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def read_aspect_values(item: Any, aspect_names: Iterable[str]) -> list[str]:
    """localizedAspects에서 이름(대소문자 무시)이 일치하는 값들을 순서대로 반환"""
    wanted = {name.lower() for name in aspect_names}
    values: list[str] = []

    for aspect in _as_list(_as_dict(item).get("localizedAspects")):
        aspect = _as_dict(aspect)
        name = aspect.get("name")
        if not isinstance(name, str) or name.lower() not in wanted:
            continue
        raw_value = aspect.get("value")
        candidates = raw_value if isinstance(raw_value, list) else [raw_value]
        for candidate in candidates:
            cleaned = _clean(candidate)
            if cleaned:
                values.append(cleaned)

    return values


def first_aspect_value(item: Any, aspect_names: Iterable[str]) -> Optional[str]:
    values = read_aspect_values(item, aspect_names)
    return values[0] if values else None


def read_brand(item: Any) -> Optional[str]:
    """brand 필드 우선, 없으면 localizedAspects의 'brand'"""
    direct = _clean(_as_dict(item).get("brand"))
    if direct:
        return direct
    return first_aspect_value(item, ["brand"])


def _read_image(item: dict) -> Optional[str]:
    primary = _as_str(_as_dict(item.get("image")).get("imageUrl"))
    if primary:
        return primary
    thumbnails = _as_list(item.get("thumbnailImages"))
    if thumbnails:
        return _as_str(_as_dict(thumbnails[0]).get("imageUrl"))
    return None


def _read_shipping(item: dict) -> Optional[str]:
    options = _as_list(item.get("shippingOptions"))
    if not options:
        return None
    cost = _as_dict(_as_dict(options[0]).get("shippingCost")).get("value")
    if isinstance(cost, bool) or not isinstance(cost, (str, int, float)):
        return None
    if isinstance(cost, float) and cost.is_integer():
        cost = int(cost)
    return f"${cost} shipping"


def normalize_item(raw: Any) -> Listing:
    """RawCandidate -> Listing (신뢰도는 Scorer가 채움)"""
    item = _as_dict(raw)
    price = _as_dict(item.get("price"))

    return Listing(
        id=_as_str(item.get("itemId")) or "",
        title=_as_str(item.get("title")) or "",
        price=_parse_price(price.get("value")),
        currency=_as_str(price.get("currency")) or "USD",
        condition=_as_str(item.get("condition")) or "Unknown",
        brand=read_brand(item),
        size=first_aspect_value(item, ["size", "size type"]),
        color=first_aspect_value(item, ["color"]),
        material=first_aspect_value(item, ["material"]),
        created_at=_as_str(item.get("itemCreationDate")),
        vintage_confidence=0,
        shipping=_read_shipping(item),
        image=_read_image(item),
        url=_as_str(item.get("itemWebUrl")) or "",
    )
