"""Sort policies with fast-fashion demotion and total tie-breaks."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from vintage_finder.schemas import Listing, SortPolicy

from .filters import is_fast_fashion_brand


def parse_timestamp(value: Optional[str]) -> float:
    """ISO 8601 → epoch 초. 없거나 파싱 실패면 0 (epoch)"""
    if not value or not isinstance(value, str):
        return 0.0
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def sort_key(listing: Listing, sort_by: SortPolicy) -> tuple:
    # 패스트패션은 정렬 기준과 무관하게 항상 뒤
    tier = 1 if is_fast_fashion_brand(listing.brand) else 0
    confidence = listing.vintage_confidence

    if sort_by == SortPolicy.PRICE_LOW:
        return (tier, listing.price, -confidence, listing.id)
    if sort_by == SortPolicy.PRICE_HIGH:
        return (tier, -listing.price, -confidence, listing.id)
    if sort_by == SortPolicy.NEWEST:
        return (tier, -parse_timestamp(listing.created_at), -confidence, listing.id)
    return (tier, -confidence, listing.price, listing.id)


def sort_listings(listings: Iterable[Listing], sort_by: SortPolicy = SortPolicy.BEST_MATCH) -> list[Listing]:
    return sorted(listings, key=lambda listing: sort_key(listing, sort_by))
