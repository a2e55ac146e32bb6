"""Filter rules: brand allow/deny, facets, terms, price, strictness."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from vintage_finder.schemas import ItemCondition, Listing, SearchRequest, Strictness
from vintage_finder.utils.text import (
    build_haystack,
    has_text,
    is_used_condition,
    matches_era,
    matches_gender,
    normalize_brand,
)

from .terms import get_ranking_terms


@dataclass(frozen=True)
class StrictnessRule:
    min_confidence: Optional[int]
    requires_used: bool


STRICTNESS_RULES = {
    Strictness.RELAXED: StrictnessRule(min_confidence=None, requires_used=False),
    Strictness.BALANCED: StrictnessRule(min_confidence=45, requires_used=False),
    Strictness.STRICT: StrictnessRule(min_confidence=65, requires_used=True),
}


def is_blocked_brand(brand: Optional[str]) -> bool:
    if not has_text(brand):
        return False
    return normalize_brand(brand) in get_ranking_terms().blocked_brands


def is_allowed_brand(brand: Optional[str]) -> bool:
    """브랜드가 있고 차단 목록이 아니면 허용"""
    return has_text(brand) and not is_blocked_brand(brand)


def is_fast_fashion_brand(brand: Optional[str]) -> bool:
    if not has_text(brand):
        return False
    return normalize_brand(brand) in get_ranking_terms().fast_fashion_brands


def listing_haystack(listing: Listing) -> str:
    return build_haystack(
        listing.title,
        listing.brand,
        listing.size,
        listing.color,
        listing.material,
        listing.condition,
    )


def _contains(haystack: str, needle: Optional[str]) -> bool:
    return not needle or needle.lower() in haystack


def passes_brand_rule(listing: Listing, request: SearchRequest) -> bool:
    if is_blocked_brand(listing.brand):
        return False
    if not has_text(listing.brand):
        return not request.require_brand
    return True


def passes_condition(listing: Listing, request: SearchRequest) -> bool:
    if request.condition is None:
        return True
    used = is_used_condition(listing.condition)
    return used if request.condition == ItemCondition.USED else not used


def passes_price(listing: Listing, request: SearchRequest) -> bool:
    if request.min_price is not None and listing.price < request.min_price:
        return False
    if request.max_price is not None and listing.price > request.max_price:
        return False
    return True


def passes_strictness(listing: Listing, strictness: Strictness) -> bool:
    rule = STRICTNESS_RULES[strictness]
    if rule.min_confidence is not None and listing.vintage_confidence < rule.min_confidence:
        return False
    if rule.requires_used and not is_used_condition(listing.condition):
        return False
    return True


def passes_filters(listing: Listing, request: SearchRequest) -> bool:
    if not passes_brand_rule(listing, request):
        return False

    haystack = listing_haystack(listing)

    if not _contains(haystack, request.brand):
        return False
    if not _contains(haystack, request.size):
        return False
    if not _contains(haystack, request.color):
        return False
    if not _contains(haystack, request.material):
        return False
    if not matches_era(haystack, request.era):
        return False
    if not matches_gender(haystack, request.gender):
        return False

    if not passes_condition(listing, request):
        return False
    if not passes_price(listing, request):
        return False

    if any(term in haystack for term in request.exclude_terms):
        return False
    if not all(term in haystack for term in request.include_terms):
        return False

    return passes_strictness(listing, request.strictness)


def filter_listings(listings: Iterable[Listing], request: SearchRequest) -> list[Listing]:
    return [listing for listing in listings if passes_filters(listing, request)]
