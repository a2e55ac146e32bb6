"""Curated ranking term lists (loaded once from resources/ranking/*.yaml)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from vintage_finder.utils.resource_loader import load_brand_lists, load_vintage_terms
from vintage_finder.utils.text import normalize_brand


@dataclass(frozen=True)
class RankingTerms:
    positive_terms: tuple[str, ...]
    negative_terms: tuple[str, ...]
    max_positive_hits: int
    blocked_brands: frozenset[str]
    fast_fashion_brands: frozenset[str]


def _unique_lower(terms: list) -> tuple[str, ...]:
    seen: list[str] = []
    for term in terms:
        text = str(term).strip().lower()
        if text and text not in seen:
            seen.append(text)
    return tuple(seen)


@lru_cache(maxsize=1)
def get_ranking_terms() -> RankingTerms:
    vintage = load_vintage_terms()
    brands = load_brand_lists()
    return RankingTerms(
        positive_terms=_unique_lower(vintage["positive_terms"]),
        negative_terms=_unique_lower(vintage["negative_terms"]),
        max_positive_hits=vintage["max_positive_hits"],
        blocked_brands=frozenset(normalize_brand(str(b)) for b in brands["blocked_brands"]),
        fast_fashion_brands=frozenset(normalize_brand(str(b)) for b in brands["fast_fashion_brands"]),
    )
