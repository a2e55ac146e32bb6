"""Ranking layer: confidence scoring, filtering and ordering."""

from .filters import (
    STRICTNESS_RULES,
    filter_listings,
    is_allowed_brand,
    is_blocked_brand,
    is_fast_fashion_brand,
    passes_filters,
)
from .scorer import score, score_listing
from .sorting import parse_timestamp, sort_listings
from .terms import RankingTerms, get_ranking_terms

__all__ = [
    "STRICTNESS_RULES",
    "filter_listings",
    "is_allowed_brand",
    "is_blocked_brand",
    "is_fast_fashion_brand",
    "passes_filters",
    "score",
    "score_listing",
    "parse_timestamp",
    "sort_listings",
    "RankingTerms",
    "get_ranking_terms",
]
