"""Text utilities (normalization + regex signals)."""

from .normalization import (
    build_haystack,
    has_text,
    is_used_condition,
    keyword_tokens,
    normalize_brand,
    normalize_whitespace,
)
from .patterns import (
    MILLENNIUM_TOKEN_RE,
    VINTAGE_TOKEN_RE,
    Y2K_TOKEN_RE,
    is_y2k_equivalent,
    matches_era,
    matches_gender,
)

__all__ = [
    "build_haystack",
    "has_text",
    "is_used_condition",
    "keyword_tokens",
    "normalize_brand",
    "normalize_whitespace",
    "MILLENNIUM_TOKEN_RE",
    "VINTAGE_TOKEN_RE",
    "Y2K_TOKEN_RE",
    "is_y2k_equivalent",
    "matches_era",
    "matches_gender",
]
