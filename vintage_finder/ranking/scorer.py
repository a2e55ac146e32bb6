"""Relevance Scorer - vintage confidence (0~100)

결정적 순수 함수입니다. 같은 (매물, 키워드)에는 항상 같은 점수.

    50 기본
    +12 브랜드 있음
    +10 중고 계열 상태
    +8 / -6 키워드 토큰별 포함/미포함 (title + brand)
    +12 키워드 전체 문자열 포함
    +6 긍정 용어 (최대 3개)
    -12 부정 용어 (상한 없음)
    → [0, 100] 클램프
"""

from __future__ import annotations

from typing import Optional

from vintage_finder.schemas import Listing
from vintage_finder.utils.text import has_text, is_used_condition, keyword_tokens

from .terms import RankingTerms, get_ranking_terms


BASE_SCORE = 50
BRAND_BONUS = 12
USED_BONUS = 10
TOKEN_HIT = 8
TOKEN_MISS = -6
FULL_KEYWORD_BONUS = 12
POSITIVE_TERM_BONUS = 6
NEGATIVE_TERM_PENALTY = 12


def score_listing(
    title: str,
    brand: Optional[str],
    condition: str,
    keyword: str,
    terms: Optional[RankingTerms] = None,
) -> int:
    terms = terms or get_ranking_terms()
    haystack = f"{title or ''} {brand or ''}".lower()

    score = BASE_SCORE

    if has_text(brand):
        score += BRAND_BONUS
    if is_used_condition(condition):
        score += USED_BONUS

    for token in keyword_tokens(keyword):
        score += TOKEN_HIT if token in haystack else TOKEN_MISS

    full_keyword = (keyword or "").strip().lower()
    if full_keyword and full_keyword in haystack:
        score += FULL_KEYWORD_BONUS

    positive_hits = sum(1 for term in terms.positive_terms if term in haystack)
    score += min(positive_hits, terms.max_positive_hits) * POSITIVE_TERM_BONUS

    negative_hits = sum(1 for term in terms.negative_terms if term in haystack)
    score -= negative_hits * NEGATIVE_TERM_PENALTY

    return max(0, min(100, score))


def score(listing: Listing, keyword: str) -> Listing:
    """점수를 기록한 사본 반환"""
    confidence = score_listing(listing.title, listing.brand, listing.condition, keyword)
    return listing.model_copy(update={"vintage_confidence": confidence})
