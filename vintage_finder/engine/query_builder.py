"""Query Builder - 검색 요청 → 검색어 변형 목록

- 기본: keyword (+ brand) + "vintage" (+ 성별 표기)
- y2k / 2000s / 2000 연대는 "y2k" 계열과 "2000s" 계열 두 갈래로 검색
"""

from __future__ import annotations

from vintage_finder.schemas import Gender, SearchRequest
from vintage_finder.utils.text import (
    MILLENNIUM_TOKEN_RE,
    VINTAGE_TOKEN_RE,
    Y2K_TOKEN_RE,
    is_y2k_equivalent,
    normalize_whitespace,
)
from vintage_finder.utils.text.patterns import MEN_RE, WOMEN_RE


def ensure_vintage_keyword(query: str) -> str:
    trimmed = query.strip()
    if VINTAGE_TOKEN_RE.search(trimmed):
        return trimmed
    return f"{trimmed} vintage"


def ensure_gender_keyword(query: str, gender) -> str:
    if gender == Gender.MEN and not MEN_RE.search(query):
        return f"{query} mens"
    if gender == Gender.WOMEN and not WOMEN_RE.search(query):
        return f"{query} womens"
    return query


def _y2k_variants(base: str) -> list[str]:
    has_y2k = bool(Y2K_TOKEN_RE.search(base))
    has_millennium = bool(MILLENNIUM_TOKEN_RE.search(base))

    if has_y2k and has_millennium:
        # 두 토큰이 모두 있으면 y2k를 뺀 쪽을 2000s 변형으로 사용
        return [base, normalize_whitespace(Y2K_TOKEN_RE.sub(" ", base))]

    y2k_variant = base if has_y2k else f"{base} y2k"
    millennium_variant = base if has_millennium else f"{base} 2000s"
    return [y2k_variant, millennium_variant]


def build_query_variants(request: SearchRequest) -> list[str]:
    """검색어 변형 목록 (순서 유지, 중복 없음, 최소 1개)

    Raises:
        ValueError: keyword가 비어 있는 경우
    """
    keyword = request.keyword.strip()
    if not keyword:
        raise ValueError("keyword must not be blank")

    base = keyword
    if request.brand:
        base = f"{base} {request.brand.strip()}"
    base = ensure_vintage_keyword(base)
    base = ensure_gender_keyword(base, request.gender)

    if not is_y2k_equivalent(request.era):
        return [base]

    variants: list[str] = []
    for variant in _y2k_variants(base):
        if variant not in variants:
            variants.append(variant)
    return variants
