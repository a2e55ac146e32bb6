"""Text normalization helpers for brands, keywords and haystacks."""

from __future__ import annotations

import re
from typing import Optional


_BRAND_SEPARATORS_RE = re.compile(r"[.\-_/]")
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9]+")

USED_CONDITION_MARKERS = ("used", "pre-owned", "pre owned")


def normalize_whitespace(value: str) -> str:
    """연속 공백/개행을 한 칸으로 정리."""
    return _WHITESPACE_RE.sub(" ", value or "").strip()


def normalize_brand(brand: Optional[str]) -> str:
    """브랜드 비교용 정규화.

    소문자화 후 구분자(. - _ /)를 제거하고 공백을 정리합니다.

    예:
    - "Un.Branded" -> "unbranded"
    - "N/A" -> "na"
    - "Forever  21" -> "forever 21"
    """
    if not brand:
        return ""
    lowered = brand.strip().lower()
    return normalize_whitespace(_BRAND_SEPARATORS_RE.sub("", lowered))


def has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def keyword_tokens(keyword: str) -> list[str]:
    """키워드를 영숫자 경계로 분리 (2글자 이상만, 순서/중복 유지)."""
    if not keyword:
        return []
    return [t for t in _TOKEN_SPLIT_RE.split(keyword.lower()) if len(t) >= 2]


def is_used_condition(condition: Optional[str]) -> bool:
    """상태 문자열이 중고 계열인지 판정 (used / pre-owned / pre owned)."""
    if not condition:
        return False
    c = condition.lower()
    return any(marker in c for marker in USED_CONDITION_MARKERS)


def build_haystack(*parts: Optional[str]) -> str:
    """비어 있지 않은 조각만 공백으로 이어 소문자화."""
    return " ".join(p for p in parts if p).lower()
