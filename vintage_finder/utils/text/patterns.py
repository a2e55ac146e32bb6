"""Regex signals for era / gender detection and query token checks."""

from __future__ import annotations

import re
from typing import Optional


VINTAGE_TOKEN_RE = re.compile(r"\bvintage\b", re.IGNORECASE)

# 쿼리 변형용 토큰 검사
Y2K_TOKEN_RE = re.compile(r"\by2k\b", re.IGNORECASE)
MILLENNIUM_TOKEN_RE = re.compile(r"\b(?:early\s*)?2000s?\b|\b00s\b", re.IGNORECASE)

# 성별 표기
MEN_RE = re.compile(r"\bmen('?s)?\b|\bmale\b", re.IGNORECASE)
WOMEN_RE = re.compile(r"\bwomen('?s)?\b|\bfemale\b|\blad(?:y|ies)\b", re.IGNORECASE)

GENDER_PATTERNS = {
    "men": MEN_RE,
    "women": WOMEN_RE,
}

# 연대 표기 (haystack은 이미 소문자)
ERA_PATTERNS = {
    "70s": re.compile(r"70s|70's|1970|seventies"),
    "80s": re.compile(r"80s|80's|1980|eighties"),
    "90s": re.compile(r"90s|90's|1990|nineties"),
    "2000": re.compile(r"\b2000\b|y2k|2000s|00s"),
    "2000s": re.compile(r"y2k|2000|00s|2000s"),
    "y2k": re.compile(r"y2k|2000|00s|2000s"),
}

# 두 갈래(y2k / 2000s) 검색이 필요한 연대
Y2K_EQUIVALENT_ERAS = frozenset({"y2k", "2000s", "2000"})


def _key(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", value)


def matches_era(haystack: str, era: Optional[str]) -> bool:
    key = _key(era)
    if not key:
        return True
    pattern = ERA_PATTERNS.get(key)
    if pattern is None:
        return True
    return bool(pattern.search(haystack))


def matches_gender(haystack: str, gender: Optional[str]) -> bool:
    key = _key(gender)
    if not key:
        return True
    pattern = GENDER_PATTERNS.get(key)
    if pattern is None:
        return True
    return bool(pattern.search(haystack))


def is_y2k_equivalent(era: Optional[str]) -> bool:
    return _key(era) in Y2K_EQUIVALENT_ERAS
