"""테스트 자산(데이터) 레이어

규칙:
- 단순 dict/list 생성 외 로직 없음
- 엔진/네트워크 의존 없음
"""

from .listings import (
    ITEM_DETAILS,
    LEATHER_JACKETS,
    LEATHER_JACKETS_PRICE_LOW_IDS,
    RAW_BROKEN,
    RAW_FULL,
    TEES,
)

__all__ = [
    "ITEM_DETAILS",
    "LEATHER_JACKETS",
    "LEATHER_JACKETS_PRICE_LOW_IDS",
    "RAW_BROKEN",
    "RAW_FULL",
    "TEES",
]
