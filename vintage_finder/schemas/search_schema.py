"""Pydantic 스키마 정의 (검색 요청/매물/응답)"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DEFAULT_LIMIT = 24
MAX_LIMIT = 200


class Gender(str, Enum):
    MEN = "men"
    WOMEN = "women"


class Era(str, Enum):
    SEVENTIES = "70s"
    EIGHTIES = "80s"
    NINETIES = "90s"
    Y2K = "y2k"
    TWO_THOUSANDS = "2000s"
    TWO_THOUSAND = "2000"


class ItemCondition(str, Enum):
    NEW = "new"
    USED = "used"


class Strictness(str, Enum):
    """신뢰도 하한 단계"""

    RELAXED = "relaxed"
    BALANCED = "balanced"
    STRICT = "strict"


class SortPolicy(str, Enum):
    BEST_MATCH = "best_match"
    PRICE_LOW = "price_low"
    PRICE_HIGH = "price_high"
    NEWEST = "newest"


class SearchRequest(BaseModel):
    """매물 검색 요청 (불변)

    - keyword가 공백뿐이면 엔진은 외부 호출 없이 빈 응답을 반환합니다.
    - 포함/제외 용어는 소문자로 정리되고 빈 값은 제거됩니다.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str = Field("", max_length=500, description="검색어")
    brand: Optional[str] = Field(None, max_length=100, description="브랜드 패싯")
    gender: Optional[Gender] = Field(None, description="men | women")
    category_id: Optional[str] = Field(None, max_length=50, description="마켓플레이스 카테고리 ID")
    size: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=50)
    material: Optional[str] = Field(None, max_length=50)
    era: Optional[Era] = Field(None, description="70s | 80s | 90s | y2k | 2000s | 2000")
    condition: Optional[ItemCondition] = Field(None, description="new | used")
    min_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    max_price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    strictness: Strictness = Strictness.BALANCED
    sort_by: SortPolicy = SortPolicy.BEST_MATCH
    include_terms: list[str] = Field(default_factory=list, max_length=50)
    exclude_terms: list[str] = Field(default_factory=list, max_length=50)
    require_brand: bool = Field(True, description="브랜드 없는 매물 제외 여부")
    limit: int = Field(DEFAULT_LIMIT, gt=0, le=MAX_LIMIT)
    offset: int = Field(0, ge=0)
    marketplace_id: Optional[str] = Field(None, max_length=50)

    @field_validator("keyword", mode="before")
    @classmethod
    def strip_keyword(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("brand", "category_id", "size", "color", "material", "marketplace_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Optional[str]:
        """빈 문자열 패싯은 미지정으로 취급"""
        if v is None:
            return None
        text = str(v).strip()
        return text or None

    @field_validator("include_terms", "exclude_terms", mode="before")
    @classmethod
    def normalize_terms(cls, v: Any) -> list[str]:
        """콤마 구분 문자열 또는 리스트를 소문자 용어 리스트로 정리"""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        terms: list[str] = []
        for term in v:
            text = str(term).strip().lower()
            if text and text not in terms:
                terms.append(text)
        return terms

    @model_validator(mode="after")
    def validate_price_range(self) -> "SearchRequest":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("min_price must be less than or equal to max_price")
        return self

    @property
    def has_keyword(self) -> bool:
        return bool(self.keyword.strip())


class Listing(BaseModel):
    """엔진 표준 매물 표현 (표시용)

    Normalizer가 생성하고, Enricher가 brand만 한 번 채우며,
    Scorer가 vintage_confidence를 한 번 기록합니다. 이후에는 변경하지 않습니다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="마켓플레이스 상품 ID")
    title: str = ""
    price: float = Field(0.0, ge=0)
    currency: str = "USD"
    condition: str = "Unknown"
    brand: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    material: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    vintage_confidence: int = Field(0, ge=0, le=100, alias="vintageConfidence")
    shipping: Optional[str] = None
    image: Optional[str] = None
    url: str = ""


class SearchResponse(BaseModel):
    """검색 응답: total은 필터 통과 수 (원격 전체 수 아님)"""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)
    limit: int = Field(..., gt=0)
    has_more: bool = Field(..., alias="hasMore")
    items: list[Listing] = Field(default_factory=list)

    @classmethod
    def empty(cls, offset: int, limit: int) -> "SearchResponse":
        return cls(total=0, offset=offset, limit=limit, has_more=False, items=[])


class ErrorResponse(BaseModel):
    """실패 응답 (부분 성공 형태는 없음)"""
    error: str = Field(..., description="사용자 노출용 메시지")
    error_code: str | None = Field(None, description="에러 코드")


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    credentials_configured: bool
