"""Schemas package - export only."""

from .search_schema import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    Era,
    ErrorResponse,
    Gender,
    HealthResponse,
    ItemCondition,
    Listing,
    SearchRequest,
    SearchResponse,
    SortPolicy,
    Strictness,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "Era",
    "ErrorResponse",
    "Gender",
    "HealthResponse",
    "ItemCondition",
    "Listing",
    "SearchRequest",
    "SearchResponse",
    "SortPolicy",
    "Strictness",
]
