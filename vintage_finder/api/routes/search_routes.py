"""Search Routes (Engine Layer)

HTTP 쿼리 파라미터 → SearchRequest 변환 후 SearchOrchestrator에 위임합니다.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from vintage_finder.core.config import settings
from vintage_finder.core.exceptions import ListingEngineException
from vintage_finder.core.logging import logger, sanitize_for_log
from vintage_finder.engine import SearchOrchestrator
from vintage_finder.marketplace import (
    BrandEnricher,
    BrowseClient,
    CandidateFetcher,
    EbayEndpoints,
    SharedHttpClient,
    TokenCache,
    get_shared_http_client,
)
from vintage_finder.schemas import ErrorResponse, SearchRequest, SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])

# 싱글톤 서비스
_token_cache: Optional[TokenCache] = None
_orchestrator: Optional[SearchOrchestrator] = None


def get_http_client() -> SharedHttpClient:
    return get_shared_http_client()


def get_token_cache(http_client: SharedHttpClient = Depends(get_http_client)) -> TokenCache:
    """TokenCache 싱글톤 (프로세스 전체에서 토큰 공유)"""
    global _token_cache
    if _token_cache is None:
        _token_cache = TokenCache(http_client, EbayEndpoints.from_settings())
    return _token_cache


def get_orchestrator(
    http_client: SharedHttpClient = Depends(get_http_client),
    token_cache: TokenCache = Depends(get_token_cache),
) -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤"""
    global _orchestrator
    if _orchestrator is None:
        browse = BrowseClient(http_client, EbayEndpoints.from_settings())
        _orchestrator = SearchOrchestrator(
            token_cache=token_cache,
            fetcher=CandidateFetcher(browse),
            enricher=BrandEnricher(browse),
        )
    return _orchestrator


def parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() == "true"


def _error(status_code: int, message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, error_code=error_code).model_dump(),
    )


_ERROR_MESSAGES = {
    "CONFIG_ERROR": "Search is not configured on this server.",
    "UPSTREAM_AUTH_ERROR": "Could not authenticate with the marketplace.",
    "UPSTREAM_SEARCH_ERROR": "The marketplace search failed. Please try again.",
    "NETWORK_TIMEOUT": "The marketplace did not respond in time.",
    "BUDGET_EXHAUSTED": "Search took too long. Please try again.",
}


def _get_error_message(error: ListingEngineException) -> str:
    """에러 코드별 사용자 메시지 (내부 사유는 노출하지 않음)"""
    return _ERROR_MESSAGES.get(error.error_code, "Search failed. Please try again.")


@router.get(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_listings(
    keyword: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    gender: Optional[str] = Query(None),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    size: Optional[str] = Query(None),
    color: Optional[str] = Query(None),
    material: Optional[str] = Query(None),
    era: Optional[str] = Query(None),
    condition: Optional[str] = Query(None),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    strictness: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    include_terms: Optional[str] = Query(None, alias="includeTerms"),
    exclude_terms: Optional[str] = Query(None, alias="excludeTerms"),
    require_brand: Optional[str] = Query(None, alias="requireBrand"),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    marketplace_id: Optional[str] = Query(None, alias="marketplaceId"),
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """빈티지 매물 검색 API

    Flow:
        1. 쿼리 파라미터 검증 (실패 시 400)
        2. Engine에 위임 (Token → Fan-out → Enrich → Score → Filter → Sort)
        3. 엔진 오류는 500 + error_code
    """
    raw = {
        "keyword": keyword,
        "brand": brand,
        "gender": gender,
        "category_id": category_id,
        "size": size,
        "color": color,
        "material": material,
        "era": era,
        "condition": condition,
        "min_price": min_price,
        "max_price": max_price,
        "strictness": strictness,
        "sort_by": sort_by,
        "include_terms": include_terms,
        "exclude_terms": exclude_terms,
        "limit": limit,
        "offset": offset,
        "marketplace_id": marketplace_id,
    }
    # 빈 값은 미지정으로 취급해 기본값을 사용
    payload = {k: v.strip() for k, v in raw.items() if v is not None and v.strip()}
    payload["require_brand"] = parse_bool(require_brand, default=True)

    try:
        request = SearchRequest(**payload)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or "request"
        logger.warning(f"[API] Input validation failed: field={field}")
        return _error(400, f"Invalid parameter '{field}': {first.get('msg', 'invalid value')}", "VALIDATION_ERROR")

    logger.info(f"[API] Search request: keyword='{sanitize_for_log(request.keyword)}'")

    try:
        return await asyncio.wait_for(
            orchestrator.search(request),
            timeout=settings.api_search_timeout_s,
        )
    except asyncio.TimeoutError:
        logger.error(f"[API] Timeout: keyword='{sanitize_for_log(request.keyword)}'")
        return _error(500, "Search took too long. Please try again.", "TIMEOUT")
    except ListingEngineException as e:
        logger.error(f"[API] Search failed: {e}")
        return _error(500, _get_error_message(e), e.error_code)
    except Exception:
        logger.error(f"[API] Unexpected error: keyword='{sanitize_for_log(request.keyword)}'", exc_info=True)
        return _error(500, "Search failed. Please try again.", "INTERNAL_ERROR")
