"""eBay Browse API client (item_summary search + item detail).

요청 파라미터/필터 문법 변환만 담당하고, 재시도나 병렬화는 호출자 몫입니다.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

from vintage_finder.core.exceptions import UpstreamRequestError
from vintage_finder.core.logging import logger, sanitize_for_log
from vintage_finder.schemas import ItemCondition, SearchRequest

from .endpoints import MARKETPLACE_HEADER, EbayEndpoints
from .http_client import SharedHttpClient


CONDITION_IDS = {
    ItemCondition.NEW: "1000",
    ItemCondition.USED: "3000",
}


def _format_amount(value: float) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def build_filter(request: SearchRequest) -> Optional[str]:
    """가격/상태 조건을 Browse filter 문법으로 변환

    예: "price:[0..120],priceCurrency:USD,conditionIds:{3000}"
    """
    filters: list[str] = []

    if request.min_price is not None or request.max_price is not None:
        low = _format_amount(request.min_price) if request.min_price is not None else "0"
        high = _format_amount(request.max_price) if request.max_price is not None else ""
        filters.append(f"price:[{low}..{high}]")
        filters.append("priceCurrency:USD")

    if request.condition is not None:
        filters.append(f"conditionIds:{{{CONDITION_IDS[request.condition]}}}")

    return ",".join(filters) if filters else None


def build_aspect_filter(request: SearchRequest) -> Optional[str]:
    """브랜드 + 카테고리가 모두 있을 때만 aspect_filter 사용"""
    if not request.brand or not request.category_id:
        return None
    escaped_brand = request.brand.replace("'", "\\'")
    return f"categoryId:{request.category_id},Brand:{{{escaped_brand}}}"


def build_search_params(request: SearchRequest, query: str, limit: int, offset: int) -> Dict[str, str]:
    params: Dict[str, str] = {
        "q": query,
        "limit": str(limit),
        "offset": str(offset),
    }
    if request.category_id:
        params["category_ids"] = request.category_id

    aspect_filter = build_aspect_filter(request)
    if aspect_filter:
        params["aspect_filter"] = aspect_filter

    filter_value = build_filter(request)
    if filter_value:
        params["filter"] = filter_value
    return params


def auth_headers(token: str, marketplace_id: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        MARKETPLACE_HEADER: marketplace_id,
    }


class BrowseClient:
    def __init__(self, http_client: SharedHttpClient, endpoints: Optional[EbayEndpoints] = None) -> None:
        self.http = http_client
        self.endpoints = endpoints or EbayEndpoints.from_settings()

    async def search_page(
        self,
        token: str,
        marketplace_id: str,
        request: SearchRequest,
        query: str,
        limit: int,
        offset: int,
        timeout: float,
    ) -> list[Any]:
        """검색 1페이지 호출 → itemSummaries (없으면 빈 리스트)

        Raises:
            UpstreamRequestError: 비정상 상태 코드 또는 JSON 파싱 실패
            NetworkTimeoutException: 타임아웃
        """
        params = build_search_params(request, query, limit, offset)
        response = await self.http.get(
            self.endpoints.search_url,
            params=params,
            headers=auth_headers(token, marketplace_id),
            timeout_s=timeout,
        )

        if not response.ok:
            raise UpstreamRequestError(
                operation=f"eBay Browse search ({query})",
                reason=f"{response.status_code} {sanitize_for_log(response.text, 200)}",
                status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamRequestError(
                operation=f"eBay Browse search ({query})",
                reason="invalid JSON body",
                status=response.status_code,
            ) from e

        items = data.get("itemSummaries") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.debug(f"[Browse] No itemSummaries: query='{query}', offset={offset}")
            return []
        return items

    async def get_item(self, token: str, marketplace_id: str, item_id: str, timeout: float) -> Any:
        """상품 상세 조회 (브랜드 보강 전용)

        Raises:
            UpstreamRequestError: 비정상 상태 코드 또는 JSON 파싱 실패
            NetworkTimeoutException: 타임아웃
        """
        url = f"{self.endpoints.item_url}/{quote(item_id, safe='')}"
        response = await self.http.get(
            url,
            headers=auth_headers(token, marketplace_id),
            timeout_s=timeout,
        )
        if not response.ok:
            raise UpstreamRequestError(
                operation="eBay item detail",
                reason=str(response.status_code),
                status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamRequestError(operation="eBay item detail", reason="invalid JSON body") from e
