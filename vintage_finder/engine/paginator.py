"""Paginator - 정렬된 필터 결과 → 응답 페이지"""

from typing import Sequence

from vintage_finder.schemas import Listing, SearchResponse


def paginate(listings: Sequence[Listing], offset: int, limit: int) -> SearchResponse:
    """앞에서부터 limit개를 잘라 응답 생성

    후보 창은 이미 offset에서 시작했으므로 여기서는 다시 건너뛰지 않습니다.
    hasMore는 "페이지가 꽉 찼는가"로 판단하는 근사치입니다.
    """
    page = list(listings[:limit])
    return SearchResponse(
        total=len(listings),
        offset=offset,
        limit=limit,
        has_more=len(page) == limit,
        items=page,
    )
