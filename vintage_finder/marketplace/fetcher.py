"""Candidate Fetcher - 쿼리 변형 x 페이지 fan-out 수집

- 모든 호출을 동시에 실행하고 전부 끝날 때까지 기다린 뒤 결과를 검사 (settle-all)
- 하나라도 성공하면 성공분의 합집합으로 진행, 실패분은 버림
- 전부 실패하면 첫 실패 사유로 UpstreamSearchError
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, Optional, Sequence

from vintage_finder.core.config import settings
from vintage_finder.core.exceptions import ListingEngineException, UpstreamSearchError
from vintage_finder.core.logging import logger
from vintage_finder.schemas import SearchRequest

from .browse_client import BrowseClient


def _failure_message(error: BaseException) -> str:
    if isinstance(error, ListingEngineException):
        return error.message
    return str(error) or type(error).__name__


def merge_candidates(pages: Iterable[Sequence[Any]]) -> list[Any]:
    """itemId 기준 중복 제거 (나중에 본 것이 우선, 순서는 최초 등장 위치)"""
    merged: dict[str, Any] = {}
    for page in pages:
        for item in page:
            item_id = item.get("itemId") if isinstance(item, dict) else None
            if isinstance(item_id, str) and item_id:
                merged[item_id] = item
    return list(merged.values())


class CandidateFetcher:
    def __init__(self, browse_client: BrowseClient, candidate_pages: Optional[int] = None) -> None:
        self.browse = browse_client
        self.candidate_pages = candidate_pages or settings.search_candidate_pages

    async def fetch(
        self,
        token: str,
        marketplace_id: str,
        request: SearchRequest,
        variants: Sequence[str],
        timeout: float,
    ) -> list[Any]:
        """후보 원본(raw) 목록 수집

        Raises:
            UpstreamSearchError: 모든 호출이 실패한 경우
        """
        jobs = []
        for variant in variants:
            for page in range(self.candidate_pages):
                page_offset = request.offset + page * request.limit
                jobs.append(
                    self.browse.search_page(
                        token,
                        marketplace_id,
                        request,
                        variant,
                        request.limit,
                        page_offset,
                        timeout,
                    )
                )

        logger.debug(f"[Fetcher] Dispatching {len(jobs)} calls for {len(variants)} variant(s)")
        results = await asyncio.gather(*jobs, return_exceptions=True)

        successes: list[Sequence[Any]] = []
        failures: list[BaseException] = []
        for result in results:
            if isinstance(result, BaseException):
                failures.append(result)
            else:
                successes.append(result)

        if not successes:
            message = _failure_message(failures[0]) if failures else "Search failed"
            logger.warning(f"[Fetcher] All {len(results)} calls failed: {message}")
            raise UpstreamSearchError(message, details={"failed_calls": len(failures)})

        if failures:
            logger.info(
                f"[Fetcher] Partial failure: {len(failures)}/{len(results)} calls dropped "
                f"(first: {type(failures[0]).__name__})"
            )

        merged = merge_candidates(successes)
        logger.info(f"[Fetcher] Collected {len(merged)} unique candidates from {len(successes)} pages")
        return merged
