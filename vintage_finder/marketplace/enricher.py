"""Brand Enricher - 브랜드 누락 매물 상세 조회 (best-effort)

- 브랜드가 비어 있는 매물 중 앞에서부터 최대 40건만 조회
- 8건씩 동시 실행, 배치는 순차 처리
- 개별 실패는 삼키고 결과(EnrichmentOutcome)로만 남김 → 요청 실패로 이어지지 않음
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Sequence

from vintage_finder.core.config import settings
from vintage_finder.core.logging import logger
from vintage_finder.engine.budget import BudgetManager
from vintage_finder.schemas import Listing
from vintage_finder.utils.text import has_text

from .browse_client import BrowseClient
from .normalizer import read_brand


@dataclass(frozen=True)
class EnrichmentOutcome:
    """매물 1건의 보강 결과: brand가 있으면 성공, 아니면 skipped(reason)"""

    index: int
    brand: Optional[str] = None
    reason: Optional[str] = None

    @property
    def enriched(self) -> bool:
        return has_text(self.brand)


class BrandEnricher:
    def __init__(
        self,
        browse_client: BrowseClient,
        max_lookups: Optional[int] = None,
        concurrency: Optional[int] = None,
    ) -> None:
        self.browse = browse_client
        self.max_lookups = max_lookups or settings.enrich_max_lookups
        self.concurrency = concurrency or settings.enrich_concurrency

    def select_targets(self, listings: Sequence[Listing]) -> list[int]:
        """브랜드가 없는 매물의 인덱스 (상한 적용)"""
        targets: list[int] = []
        for index, listing in enumerate(listings):
            if not has_text(listing.brand):
                targets.append(index)
            if len(targets) >= self.max_lookups:
                break
        return targets

    async def enrich(
        self,
        listings: Sequence[Listing],
        token: str,
        marketplace_id: str,
        budget: BudgetManager,
    ) -> list[Listing]:
        output = list(listings)
        targets = self.select_targets(output)
        if not targets:
            return output

        enriched_count = 0
        for start in range(0, len(targets), self.concurrency):
            if budget.is_exhausted():
                logger.info(
                    f"[Enricher] Budget exhausted, skipping {len(targets) - start} remaining lookups"
                )
                break

            timeout = budget.get_timeout_for("enrich")
            batch = targets[start:start + self.concurrency]
            outcomes = await asyncio.gather(
                *(self._lookup(index, output[index], token, marketplace_id, timeout) for index in batch)
            )

            for outcome in outcomes:
                if outcome.enriched:
                    output[outcome.index] = output[outcome.index].model_copy(
                        update={"brand": outcome.brand.strip()}
                    )
                    enriched_count += 1

        logger.debug(f"[Enricher] Enriched {enriched_count}/{len(targets)} listings")
        return output

    async def _lookup(
        self,
        index: int,
        listing: Listing,
        token: str,
        marketplace_id: str,
        timeout: float,
    ) -> EnrichmentOutcome:
        if not listing.id:
            return EnrichmentOutcome(index=index, reason="missing item id")
        try:
            detail = await self.browse.get_item(token, marketplace_id, listing.id, timeout)
        except Exception as e:
            # best-effort: 개별 실패는 요청 수준 오류가 아님
            logger.debug(f"[Enricher] Lookup skipped: id={listing.id}, error={type(e).__name__}")
            return EnrichmentOutcome(index=index, reason=type(e).__name__)

        brand = read_brand(detail)
        if not brand:
            return EnrichmentOutcome(index=index, reason="no brand in detail")
        return EnrichmentOutcome(index=index, brand=brand)
