"""Search Orchestrator - Main Engine Entry Point

검색 파이프라인:
1. Token (캐시 또는 교환)
2. Query variants
3. Candidate fan-out (variants x pages)
4. Normalize → Enrich (best-effort) → Score
5. Filter → Sort → Paginate

모든 외부 호출은 요청 단위 BudgetManager가 준 타임아웃으로 실행됩니다.
"""

from typing import Optional

from vintage_finder.core.config import settings
from vintage_finder.core.logging import logger
from vintage_finder.marketplace.normalizer import normalize_item
from vintage_finder.ranking import filter_listings, score, sort_listings
from vintage_finder.schemas import SearchRequest, SearchResponse

from .budget import BudgetConfig, BudgetManager
from .paginator import paginate
from .query_builder import build_query_variants


class SearchOrchestrator:
    """매물 검색 오케스트레이터

    공유 상태는 token_cache 하나뿐이고, 예산은 요청마다 새로 만듭니다.
    """

    def __init__(
        self,
        token_cache,
        fetcher,
        enricher,
        budget_config: Optional[BudgetConfig] = None,
        default_marketplace_id: Optional[str] = None,
    ):
        """
        Args:
            token_cache: 토큰 캐시 (get_token 메서드 구현)
            fetcher: 후보 수집기 (fetch 메서드 구현)
            enricher: 브랜드 보강기 (enrich 메서드 구현)
            budget_config: 요청 예산 설정 (기본값: settings)
            default_marketplace_id: 요청에 없을 때 사용할 마켓플레이스
        """
        if not token_cache:
            raise ValueError("token_cache must not be None")
        if not fetcher:
            raise ValueError("fetcher must not be None")
        if not enricher:
            raise ValueError("enricher must not be None")

        self.token_cache = token_cache
        self.fetcher = fetcher
        self.enricher = enricher
        self.budget_config = budget_config or BudgetConfig.from_settings()
        self.default_marketplace_id = default_marketplace_id or settings.ebay_marketplace_id

    async def search(self, request: SearchRequest) -> SearchResponse:
        """검색 실행

        Raises:
            ConfigError: 자격 증명 미설정
            UpstreamAuthError: 토큰 교환 실패
            UpstreamSearchError: 모든 검색 호출 실패
            BudgetExhaustedException: 필수 단계 전에 예산 소진
        """
        if not request.has_keyword:
            logger.debug("[Engine] Blank keyword, returning empty response")
            return SearchResponse.empty(offset=request.offset, limit=request.limit)

        budget = BudgetManager(self.budget_config)
        budget.start()
        marketplace_id = request.marketplace_id or self.default_marketplace_id
        logger.info(
            f"[Engine] Search started: keyword='{request.keyword}', "
            f"sort={request.sort_by.value}, strictness={request.strictness.value}"
        )

        token = await self.token_cache.get_token(budget.require_timeout("token"))
        budget.checkpoint("token")

        variants = build_query_variants(request)
        raw_candidates = await self.fetcher.fetch(
            token,
            marketplace_id,
            request,
            variants,
            budget.require_timeout("search"),
        )
        budget.checkpoint("search")

        listings = [normalize_item(raw) for raw in raw_candidates]
        listings = await self.enricher.enrich(listings, token, marketplace_id, budget)
        budget.checkpoint("enrich")

        # 점수는 원래 키워드 기준 (변형 검색어 아님)
        scored = [score(listing, request.keyword) for listing in listings]
        filtered = filter_listings(scored, request)
        ordered = sort_listings(filtered, request.sort_by)
        response = paginate(ordered, offset=request.offset, limit=request.limit)

        logger.info(
            f"[Engine] Search completed: variants={len(variants)}, candidates={len(listings)}, "
            f"filtered={response.total}, returned={len(response.items)}, elapsed={budget.elapsed():.2f}s"
        )
        logger.debug(f"[Engine] Budget report: {budget.get_report()}")
        return response
