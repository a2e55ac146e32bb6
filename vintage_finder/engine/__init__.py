"""Engine Layer - Search Pipeline Orchestration

- SearchOrchestrator: 검색 실행 진입점
- BudgetManager: 요청 단위 시간 예산
- build_query_variants: 검색어 변형
- paginate: 응답 페이지 생성
"""

# budget은 marketplace.enricher가 참조하므로 먼저 로드
from .budget import BudgetConfig, BudgetManager
from .paginator import paginate
from .query_builder import build_query_variants
from .orchestrator import SearchOrchestrator

__all__ = [
    "SearchOrchestrator",
    "BudgetManager",
    "BudgetConfig",
    "build_query_variants",
    "paginate",
]
