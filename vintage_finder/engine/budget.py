"""Budget Manager - Per-request Time Budget Management

예산 할당 구조 (기본값):
- 전체: 15초
- Token: 3초
- Search (후보 수집 fan-out): 6초
- Enrich (브랜드 보강): 5초
- 버퍼: 1초

각 외부 호출의 타임아웃은 min(단계 타임아웃, 남은 예산)입니다.
"""

from dataclasses import dataclass
from time import time
from typing import Optional

from vintage_finder.core.config import settings
from vintage_finder.core.exceptions import BudgetExhaustedException


@dataclass
class BudgetConfig:
    """예산 설정"""

    total_budget: float = 15.0  # 전체 예산 (초)
    token_timeout: float = 3.0  # 토큰 교환
    search_timeout: float = 6.0  # 검색 호출 1건
    enrich_timeout: float = 5.0  # 상세 조회 1건
    min_remaining: float = 0.5  # 실행 최소 여유 시간 (초)

    def __post_init__(self):
        """설정 검증"""
        sum_timeouts = self.token_timeout + self.search_timeout + self.enrich_timeout
        if sum_timeouts > self.total_budget:
            raise ValueError(
                f"Sum of timeouts ({sum_timeouts}s) exceeds total budget ({self.total_budget}s)"
            )

    @classmethod
    def from_settings(cls) -> "BudgetConfig":
        return cls(
            total_budget=settings.budget_total_s,
            token_timeout=settings.budget_token_s,
            search_timeout=settings.budget_search_s,
            enrich_timeout=settings.budget_enrich_s,
        )


class BudgetManager:
    """요청 단위 시간 예산 관리자

    요청마다 새 인스턴스를 만들어 사용합니다 (동시 요청 간 공유 금지).

    Usage:
        budget = BudgetManager(config)
        budget.start()

        timeout = budget.require_timeout("search")
        ...
        budget.checkpoint("search")

        if not budget.is_exhausted():
            ...  # best-effort 단계 실행
    """

    STAGES = ("token", "search", "enrich")

    def __init__(self, config: Optional[BudgetConfig] = None):
        self.config = config or BudgetConfig()
        self.start_time: Optional[float] = None
        self._checkpoints: dict[str, float] = {}

    def start(self) -> None:
        """예산 측정 시작"""
        self.start_time = time()
        self._checkpoints.clear()

    def checkpoint(self, name: str) -> None:
        """체크포인트 기록

        Raises:
            RuntimeError: start()가 호출되지 않은 경우
        """
        if self.start_time is None:
            raise RuntimeError("Budget not started. Call start() first.")
        self._checkpoints[name] = time() - self.start_time

    def elapsed(self) -> float:
        """경과 시간 (초). start() 전에는 0.0"""
        if self.start_time is None:
            return 0.0
        return time() - self.start_time

    def remaining(self) -> float:
        """남은 예산 (초). 음수가 되지 않도록 보장."""
        return max(0.0, self.config.total_budget - self.elapsed())

    def is_exhausted(self) -> bool:
        """최소 여유 시간보다 적게 남았는지 여부"""
        return self.remaining() < self.config.min_remaining

    def get_timeout_for(self, stage: str) -> float:
        """단계별 타임아웃: 남은 예산과 단계 설정값 중 작은 값"""
        remaining = self.remaining()

        if stage == "token":
            return min(self.config.token_timeout, remaining)
        elif stage == "search":
            return min(self.config.search_timeout, remaining)
        elif stage == "enrich":
            return min(self.config.enrich_timeout, remaining)
        else:
            return remaining

    def require_timeout(self, stage: str) -> float:
        """필수 단계용 타임아웃. 예산이 소진됐으면 예외.

        Raises:
            BudgetExhaustedException: 최소 여유 시간보다 적게 남은 경우
        """
        if self.is_exhausted():
            raise BudgetExhaustedException(stage=stage, remaining_s=self.remaining())
        return self.get_timeout_for(stage)

    def get_report(self) -> dict:
        """예산 사용 리포트"""
        return {
            "total_budget": self.config.total_budget,
            "elapsed": self.elapsed(),
            "remaining": self.remaining(),
            "checkpoints": self._checkpoints.copy(),
            "is_exhausted": self.is_exhausted(),
        }
