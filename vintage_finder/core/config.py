"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # eBay 자격 증명 (비어 있으면 토큰 발급 시 ConfigError)
    ebay_env: str = "production"
    ebay_client_id: str = ""
    ebay_client_secret: str = ""
    ebay_marketplace_id: str = "EBAY_US"
    ebay_oauth_scope: str = "https://api.ebay.com/oauth/api_scope"

    # 토큰 만료 안전 마진 (초)
    token_expiry_margin_s: int = 60

    # 후보 수집: 쿼리 변형마다 요청할 페이지 수
    search_candidate_pages: int = 5

    # 브랜드 보강(상세 조회) 상한
    enrich_max_lookups: int = 40
    enrich_concurrency: int = 8

    # HTTP
    http_user_agent: str = "vintage-finder/0.1 (+https://github.com/)"
    http_max_clients: int = 20

    # 요청 단위 예산 (초)
    # NOTE: 단계별 타임아웃 합계는 budget_total_s 이하여야 합니다.
    budget_total_s: float = 15.0
    budget_token_s: float = 3.0
    budget_search_s: float = 6.0
    budget_enrich_s: float = 5.0

    # API 하드 캡: 예산보다 조금 길게 걸어 매달린 요청을 끊습니다.
    api_search_timeout_s: float = 20.0

    # API
    api_title: str = "Vintage Finder"
    api_version: str = "0.1.0"
    api_description: str = "빈티지 매물 검색 결과를 정제/점수화/정렬해 반환합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("ebay_env")
    @classmethod
    def validate_ebay_env(cls, v: str) -> str:
        value = (v or "").strip().lower()
        if value not in {"production", "sandbox"}:
            raise ValueError("ebay_env must be 'production' or 'sandbox'")
        return value

    @field_validator(
        "token_expiry_margin_s",
        "search_candidate_pages",
        "enrich_max_lookups",
        "enrich_concurrency",
        "http_max_clients",
    )
    @classmethod
    def validate_positive_counts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("counts must be positive")
        return v

    @field_validator(
        "budget_total_s",
        "budget_token_s",
        "budget_search_s",
        "budget_enrich_s",
        "api_search_timeout_s",
    )
    @classmethod
    def validate_budgets(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("budgets must be positive")
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.ebay_client_id.strip() and self.ebay_client_secret.strip())

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
