"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, search_router, get_orchestrator, get_token_cache

__all__ = ["health_router", "search_router", "get_orchestrator", "get_token_cache"]
