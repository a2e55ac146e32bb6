"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter

from vintage_finder import __version__
from vintage_finder.core.config import settings
from vintage_finder.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 자격 증명 설정 여부 (외부 호출은 하지 않음)
    """
    credentials_ok = settings.has_credentials
    return HealthResponse(
        status="ok" if credentials_ok else "degraded",
        timestamp=datetime.now(),
        version=__version__,
        credentials_configured=credentials_ok,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "빈티지 매물 검색 서비스",
        "version": __version__,
        "docs": "/docs",
    }
