"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class ListingEngineException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 설정 관련 예외
class ConfigError(ListingEngineException):
    """필수 설정(자격 증명 등) 누락 - 재시도하지 않음"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "CONFIG_ERROR", details)


# 외부(마켓플레이스) 연동 예외
class UpstreamException(ListingEngineException):
    """외부 API 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "UPSTREAM_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "UPSTREAM_ERROR", details)


class UpstreamAuthError(UpstreamException):
    """토큰 교환(client credentials) 실패"""
    def __init__(self, status: Optional[int], reason: str, details: Optional[dict[str, Any]] = None):
        message = f"eBay OAuth error: {status if status is not None else 'no response'} {reason}".strip()
        super().__init__(message, "UPSTREAM_AUTH_ERROR", details or {"status": status})
        self.status = status


class UpstreamSearchError(UpstreamException):
    """모든 검색 호출이 실패 (부분 실패는 예외 아님)"""
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "UPSTREAM_SEARCH_ERROR", details)


class UpstreamRequestError(UpstreamException):
    """단일 외부 호출 실패 (비정상 상태 코드/전송 오류/응답 파싱 실패)"""
    def __init__(self, operation: str, reason: str, status: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        message = f"{operation} failed: {reason}"
        super().__init__(
            message,
            "UPSTREAM_REQUEST_ERROR",
            details or {"operation": operation, "status": status},
        )
        self.status = status


class NetworkTimeoutException(UpstreamException):
    """네트워크 타임아웃 예외"""
    def __init__(self, operation: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Network timeout during '{operation}' after {timeout_s:.2f}s"
        super().__init__(message, "NETWORK_TIMEOUT",
                        details or {"operation": operation, "timeout_s": timeout_s})


# 예산/시간 관련 예외
class BudgetExhaustedException(ListingEngineException):
    """요청 예산 소진"""
    def __init__(self, stage: str, remaining_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Budget exhausted before '{stage}' (remaining: {remaining_s:.2f}s)"
        super().__init__(message, "BUDGET_EXHAUSTED",
                        details or {"stage": stage, "remaining_s": remaining_s})
