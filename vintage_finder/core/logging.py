"""로깅 설정 + 로그용 마스킹

- 로거는 "vintage_finder" 하나만 구성 (핸들러 중복 등록 없음)
- production에서는 DEBUG를 INFO로 올리고 위치 정보 없는 짧은 포맷 사용
- sanitize_for_log는 자격 증명 값만 *** 로 가리고 나머지 문맥은 남김
"""
import logging
import os
import re
import sys
from typing import Optional

from vintage_finder.core.config import settings


LOGGER_NAME = "vintage_finder"

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# "Bearer <token>", "Basic <base64>" (16자 이상)
_AUTH_SCHEME_RE = re.compile(r"\b(bearer|basic)\s+[A-Za-z0-9\-._~+/=^#|:]{16,}", re.IGNORECASE)

# key=value / "key": "value" (폼 본문, JSON 본문, 쿼리스트링)
_SECRET_PAIR_RE = re.compile(
    r"""(["']?(?:access_token|refresh_token|client_secret|client_id|password|secret|token)["']?\s*[:=]\s*["']?)"""
    r"""[^\s"',&}]+""",
    re.IGNORECASE,
)


def setup_logging(level_name: Optional[str] = None, production: Optional[bool] = None) -> logging.Logger:
    """로거 초기화 및 설정 (여러 번 호출해도 핸들러는 하나)"""
    logger = logging.getLogger(LOGGER_NAME)
    production = IS_PRODUCTION if production is None else production

    log_level = (level_name or settings.log_level).upper()
    if production and log_level == "DEBUG":
        log_level = "INFO"

    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt=_PRODUCTION_FORMAT if production else _DEBUG_FORMAT,
        datefmt=_DATE_FORMAT,
    )

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로깅/오류 사유용 문자열 정리

    Authorization 스킴 뒤의 자격 증명과 token/secret/password 류 키의 값만
    마스킹한 뒤 max_length로 자릅니다.

    예:
        'Bearer v^1.1#abc'                → 'Bearer ***'
        '{"access_token": "x", "a": 1}'   → '{"access_token": "***", "a": 1}'
        'grant_type=x&client_secret=abc'  → 'grant_type=x&client_secret=***'
    """
    if not value:
        return "[empty]"

    result = _AUTH_SCHEME_RE.sub(lambda m: f"{m.group(1)} ***", value)
    result = _SECRET_PAIR_RE.sub(lambda m: f"{m.group(1)}***", result)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
