"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from vintage_finder.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """패키지 기준 리소스 절대 경로 반환"""
    # vintage_finder/utils/resource_loader.py -> vintage_finder/utils -> vintage_finder
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except Exception as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_vintage_terms() -> Dict[str, Any]:
    """빈티지 신호(긍정/부정) 용어 사전 로드"""
    data = load_yaml_resource("ranking/terms.yaml")
    return {
        "positive_terms": list(data.get("positive_terms", [])),
        "negative_terms": list(data.get("negative_terms", [])),
        "max_positive_hits": int(data.get("max_positive_hits", 3)),
    }


def load_brand_lists() -> Dict[str, list[str]]:
    """차단 브랜드/패스트패션 브랜드 목록 로드"""
    data = load_yaml_resource("ranking/brands.yaml")
    return {
        "blocked_brands": list(data.get("blocked_brands", [])),
        "fast_fashion_brands": list(data.get("fast_fashion_brands", [])),
    }
