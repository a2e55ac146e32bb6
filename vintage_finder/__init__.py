"""Vintage Finder - 빈티지 매물 검색/랭킹 엔진"""

__version__ = "0.1.0"
