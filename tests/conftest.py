"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (네트워크 호출 없음)

금지:
- 실제 eBay 호출
- 픽스처 데이터 안의 로직
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("EBAY_CLIENT_ID", "")
os.environ.setdefault("EBAY_CLIENT_SECRET", "")

from vintage_finder.marketplace.http_client import HttpResponse  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


def json_response(payload: Any, status_code: int = 200) -> HttpResponse:
    return HttpResponse(status_code=status_code, text=json.dumps(payload))


class FakeClock:
    """주입용 시계 (초 단위, 수동 진행)"""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeHttpClient:
    """SharedHttpClient 대체: 미리 넣어둔 응답을 순서대로 반환

    응답 자리에 예외 인스턴스를 넣으면 그 예외를 던집니다.
    """

    def __init__(self, responses: Optional[list[Any]] = None, delay: float = 0.0):
        self.responses = list(responses or [])
        self.delay = delay
        self.posts: list[dict[str, Any]] = []
        self.gets: list[dict[str, Any]] = []

    def _next(self) -> HttpResponse:
        if not self.responses:
            raise AssertionError("FakeHttpClient ran out of scripted responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def post_form(self, url, *, data, timeout_s, headers=None) -> HttpResponse:
        self.posts.append({"url": url, "data": dict(data), "headers": dict(headers or {}), "timeout_s": timeout_s})
        await asyncio.sleep(self.delay)
        return self._next()

    async def get(self, url, *, timeout_s, params=None, headers=None) -> HttpResponse:
        self.gets.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {}), "timeout_s": timeout_s})
        await asyncio.sleep(self.delay)
        return self._next()


class FakeBrowseClient:
    """BrowseClient 대체

    - pages: {(query, offset): [raw items] | Exception}
      없는 키는 빈 페이지
    - details: {item_id: dict | Exception}
    """

    def __init__(
        self,
        pages: Optional[dict[tuple[str, int], Any]] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.pages = pages or {}
        self.details = details or {}
        self.search_calls: list[dict[str, Any]] = []
        self.item_calls: list[str] = []

    async def search_page(self, token, marketplace_id, request, query, limit, offset, timeout):
        self.search_calls.append(
            {"token": token, "marketplace_id": marketplace_id, "query": query, "limit": limit, "offset": offset, "timeout": timeout}
        )
        await asyncio.sleep(0)
        page = self.pages.get((query, offset), [])
        if isinstance(page, Exception):
            raise page
        return page

    async def get_item(self, token, marketplace_id, item_id, timeout):
        self.item_calls.append(item_id)
        await asyncio.sleep(0)
        detail = self.details.get(item_id, {})
        if isinstance(detail, Exception):
            raise detail
        return detail


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_http_client():
    """FakeHttpClient 팩토리"""
    return FakeHttpClient


@pytest.fixture
def make_browse_client():
    """FakeBrowseClient 팩토리"""
    return FakeBrowseClient


@pytest.fixture
def ok_json():
    """dict → 200 HttpResponse 변환기"""
    return json_response
