"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 모든 호출은 호출자가 넘긴 timeout_s를 따릅니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import Timeout as CurlTimeout

from vintage_finder.core.config import settings
from vintage_finder.core.exceptions import NetworkTimeoutException, UpstreamRequestError
from vintage_finder.core.logging import logger


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


def _is_timeout(error: BaseException) -> bool:
    # curl_cffi는 CURLE_OPERATION_TIMEDOUT을 Timeout(ConnectTimeout/ReadTimeout 포함)으로 올림
    return isinstance(error, (CurlTimeout, asyncio.TimeoutError, TimeoutError))


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                headers=self.default_headers(),
                allow_redirects=True,
                max_clients=int(settings.http_max_clients),
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": settings.http_user_agent,
            "Accept": "application/json",
        }

    async def get(
        self,
        url: str,
        *,
        timeout_s: float,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """GET 요청

        Raises:
            NetworkTimeoutException: 타임아웃
            UpstreamRequestError: 전송 오류
        """
        sess = await self._ensure_session()
        try:
            resp = await sess.get(url, params=dict(params or {}), headers=headers, timeout=timeout_s)
        except Exception as e:
            raise self._translate_error("GET", url, timeout_s, e) from e
        return HttpResponse(
            status_code=getattr(resp, "status_code", 0) or 0,
            text=getattr(resp, "text", "") or "",
        )

    async def post_form(
        self,
        url: str,
        *,
        data: Mapping[str, str],
        timeout_s: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """application/x-www-form-urlencoded POST 요청

        Raises:
            NetworkTimeoutException: 타임아웃
            UpstreamRequestError: 전송 오류
        """
        sess = await self._ensure_session()
        merged = {"Content-Type": "application/x-www-form-urlencoded", **(headers or {})}
        try:
            resp = await sess.post(url, data=dict(data), headers=merged, timeout=timeout_s)
        except Exception as e:
            raise self._translate_error("POST", url, timeout_s, e) from e
        return HttpResponse(
            status_code=getattr(resp, "status_code", 0) or 0,
            text=getattr(resp, "text", "") or "",
        )

    @staticmethod
    def _translate_error(method: str, url: str, timeout_s: float, error: Exception) -> Exception:
        logger.info(f"[HTTP_CLIENT] {method} failed: {type(error).__name__}: {error!r}")
        if _is_timeout(error):
            return NetworkTimeoutException(operation=f"{method} {url}", timeout_s=timeout_s)
        return UpstreamRequestError(operation=f"{method} {url}", reason=f"{type(error).__name__}: {error}")

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.debug(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {e}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
