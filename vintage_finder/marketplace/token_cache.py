"""OAuth 토큰 캐시 (client credentials, single-flight)

- 캐시된 토큰이 유효하면 그대로 반환 (외부 호출 없음)
- 미스 시 진행 중인 교환 하나를 공유: 동시에 미스가 나도 교환 호출은 1회
  (실패해도 대기자들이 같은 예외를 받고, 다음 호출에서 새로 교환)
- 만료 시각 = 발급 만료 - 안전 마진(기본 60초)
"""

from __future__ import annotations

import asyncio
import base64
from dataclasses import dataclass
from time import time
from typing import Callable, Optional

from vintage_finder.core.config import settings
from vintage_finder.core.exceptions import ConfigError, UpstreamAuthError, UpstreamException
from vintage_finder.core.logging import logger, sanitize_for_log

from .endpoints import EbayEndpoints
from .http_client import SharedHttpClient


@dataclass(frozen=True)
class CachedToken:
    token: str
    expires_at: float


class TokenCache:
    """프로세스(또는 서비스 핸들) 단위로 하나만 만들어 주입합니다."""

    def __init__(
        self,
        http_client: SharedHttpClient,
        endpoints: Optional[EbayEndpoints] = None,
        *,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        scope: Optional[str] = None,
        expiry_margin_s: Optional[int] = None,
        clock: Callable[[], float] = time,
    ) -> None:
        self.http = http_client
        self.endpoints = endpoints or EbayEndpoints.from_settings()
        self.client_id = settings.ebay_client_id if client_id is None else client_id
        self.client_secret = settings.ebay_client_secret if client_secret is None else client_secret
        self.scope = scope or settings.ebay_oauth_scope
        self.expiry_margin_s = settings.token_expiry_margin_s if expiry_margin_s is None else expiry_margin_s
        self._clock = clock
        self._cached: Optional[CachedToken] = None
        # 진행 중인 교환 (동시 미스는 모두 이 결과/예외를 공유)
        self._inflight: Optional["asyncio.Future[str]"] = None

    def _current(self) -> Optional[str]:
        cached = self._cached
        if cached is not None and self._clock() < cached.expires_at:
            return cached.token
        return None

    def invalidate(self) -> None:
        self._cached = None

    async def get_token(self, timeout: float) -> str:
        """유효한 bearer 토큰 반환

        Raises:
            ConfigError: client id/secret 미설정
            UpstreamAuthError: 교환 실패 (비정상 상태/응답)
        """
        token = self._current()
        if token:
            return token

        inflight = self._inflight
        if inflight is None:
            inflight = asyncio.ensure_future(self._exchange(timeout))
            inflight.add_done_callback(self._clear_inflight)
            self._inflight = inflight
        else:
            logger.debug("[TokenCache] Joining in-flight exchange")

        # 한 호출자의 취소가 공유 교환을 취소하지 않도록 shield
        return await asyncio.shield(inflight)

    def _clear_inflight(self, task: "asyncio.Future[str]") -> None:
        if self._inflight is task:
            self._inflight = None
        # 대기자가 모두 취소된 경우에도 예외 미조회 경고가 남지 않게
        if not task.cancelled():
            task.exception()

    def _auth_header(self) -> str:
        client_id = (self.client_id or "").strip()
        client_secret = (self.client_secret or "").strip()
        if not client_id or not client_secret:
            raise ConfigError(
                "Missing eBay credentials. Set EBAY_CLIENT_ID and EBAY_CLIENT_SECRET."
            )
        encoded = base64.b64encode(f"{client_id}:{client_secret}".encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    async def _exchange(self, timeout: float) -> str:
        auth_header = self._auth_header()
        logger.info("[TokenCache] Cache miss, requesting client-credentials token")

        try:
            response = await self.http.post_form(
                self.endpoints.oauth_url,
                data={"grant_type": "client_credentials", "scope": self.scope},
                headers={"Authorization": auth_header},
                timeout_s=timeout,
            )
        except UpstreamException as e:
            raise UpstreamAuthError(status=None, reason=e.message) from e

        if not response.ok:
            logger.warning(f"[TokenCache] Exchange rejected: status={response.status_code}")
            raise UpstreamAuthError(status=response.status_code, reason=sanitize_for_log(response.text, 300))

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamAuthError(status=response.status_code, reason="invalid JSON body") from e

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str) or not access_token:
            raise UpstreamAuthError(status=response.status_code, reason="response missing access_token")

        try:
            expires_in = float(payload.get("expires_in", 0))
        except (TypeError, ValueError):
            expires_in = 0.0

        self._cached = CachedToken(
            token=access_token,
            expires_at=self._clock() + expires_in - self.expiry_margin_s,
        )
        logger.info(f"[TokenCache] Token cached (expires_in={expires_in:.0f}s)")
        return access_token
