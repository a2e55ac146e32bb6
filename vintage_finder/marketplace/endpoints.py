"""eBay endpoint resolution (production / sandbox)."""

from __future__ import annotations

from dataclasses import dataclass

from vintage_finder.core.config import settings


PRODUCTION_BASE_URL = "https://api.ebay.com"
SANDBOX_BASE_URL = "https://api.sandbox.ebay.com"

MARKETPLACE_HEADER = "X-EBAY-C-MARKETPLACE-ID"


@dataclass(frozen=True)
class EbayEndpoints:
    base_url: str

    @property
    def oauth_url(self) -> str:
        return f"{self.base_url}/identity/v1/oauth2/token"

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/buy/browse/v1/item_summary/search"

    @property
    def item_url(self) -> str:
        return f"{self.base_url}/buy/browse/v1/item"

    @classmethod
    def for_environment(cls, env: str) -> "EbayEndpoints":
        if (env or "").strip().lower() == "sandbox":
            return cls(base_url=SANDBOX_BASE_URL)
        return cls(base_url=PRODUCTION_BASE_URL)

    @classmethod
    def from_settings(cls) -> "EbayEndpoints":
        return cls.for_environment(settings.ebay_env)
