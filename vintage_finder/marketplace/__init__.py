"""eBay marketplace integration (token, search fan-out, normalization, enrichment).

공개 API는 이 파일에서만 export합니다.
"""

from .browse_client import BrowseClient, build_filter, build_search_params
from .endpoints import EbayEndpoints
from .enricher import BrandEnricher, EnrichmentOutcome
from .fetcher import CandidateFetcher, merge_candidates
from .http_client import HttpResponse, SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .normalizer import normalize_item, read_brand
from .token_cache import TokenCache

__all__ = [
        "BrowseClient",
        "build_filter",
        "build_search_params",
        "EbayEndpoints",
        "BrandEnricher",
        "EnrichmentOutcome",
        "CandidateFetcher",
        "merge_candidates",
        "HttpResponse",
        "SharedHttpClient",
        "get_shared_http_client",
        "shutdown_shared_http_client",
        "normalize_item",
        "read_brand",
        "TokenCache",
]
