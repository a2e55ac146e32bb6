"""BrandEnricher 테스트 (best-effort 브랜드 보강)."""

from __future__ import annotations

import pytest

from vintage_finder.core.exceptions import UpstreamRequestError
from vintage_finder.engine.budget import BudgetConfig, BudgetManager
from vintage_finder.marketplace.enricher import BrandEnricher
from vintage_finder.schemas import Listing
from tests.fixtures import ITEM_DETAILS


def _listing(item_id, brand=None):
    return Listing(id=item_id, title=f"item {item_id}", brand=brand)


def _budget(total=15.0):
    budget = BudgetManager(BudgetConfig(total_budget=total, token_timeout=0.1, search_timeout=0.1, enrich_timeout=0.1))
    budget.start()
    return budget


@pytest.mark.asyncio
async def test_enriches_blank_brands_only(make_browse_client):
    browse = make_browse_client(details=ITEM_DETAILS)
    enricher = BrandEnricher(browse, max_lookups=40, concurrency=8)
    listings = [_listing("nb-1"), _listing("has", brand="Wrangler"), _listing("nb-2"), _listing("nb-3")]

    result = await enricher.enrich(listings, "tok", "EBAY_US", _budget())

    assert [listing.brand for listing in result] == ["Pendleton", "Wrangler", "Carhartt", None]
    assert "has" not in browse.item_calls


@pytest.mark.asyncio
async def test_failures_are_swallowed(make_browse_client):
    browse = make_browse_client(details={
        "a": UpstreamRequestError(operation="eBay item detail", reason="404", status=404),
        "b": RuntimeError("boom"),
        "c": {"brand": "Patagonia"},
    })
    enricher = BrandEnricher(browse)

    result = await enricher.enrich([_listing("a"), _listing("b"), _listing("c")], "tok", "EBAY_US", _budget())

    assert [listing.brand for listing in result] == [None, None, "Patagonia"]


@pytest.mark.asyncio
async def test_lookup_cap_and_order(make_browse_client):
    browse = make_browse_client()
    enricher = BrandEnricher(browse, max_lookups=40, concurrency=8)
    listings = [_listing(f"id-{i}") for i in range(50)]

    await enricher.enrich(listings, "tok", "EBAY_US", _budget())

    assert browse.item_calls == [f"id-{i}" for i in range(40)]


def test_select_targets_skips_branded():
    enricher = BrandEnricher(browse_client=object(), max_lookups=2, concurrency=8)
    listings = [_listing("a", "X"), _listing("b"), _listing("c", "  "), _listing("d")]

    assert enricher.select_targets(listings) == [1, 2]


@pytest.mark.asyncio
async def test_exhausted_budget_skips_lookups(make_browse_client):
    browse = make_browse_client(details=ITEM_DETAILS)
    enricher = BrandEnricher(browse)
    budget = BudgetManager(BudgetConfig(total_budget=0.4, token_timeout=0.1, search_timeout=0.1, enrich_timeout=0.1))
    budget.start()

    result = await enricher.enrich([_listing("nb-1")], "tok", "EBAY_US", budget)

    assert browse.item_calls == []
    assert result[0].brand is None


@pytest.mark.asyncio
async def test_input_listings_untouched(make_browse_client):
    enricher = BrandEnricher(make_browse_client(details=ITEM_DETAILS))
    original = [_listing("nb-1")]

    result = await enricher.enrich(original, "tok", "EBAY_US", _budget())

    assert original[0].brand is None
    assert result[0].brand == "Pendleton"
