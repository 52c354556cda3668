"""
Upstream services - sync entry points used by the request handlers.

Each call opens a fresh adapter, runs it to completion with asyncio.run
and closes its HTTP client. Requests share no connection pool, so a slow
upstream only ever blocks the request that is waiting on it.
"""

import asyncio

from django.conf import settings

from foodcourt_schemas import MenuItem, Restaurant

from apps.web.upstream.adapter import SwiggyAdapter


def get_adapter() -> SwiggyAdapter:
    """Build an adapter pointed at the configured upstream."""
    return SwiggyAdapter(base_url=settings.UPSTREAM_BASE_URL)


def fetch_restaurants(
    lat: float | None = None, lng: float | None = None
) -> list[Restaurant]:
    """
    Fetch restaurants near a point.

    Raises:
        UpstreamError: If the upstream request fails.
    """

    async def _run() -> list[Restaurant]:
        adapter = get_adapter()
        try:
            return await adapter.get_restaurants(lat, lng)
        finally:
            await adapter.close()

    return asyncio.run(_run())


def fetch_menu(
    restaurant_id: str, lat: float | None = None, lng: float | None = None
) -> list[MenuItem]:
    """
    Fetch the flattened menu of one restaurant.

    Raises:
        UpstreamError: If the upstream request fails.
    """

    async def _run() -> list[MenuItem]:
        adapter = get_adapter()
        try:
            return await adapter.get_menu(restaurant_id, lat, lng)
        finally:
            await adapter.close()

    return asyncio.run(_run())
