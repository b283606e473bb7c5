"""Market price lookup around an address.

The result is only displayed next to the analysis; it is never fed into
the deal computation.
"""

import logging
from decimal import Decimal, InvalidOperation

import httpx

from flipcalc.config import settings
from flipcalc.models.errors import MarketLookupError
from flipcalc.models.market import Listing, MarketSnapshot

logger = logging.getLogger(__name__)


def market_map_url(address: str, base_url: str | None = None) -> str:
    """Link to the listings map for an address (map-link deployment variant)."""
    url = httpx.URL(base_url or settings.map_base_url, params={"q": address.strip()})
    return str(url)


def _decimal(value) -> Decimal:
    return Decimal(str(value))


class MarketLookupClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key or settings.market_api_key
        self.base_url = (base_url or settings.market_api_url).rstrip("/")
        self.timeout = timeout or settings.market_timeout_seconds
        self.headers = {"X-Api-Key": self.api_key, "Accept": "application/json"}

    async def _get(self, endpoint: str, params: dict | None = None) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(
                f"{self.base_url}{endpoint}",
                headers=self.headers,
                params=params or {},
            )
            resp.raise_for_status()
            return resp.json()

    async def lookup(self, address: str) -> MarketSnapshot:
        """Average sale price per m2 and similar listings near an address."""
        address = address.strip()
        if not address:
            raise MarketLookupError(address, "address is empty")

        try:
            data = await self._get("/average-price", {"address": address})
        except (httpx.HTTPError, ValueError) as e:  # ValueError: body is not JSON
            logger.warning("Market lookup failed for %s: %s", address, e)
            raise MarketLookupError(address, str(e)) from e

        if not isinstance(data, dict):
            raise MarketLookupError(address, "unexpected response format")

        price = data.get("averagePricePerSqm")
        if price is None:
            raise MarketLookupError(address, "response has no average price")

        items = data.get("listings", [])
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise MarketLookupError(address, "malformed listing data")

        try:
            listings = tuple(
                Listing(
                    description=item.get("description", ""),
                    price=_decimal(item.get("price", 0)),
                    surface=_decimal(item.get("surface", 0)),
                    url=item.get("url", ""),
                )
                for item in items
            )
            average = _decimal(price)
        except InvalidOperation as e:
            raise MarketLookupError(address, "malformed price data") from e

        logger.info("Market lookup %s: %s/m2, %d listings", address, average, len(listings))

        return MarketSnapshot(
            address=address,
            average_price_per_sqm=average,
            similar_listings=listings,
            map_url=data.get("mapUrl") or market_map_url(address),
        )
