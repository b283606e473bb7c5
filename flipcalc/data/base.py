"""Protocol definitions for data sources."""

from typing import Protocol, runtime_checkable

from flipcalc.models.market import MarketSnapshot


@runtime_checkable
class MarketDataSource(Protocol):
    async def lookup(self, address: str) -> MarketSnapshot:
        """Average price per m2 (and comparables or a map link) around an address.

        Raises MarketLookupError on failure.
        """
        ...
