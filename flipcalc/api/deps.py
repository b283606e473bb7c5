"""FastAPI dependency injection."""

from flipcalc.config import settings
from flipcalc.data.base import MarketDataSource
from flipcalc.data.market import MarketLookupClient
from flipcalc.models.deal import Conventions


def get_market_source() -> MarketDataSource:
    return MarketLookupClient()


def get_conventions() -> Conventions:
    return settings.conventions
