from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Listing:
    description: str
    price: Decimal
    surface: Decimal  # m2
    url: str = ""


@dataclass(frozen=True)
class MarketSnapshot:
    address: str
    average_price_per_sqm: Decimal
    similar_listings: tuple[Listing, ...] = ()
    map_url: str | None = None
