"""Exception types raised outside the pure deal computation."""


class FlipCalcError(Exception):
    """Base class for flipcalc errors."""


class MarketLookupError(FlipCalcError):
    """The external market-data lookup failed or returned unusable data."""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Market lookup failed for '{address}': {reason}")
